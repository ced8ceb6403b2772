"""CLI action handlers.

Purpose
-------
Turn parsed arguments into client options, then either describe the request
that would be sent (dry-run, the default) or send it with ``--execute``.

Option sources
--------------
Options are collected in this order and applied last-write-wins:

1. the ``--config`` settings file (JSON or YAML),
2. ``<PREFIX>_*`` environment variables (unless ``--no-env``),
3. explicit command-line flags.

Fallback & Error Semantics
--------------------------
- Dry-run performs no network I/O and never validates the credential; it
  reports ``api_key_present`` instead.
- Errors are printed to stderr as one JSON object. Exit codes: ``1`` for
  settings or request failures, ``2`` for a missing credential.
- The credential value itself is never printed or logged.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..base.capabilities import CAP_VISION, capabilities_for
from ..base.errors import MissingCredentialError, ProviderError
from ..base.http import parse_headers, proxy_kind
from ..base.logging import LogContext, configure_logger, get_logger, normalized_log_event
from ..client import new_client
from ..config import BridgeSettings, Config, Option, Provider, load_settings_file, new_config, options_from_env
from ..config.defaults import DEFAULT_MODEL, OPENAI_DEFAULT_BASE_URL
from ..config.env import env_var_name

_PREVIEW_CHARS = 64


def settings_from_args(args: argparse.Namespace) -> BridgeSettings:
    """Validate the explicitly given flags into settings (omitted flags stay unset)."""
    data = {
        name: getattr(args, name)
        for name in BridgeSettings.model_fields
        if getattr(args, name, None) is not None
    }
    return BridgeSettings.model_validate(data)


def collect_options(args: argparse.Namespace) -> List[Option]:
    """Gather options from the settings file, the environment and the flags.

    Raises
    ------
    OSError
        The settings file cannot be read.
    ValueError
        The settings file is not a mapping.
    pydantic.ValidationError
        A value from any source has the wrong type.
    """
    opts: List[Option] = []
    if args.config:
        opts.extend(load_settings_file(args.config).to_options())
    if args.use_env:
        opts.extend(options_from_env(args.env_prefix))
    opts.extend(settings_from_args(args).to_options())
    return opts


def resolved_base_url(cfg: Config) -> Optional[str]:
    """Return the endpoint requests would go to (``None`` for Azure without one)."""
    if cfg.provider is Provider.AZURE:
        return cfg.base_url or None
    return cfg.base_url or OPENAI_DEFAULT_BASE_URL


def _preview(text: Optional[str]) -> Optional[str]:
    if text and len(text) > _PREVIEW_CHARS:
        return f"{text[:_PREVIEW_CHARS]}..."
    return text


def plan_run(args: argparse.Namespace, opts: Optional[List[Option]] = None) -> Dict[str, Any]:
    """Compute a dry-run summary of the request without I/O.

    Parameters
    ----------
    args: argparse.Namespace
        Parsed CLI arguments.
    opts: Optional[List[Option]]
        Already collected options; collected from ``args`` when ``None``.

    Returns
    -------
    Dict[str, Any]
        JSON-serializable summary. Header values and the credential are
        deliberately omitted; only header names and ``api_key_present`` are
        reported.
    """
    cfg = new_config(*(collect_options(args) if opts is None else opts))
    model = cfg.model or DEFAULT_MODEL
    plan: Dict[str, Any] = {
        "operation": "image_completion" if args.image else "completion",
        "provider": cfg.provider.value,
        "model": model,
        "base_url": resolved_base_url(cfg),
        "api_version": cfg.api_version or None,
        "proxy": proxy_kind(cfg),
        "header_names": sorted(parse_headers(cfg.headers)),
        "skip_verify": cfg.skip_verify,
        "timeout": cfg.timeout,
        "max_tokens": cfg.max_tokens,
        "temperature": cfg.temperature,
        "top_p": cfg.top_p,
        "api_key_present": bool(cfg.token),
        "content_preview": _preview(args.content),
    }
    if args.image:
        plan["vision_supported"] = CAP_VISION in capabilities_for(model, cfg.capabilities)
    return plan


def _print_error(exc: BaseException, **extra: Any) -> None:
    payload: Dict[str, Any] = {"error": str(exc)}
    if isinstance(exc, ProviderError):
        payload["code"] = exc.code.value
        payload["retryable"] = exc.retryable
    payload.update(extra)
    print(json.dumps(payload), file=sys.stderr)


def execute(args: argparse.Namespace, opts: List[Option]) -> int:
    """Build a client from ``opts`` and send the request described by ``args``.

    Returns
    -------
    int
        ``0`` on success, ``2`` when no credential is configured and ``1`` for
        any other configuration or request failure.

    Side Effects
    ------------
    - Performs one network round trip.
    - Emits ``cli.start`` / ``cli.finalize`` / ``cli.error`` log events.
    """
    try:
        client = new_client(*opts)
    except MissingCredentialError as exc:
        _print_error(exc, set_env=env_var_name("api_key", args.env_prefix))
        return 2
    except ProviderError as exc:
        _print_error(exc)
        return 1

    logger = get_logger("openai_bridge.cli")
    ctx = LogContext(provider=client.provider.value, model=client.model)
    normalized_log_event(logger, "cli.start", ctx, phase="start", attempt=1)
    try:
        if args.image:
            resp = client.image_completion(args.image, args.system, args.content)
        else:
            resp = client.completion(args.system, args.content)
    except ProviderError as exc:
        normalized_log_event(
            logger, "cli.error", ctx, phase="finalize", error_code=exc.code.value, emitted=False
        )
        _print_error(exc)
        return 1
    finally:
        client.sdk_client.close()

    normalized_log_event(
        logger, "cli.finalize", ctx, phase="finalize", emitted=bool(resp.content), tokens=resp.usage
    )
    if args.json:
        print(json.dumps(resp.to_dict(), ensure_ascii=False))
    else:
        print(resp.content)
    return 0


def handle_run(args: argparse.Namespace) -> int:
    """Execute the CLI request (inspect or execute).

    Returns
    -------
    int
        ``0`` for dry-run plan emission or successful execution; non-zero on
        settings or execution error.
    """
    if args.log_level:
        configure_logger(level=args.log_level)
    try:
        opts = collect_options(args)
    except (OSError, ValueError, ValidationError) as exc:
        _print_error(exc)
        return 1
    if not args.execute:
        print(json.dumps(plan_run(args, opts)))
        return 0
    return execute(args, opts)


__all__ = [
    "collect_options",
    "execute",
    "handle_run",
    "plan_run",
    "resolved_base_url",
    "settings_from_args",
]

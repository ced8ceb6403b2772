"""CLI parser construction for openai-bridge.

This module wires argument shapes only; handlers live in ``cli_actions``.
Every configuration flag defaults to ``None`` so that an omitted flag never
overrides a value coming from the settings file or the environment.
"""

from __future__ import annotations

import argparse

from ..config.env import DEFAULT_ENV_PREFIX


def _add_config_flags(p: argparse.ArgumentParser) -> None:
    """Attach one flag per client option (dest names match ``BridgeSettings``)."""
    grp = p.add_argument_group("client options")
    grp.add_argument("--api-key", dest="api_key", default=None, help="API credential")
    grp.add_argument("--org-id", dest="org_id", default=None)
    grp.add_argument("--model", default=None)
    grp.add_argument("--provider", default=None, help="'openai' (default) or 'azure'")
    grp.add_argument("--base-url", dest="base_url", default=None)
    grp.add_argument("--api-version", dest="api_version", default=None)
    grp.add_argument("--proxy-url", dest="proxy_url", default=None, help="HTTP(S) proxy URL")
    grp.add_argument("--socks-url", dest="socks_url", default=None, help="SOCKS5 proxy, host:port")
    grp.add_argument("--timeout", type=float, default=None, help="seconds; <= 0 waits indefinitely")
    grp.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    grp.add_argument("--temperature", type=float, default=None)
    grp.add_argument("--top-p", dest="top_p", type=float, default=None)
    grp.add_argument("--presence-penalty", dest="presence_penalty", type=float, default=None)
    grp.add_argument("--frequency-penalty", dest="frequency_penalty", type=float, default=None)
    grp.add_argument(
        "--skip-verify",
        dest="skip_verify",
        action="store_const",
        const=True,
        default=None,
        help="disable TLS certificate verification (development only)",
    )
    grp.add_argument(
        "--header",
        dest="headers",
        action="append",
        default=None,
        metavar="KEY=VALUE",
        help="extra request header; repeatable",
    )
    grp.add_argument(
        "--capability",
        dest="capabilities",
        action="append",
        default=None,
        help="declare a model capability such as 'vision'; repeatable",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for a single chat (or image chat) request. No I/O happens here.
    """
    p = argparse.ArgumentParser(
        prog="openai-bridge",
        description="Send one chat completion through openai_bridge (safe by default: dry-run)",
    )
    p.add_argument("content", help="user message text")
    p.add_argument("--system", default="", help="system prompt")
    p.add_argument("--image", default=None, help="image URL; switches to an image completion")
    p.add_argument("--config", default=None, help="JSON or YAML settings file")
    p.add_argument("--env-prefix", dest="env_prefix", default=DEFAULT_ENV_PREFIX)
    p.add_argument("--no-env", dest="use_env", action="store_false", help="ignore environment variables")
    p.add_argument("--execute", action="store_true", help="perform the request (otherwise print the plan)")
    p.add_argument("--json", action="store_true", help="print the response as JSON with usage")
    p.add_argument("--log-level", dest="log_level", default=None)
    _add_config_flags(p)
    return p


__all__ = ["build_parser"]

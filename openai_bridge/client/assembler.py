"""Client assembly: options -> validated config -> transport -> SDK client.

Purpose:
- Turn an ordered option list into a ready :class:`~openai_bridge.client.Client`
  bound to one ``openai`` SDK client and one ``httpx.Client``.

External dependencies:
- ``openai`` SDK (``OpenAI`` / ``AzureOpenAI``) for the wire protocol.
- ``httpx`` via :mod:`openai_bridge.base.http` for the transport.

Failure semantics:
- ``MissingCredentialError`` / ``ProviderError(VALIDATION)`` from validation
  and ``ProxyUnreachableError`` from transport assembly are raised straight
  to the caller; nothing is deferred to the first request.

Retry:
- The SDK's built-in retry loop is disabled (``max_retries=0``); every call
  is exactly one round trip.
"""

from __future__ import annotations

import logging

import httpx
import openai

from ..base.http import build_http_client, proxy_kind
from ..base.logging import get_logger, log_event, LogContext
from ..config import Config, Option, Provider, new_config
from ..config.defaults import AZURE_DEFAULT_API_VERSION, OPENAI_DEFAULT_BASE_URL
from .client import Client

_logger_name = "openai_bridge.client"


def build_sdk_client(cfg: Config, http_client: httpx.Client) -> openai.OpenAI:
    """Create the provider-specific SDK client for a validated config.

    Azure:
        ``azure_deployment`` is pinned to the configured model, so every chat
        request goes to ``/openai/deployments/<model>/...`` whatever model name
        the request body carries; the SDK's model-to-deployment mapping never
        runs.
    Default:
        The configured base URL or the official endpoint. An API-version
        override is sent as the ``api-version`` query parameter.
    """
    common = {
        "api_key": cfg.token,
        "organization": cfg.org_id or None,
        "http_client": http_client,
        "timeout": cfg.timeout,
        "max_retries": 0,
    }
    if cfg.provider is Provider.AZURE:
        return openai.AzureOpenAI(
            azure_endpoint=cfg.base_url,
            azure_deployment=cfg.model,
            api_version=cfg.api_version or AZURE_DEFAULT_API_VERSION,
            **common,
        )
    return openai.OpenAI(
        base_url=cfg.base_url or OPENAI_DEFAULT_BASE_URL,
        default_query={"api-version": cfg.api_version} if cfg.api_version else None,
        **common,
    )


def new_client(*opts: Option) -> Client:
    """Build a client from options.

    Steps: apply options over defaults, validate, build the HTTP client
    (TLS, proxy, header injection, timeout), branch on provider, then copy the
    resolved settings into an immutable :class:`Client`.

    Raises:
        MissingCredentialError: No token was configured.
        ProviderError: Azure was selected without an endpoint.
        ProxyUnreachableError: The proxy settings are unusable.
    """
    cfg = new_config(*opts)
    cfg.validate()

    http_client = build_http_client(cfg)
    try:
        sdk = build_sdk_client(cfg, http_client)
    except BaseException:
        http_client.close()
        raise

    logger = get_logger(_logger_name)
    log_event(
        logger,
        "client.build",
        LogContext(provider=cfg.provider.value, model=cfg.model),
        level=logging.DEBUG,
        base_url=str(sdk.base_url),
        proxy=proxy_kind(cfg),
        header_count=len(cfg.headers),
        skip_verify=cfg.skip_verify,
        timeout=cfg.timeout,
    )
    return Client(cfg, sdk)


__all__ = ["build_sdk_client", "new_client"]

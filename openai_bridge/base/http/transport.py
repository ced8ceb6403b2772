"""Transport and HTTP client assembly.

Purpose:
    Build the single ``httpx.Client`` a bridge client owns for its lifetime:
    a base ``httpx.HTTPTransport`` (optionally with certificate verification
    disabled), optionally routed through an HTTP or SOCKS5 proxy, wrapped in
    :class:`HeaderInjectingTransport`, with the configured timeout.

External dependencies:
    - ``httpx`` for the transport and client.
    - ``socksio`` (the ``httpx[socks]`` extra) for SOCKS5 proxying.

Proxy rules:
    - An HTTP(S) proxy URL wins when both proxy settings are present.
    - SOCKS5 addresses may be given as ``host:port`` or ``socks5://host:port``.
    - Invalid proxy settings raise :class:`ProxyUnreachableError` here, at
      construction time. Nothing connects until the first request.

Timeout strategy:
    ``None`` disables the client timeout entirely (wait indefinitely). Callers
    may still pass a per-request timeout to individual calls.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Protocol

import httpx

from ..errors import ProxyUnreachableError
from .headers import HeaderInjectingTransport, parse_headers

_SOCKS_SCHEMES = ("socks5", "socks5h")


class TransportSettings(Protocol):
    """Settings consumed when assembling the transport.

    ``openai_bridge.config.Config`` satisfies this structurally.
    """

    proxy_url: str
    socks_url: str
    skip_verify: bool
    headers: Iterable[str]
    timeout: Optional[float]


def _socks_proxy_url(address: str) -> str:
    """Normalize a SOCKS5 address to a proxy URL or raise ProxyUnreachableError."""
    raw = address.strip()
    if "://" not in raw:
        raw = f"socks5://{raw}"
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise ProxyUnreachableError(
            f"proxy connection failed: invalid SOCKS5 proxy address {address!r}", raw=exc
        ) from exc
    if url.scheme not in _SOCKS_SCHEMES:
        raise ProxyUnreachableError(f"proxy connection failed: unsupported SOCKS scheme {url.scheme!r}")
    if not url.host or url.port is None:
        raise ProxyUnreachableError(
            f"proxy connection failed: SOCKS5 proxy address {address!r} needs host and port"
        )
    return str(url)


def proxy_kind(settings: TransportSettings) -> Optional[str]:
    """Return ``"http"``, ``"socks5"`` or ``None`` for the effective proxy."""
    if settings.proxy_url:
        return "http"
    if settings.socks_url:
        return "socks5"
    return None


def transport_options(settings: TransportSettings) -> Dict[str, Any]:
    """Compute ``httpx.HTTPTransport`` keyword arguments without side effects.

    Returns:
        ``{"verify": bool, "proxy": str | None}``.

    Raises:
        ProxyUnreachableError: For an unusable SOCKS5 address.
    """
    proxy: Optional[str] = None
    kind = proxy_kind(settings)
    if kind == "http":
        proxy = settings.proxy_url
    elif kind == "socks5":
        proxy = _socks_proxy_url(settings.socks_url)
    return {"verify": not settings.skip_verify, "proxy": proxy}


def build_transport(settings: TransportSettings) -> httpx.BaseTransport:
    """Construct the base transport (direct or proxied).

    Raises:
        ProxyUnreachableError: When the proxy cannot be configured, including
            a missing SOCKS support library.
    """
    opts = transport_options(settings)
    if opts["proxy"] is None:
        return httpx.HTTPTransport(verify=opts["verify"])
    try:
        return httpx.HTTPTransport(verify=opts["verify"], proxy=opts["proxy"])
    except (ImportError, ValueError, httpx.InvalidURL) as exc:
        raise ProxyUnreachableError(
            f"proxy connection failed: verify proxy address and network connectivity ({exc})", raw=exc
        ) from exc


def build_http_client(settings: TransportSettings) -> httpx.Client:
    """Build the header-injecting ``httpx.Client`` with the configured timeout."""
    transport = HeaderInjectingTransport(build_transport(settings), parse_headers(settings.headers))
    return httpx.Client(transport=transport, timeout=settings.timeout)


__all__ = [
    "TransportSettings",
    "proxy_kind",
    "transport_options",
    "build_transport",
    "build_http_client",
]

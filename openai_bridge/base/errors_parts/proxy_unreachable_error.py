"""Error raised when a proxied transport cannot be constructed."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class ProxyUnreachableError(ProviderError):
    """The HTTP or SOCKS5 proxy settings could not be turned into a transport.

    Surfaced synchronously from client construction; it is never deferred to
    the first request.
    """

    def __init__(self, message: str, *, provider: str = "openai", raw: Optional[Exception] = None) -> None:
        super().__init__(code=ErrorCode.UNAVAILABLE, message=message, provider=provider, raw=raw)


__all__ = ["ProxyUnreachableError"]

"""Error raised when a configuration carries no API credential."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class MissingCredentialError(ProviderError):
    """The configuration has an empty token.

    Raised by ``Config.validate`` before any transport is built, so no
    network activity ever happens without a credential.
    """

    def __init__(self, message: str = "missing API credential: set OPENAI_API_KEY or pass with_token()", *, provider: str = "openai", model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.AUTH, message=message, provider=provider, model=model)


__all__ = ["MissingCredentialError"]

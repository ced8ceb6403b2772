"""Error raised when a backend answers with zero candidate choices."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class EmptyResponseError(ProviderError):
    """The chat completion response carried an empty ``choices`` list."""

    def __init__(self, message: str = "empty response from API: no choices returned", *, provider: str = "openai", model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.EMPTY_RESPONSE, message=message, provider=provider, model=model)


__all__ = ["EmptyResponseError"]

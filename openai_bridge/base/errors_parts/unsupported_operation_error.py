"""Error raised when a convenience call targets a model lacking a capability."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class UnsupportedOperationError(ProviderError):
    """The configured model is not known to support the requested operation.

    Attributes:
        capability: Name of the missing capability (e.g., ``"vision"``).
    """

    def __init__(self, message: str, *, capability: str, provider: str = "openai", model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.UNSUPPORTED, message=message, provider=provider, model=model)
        self.capability = capability


__all__ = ["UnsupportedOperationError"]

"""Error wrapping any failure surfaced by the underlying SDK call."""
from __future__ import annotations

from typing import Optional

from .classification import classify_exception
from .error_code import RETRYABLE_CODES
from .provider_error import ProviderError


class BackendError(ProviderError):
    """A network or API failure from the wrapped SDK, with operation context.

    The code is classified from the original exception (HTTP status first,
    message heuristics second). The original exception is kept in ``raw`` and
    should also be chained with ``raise ... from exc`` by the caller.
    """

    def __init__(self, operation: str, exc: Exception, *, provider: str = "openai", model: Optional[str] = None) -> None:
        code = classify_exception(exc)
        super().__init__(
            code=code,
            message=f"{operation} failed: {exc}",
            provider=provider,
            model=model,
            retryable=code in RETRYABLE_CODES,
            raw=exc,
        )
        self.operation = operation


__all__ = ["BackendError"]

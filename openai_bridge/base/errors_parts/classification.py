"""
Map failures raised by the ``openai`` SDK (and ``httpx`` underneath it) onto
normalized :class:`ErrorCode` values.

Order of evidence: the exception type, then the HTTP status it carries, then
a small table of message hints for errors that never reached a status line.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

import httpx
import openai

from .error_code import ErrorCode
from .provider_error import ProviderError

_STATUS_CODES: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

# First match wins.
_MESSAGE_HINTS: Tuple[Tuple[ErrorCode, Tuple[str, ...]], ...] = (
    (ErrorCode.TIMEOUT, ("timed out", "timeout")),
    (ErrorCode.RATE_LIMIT, ("rate limit", "too many requests")),
    (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.UNSUPPORTED, ("not supported",)),
    (ErrorCode.UNAVAILABLE, ("connection", "unavailable")),
    (ErrorCode.VALIDATION, ("invalid",)),
    (ErrorCode.SERVER_ERROR, ("server error",)),
)


def status_of(exc: BaseException) -> Optional[int]:
    """Return the HTTP status carried by ``exc``, if any.

    Reads ``openai.APIStatusError.status_code`` directly; for other
    exceptions looks at ``status_code`` and then ``response.status_code``.
    """
    if isinstance(exc, openai.APIStatusError):
        return exc.status_code
    response = getattr(exc, "response", None)
    for candidate in (getattr(exc, "status_code", None), getattr(response, "status_code", None)):
        if isinstance(candidate, int) and 100 <= candidate < 600:
            return candidate
    return None


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to a code; unlisted 5xx count as server errors."""
    code = _STATUS_CODES.get(status)
    if code is not None:
        return code
    return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ``ProviderError`` keeps its own code.
        2. Timeouts (SDK, ``httpx`` and builtin).
        3. HTTP status.
        4. Connection-level failures without a status.
        5. Message hints, then ``UNKNOWN``.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (openai.APITimeoutError, httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    status = status_of(exc)
    if status is not None:
        return code_for_status(status)
    if isinstance(exc, (openai.APIConnectionError, httpx.TransportError)):
        return ErrorCode.UNAVAILABLE
    msg = str(exc).lower()
    for code, hints in _MESSAGE_HINTS:
        if any(h in msg for h in hints):
            return code
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "status_of",
]

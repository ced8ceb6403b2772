"""
Normalized error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the configuration layer, the
transport assembler and the request dispatcher. Values are lowercase
snake_case and are considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


# Codes where a caller-side retry may reasonably succeed.
RETRYABLE_CODES = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.SERVER_ERROR,
        ErrorCode.UNAVAILABLE,
    }
)


__all__ = ["ErrorCode", "RETRYABLE_CODES"]

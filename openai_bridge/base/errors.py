"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``openai_bridge.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode, RETRYABLE_CODES
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception
from .errors_parts.missing_credential_error import MissingCredentialError
from .errors_parts.proxy_unreachable_error import ProxyUnreachableError
from .errors_parts.empty_response_error import EmptyResponseError
from .errors_parts.unsupported_operation_error import UnsupportedOperationError
from .errors_parts.backend_error import BackendError

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "classify_exception",
    "MissingCredentialError",
    "ProxyUnreachableError",
    "EmptyResponseError",
    "UnsupportedOperationError",
    "BackendError",
]

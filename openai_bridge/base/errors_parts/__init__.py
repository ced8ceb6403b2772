"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openai_bridge.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, RETRYABLE_CODES
from .provider_error import ProviderError
from .classification import classify_exception
from .missing_credential_error import MissingCredentialError
from .proxy_unreachable_error import ProxyUnreachableError
from .empty_response_error import EmptyResponseError
from .unsupported_operation_error import UnsupportedOperationError
from .backend_error import BackendError

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

"""
Bridge Base Package

Provider-agnostic building blocks shared by the configuration layer, the
client assembler and the CLI:

- Errors: normalized error taxonomy and exception classification
- Models (DTOs): request/response value types
- HTTP: header injection, proxy and TLS transport assembly
- Capabilities: declarative model capability table
- Logging: shared structured JSON logger

Nothing in this package imports from ``config``, ``client`` or ``cli``.
"""

from .capabilities import CAP_CHAT, CAP_VISION, MODEL_CAPABILITIES, capabilities_for, supports
from .errors import (
    BackendError,
    EmptyResponseError,
    ErrorCode,
    MissingCredentialError,
    ProviderError,
    ProxyUnreachableError,
    RETRYABLE_CODES,
    UnsupportedOperationError,
    classify_exception,
)
from .logging import LogContext, configure_logger, get_logger, log_event, normalized_log_event
from .models import (
    ChatCompletionRequest,
    ContentPart,
    ContentPartType,
    Message,
    MessageLike,
    Response,
    Role,
    Usage,
)

__all__ = [
    # Capabilities
    "CAP_CHAT",
    "CAP_VISION",
    "MODEL_CAPABILITIES",
    "capabilities_for",
    "supports",
    # Errors
    "BackendError",
    "EmptyResponseError",
    "ErrorCode",
    "MissingCredentialError",
    "ProviderError",
    "ProxyUnreachableError",
    "RETRYABLE_CODES",
    "UnsupportedOperationError",
    "classify_exception",
    # Logging
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "normalized_log_event",
    # Models
    "ChatCompletionRequest",
    "ContentPart",
    "ContentPartType",
    "Message",
    "MessageLike",
    "Response",
    "Role",
    "Usage",
]

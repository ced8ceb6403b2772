"""One-class-per-file model implementations; import from ``base.models``."""

from .content_part import ContentPart, ContentPartType
from .message import Message, Role
from .chat_request import ChatCompletionRequest, MessageLike
from .usage import Usage
from .response import Response

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ChatCompletionRequest",
    "MessageLike",
    "Usage",
    "Response",
]

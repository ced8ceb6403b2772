"""
Request and response value types public surface.

This module re-exports the one-class-per-file implementations under
``openai_bridge.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role
from .models_parts.chat_request import ChatCompletionRequest, MessageLike
from .models_parts.usage import Usage
from .models_parts.response import Response

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

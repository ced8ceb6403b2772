"""
Message DTO used to build chat completion requests.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. Content may be either plain text or a list of `ContentPart` objects for
multi-part (text plus image) messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

from .content_part import ContentPart


# Message roles used by the chat completions API.
Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A chat message in a conversation history.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Either a plain text string or a list of `ContentPart` items.

    Methods:
        is_multipart: Returns True when content is a list of parts.
        to_param: Returns the SDK message dictionary.
    """

    role: Role
    content: Union[str, List[ContentPart]]

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(role="system", content=text)

    @classmethod
    def user(cls, content: Union[str, List[ContentPart]]) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(role="assistant", content=text)

    def is_multipart(self) -> bool:
        """Return True if the message content is a list of parts."""
        return isinstance(self.content, list)

    def to_param(self) -> Dict[str, Any]:
        """Return the chat completions message dictionary for this message."""
        if isinstance(self.content, str):
            return {"role": self.role, "content": self.content}
        return {"role": self.role, "content": [p.to_param() for p in self.content]}


__all__ = [
    "Message",
    "Role",
]

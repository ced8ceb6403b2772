"""
Structured content part model for multi-part chat messages.

This module defines the `ContentPart` dataclass and its associated
`ContentPartType` literal. A user message may combine several parts (a text
segment and an image reference); each part maps one-to-one onto the SDK's
``{"type": ..., ...}`` message part shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional


# Part types understood by the chat completions wire format.
ContentPartType = Literal[
    "text",       # Plain text segment
    "image_url",  # Image reference by URL (http(s) or data: URI)
]


@dataclass(frozen=True)
class ContentPart:
    """A single piece of a multi-part chat message.

    Attributes:
        type: The semantic kind of the part, ``"text"`` or ``"image_url"``.
        text: Text content for ``text`` parts.
        image_url: Image location for ``image_url`` parts.

    Methods:
        to_param: Return the SDK message-part dictionary.
    """

    type: ContentPartType
    text: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def of_text(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def of_image(cls, url: str) -> "ContentPart":
        return cls(type="image_url", image_url=url)

    def to_param(self) -> Dict[str, Any]:
        """Return the chat completions message-part dictionary."""
        if self.type == "image_url":
            return {"type": "image_url", "image_url": {"url": self.image_url or ""}}
        return {"type": "text", "text": self.text or ""}


__all__ = [
    "ContentPart",
    "ContentPartType",
]

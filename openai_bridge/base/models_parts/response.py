"""
Response value produced by the convenience wrappers.

Pairs the first candidate's text with the usage triple. Construction from a
raw SDK completion checks for an empty ``choices`` list before touching it,
so a backend returning zero candidates yields :class:`EmptyResponseError`
instead of an ``IndexError``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..errors import EmptyResponseError
from .usage import Usage


@dataclass(frozen=True)
class Response:
    """Extracted text content plus token usage for one call.

    Attributes:
        content: Text of the first candidate message (``""`` when the
            backend returned a null content field).
        usage: Token accounting for the call.
    """

    content: str
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_completion(cls, completion: Any, *, provider: str = "openai", model: Optional[str] = None) -> "Response":
        """Build a response from an SDK ``ChatCompletion``.

        Raises:
            EmptyResponseError: When the completion has no choices.
        """
        choices = getattr(completion, "choices", None) or []
        if len(choices) == 0:
            raise EmptyResponseError(provider=provider, model=model)
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None) or ""
        return cls(content=content, usage=Usage.from_sdk(getattr(completion, "usage", None)))

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "usage": self.usage.to_dict()}


__all__ = ["Response"]

"""
ChatCompletionRequest DTO: the one request record every dispatch call builds.

The record carries the client's resolved sampling parameters plus the message
list, and renders itself into keyword arguments for
``client.chat.completions.create(**params)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from .message import Message

# A history entry is either our DTO or an SDK-shaped message mapping.
MessageLike = Union[Message, Mapping[str, Any]]


@dataclass
class ChatCompletionRequest:
    """Normalized chat completion request.

    Attributes:
        model: Target model identifier.
        max_tokens: Maximum tokens to generate.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        frequency_penalty: Frequency-proportional repetition penalty.
        presence_penalty: Constant repetition penalty.
        messages: Ordered conversation history.
    """

    model: str
    max_tokens: int
    temperature: float
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    messages: List[MessageLike] = field(default_factory=list)

    def message_params(self) -> List[Dict[str, Any]]:
        """Render messages in order; mappings are passed through as given."""
        out: List[Dict[str, Any]] = []
        for m in self.messages:
            if isinstance(m, Message):
                out.append(m.to_param())
            else:
                out.append(dict(m))
        return out

    def to_params(self) -> Dict[str, Any]:
        """Return keyword arguments for ``chat.completions.create``."""
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
            "messages": self.message_params(),
        }


__all__ = [
    "ChatCompletionRequest",
    "MessageLike",
]

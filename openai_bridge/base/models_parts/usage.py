"""
Token usage accounting triple returned with every chat completion.

``Usage.from_sdk`` converts the SDK's ``CompletionUsage`` (or any object or
mapping exposing ``prompt_tokens``/``completion_tokens``/``total_tokens``)
into a frozen value. Some OpenAI-compatible backends omit the usage block or
individual counters; those read as zero rather than raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


def _coerce_count(value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 0
    return n if n >= 0 else 0


@dataclass(frozen=True)
class Usage:
    """Prompt, completion and total token counts for one call."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_sdk(cls, usage: Any) -> "Usage":
        if usage is None:
            return cls()
        if isinstance(usage, Mapping):
            get = usage.get
        else:
            def get(key: str, default: Any = None) -> Any:
                return getattr(usage, key, default)
        prompt = _coerce_count(get("prompt_tokens", 0))
        completion = _coerce_count(get("completion_tokens", 0))
        total = _coerce_count(get("total_tokens", 0))
        if not total and (prompt or completion):
            total = prompt + completion
        return cls(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


__all__ = ["Usage"]

"""Provider tag: the closed set of endpoint-construction branches."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Provider(str, Enum):
    """Backend family selecting how the SDK client is assembled.

    ``DEFAULT`` covers OpenAI itself and every OpenAI-protocol backend reached
    through a base URL (DeepSeek, ZhiPu, Ollama, LM Studio, vLLM, ...).
    ``AZURE`` routes through Azure OpenAI deployments.
    """

    DEFAULT = "openai"
    AZURE = "azure"

    @classmethod
    def normalize(cls, value: Optional[Union[str, "Provider"]]) -> "Provider":
        """Map any tag onto a known provider; unknown tags become ``DEFAULT``."""
        if isinstance(value, Provider):
            return value
        tag = (value or "").strip().lower()
        for member in cls:
            if member.value == tag:
                return member
        return cls.DEFAULT


__all__ = ["Provider"]

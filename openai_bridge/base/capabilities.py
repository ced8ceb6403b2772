"""Declarative model capability table.

Backends expose no authoritative capability metadata through the chat
completions protocol, so the set of models accepting image input is kept here
as data. Dispatch code only asks :func:`supports`; extending coverage means
adding a row to ``MODEL_CAPABILITIES`` or passing explicit overrides for the
configured model (see ``with_model_capabilities``).

Lookup rules
------------
1. Explicit overrides for the configured model win outright.
2. The model id is lower-cased and any ``vendor/`` path prefix is dropped
   (``lmstudio-community/Llava-Vision`` -> ``llava-vision``).
3. Exact match, then the longest registered family that is followed by a
   separator (``-``, ``:``, ``.``, ``@``, ``_``). ``gpt-4o-2024-08-06`` resolves
   through ``gpt-4o``; ``gpt-4-0613`` through ``gpt-4``.
4. Anything else is unknown and has no capabilities (fail closed).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional

CAP_CHAT = "chat"
CAP_VISION = "vision"

_CHAT = frozenset({CAP_CHAT})
_CHAT_VISION = frozenset({CAP_CHAT, CAP_VISION})

_SEPARATORS = ("-", ":", ".", "@", "_")

MODEL_CAPABILITIES: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        # OpenAI
        "gpt-3.5-turbo": _CHAT,
        "gpt-4": _CHAT,
        "gpt-4-32k": _CHAT,
        "gpt-4-turbo": _CHAT_VISION,
        "gpt-4-vision-preview": _CHAT_VISION,
        "gpt-4o": _CHAT_VISION,
        "gpt-4o-mini": _CHAT_VISION,
        "chatgpt-4o-latest": _CHAT_VISION,
        "gpt-4.1": _CHAT_VISION,
        "gpt-4.1-mini": _CHAT_VISION,
        "gpt-4.1-nano": _CHAT_VISION,
        "gpt-4.5-preview": _CHAT_VISION,
        "gpt-5": _CHAT_VISION,
        "o1": _CHAT_VISION,
        "o1-mini": _CHAT,
        "o3": _CHAT_VISION,
        "o3-mini": _CHAT,
        "o4-mini": _CHAT_VISION,
        # DeepSeek
        "deepseek-chat": _CHAT,
        "deepseek-reasoner": _CHAT,
        "deepseek-vl2": _CHAT_VISION,
        # ZhiPu
        "glm-4": _CHAT,
        "glm-4-flash": _CHAT,
        "glm-4-plus": _CHAT,
        "glm-4v": _CHAT_VISION,
        "glm-4v-flash": _CHAT_VISION,
        "glm-4v-plus": _CHAT_VISION,
        "glm-4.5v": _CHAT_VISION,
        # Local / self-hosted families
        "llava": _CHAT_VISION,
        "bakllava": _CHAT_VISION,
        "llama3.2-vision": _CHAT_VISION,
        "qwen-vl": _CHAT_VISION,
        "qwen2-vl": _CHAT_VISION,
        "qwen2.5-vl": _CHAT_VISION,
        "minicpm-v": _CHAT_VISION,
    }
)


def _normalize_model_id(model: str) -> str:
    name = (model or "").strip().lower()
    if "/" in name:
        name = name.rsplit("/", 1)[1]
    return name


def _lookup(name: str, table: Mapping[str, FrozenSet[str]]) -> FrozenSet[str]:
    if name in table:
        return table[name]
    best: Optional[str] = None
    for family in table:
        if len(name) <= len(family) or not name.startswith(family):
            continue
        if name[len(family)] not in _SEPARATORS:
            continue
        if best is None or len(family) > len(best):
            best = family
    return table[best] if best is not None else frozenset()


def capabilities_for(
    model: str,
    overrides: Optional[Iterable[str]] = None,
    table: Mapping[str, FrozenSet[str]] = MODEL_CAPABILITIES,
) -> FrozenSet[str]:
    """Return the capability set of ``model``.

    Parameters:
        model: Model identifier as sent to the backend.
        overrides: Explicit capabilities for this model; when not ``None`` they
            replace the table lookup entirely.
        table: Capability table to consult (defaults to ``MODEL_CAPABILITIES``).

    Returns:
        A frozenset of capability names; empty for unknown models.
    """
    if overrides is not None:
        return frozenset(str(c).strip().lower() for c in overrides)
    return _lookup(_normalize_model_id(model), table)


def supports(model: str, capability: str, overrides: Optional[Iterable[str]] = None) -> bool:
    """Return True when ``model`` is known to support ``capability``."""
    return capability in capabilities_for(model, overrides)


__all__ = [
    "CAP_CHAT",
    "CAP_VISION",
    "MODEL_CAPABILITIES",
    "capabilities_for",
    "supports",
]

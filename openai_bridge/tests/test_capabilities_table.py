"""Model capability lookup: exact ids, families, vendor prefixes, overrides."""
from __future__ import annotations

import pytest

from openai_bridge.base.capabilities import CAP_CHAT, CAP_VISION, capabilities_for, supports


@pytest.mark.parametrize(
    "model",
    [
        "gpt-4o",
        "gpt-4o-2024-08-06",
        "GPT-4o-mini",
        "llava:13b",
        "lmstudio-community/llava-v1.6",
        "glm-4v-flash",
        "qwen2.5-vl-7b-instruct",
    ],
)
def test_vision_models(model):
    assert supports(model, CAP_VISION)  # nosec B101


@pytest.mark.parametrize("model", ["gpt-3.5-turbo", "gpt-4-0613", "deepseek-chat", "glm-4-flash", "o3-mini"])
def test_text_only_models(model):
    caps = capabilities_for(model)
    assert CAP_CHAT in caps  # nosec B101
    assert CAP_VISION not in caps  # nosec B101


def test_family_match_requires_separator():
    # "gpt-4oz" is not a gpt-4o variant and no shorter family ends at a separator
    assert capabilities_for("gpt-4oz") == frozenset()  # nosec B101


def test_unknown_model_has_no_capabilities():
    assert capabilities_for("totally-custom") == frozenset()  # nosec B101
    assert capabilities_for("") == frozenset()  # nosec B101


def test_overrides_replace_table_lookup():
    assert capabilities_for("gpt-3.5-turbo", ["Vision"]) == frozenset({CAP_VISION})  # nosec B101
    assert not supports("gpt-4o", CAP_VISION, overrides=[])  # nosec B101

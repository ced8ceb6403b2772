"""Image-augmented completions and the capability gate."""
from __future__ import annotations

import pytest

from openai_bridge import (
    new_client,
    with_model,
    with_model_capabilities,
    with_token,
)
from openai_bridge.base.capabilities import CAP_VISION
from openai_bridge.base.errors import ErrorCode, UnsupportedOperationError

IMAGE = "https://example.test/cat.png"


def test_image_message_layout_with_prompt(fake_backend):
    client = new_client(with_token("sk-test"), with_model("gpt-4o"))
    resp = client.image_completion(IMAGE, "describe tersely", "what is this?")
    messages = fake_backend.last_json()["messages"]
    assert messages == [  # nosec B101
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "what is this?"},
                {"type": "image_url", "image_url": {"url": IMAGE}},
            ],
        },
        {"role": "system", "content": "describe tersely"},
    ]
    assert resp.content == "hello"  # nosec B101


def test_image_message_without_prompt_has_no_system_message(fake_backend):
    client = new_client(with_token("sk-test"), with_model("gpt-4o"))
    client.create_image_chat_completion(IMAGE, "", "what is this?")
    messages = fake_backend.last_json()["messages"]
    assert [m["role"] for m in messages] == ["user"]  # nosec B101


def test_text_only_model_rejected_before_network(fake_backend):
    client = new_client(with_token("sk-test"), with_model("gpt-3.5-turbo"))
    with pytest.raises(UnsupportedOperationError) as info:
        client.image_completion(IMAGE, "", "what is this?")
    assert info.value.code is ErrorCode.UNSUPPORTED  # nosec B101
    assert info.value.capability == CAP_VISION  # nosec B101
    assert fake_backend.requests == []  # nosec B101


def test_unknown_model_rejected_unless_declared(fake_backend):
    client = new_client(with_token("sk-test"), with_model("my-finetune"))
    with pytest.raises(UnsupportedOperationError):
        client.image_completion(IMAGE, "", "x")

    declared = new_client(with_token("sk-test"), with_model("my-finetune"), with_model_capabilities("vision"))
    assert declared.image_completion(IMAGE, "", "x").content == "hello"  # nosec B101
    assert len(fake_backend.requests) == 1  # nosec B101


def test_raw_image_operation_skips_capability_check(fake_backend):
    client = new_client(with_token("sk-test"), with_model("gpt-3.5-turbo"))
    raw = client.create_image_chat_completion(IMAGE, "", "x")
    assert raw.choices[0].message.content == "hello"  # nosec B101

"""Request and response value types."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from openai_bridge.base.errors import EmptyResponseError
from openai_bridge.base.models import ChatCompletionRequest, ContentPart, Message, Response, Usage


def test_message_params():
    assert Message.system("s").to_param() == {"role": "system", "content": "s"}  # nosec B101
    multi = Message.user([ContentPart.of_text("t"), ContentPart.of_image("u")])
    assert multi.is_multipart()  # nosec B101
    assert multi.to_param() == {  # nosec B101
        "role": "user",
        "content": [{"type": "text", "text": "t"}, {"type": "image_url", "image_url": {"url": "u"}}],
    }


def test_request_params_include_penalties():
    req = ChatCompletionRequest(
        model="m",
        max_tokens=5,
        temperature=1.0,
        top_p=1.0,
        frequency_penalty=0.0,
        presence_penalty=0.0,
        messages=[{"role": "user", "content": "x"}],
    )
    params = req.to_params()
    assert params["frequency_penalty"] == 0.0  # nosec B101
    assert params["presence_penalty"] == 0.0  # nosec B101
    assert params["messages"] == [{"role": "user", "content": "x"}]  # nosec B101


def test_usage_from_sdk_shapes():
    assert Usage.from_sdk(None) == Usage()  # nosec B101
    assert Usage.from_sdk({"prompt_tokens": 2, "completion_tokens": 3}).total_tokens == 5  # nosec B101
    obj = SimpleNamespace(prompt_tokens=1, completion_tokens=1, total_tokens=2)
    assert Usage.from_sdk(obj).to_dict() == {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2}  # nosec B101


def test_response_from_completion():
    completion = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content="hi"))],
        usage=SimpleNamespace(prompt_tokens=1, completion_tokens=2, total_tokens=3),
    )
    resp = Response.from_completion(completion)
    assert resp.content == "hi"  # nosec B101
    assert resp.to_dict() == {  # nosec B101
        "content": "hi",
        "usage": {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3},
    }


def test_response_without_choices():
    with pytest.raises(EmptyResponseError):
        Response.from_completion(SimpleNamespace(choices=[], usage=None), model="m")

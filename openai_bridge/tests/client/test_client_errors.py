"""Failure mapping: backend errors, empty responses and transport faults."""
from __future__ import annotations

import httpx
import openai
import pytest

from openai_bridge import new_client, with_token
from openai_bridge.base.errors import BackendError, EmptyResponseError, ErrorCode


def test_zero_choices_raise_empty_response(fake_backend):
    fake_backend.reply_completion(choices=[])
    client = new_client(with_token("sk-test"))
    with pytest.raises(EmptyResponseError) as info:
        client.completion("", "hi")
    assert info.value.code is ErrorCode.EMPTY_RESPONSE  # nosec B101
    assert "no choices" in info.value.message  # nosec B101


def test_zero_choices_on_image_completion(fake_backend):
    fake_backend.reply_completion(choices=[])
    client = new_client(with_token("sk-test"))
    with pytest.raises(EmptyResponseError):
        client.image_completion("https://example.test/a.png", "", "x")


def test_server_error_wrapped_once_without_retry(fake_backend):
    fake_backend.reply(500, {"error": {"message": "boom", "type": "server_error"}})
    client = new_client(with_token("sk-test"))
    with pytest.raises(BackendError) as info:
        client.completion("", "hi")
    err = info.value
    assert err.code is ErrorCode.SERVER_ERROR  # nosec B101
    assert err.retryable is True  # nosec B101
    assert err.operation == "chat completion"  # nosec B101
    assert err.message.startswith("chat completion failed:")  # nosec B101
    assert isinstance(err.__cause__, openai.InternalServerError)  # nosec B101
    assert len(fake_backend.requests) == 1  # nosec B101


def test_auth_failure_is_not_retryable(fake_backend):
    fake_backend.reply(401, {"error": {"message": "bad key", "type": "invalid_request_error"}})
    client = new_client(with_token("sk-bad"))
    with pytest.raises(BackendError) as info:
        client.create_chat_completion_with_messages([{"role": "user", "content": "hi"}])
    assert info.value.code is ErrorCode.AUTH  # nosec B101
    assert info.value.retryable is False  # nosec B101
    assert info.value.operation == "chat completion with messages"  # nosec B101


def test_rate_limit_is_retryable(fake_backend):
    fake_backend.reply(429, {"error": {"message": "slow down"}})
    client = new_client(with_token("sk-test"))
    with pytest.raises(BackendError) as info:
        client.completion("", "hi")
    assert info.value.code is ErrorCode.RATE_LIMIT  # nosec B101
    assert info.value.retryable is True  # nosec B101


def _raising_transport(monkeypatch, exc):
    from openai_bridge.base.http import transport as transport_module

    def handler(request):
        raise exc

    monkeypatch.setattr(transport_module, "build_transport", lambda settings: httpx.MockTransport(handler))


def test_connection_failure_maps_to_unavailable(monkeypatch):
    _raising_transport(monkeypatch, httpx.ConnectError("connection refused"))
    client = new_client(with_token("sk-test"))
    with pytest.raises(BackendError) as info:
        client.completion("", "hi")
    assert info.value.code is ErrorCode.UNAVAILABLE  # nosec B101


def test_timeout_maps_to_timeout(monkeypatch):
    _raising_transport(monkeypatch, httpx.ReadTimeout("read timed out"))
    client = new_client(with_token("sk-test"))
    with pytest.raises(BackendError) as info:
        client.completion("", "hi", timeout=0.5)
    assert info.value.code is ErrorCode.TIMEOUT  # nosec B101
    assert info.value.retryable is True  # nosec B101

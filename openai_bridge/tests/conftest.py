"""Pytest configuration for the openai_bridge test suite.

SDK traffic is served by ``httpx.MockTransport``: the ``fake_backend``
fixture replaces ``build_transport`` so every client built during the test
talks to an in-process handler while header injection, timeouts and the
``openai`` SDK request/response handling still run for real.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional

import httpx
import pytest

from openai_bridge.base.http import transport as transport_module


def completion_body(
    content: Optional[str] = "hello",
    *,
    model: str = "gpt-4o-mini",
    choices: Optional[List[Dict[str, Any]]] = None,
    usage: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    """Return a chat completion payload in the wire shape the SDK parses."""
    if choices is None:
        choices = [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ]
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": choices,
        "usage": usage if usage is not None else {"prompt_tokens": 7, "completion_tokens": 3, "total_tokens": 10},
    }


class FakeBackend:
    """Records requests and replies with a configurable status and JSON body."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.settings: List[Any] = []
        self.status_code = 200
        self.body: Dict[str, Any] = completion_body()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    def reply(self, status_code: int = 200, body: Optional[Dict[str, Any]] = None) -> None:
        self.status_code = status_code
        if body is not None:
            self.body = body

    def reply_completion(self, content: Optional[str] = "hello", **kwargs: Any) -> None:
        """Reply with a completion built by :func:`completion_body`."""
        self.reply(200, completion_body(content, **kwargs))

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the backend"  # nosec B101
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture()
def fake_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeBackend]:
    """Route every client built during the test to an in-process backend."""

    backend = FakeBackend()

    def _build(settings: Any) -> httpx.BaseTransport:
        backend.settings.append(settings)
        return httpx.MockTransport(backend.handler)

    monkeypatch.setattr(transport_module, "build_transport", _build)
    yield backend


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``OPENAI_*`` variables so environment reads are deterministic."""

    import os

    for name in list(os.environ):
        if name.startswith("OPENAI_"):
            monkeypatch.delenv(name, raising=False)

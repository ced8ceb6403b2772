"""Request dispatcher bound to one assembled SDK client.

Every public operation builds exactly one :class:`ChatCompletionRequest` from
the client's resolved sampling parameters and a message list, then performs
exactly one synchronous ``chat.completions.create`` call. There is no retry,
no caching and no per-call state: the client never remembers earlier turns,
so callers thread conversation history through
:meth:`Client.create_chat_completion_with_messages` themselves.

Concurrency:
    A client holds no mutable per-call state. Concurrent calls from several
    threads share the underlying ``httpx`` connection pool, which is
    thread-safe.

Errors:
    SDK failures are re-raised as :class:`BackendError` (chained to the
    original) with the operation name in the message. The convenience wrappers
    additionally raise :class:`EmptyResponseError` and
    :class:`UnsupportedOperationError`.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, FrozenSet, List, Optional, Sequence

import openai

from ..base.capabilities import CAP_VISION, capabilities_for
from ..base.errors import BackendError, UnsupportedOperationError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    ChatCompletionRequest,
    ContentPart,
    Message,
    MessageLike,
    Response,
    Usage,
)
from ..config.defaults import DEFAULT_SYSTEM_PROMPT
from ..config.provider import Provider

if TYPE_CHECKING:  # pragma: no cover
    from ..config import Config


class Client:
    """Chat client for OpenAI, Azure OpenAI and OpenAI-compatible backends.

    Build instances with :func:`openai_bridge.new_client`; the constructor
    only copies resolved values out of an already validated config.
    """

    def __init__(self, cfg: "Config", sdk: openai.OpenAI) -> None:
        self._sdk = sdk
        self._provider: Provider = cfg.provider
        self._model = cfg.model
        self._max_tokens = cfg.max_tokens
        self._temperature = cfg.temperature
        self._top_p = cfg.top_p
        self._presence_penalty = cfg.presence_penalty
        self._frequency_penalty = cfg.frequency_penalty
        self._capabilities: Optional[FrozenSet[str]] = cfg.capabilities
        self._logger = get_logger("openai_bridge.client")

    # ----- read-only settings -----
    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def top_p(self) -> float:
        return self._top_p

    @property
    def presence_penalty(self) -> float:
        return self._presence_penalty

    @property
    def frequency_penalty(self) -> float:
        return self._frequency_penalty

    @property
    def sdk_client(self) -> openai.OpenAI:
        """The wrapped ``openai`` SDK client (owned by this instance)."""
        return self._sdk

    def capabilities(self) -> FrozenSet[str]:
        """Capabilities of the configured model (explicit or from the table)."""
        return capabilities_for(self._model, self._capabilities)

    # ----- request building -----
    def build_chat_completion_request(self, messages: Sequence[MessageLike]) -> ChatCompletionRequest:
        """Create the request record carrying this client's sampling settings."""
        return ChatCompletionRequest(
            model=self._model,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            top_p=self._top_p,
            frequency_penalty=self._frequency_penalty,
            presence_penalty=self._presence_penalty,
            messages=list(messages),
        )

    # ----- raw operations -----
    def create_chat_completion(self, prompt: str, content: str, *, timeout: Optional[float] = None) -> Any:
        """Send ``[system(prompt), user(content)]`` and return the SDK response.

        An empty ``prompt`` is replaced by ``DEFAULT_SYSTEM_PROMPT``.
        """
        messages = [
            Message.system(prompt or DEFAULT_SYSTEM_PROMPT),
            Message.user(content),
        ]
        return self._send("chat completion", self.build_chat_completion_request(messages), timeout)

    def create_chat_completion_with_messages(self, messages: Sequence[MessageLike], *, timeout: Optional[float] = None) -> Any:
        """Send the caller's message history unchanged and return the SDK response."""
        return self._send("chat completion with messages", self.build_chat_completion_request(messages), timeout)

    def create_image_chat_completion(self, image: str, prompt: str, content: str, *, timeout: Optional[float] = None) -> Any:
        """Send a text + image-URL user message and return the SDK response.

        The system message, when ``prompt`` is non-empty, follows the user
        message. No capability check happens at this level.
        """
        messages: List[Message] = [
            Message.user([ContentPart.of_text(content), ContentPart.of_image(image)]),
        ]
        if prompt:
            messages.append(Message.system(prompt))
        return self._send("image chat completion", self.build_chat_completion_request(messages), timeout)

    # ----- convenience wrappers -----
    def completion(self, prompt: str, content: str, *, timeout: Optional[float] = None) -> Response:
        """Chat completion unwrapped to the first candidate's text and usage.

        Raises:
            BackendError: The SDK call failed.
            EmptyResponseError: The backend returned no choices.
        """
        resp = self.create_chat_completion(prompt, content, timeout=timeout)
        return Response.from_completion(resp, provider=self._provider.value, model=self._model)

    def image_completion(self, image: str, prompt: str, content: str, *, timeout: Optional[float] = None) -> Response:
        """Image-augmented completion unwrapped to text and usage.

        The configured model must be known to accept images, either through
        the capability table or ``with_model_capabilities("vision")``.

        Raises:
            UnsupportedOperationError: The model is not known to support images.
            BackendError: The SDK call failed.
            EmptyResponseError: The backend returned no choices.
        """
        if CAP_VISION not in self.capabilities():
            raise UnsupportedOperationError(
                f"model {self._model!r} is not known to accept image input; "
                "declare it with with_model_capabilities('vision')",
                capability=CAP_VISION,
                provider=self._provider.value,
                model=self._model,
            )
        resp = self.create_image_chat_completion(image, prompt, content, timeout=timeout)
        return Response.from_completion(resp, provider=self._provider.value, model=self._model)

    # ----- internals -----
    def _send(self, operation: str, request: ChatCompletionRequest, timeout: Optional[float]) -> Any:
        params = request.to_params()
        if timeout is not None:
            params["timeout"] = timeout
        ctx = LogContext(provider=self._provider.value, model=self._model, operation=operation)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            level=logging.DEBUG,
            messages=len(params["messages"]),
        )
        t0 = time.perf_counter()
        try:
            resp = self._sdk.chat.completions.create(**params)
        except openai.OpenAIError as exc:
            err = BackendError(operation, exc, provider=self._provider.value, model=self._model)
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                level=logging.DEBUG,
                error_code=err.code.value,
                error=str(exc),
            )
            raise err from exc
        latency_ms = (time.perf_counter() - t0) * 1000.0
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            level=logging.DEBUG,
            emitted=bool(getattr(resp, "choices", None)),
            tokens=Usage.from_sdk(getattr(resp, "usage", None)),
            latency_ms=round(latency_ms, 3),
        )
        return resp


__all__ = ["Client"]

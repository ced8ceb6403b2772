"""Configuration options.

Each ``with_*`` function returns an :data:`Option`: a closure that writes one
field of a :class:`Config`. Options are applied in the order given to
``new_config``/``new_client`` and the last write to a field wins; nothing is
merged. Value normalization (provider tags, non-positive temperature and
max-tokens, timeouts) happens when the option is created, so an option always
writes an already-normalized value.

Usage::

    client = new_client(
        with_token(os.environ["OPENAI_API_KEY"]),
        with_base_url("http://localhost:11434/v1"),
        with_model("llava:latest"),
        with_headers(["X-Trace=abc"]),
    )
"""

from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Optional, Union

from .bridge_config import Config, Option
from .defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .provider import Provider


def with_token(val: str) -> Option:
    """Set the API credential."""
    def _apply(c: Config) -> None:
        c.token = val
    return _apply


def with_org_id(val: str) -> Option:
    """Set the organization id."""
    def _apply(c: Config) -> None:
        c.org_id = val
    return _apply


def with_model(val: str) -> Option:
    """Set the model identifier (Azure: also the deployment name)."""
    def _apply(c: Config) -> None:
        c.model = val
    return _apply


def with_provider(val: Union[str, Provider]) -> Option:
    """Set the provider tag.

    Only ``"openai"`` and ``"azure"`` are recognized; any other value,
    including historical tags such as ``"deepseek"`` or ``"ollama"``, selects
    the default OpenAI-compatible branch instead of failing.
    """
    provider = Provider.normalize(val)

    def _apply(c: Config) -> None:
        c.provider = provider
    return _apply


def with_base_url(val: str) -> Option:
    """Set the endpoint used for requests."""
    def _apply(c: Config) -> None:
        c.base_url = val
    return _apply


def with_api_version(val: str) -> Option:
    """Set the API version (Azure ``api-version``)."""
    def _apply(c: Config) -> None:
        c.api_version = val
    return _apply


def with_proxy_url(val: str) -> Option:
    """Route requests through an HTTP(S) proxy."""
    def _apply(c: Config) -> None:
        c.proxy_url = val
    return _apply


def with_socks_url(val: str) -> Option:
    """Dial through a SOCKS5 proxy; ignored when an HTTP proxy is set."""
    def _apply(c: Config) -> None:
        c.socks_url = val
    return _apply


def with_timeout(val: Optional[Union[float, int, timedelta]]) -> Option:
    """Set the request timeout.

    Accepts seconds or a ``timedelta``. ``None``, zero and negative values
    mean no timeout.
    """
    seconds: Optional[float]
    if isinstance(val, timedelta):
        seconds = val.total_seconds()
    elif val is None:
        seconds = None
    else:
        seconds = float(val)
    if seconds is not None and seconds <= 0:
        seconds = None

    def _apply(c: Config) -> None:
        c.timeout = seconds
    return _apply


def with_max_tokens(val: int) -> Option:
    """Set the maximum number of tokens to generate.

    The total of input and generated tokens is bounded by the model's context
    length. Values <= 0 are replaced by ``DEFAULT_MAX_TOKENS``.
    """
    if val <= 0:
        val = DEFAULT_MAX_TOKENS

    def _apply(c: Config) -> None:
        c.max_tokens = int(val)
    return _apply


def with_temperature(val: float) -> Option:
    """Set the sampling temperature (0 to 2).

    Values <= 0 are replaced by ``DEFAULT_TEMPERATURE``; a literal zero
    temperature cannot be requested through this option.
    """
    if val <= 0:
        val = DEFAULT_TEMPERATURE

    def _apply(c: Config) -> None:
        c.temperature = float(val)
    return _apply


def with_top_p(val: float) -> Option:
    """Set nucleus sampling: only tokens within the top ``val`` probability mass."""
    def _apply(c: Config) -> None:
        c.top_p = float(val)
    return _apply


def with_presence_penalty(val: float) -> Option:
    """Set the presence penalty (-2.0 to 2.0)."""
    def _apply(c: Config) -> None:
        c.presence_penalty = float(val)
    return _apply


def with_frequency_penalty(val: float) -> Option:
    """Set the frequency penalty (-2.0 to 2.0)."""
    def _apply(c: Config) -> None:
        c.frequency_penalty = float(val)
    return _apply


def with_skip_verify(val: bool) -> Option:
    """Disable TLS certificate verification.

    Exposes the client to man-in-the-middle attacks. Use only against local
    development or test endpoints.
    """
    def _apply(c: Config) -> None:
        c.skip_verify = bool(val)
    return _apply


def with_headers(headers: Union[str, Iterable[str]]) -> Option:
    """Set raw ``"Key=Value"`` headers added to every request.

    Replaces any previously configured header list. A single string counts
    as one entry. Malformed entries are dropped when the transport is built.
    """
    values = [headers] if isinstance(headers, str) else list(headers)

    def _apply(c: Config) -> None:
        c.headers = list(values)
    return _apply


def with_model_capabilities(*capabilities: str) -> Option:
    """Declare the capabilities of the configured model (e.g. ``"vision"``).

    Overrides the built-in capability table for this client only.
    """
    caps = frozenset(str(c).strip().lower() for c in capabilities)

    def _apply(c: Config) -> None:
        c.capabilities = caps
    return _apply


__all__ = [
    "with_token",
    "with_org_id",
    "with_model",
    "with_provider",
    "with_base_url",
    "with_api_version",
    "with_proxy_url",
    "with_socks_url",
    "with_timeout",
    "with_max_tokens",
    "with_temperature",
    "with_top_p",
    "with_presence_penalty",
    "with_frequency_penalty",
    "with_skip_verify",
    "with_headers",
    "with_model_capabilities",
]

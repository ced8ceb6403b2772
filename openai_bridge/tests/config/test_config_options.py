"""Option application and validation rules for ``Config``.

Covers:
- defaults when no options are given
- last-write-wins ordering
- non-positive temperature / max-tokens replaced by defaults
- provider tag normalization
- credential and Azure endpoint validation
"""
from __future__ import annotations

from datetime import timedelta

import pytest

from openai_bridge.base.errors import ErrorCode, MissingCredentialError, ProviderError
from openai_bridge.config import (
    Provider,
    new_config,
    with_base_url,
    with_headers,
    with_max_tokens,
    with_model,
    with_model_capabilities,
    with_provider,
    with_temperature,
    with_timeout,
    with_token,
    with_top_p,
)
from openai_bridge.config.defaults import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
)


def test_defaults_without_options():
    cfg = new_config()
    assert cfg.token == ""  # nosec B101
    assert cfg.model == ""  # nosec B101
    assert cfg.provider is Provider.DEFAULT  # nosec B101
    assert cfg.max_tokens == DEFAULT_MAX_TOKENS == 2000  # nosec B101
    assert cfg.temperature == DEFAULT_TEMPERATURE == 1.0  # nosec B101
    assert cfg.top_p == DEFAULT_TOP_P == 1.0  # nosec B101
    assert cfg.presence_penalty == 0.0  # nosec B101
    assert cfg.frequency_penalty == 0.0  # nosec B101
    assert cfg.headers == []  # nosec B101
    assert cfg.timeout is None  # nosec B101
    assert cfg.skip_verify is False  # nosec B101
    assert cfg.capabilities is None  # nosec B101


def test_last_write_wins():
    cfg = new_config(with_model("a"), with_top_p(0.5), with_model("b"))
    assert cfg.model == "b"  # nosec B101
    assert cfg.top_p == 0.5  # nosec B101


@pytest.mark.parametrize("value", [0, -5, 0.0])
def test_non_positive_temperature_uses_default(value):
    assert new_config(with_temperature(value)).temperature == DEFAULT_TEMPERATURE  # nosec B101


def test_positive_temperature_kept():
    assert new_config(with_temperature(0.2)).temperature == 0.2  # nosec B101


@pytest.mark.parametrize("value", [0, -1])
def test_non_positive_max_tokens_uses_default(value):
    assert new_config(with_max_tokens(value)).max_tokens == DEFAULT_MAX_TOKENS  # nosec B101


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("azure", Provider.AZURE),
        (" Azure ", Provider.AZURE),
        ("openai", Provider.DEFAULT),
        ("deepseek", Provider.DEFAULT),
        ("", Provider.DEFAULT),
        (Provider.AZURE, Provider.AZURE),
    ],
)
def test_provider_tags_normalize(tag, expected):
    assert new_config(with_provider(tag)).provider is expected  # nosec B101


@pytest.mark.parametrize(
    "value, expected",
    [(30, 30.0), (timedelta(seconds=90), 90.0), (0, None), (-1, None), (None, None)],
)
def test_timeout_normalization(value, expected):
    assert new_config(with_timeout(value)).timeout == expected  # nosec B101


def test_with_headers_accepts_single_entry():
    cfg = new_config(with_headers("X-A=1"))
    assert cfg.headers == ["X-A=1"]  # nosec B101


def test_with_headers_copies_caller_list():
    raw = ["X-A=1"]
    cfg = new_config(with_headers(raw))
    raw.append("X-B=2")
    assert cfg.headers == ["X-A=1"]  # nosec B101


def test_with_model_capabilities_normalizes_names():
    cfg = new_config(with_model_capabilities("Vision", " chat "))
    assert cfg.capabilities == frozenset({"vision", "chat"})  # nosec B101


def test_validate_requires_token():
    with pytest.raises(MissingCredentialError) as info:
        new_config(with_model("gpt-4o")).validate()
    assert info.value.code is ErrorCode.AUTH  # nosec B101


def test_validate_fills_default_model():
    cfg = new_config(with_token("sk-test"))
    cfg.validate()
    assert cfg.model == DEFAULT_MODEL == "gpt-4o-mini"  # nosec B101


def test_validate_azure_requires_base_url():
    cfg = new_config(with_token("k"), with_provider("azure"), with_model("gpt-4"))
    with pytest.raises(ProviderError) as info:
        cfg.validate()
    assert info.value.code is ErrorCode.VALIDATION  # nosec B101


def test_validate_azure_with_base_url_passes():
    cfg = new_config(
        with_token("k"),
        with_provider("azure"),
        with_base_url("https://example.openai.azure.com"),
    )
    cfg.validate()
    assert cfg.model == DEFAULT_MODEL  # nosec B101

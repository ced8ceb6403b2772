"""Azure OpenAI routing: deployment path, api-version and api-key header."""
from __future__ import annotations

import openai
import pytest

from openai_bridge import (
    Provider,
    new_client,
    with_api_version,
    with_base_url,
    with_model,
    with_provider,
    with_token,
)
from openai_bridge.base.errors import ErrorCode, ProviderError

ENDPOINT = "https://example.openai.azure.com"


def test_azure_routes_to_configured_deployment(fake_backend):
    client = new_client(
        with_token("azure-key"),
        with_provider("azure"),
        with_base_url(ENDPOINT),
        with_model("gpt-4"),
        with_api_version("2024-02-01"),
    )
    assert client.provider is Provider.AZURE  # nosec B101
    assert isinstance(client.sdk_client, openai.AzureOpenAI)  # nosec B101
    client.completion("", "hi")
    req = fake_backend.last_request
    assert req.url.path == "/openai/deployments/gpt-4/chat/completions"  # nosec B101
    assert req.url.params["api-version"] == "2024-02-01"  # nosec B101
    assert req.headers["api-key"] == "azure-key"  # nosec B101
    assert fake_backend.last_json()["model"] == "gpt-4"  # nosec B101


def test_azure_default_api_version(fake_backend):
    client = new_client(with_token("k"), with_provider("AZURE"), with_base_url(ENDPOINT), with_model("gpt-4"))
    client.completion("", "hi")
    assert fake_backend.last_request.url.params["api-version"] == "2023-05-15"  # nosec B101


def test_azure_without_endpoint_is_rejected(fake_backend):
    with pytest.raises(ProviderError) as info:
        new_client(with_token("k"), with_provider("azure"))
    assert info.value.code is ErrorCode.VALIDATION  # nosec B101
    assert fake_backend.settings == []  # nosec B101


def test_api_version_on_default_provider_is_a_query_parameter(fake_backend):
    client = new_client(with_token("k"), with_base_url("https://gateway.example.test/v1"), with_api_version("2024-06-01"))
    client.completion("", "hi")
    req = fake_backend.last_request
    assert req.url.path == "/v1/chat/completions"  # nosec B101
    assert req.url.params["api-version"] == "2024-06-01"  # nosec B101


def test_unknown_provider_tag_uses_default_branch(fake_backend):
    client = new_client(with_token("k"), with_provider("ollama"), with_base_url("http://localhost:11434/v1"))
    assert client.provider is Provider.DEFAULT  # nosec B101
    assert not isinstance(client.sdk_client, openai.AzureOpenAI)  # nosec B101
    client.completion("", "hi")
    assert str(fake_backend.last_request.url) == "http://localhost:11434/v1/chat/completions"  # nosec B101

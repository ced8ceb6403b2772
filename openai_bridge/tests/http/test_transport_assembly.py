"""Proxy selection, TLS policy and timeout wiring of the HTTP client."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import httpx
import pytest

from openai_bridge import new_client, with_socks_url, with_token
from openai_bridge.base.errors import ErrorCode, ProxyUnreachableError
from openai_bridge.base.http import (
    HeaderInjectingTransport,
    build_http_client,
    build_transport,
    proxy_kind,
    transport_options,
)


@dataclass
class _Settings:
    proxy_url: str = ""
    socks_url: str = ""
    skip_verify: bool = False
    headers: List[str] = field(default_factory=list)
    timeout: Optional[float] = None


def test_direct_connection_verifies_tls():
    assert transport_options(_Settings()) == {"verify": True, "proxy": None}  # nosec B101
    assert proxy_kind(_Settings()) is None  # nosec B101


def test_skip_verify_disables_certificate_checks():
    assert transport_options(_Settings(skip_verify=True))["verify"] is False  # nosec B101


def test_http_proxy_wins_over_socks():
    s = _Settings(proxy_url="http://proxy.local:3128", socks_url="127.0.0.1:1080")
    assert proxy_kind(s) == "http"  # nosec B101
    assert transport_options(s)["proxy"] == "http://proxy.local:3128"  # nosec B101


@pytest.mark.parametrize(
    "address, expected",
    [
        ("127.0.0.1:1080", "socks5://127.0.0.1:1080"),
        ("socks5://proxy.local:1080", "socks5://proxy.local:1080"),
    ],
)
def test_socks_address_normalized(address, expected):
    s = _Settings(socks_url=address)
    assert proxy_kind(s) == "socks5"  # nosec B101
    assert transport_options(s)["proxy"] == expected  # nosec B101


@pytest.mark.parametrize("address", ["localhost", "http://proxy.local:1080"])
def test_unusable_socks_address_raises(address):
    with pytest.raises(ProxyUnreachableError) as info:
        transport_options(_Settings(socks_url=address))
    assert info.value.code is ErrorCode.UNAVAILABLE  # nosec B101
    assert "proxy connection failed" in info.value.message  # nosec B101


def test_build_transport_with_http_proxy():
    transport = build_transport(_Settings(proxy_url="http://proxy.local:3128"))
    assert isinstance(transport, httpx.HTTPTransport)  # nosec B101
    transport.close()


def test_build_transport_with_socks_proxy():
    pytest.importorskip("socksio")
    transport = build_transport(_Settings(socks_url="127.0.0.1:1080"))
    assert isinstance(transport, httpx.HTTPTransport)  # nosec B101
    transport.close()


def test_build_transport_rejects_unsupported_proxy_scheme():
    with pytest.raises(ProxyUnreachableError):
        build_transport(_Settings(proxy_url="ftp://proxy.local:21"))


def test_http_client_wraps_transport_and_sets_timeout():
    client = build_http_client(_Settings(headers=["X-Trace=abc"], timeout=5.0))
    try:
        assert isinstance(client._transport, HeaderInjectingTransport)  # nosec B101
        assert client._transport.header_names == ["X-Trace"]  # nosec B101
        assert client.timeout == httpx.Timeout(5.0)  # nosec B101
    finally:
        client.close()


def test_http_client_without_timeout_waits_indefinitely():
    client = build_http_client(_Settings())
    try:
        assert client.timeout == httpx.Timeout(None)  # nosec B101
    finally:
        client.close()


def test_new_client_fails_fast_on_unusable_socks_address():
    with pytest.raises(ProxyUnreachableError):
        new_client(with_token("sk-test"), with_socks_url("localhost"))

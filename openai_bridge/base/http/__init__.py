"""HTTP transport assembly: headers, proxying, TLS verification."""

from .headers import HeaderInjectingTransport, HeaderSet, parse_headers
from .transport import (
    TransportSettings,
    build_http_client,
    build_transport,
    proxy_kind,
    transport_options,
)

__all__ = [
    "HeaderInjectingTransport",
    "HeaderSet",
    "parse_headers",
    "TransportSettings",
    "build_http_client",
    "build_transport",
    "proxy_kind",
    "transport_options",
]

"""Custom header parsing and the header-injecting transport decorator.

Headers are configured as raw ``"Key=Value"`` strings. :func:`parse_headers`
turns them into a name -> values mapping once, at client construction, and
:class:`HeaderInjectingTransport` appends those values to every request that
passes through it, alongside whatever the SDK already set (authorization,
user agent, retry-count headers and so on).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple

import httpx

HeaderSet = Dict[str, List[str]]


def parse_headers(raw: Iterable[str]) -> HeaderSet:
    """Parse ``"Key=Value"`` strings into a header set.

    Splits on the first ``=`` only, so values may themselves contain ``=``.
    Key and value are stripped of surrounding whitespace. Entries without
    ``=`` or with an empty key are dropped silently; empty values are kept.
    Repeated keys accumulate values in order.

    >>> parse_headers(["A=1", "B=2=3", "=x", "novalue", "C="])
    {'A': ['1'], 'B': ['2=3'], 'C': ['']}
    """
    out: HeaderSet = {}
    for entry in raw:
        key, sep, value = str(entry).partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        out.setdefault(key, []).append(value.strip())
    return out


class HeaderInjectingTransport(httpx.BaseTransport):
    """Transport decorator adding a fixed header set to each request.

    Names and values are encoded to UTF-8 once, here, so non-ASCII values
    go out as their raw bytes instead of failing inside httpx on every call.

    Parameters
    ----------
    inner: httpx.BaseTransport
        Transport that performs the actual I/O (proxied or direct).
    headers: Mapping[str, List[str]]
        Header name -> values; every value is appended, existing request
        headers are never removed.
    """

    def __init__(self, inner: httpx.BaseTransport, headers: Mapping[str, List[str]]) -> None:
        self._inner = inner
        self._names = [name for name, values in headers.items() if values]
        self._raw: List[Tuple[bytes, bytes]] = [
            (name.encode("utf-8"), value.encode("utf-8"))
            for name, values in headers.items()
            for value in values
        ]

    @property
    def header_names(self) -> List[str]:
        return list(self._names)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        if self._raw:
            request.headers = httpx.Headers(list(request.headers.raw) + self._raw)
        return self._inner.handle_request(request)

    def close(self) -> None:
        self._inner.close()


__all__ = ["HeaderSet", "parse_headers", "HeaderInjectingTransport"]

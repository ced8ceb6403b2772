"""Mutable configuration record and its validation.

A :class:`Config` is created fresh for every client construction from the
built-in defaults, mutated in place by each option in the order given, and
validated exactly once. Its values are then copied into the client and the
record is discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional

from ..base.errors import ErrorCode, MissingCredentialError, ProviderError
from .defaults import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_PROVIDER,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
)
from .provider import Provider


@dataclass
class Config:
    """Settings accumulated from options.

    Attributes:
        token: API credential; required.
        org_id: Optional organization id sent with every request.
        model: Model identifier; defaulted during validation when empty.
        provider: Endpoint-construction branch.
        base_url: Endpoint override (Azure: the resource endpoint).
        api_version: API version override.
        proxy_url: HTTP(S) proxy URL; wins over ``socks_url``.
        socks_url: SOCKS5 proxy address (``host:port`` or ``socks5://...``).
        timeout: Request timeout in seconds; ``None`` waits indefinitely.
        max_tokens: Maximum tokens to generate.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        presence_penalty: Constant repetition penalty.
        frequency_penalty: Frequency-proportional repetition penalty.
        headers: Raw ``"Key=Value"`` header strings.
        skip_verify: Disable TLS certificate verification (development only).
        capabilities: Explicit capability set for ``model``; ``None`` defers
            to the built-in capability table.
    """

    token: str = ""
    org_id: str = ""
    model: str = ""
    provider: Provider = DEFAULT_PROVIDER
    base_url: str = ""
    api_version: str = ""
    proxy_url: str = ""
    socks_url: str = ""
    timeout: Optional[float] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    top_p: float = DEFAULT_TOP_P
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    headers: List[str] = field(default_factory=list)
    skip_verify: bool = False
    capabilities: Optional[FrozenSet[str]] = None

    def validate(self) -> None:
        """Check cross-field rules and fill the default model.

        Raises:
            MissingCredentialError: When ``token`` is empty.
            ProviderError: When the Azure provider has no endpoint.
        """
        if not self.token:
            raise MissingCredentialError(provider=self.provider.value, model=self.model or None)
        if not self.model:
            self.model = DEFAULT_MODEL
        if self.provider is Provider.AZURE and not self.base_url:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="azure provider requires a base URL (the resource endpoint)",
                provider=self.provider.value,
                model=self.model,
            )


Option = Callable[[Config], None]


def new_config(*opts: Option) -> Config:
    """Create a config from defaults and apply ``opts`` in order."""
    cfg = Config()
    for opt in opts:
        opt(cfg)
    return cfg


__all__ = ["Config", "Option", "new_config"]

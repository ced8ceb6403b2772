"""Validated settings DTO bridging files and the environment to options.

Purpose
-------
Offer one typed container mirroring every configuration option so external
sources (a JSON/YAML settings file, environment variables, CLI flags) can be
validated once at the edge and then turned into an ordered option list.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and type coercion.
- PyYAML for YAML settings files.

Failure modes
-------------
- Wrong types or unknown keys raise ``pydantic.ValidationError``.
- A settings file whose top level is not a mapping raises ``ValueError``.

Fields left at ``None`` produce no option, so when several sources are
chained (file, then environment, then flags) each source only overrides what
it actually sets.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .bridge_config import Option
from .env import DEFAULT_ENV_PREFIX, read_env
from .options import (
    with_api_version,
    with_base_url,
    with_frequency_penalty,
    with_headers,
    with_max_tokens,
    with_model,
    with_model_capabilities,
    with_org_id,
    with_presence_penalty,
    with_provider,
    with_proxy_url,
    with_skip_verify,
    with_socks_url,
    with_temperature,
    with_timeout,
    with_token,
    with_top_p,
)


def _split_csv(value: Any) -> Any:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class BridgeSettings(BaseModel):
    """Every client option as an optional, validated field.

    Attributes
    ----------
    api_key:
        Credential; maps to ``with_token``.
    headers:
        ``"Key=Value"`` strings; a single comma-separated string is accepted.
    capabilities:
        Explicit capability names for the configured model.

    The remaining fields map one-to-one onto the option of the same name.
    """

    model_config = ConfigDict(extra="forbid")

    api_key: Optional[str] = None
    org_id: Optional[str] = None
    model: Optional[str] = None
    provider: Optional[str] = None
    base_url: Optional[str] = None
    api_version: Optional[str] = None
    proxy_url: Optional[str] = None
    socks_url: Optional[str] = None
    timeout: Optional[float] = Field(default=None, description="seconds; <= 0 disables the timeout")
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    skip_verify: Optional[bool] = None
    headers: Optional[List[str]] = None
    capabilities: Optional[List[str]] = None

    @field_validator("headers", "capabilities", mode="before")
    @classmethod
    def _coerce_csv(cls, value: Any) -> Any:
        return _split_csv(value)

    def to_options(self) -> List[Option]:
        """Return options for every field that is set, in declaration order."""
        builders = (
            ("api_key", with_token),
            ("org_id", with_org_id),
            ("model", with_model),
            ("provider", with_provider),
            ("base_url", with_base_url),
            ("api_version", with_api_version),
            ("proxy_url", with_proxy_url),
            ("socks_url", with_socks_url),
            ("timeout", with_timeout),
            ("max_tokens", with_max_tokens),
            ("temperature", with_temperature),
            ("top_p", with_top_p),
            ("presence_penalty", with_presence_penalty),
            ("frequency_penalty", with_frequency_penalty),
            ("skip_verify", with_skip_verify),
            ("headers", with_headers),
        )
        opts: List[Option] = []
        for name, build in builders:
            value = getattr(self, name)
            if value is not None:
                opts.append(build(value))
        if self.capabilities is not None:
            opts.append(with_model_capabilities(*self.capabilities))
        return opts


def load_settings_file(path: Union[str, Path]) -> BridgeSettings:
    """Load settings from a JSON file, falling back to YAML.

    Parameters:
        path: File location.

    Returns:
        Validated :class:`BridgeSettings`.

    Raises:
        FileNotFoundError: When the file does not exist.
        ValueError: When the document is not a mapping.
        pydantic.ValidationError: When a value has the wrong type.
    """
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"settings file {path} must contain a mapping at the top level")
    return BridgeSettings.model_validate(dict(data))


def settings_from_env(prefix: str = DEFAULT_ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> BridgeSettings:
    """Read ``<PREFIX>_*`` variables into validated settings."""
    return BridgeSettings.model_validate(read_env(prefix, environ))


def options_from_env(prefix: str = DEFAULT_ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> List[Option]:
    """Shorthand for ``settings_from_env(prefix, environ).to_options()``."""
    return settings_from_env(prefix, environ).to_options()


__all__ = [
    "BridgeSettings",
    "load_settings_file",
    "settings_from_env",
    "options_from_env",
]

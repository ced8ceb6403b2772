"""Configuration layer: defaults, provider tags, options and validation.

Public API
----------
* ``Config`` / ``new_config(*opts)`` / ``Config.validate()``
* ``Provider`` tag enum
* ``with_*`` option constructors
* ``BridgeSettings``, ``load_settings_file``, ``settings_from_env``,
  ``options_from_env`` for caller-side file and environment sources
"""
from __future__ import annotations

from .bridge_config import Config, Option, new_config
from .provider import Provider
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
from .settings import BridgeSettings, load_settings_file, options_from_env, settings_from_env

__all__ = [
    "Config",
    "Option",
    "new_config",
    "Provider",
    "with_api_version",
    "with_base_url",
    "with_frequency_penalty",
    "with_headers",
    "with_max_tokens",
    "with_model",
    "with_model_capabilities",
    "with_org_id",
    "with_presence_penalty",
    "with_provider",
    "with_proxy_url",
    "with_skip_verify",
    "with_socks_url",
    "with_temperature",
    "with_timeout",
    "with_token",
    "with_top_p",
    "BridgeSettings",
    "load_settings_file",
    "settings_from_env",
    "options_from_env",
]

"""openai_bridge.config.env
========================

Environment variable conventions for caller-side configuration.

The client core never reads the process environment. Applications that want
twelve-factor style configuration call :func:`read_env` (or the higher level
``settings_from_env``) themselves and pass the result in as options.

Variable names are ``<PREFIX>_<SUFFIX>`` with the suffixes in
``ENV_FIELD_MAP``; the default prefix is ``OPENAI`` so the familiar
``OPENAI_API_KEY`` / ``OPENAI_BASE_URL`` pair works out of the box.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

DEFAULT_ENV_PREFIX = "OPENAI"

# Settings field -> environment variable suffix
ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "org_id": "ORG_ID",
    "model": "MODEL",
    "provider": "PROVIDER",
    "base_url": "BASE_URL",
    "api_version": "API_VERSION",
    "proxy_url": "PROXY_URL",
    "socks_url": "SOCKS_URL",
    "timeout": "TIMEOUT",
    "max_tokens": "MAX_TOKENS",
    "temperature": "TEMPERATURE",
    "top_p": "TOP_P",
    "presence_penalty": "PRESENCE_PENALTY",
    "frequency_penalty": "FREQUENCY_PENALTY",
    "skip_verify": "SKIP_VERIFY",
    "headers": "HEADERS",
    "capabilities": "CAPABILITIES",
}


def env_var_name(field: str, prefix: str = DEFAULT_ENV_PREFIX) -> Optional[str]:
    """Return the environment variable name for a settings field, if mapped."""
    suffix = ENV_FIELD_MAP.get(field)
    return f"{prefix.upper()}_{suffix}" if suffix else None


def read_env(prefix: str = DEFAULT_ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect raw, non-empty string values for every mapped field.

    Parameters
    ----------
    prefix: str
        Variable prefix (case-insensitive), e.g. ``"OPENAI"`` or ``"AZURE_OPENAI"``.
    environ: Optional[Mapping[str, str]]
        Source mapping; defaults to ``os.environ``.

    Returns
    -------
    Dict[str, str]
        Field name -> raw value. Unset and empty variables are omitted so
        they never override values from an earlier source.
    """
    env = os.environ if environ is None else environ
    out: Dict[str, str] = {}
    for field in ENV_FIELD_MAP:
        name = env_var_name(field, prefix)
        val = env.get(name) if name else None
        if val is not None and val.strip() != "":
            out[field] = val.strip()
    return out


__all__ = [
    "DEFAULT_ENV_PREFIX",
    "ENV_FIELD_MAP",
    "env_var_name",
    "read_env",
]

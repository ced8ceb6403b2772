"""openai_bridge.config.defaults
=============================

Central place for the small, stable default values used when building a
client. Every value is a module constant bound at import time; nothing in the
package mutates them. Callers that need a different default pass it through
an option instead.

This module imports nothing but the provider tag, so it can be used from any
layer without cycles.
"""

from __future__ import annotations

from .provider import Provider

# ---- Generation defaults ----
# Model assigned during validation when no model option was given.
DEFAULT_MODEL = "gpt-4o-mini"
# Replacement for max-tokens option values <= 0.
DEFAULT_MAX_TOKENS = 2000
# Replacement for temperature option values <= 0.
DEFAULT_TEMPERATURE = 1.0
DEFAULT_TOP_P = 1.0
DEFAULT_PROVIDER = Provider.DEFAULT

# System message used when a chat call is given an empty prompt.
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."

# ---- Endpoints ----
# Only the primary backend has a built-in endpoint; every other
# OpenAI-compatible backend needs an explicit base URL.
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
AZURE_DEFAULT_API_VERSION = "2023-05-15"

# ---- Convenience model identifiers (no special-case logic attached) ----
DEEPSEEK_CHAT_MODEL = "deepseek-chat"
ZHIPU_GLM_FREE_MODEL = "glm-4-flash"

# Example OpenAI-compatible endpoints for callers wiring third-party backends.
DEEPSEEK_BASE_URL = "https://api.deepseek.com/v1"
ZHIPU_BASE_URL = "https://open.bigmodel.cn/api/paas/v4/"
OLLAMA_BASE_URL = "http://localhost:11434/v1"


__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
    "DEFAULT_PROVIDER",
    "DEFAULT_SYSTEM_PROMPT",
    "OPENAI_DEFAULT_BASE_URL",
    "AZURE_DEFAULT_API_VERSION",
    "DEEPSEEK_CHAT_MODEL",
    "ZHIPU_GLM_FREE_MODEL",
    "DEEPSEEK_BASE_URL",
    "ZHIPU_BASE_URL",
    "OLLAMA_BASE_URL",
]

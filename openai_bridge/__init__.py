"""openai_bridge package

Configuration and transport adaptation layer over the ``openai`` SDK.

Purpose:
    Let callers talk to OpenAI, Azure OpenAI and OpenAI-compatible backends
    (DeepSeek, ZhiPu GLM, Ollama, ...) through one client whose endpoint,
    credentials, proxy, TLS policy, extra headers and sampling parameters are
    chosen with composable ``with_*`` options.

Public API (re-exported):
    - Version: ``__version__``
    - Assembly: :func:`new_client`, :class:`Client`
    - Configuration: :class:`Config`, :class:`Provider`, the ``with_*``
      options, :class:`BridgeSettings`
    - Values: :class:`Message`, :class:`ContentPart`, :class:`Response`,
      :class:`Usage`, :class:`ChatCompletionRequest`
    - Errors: :class:`ProviderError`, :class:`ErrorCode` and the specific
      subclasses

Example::

    from openai_bridge import new_client, with_token, with_model

    client = new_client(with_token("sk-..."), with_model("gpt-4o"))
    print(client.completion("", "Hello").content)
"""

from .base.capabilities import CAP_CHAT, CAP_VISION, capabilities_for, supports
from .base.errors import (
    BackendError,
    EmptyResponseError,
    ErrorCode,
    MissingCredentialError,
    ProviderError,
    ProxyUnreachableError,
    UnsupportedOperationError,
    classify_exception,
)
from .base.http import parse_headers
from .base.logging import configure_logger, get_logger
from .base.models import ChatCompletionRequest, ContentPart, Message, Response, Usage
from .client import Client, new_client
from .config import (
    BridgeSettings,
    Config,
    Option,
    Provider,
    load_settings_file,
    new_config,
    options_from_env,
    settings_from_env,
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
from .config.defaults import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Assembly
    "new_client",
    "Client",
    # Configuration
    "Config",
    "Option",
    "Provider",
    "new_config",
    "BridgeSettings",
    "load_settings_file",
    "settings_from_env",
    "options_from_env",
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
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MODEL",
    "DEFAULT_SYSTEM_PROMPT",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
    # Values
    "ChatCompletionRequest",
    "ContentPart",
    "Message",
    "Response",
    "Usage",
    "parse_headers",
    # Capabilities
    "CAP_CHAT",
    "CAP_VISION",
    "capabilities_for",
    "supports",
    # Errors
    "ProviderError",
    "ErrorCode",
    "classify_exception",
    "MissingCredentialError",
    "ProxyUnreachableError",
    "EmptyResponseError",
    "UnsupportedOperationError",
    "BackendError",
    # Logging
    "get_logger",
    "configure_logger",
]

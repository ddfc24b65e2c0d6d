"""Mandrill adapter - HTTP email sending.

Provides the Mandrill provider adapter using httpx and orjson.

Structure:
    * :mod:`.config` - Provider configuration models and loader
    * :mod:`.provider` - HTTP transport and result reporting

Contents:
    * :class:`.config.ProviderConfig` - Validated connection settings with API key
    * :class:`.config.ProviderOptions` - Validated connection settings
    * :func:`.config.load_provider_config_from_dict` - Config dict loader
    * :class:`.provider.MandrillProvider` - The provider adapter
"""

from __future__ import annotations

from .config import (
    ProviderConfig,
    ProviderOptions,
    build_provider_config,
    load_provider_config_from_dict,
)
from .provider import SEND_PATH, MandrillProvider, create_provider

__all__ = [
    "SEND_PATH",
    "MandrillProvider",
    "ProviderConfig",
    "ProviderOptions",
    "build_provider_config",
    "create_provider",
    "load_provider_config_from_dict",
]

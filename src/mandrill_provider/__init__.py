"""Public package surface for the Mandrill provider adapter.

Routes imports through the architectural layers:
- Domain exports: Message, wire transformation, error types
- Adapter exports: MandrillProvider and its configuration models
- Composition exports: configuration loading and logging setup
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.mandrill import (
    MandrillProvider,
    ProviderConfig,
    ProviderOptions,
    load_provider_config_from_dict,
)

# Composition exports (wired adapters)
from .composition import get_config, init_logging

# Domain exports
from .domain import (
    ApiError,
    ConfigurationError,
    Message,
    TransportError,
    ValidationError,
    build_wire_message,
    build_wire_request,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "MandrillProvider",
    "Message",
    "ProviderConfig",
    "ProviderOptions",
    "TransportError",
    "ValidationError",
    "build_wire_message",
    "build_wire_request",
    "get_config",
    "init_logging",
    "load_provider_config_from_dict",
    "print_info",
]

"""In-memory configuration adapters for testing.

Provides configuration functions that satisfy the same Protocols as
production adapters but never touch the filesystem.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ..mandrill.config import ProviderConfig, load_provider_config_from_dict


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def load_provider_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> ProviderConfig:
    """Parse the ``[mandrill]`` section with the real Pydantic model."""
    return load_provider_config_from_dict(config_dict)


__all__ = [
    "get_config_in_memory",
    "load_provider_config_from_dict_in_memory",
]

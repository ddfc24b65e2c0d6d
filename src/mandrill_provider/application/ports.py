"""Application ports: Protocol definitions for adapter functions and objects.

Each Protocol describes the shape a production adapter and its in-memory
counterpart share. Module-level functions and classes satisfy them
structurally (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``ProviderConfig``) are imported under ``TYPE_CHECKING`` only so that
    layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.message import Message

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.mandrill.config import ProviderConfig


class OnResult(Protocol):
    """Completion callback: called with no argument on success, one error on failure."""

    def __call__(self, error: Exception | None = ..., /) -> None: ...


class MailProvider(Protocol):
    """Capability of sending one message and reporting the outcome."""

    def send(
        self,
        message: Message | Mapping[str, Any] | None,
        on_result: OnResult | None = ...,
    ) -> asyncio.Task[None] | None: ...

    async def deliver(self, message: Message | Mapping[str, Any] | None) -> None: ...


class CreateProvider(Protocol):
    """Build a MailProvider from a validated ProviderConfig."""

    def __call__(self, config: ProviderConfig) -> MailProvider: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadProviderConfigFromDict(Protocol):
    """Load ProviderConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> ProviderConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CreateProvider",
    "GetConfig",
    "InitLogging",
    "LoadProviderConfigFromDict",
    "MailProvider",
    "OnResult",
]

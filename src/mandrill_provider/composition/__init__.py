"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Mail services
from ..adapters.mandrill.config import load_provider_config_from_dict
from ..adapters.mandrill.provider import create_provider

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.memory.mail import MailProviderSpy
    from ..application.ports import (
        CreateProvider,
        GetConfig,
        InitLogging,
        LoadProviderConfigFromDict,
        MailProvider,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_provider_config_from_dict: LoadProviderConfigFromDict = load_provider_config_from_dict
    _assert_create_provider: CreateProvider = create_provider


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    load_provider_config_from_dict: LoadProviderConfigFromDict
    create_provider: CreateProvider

    def provider_from_config(self, config: Config) -> MailProvider:
        """Build a provider from the ``[mandrill]`` section of *config*.

        Raises:
            ConfigurationError: When the section is missing or invalid.
        """
        provider_config = self.load_provider_config_from_dict(config.as_dict())
        return self.create_provider(provider_config)


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_provider_config_from_dict=load_provider_config_from_dict,
        create_provider=create_provider,
    )


def build_testing(*, spy: MailProviderSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional MailProviderSpy for capturing sends. When None, a fresh
            spy is created; pass your own to assert on captured messages.
    """
    from ..adapters.memory import (
        MailProviderSpy,
        get_config_in_memory,
        init_logging_in_memory,
        load_provider_config_from_dict_in_memory,
    )

    mail_spy = spy if spy is not None else MailProviderSpy()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        load_provider_config_from_dict=load_provider_config_from_dict_in_memory,
        create_provider=mail_spy.create_provider,
    )


__all__ = [
    # Configuration
    "get_config",
    "load_provider_config_from_dict",
    # Logging
    "init_logging",
    # Mail
    "create_provider",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

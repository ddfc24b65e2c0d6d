"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.mail` - In-memory mail provider (MailProviderSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory, load_provider_config_from_dict_in_memory
from .logging import init_logging_in_memory
from .mail import MailProviderSpy

# Static conformance assertions
if TYPE_CHECKING:
    from mandrill_provider.application.ports import (
        GetConfig,
        InitLogging,
        LoadProviderConfigFromDict,
        MailProvider,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_load_provider_config: LoadProviderConfigFromDict = load_provider_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_mail_provider: MailProvider = MailProviderSpy()

__all__ = [
    "MailProviderSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_provider_config_from_dict_in_memory",
]

"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions shared by production and in-memory adapters
"""

from __future__ import annotations

from .ports import (
    CreateProvider,
    GetConfig,
    InitLogging,
    LoadProviderConfigFromDict,
    MailProvider,
    OnResult,
)

__all__ = [
    "CreateProvider",
    "GetConfig",
    "InitLogging",
    "LoadProviderConfigFromDict",
    "MailProvider",
    "OnResult",
]

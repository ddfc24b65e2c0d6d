"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.mandrill` - Email sending via the Mandrill HTTP API
    * :mod:`.config` - Layered configuration loading
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []

"""Centralized logging initialization.

Provides a single source of truth for lib_log_rich runtime configuration.
The adapter modules only use stdlib ``logging``; applications embedding the
provider call :func:`init_logging` once to route those records through
lib_log_rich.

Contents:
    * :func:`init_logging` – idempotent logging initialization with layered config.
    * :func:`_build_runtime_config` – constructs RuntimeConfig from layered sources.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from mandrill_provider import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields pass through to lib_log_rich.RuntimeConfig.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})

    service = parsed.service or __init__conf__.name
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=service,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime once and bridge stdlib logging into it.

    Safe to call repeatedly; calls after the first return immediately.

    Args:
        config: Loaded layered configuration holding a ``[lib_log_rich]`` section.

    Side Effects:
        Loads .env files on first invocation so LOG_* variables apply, then
        initializes the global lib_log_rich runtime.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    runtime_config = _build_runtime_config(config)
    lib_log_rich.runtime.init(runtime_config)
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]

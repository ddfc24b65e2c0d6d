"""Logging initializer used by ``build_testing``.

Leaves lib_log_rich untouched so provider tests can capture the
``mandrill_provider`` loggers with pytest's ``caplog``.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the ``[lib_log_rich]`` section and install nothing."""
    del config


__all__ = ["init_logging_in_memory"]

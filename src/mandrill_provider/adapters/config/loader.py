"""Layered configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from mandrill_provider import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Validate a profile name via lib_layered_config.

    Raises:
        ValueError: If the profile name is empty, too long, contains path
            separators or other disallowed characters.

    Examples:
        >>> validate_profile("production")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Cached read; the caller validates *profile* first."""
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with the bundled defaults.

    Sources in precedence order: defaults, app, host, user, dotenv, env.
    The ``[mandrill]`` section feeds
    :func:`mandrill_provider.adapters.mandrill.config.load_provider_config_from_dict`
    and ``[lib_log_rich]`` feeds logging initialization.

    Args:
        profile: Optional profile name inserted as ``profile/<name>/`` into
            every configuration path.
        start_dir: Directory that seeds ``.env`` discovery; current working
            directory when None.

    Returns:
        Immutable configuration object with provenance tracking.
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configuration so the next call re-reads from disk."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible once the function is cast to a Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]

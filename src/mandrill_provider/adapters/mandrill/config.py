"""Provider configuration models and loader.

Provides the ProviderOptions/ProviderConfig Pydantic models for validated,
immutable Mandrill connection settings and the loader function to create
them from layered configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from mandrill_provider.domain.errors import ConfigurationError

DEFAULT_HOSTNAME = "mandrillapp.com"
DEFAULT_SECURE_PORT = 443
DEFAULT_PLAIN_PORT = 80
DEFAULT_TIMEOUT = 30.0


class ProviderOptions(BaseModel):
    """Validated, immutable connection options.

    Defaults are applied only when an option is absent (or explicitly
    ``None`` for ``port``), so ``use_secure_transport=False`` is honoured
    and selects plain HTTP on port 80.

    Example:
        >>> ProviderOptions().port
        443
        >>> ProviderOptions(use_secure_transport=False).port
        80
        >>> ProviderOptions(use_secure_transport=False, port=8080).port
        8080
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    use_secure_transport: bool = True
    hostname: str = DEFAULT_HOSTNAME
    # Declared after use_secure_transport so the validator can read it.
    port: int | None = Field(default=None, validate_default=True)
    async_mode: bool = False
    ip_pool: str | None = None
    timeout: float | None = DEFAULT_TIMEOUT

    @field_validator("port", mode="before")
    @classmethod
    def _default_port_for_transport(cls, v: Any, info: ValidationInfo) -> Any:
        """Derive the port from the transport when none was given."""
        if v is not None:
            return v
        secure = info.data.get("use_secure_transport", True)
        return DEFAULT_SECURE_PORT if secure else DEFAULT_PLAIN_PORT

    @field_validator("ip_pool", mode="before")
    @classmethod
    def _coerce_empty_ip_pool_to_none(cls, v: str | None) -> str | None:
        """Treat blank IP pool names as "not configured".

        Examples:
            >>> ProviderOptions._coerce_empty_ip_pool_to_none("   ")
            >>> ProviderOptions._coerce_empty_ip_pool_to_none("Main Pool")
            'Main Pool'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_options(self) -> ProviderOptions:
        """Reject values that would only fail later at connect time.

        Raises:
            ValueError: When hostname is blank, port is out of range, or
                timeout is not positive.
        """
        if not self.hostname.strip():
            raise ValueError("hostname must not be empty")

        if self.port is None or not 1 <= self.port <= 65535:
            raise ValueError(f"port must be 1-65535, got {self.port}")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        return self


class ProviderConfig(ProviderOptions):
    """Options plus the API key: everything one provider instance needs.

    Example:
        >>> config = ProviderConfig(api_key="secret-key")
        >>> config.hostname, config.port, config.async_mode
        ('mandrillapp.com', 443, False)
        >>> "secret-key" in repr(config)
        False
    """

    api_key: str

    @field_validator("api_key", mode="after")
    @classmethod
    def _reject_blank_api_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("api_key must not be empty")
        return v

    def __repr__(self) -> str:
        """Return string representation with api_key redacted."""
        fields: list[str] = []
        for name, value in self:
            if name == "api_key":
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"ProviderConfig({', '.join(fields)})"


def build_provider_config(
    api_key: str,
    options: ProviderOptions | Mapping[str, Any] | None = None,
) -> ProviderConfig:
    """Combine an API key with optional options into a ProviderConfig.

    Args:
        api_key: Mandrill API key.
        options: A ProviderOptions instance, a plain mapping of option names,
            or None for all defaults.

    Raises:
        ConfigurationError: When the key or any option fails validation.

    Example:
        >>> build_provider_config("k", {"use_secure_transport": False}).port
        80
        >>> build_provider_config("k", {"bogus": 1})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: ...
    """
    if isinstance(options, ProviderOptions):
        # Only explicitly set fields, so port is re-derived when left unset.
        raw: dict[str, Any] = options.model_dump(exclude_unset=True)
    elif options is None:
        raw = {}
    elif isinstance(options, Mapping):
        raw = dict(cast(Mapping[str, Any], options))
    else:
        raise ConfigurationError(f"options must be a mapping or ProviderOptions, got {type(options).__name__}")

    if "api_key" in raw:
        raise ConfigurationError("api_key must be passed separately, not inside options")

    try:
        return ProviderConfig.model_validate({**raw, "api_key": api_key})
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid provider configuration: {exc}") from exc


def load_provider_config_from_dict(config_dict: Mapping[str, Any]) -> ProviderConfig:
    """Load ProviderConfig from the ``[mandrill]`` section of a config dict.

    Bridges lib_layered_config's dictionary output with the typed model.
    The section holds ``api_key`` plus any ProviderOptions field.

    Raises:
        ConfigurationError: When the section is missing the API key, is not
            a table, or holds invalid values.

    Example:
        >>> cfg = load_provider_config_from_dict({"mandrill": {"api_key": "k", "ip_pool": "Main Pool"}})
        >>> cfg.ip_pool
        'Main Pool'
    """
    section: Any = config_dict.get("mandrill", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError("[mandrill] configuration section must be a table")

    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    api_key = raw.pop("api_key", None)
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigurationError("mandrill.api_key is not configured")

    return build_provider_config(api_key, raw)


__all__ = [
    "DEFAULT_HOSTNAME",
    "DEFAULT_PLAIN_PORT",
    "DEFAULT_SECURE_PORT",
    "DEFAULT_TIMEOUT",
    "ProviderConfig",
    "ProviderOptions",
    "build_provider_config",
    "load_provider_config_from_dict",
]

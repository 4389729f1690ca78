"""Typed runtime settings with dotenv support and startup validation."""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the API runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `app_version` reads from `APP_VERSION`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        app_version: App info service version to run (1 baseline, 2 broken, 3 namespace fix).
        log_level: Standard library logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    app_version: int = Field(default=1)
    log_level: str = Field(default="INFO")

    @field_validator("application_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unsupported log level {value!r}")
        return normalized_value


def config_load_settings(**overrides: object) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        overrides: Explicit values, e.g. from command-line flags, taking precedence over the environment.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    explicit_values = {name: value for name, value in overrides.items() if value is not None}
    try:
        return AppSettings(**explicit_values)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_parse_http_address(address: str) -> tuple[str, int]:
    """Parse a `host:port` listen address.

    An empty host, as in `:8080`, binds all interfaces.

    Args:
        address: Listen address text.

    Returns:
        tuple[str, int]: Host and port.

    Raises:
        SettingsLoadError: Raised when the port is missing or out of range.
    """

    host, separator, port_text = address.strip().rpartition(":")
    if not separator:
        raise SettingsLoadError(f"Invalid http address {address!r}. Expected HOST:PORT.")
    try:
        port = int(port_text)
    except ValueError as error:
        raise SettingsLoadError(f"Invalid http address {address!r}. Port must be an integer.") from error
    if not 1 <= port <= 65535:
        raise SettingsLoadError(f"Invalid http address {address!r}. Port must be between 1 and 65535.")
    return host.strip("[]") or "0.0.0.0", port

"""User configuration models."""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from adgen.configuration.models import (
    DEFAULT_HEIGHT,
    DEFAULT_PLACEMENTS,
    DEFAULT_WIDTH,
    MAX_PLACEMENTS,
    MIN_DIMENSION,
    MIN_PLACEMENTS,
)
from adgen.models.base import AdgenBaseModel
from adgen.urls.models import DEFAULT_PAGE, EndpointSettings


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FormDefaults(AdgenBaseModel):
    """Values a fresh configuration starts from."""

    placement_count: int = Field(
        default=DEFAULT_PLACEMENTS, ge=MIN_PLACEMENTS, le=MAX_PLACEMENTS
    )
    width: int = Field(default=DEFAULT_WIDTH, ge=MIN_DIMENSION)
    height: int = Field(default=DEFAULT_HEIGHT, ge=MIN_DIMENSION)


class StoreSettings(AdgenBaseModel):
    """Where presets are saved."""

    backend: Literal["file", "http"] = Field(
        default="file", description="Preset store: 'file' (default) or 'http'"
    )
    path: Path | None = Field(
        default=None,
        description="Preset file for the file backend (defaults to the XDG data dir)",
    )
    api_url: str | None = Field(
        default=None, description="Base API URL for the http backend"
    )
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")

    @model_validator(mode="after")
    def check_http_url(self) -> "StoreSettings":
        if self.backend == "http" and not self.api_url:
            raise ValueError("store.api_url is required when store.backend is 'http'")
        return self


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (ADGEN_*, nested with ``__``)
    2. Constructor arguments (file data)
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ADGEN_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override configuration file values."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    log_level: str = Field(default="WARNING", description="Log level")
    page: str = Field(
        default=DEFAULT_PAGE,
        description="Page reference sent with every request",
    )
    endpoint: EndpointSettings = Field(default_factory=EndpointSettings)
    defaults: FormDefaults = Field(default_factory=FormDefaults)
    store: StoreSettings = Field(default_factory=StoreSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v

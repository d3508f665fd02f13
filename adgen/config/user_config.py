"""
User configuration management for adgen.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from adgen.adapters.config_file_adapter import create_config_file_adapter
from adgen.config.models import UserConfigData
from adgen.core.errors import ConfigError
from adgen.core.structlog_logger import get_struct_logger
from adgen.protocols import ConfigFileAdapterProtocol
from adgen.urls.models import BuildContext
from adgen.utils.xdg import get_xdg_config_dir


logger = get_struct_logger(__name__)

# Environment variable prefix
ENV_PREFIX = "ADGEN_"


class UserConfig:
    """Manages user-specific configuration for adgen using Pydantic Settings."""

    def __init__(
        self,
        cli_config_path: str | Path | None = None,
        config_adapter: ConfigFileAdapterProtocol[UserConfigData] | None = None,
    ):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
            config_adapter: Optional adapter for file operations
        """
        self._adapter = config_adapter or create_config_file_adapter()
        self._config_sources: dict[str, str] = {}
        self._main_config_path: Path | None = None
        self._config_paths = self._generate_config_paths(cli_config_path)
        self._load_config()

    @property
    def data(self) -> UserConfigData:
        return self._config

    @property
    def config_path(self) -> Path | None:
        return self._main_config_path

    def _generate_config_paths(self, cli_config_path: str | Path | None) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if cli_config_path:
            config_paths.append(Path(cli_config_path).expanduser().resolve())

        config_paths.extend([Path.cwd() / "adgen.yaml", Path.cwd() / ".adgen.yml"])

        xdg_dir = get_xdg_config_dir()
        config_paths.extend([xdg_dir / "config.yaml", xdg_dir / "config.yml"])

        return config_paths

    def _load_config(self) -> None:
        """Load configuration from config files and environment variables."""
        logger.debug(
            "config_search_started", paths=[str(p) for p in self._config_paths]
        )

        config_data, found_path = self._adapter.search_config_files(self._config_paths)

        try:
            if found_path:
                self._main_config_path = found_path
                self._config = UserConfigData(**config_data)
                self._track_file_sources(config_data, found_path.name)
                logger.debug("config_loaded", path=str(found_path))
            else:
                logger.debug("config_defaults_used")
                self._config = UserConfigData()
                # Saving later goes to the XDG location
                self._main_config_path = self._config_paths[-2]
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e}",
                {"path": str(found_path) if found_path else "environment"},
            ) from e

        self._track_env_var_sources()

    def _track_file_sources(
        self, data: dict[str, Any], filename: str, prefix: str = ""
    ) -> None:
        """Recursively record which keys came from the config file."""
        for key, value in data.items():
            current_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                self._track_file_sources(value, filename, current_key)
            else:
                self._config_sources[current_key] = f"file:{filename}"

    def _track_env_var_sources(self) -> None:
        """Record which keys came from ADGEN_* environment variables."""
        for env_name in os.environ:
            if not env_name.upper().startswith(ENV_PREFIX):
                continue
            config_key = env_name[len(ENV_PREFIX) :].lower().replace("__", ".")
            if config_key.split(".")[0] in UserConfigData.model_fields:
                self._config_sources[config_key] = "environment"

    def save(self) -> None:
        """Save the current configuration to the main config file."""
        if not self._main_config_path:
            logger.warning("config_save_skipped", reason="no config path")
            return

        self._adapter.save_model(self._main_config_path, self._config)
        logger.debug("config_saved", path=str(self._main_config_path))

    def get_source(self, key: str) -> str:
        """
        Get the source of a configuration value.

        Returns:
            One of ``environment``, ``file:<name>``, ``runtime`` or ``default``
        """
        return self._config_sources.get(key, "default")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by (dotted) key."""
        current: Any = self._config
        for part in key.split("."):
            if not isinstance(current, BaseModel) or part not in type(current).model_fields:
                return default
            current = getattr(current, part)
        return current

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by (dotted) key.

        Raises:
            ValueError: If the key is unknown or the value is invalid
        """
        parts = key.split(".")
        parents: list[BaseModel] = [self._config]
        for part in parts[:-1]:
            current = parents[-1]
            if part not in type(current).model_fields:
                raise ValueError(f"Unknown configuration key: {key}")
            child = getattr(current, part)
            if not isinstance(child, BaseModel):
                raise ValueError(f"Invalid configuration path: {key}")
            parents.append(child)

        final_key = parts[-1]
        target = parents[-1]
        if final_key not in type(target).model_fields:
            logger.warning("config_key_unknown", key=key)
            raise ValueError(f"Unknown configuration key: {key}")

        try:
            if len(parents) == 1:
                setattr(self._config, final_key, value)
            else:
                # Nested sections may be frozen: rebuild the section and
                # assign it to its owner so the whole change is validated
                updated = type(target).model_validate(
                    {**target.model_dump(), final_key: value}
                )
                for owner, part in zip(
                    reversed(parents[:-1]), reversed(parts[:-1]), strict=True
                ):
                    if owner is self._config:
                        setattr(owner, part, updated)
                        break
                    updated = type(owner).model_validate(
                        {**owner.model_dump(), part: updated}
                    )
        except ValidationError as e:
            logger.warning("config_value_invalid", key=key, error=str(e))
            raise ValueError(f"Invalid value for {key}: {e}") from e

        self._config_sources[key] = "runtime"

    def reset_to_defaults(self) -> None:
        """Reset the configuration to default values."""
        self._config = UserConfigData()
        self._config_sources = {}

    def get_log_level_int(self) -> int:
        """Get the configured log level as a ``logging`` constant."""
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return level_map.get(self._config.log_level.upper(), logging.WARNING)

    def build_context(self, page: str | None = None) -> BuildContext:
        """Build context from the configured endpoint and page."""
        return BuildContext(page=page or self._config.page, endpoint=self._config.endpoint)


def create_user_config(
    cli_config_path: str | Path | None = None,
    config_adapter: ConfigFileAdapterProtocol[UserConfigData] | None = None,
) -> UserConfig:
    """
    Create a UserConfig instance with optional dependency injection.

    Args:
        cli_config_path: Optional config file path provided via CLI
        config_adapter: Optional adapter for file operations

    Returns:
        Configured UserConfig instance
    """
    return UserConfig(cli_config_path=cli_config_path, config_adapter=config_adapter)

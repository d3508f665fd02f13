"""YAML configuration file adapter."""

from pathlib import Path
from typing import Any, Generic, TypeVar

import yaml
from pydantic import BaseModel

from adgen.core.errors import ConfigError
from adgen.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class ConfigFileAdapter(Generic[T]):
    """Reads and writes YAML configuration files."""

    def load_config(self, file_path: Path) -> dict[str, Any]:
        try:
            with file_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in configuration file: {e}", {"path": str(file_path)}
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}", {"path": str(file_path)}
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration file must contain a mapping", {"path": str(file_path)}
            )
        return data

    def save_model(self, file_path: Path, model: T) -> None:
        data = model.model_dump(mode="json", exclude_defaults=True)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with file_path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error("config_save_failed", path=str(file_path), error=str(e))
            raise ConfigError(
                f"Cannot write configuration file: {e}", {"path": str(file_path)}
            ) from e

    def search_config_files(
        self, search_paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        for path in search_paths:
            if path.is_file():
                logger.debug("config_file_found", path=str(path))
                return self.load_config(path), path
        return {}, None


def create_config_file_adapter() -> ConfigFileAdapter[Any]:
    """Factory function to create a ConfigFileAdapter."""
    return ConfigFileAdapter()

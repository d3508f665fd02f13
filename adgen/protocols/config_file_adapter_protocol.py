"""Protocol for configuration file operations."""

from pathlib import Path
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel


T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class ConfigFileAdapterProtocol(Protocol[T]):
    """Protocol for loading and saving YAML configuration files."""

    def load_config(self, file_path: Path) -> dict[str, Any]:
        """Load a configuration file into a dictionary.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        ...

    def save_model(self, file_path: Path, model: T) -> None:
        """Write a model to a configuration file.

        Raises:
            ConfigError: If the file cannot be written
        """
        ...

    def search_config_files(
        self, search_paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        """Load the first existing file of ``search_paths``.

        Returns:
            Tuple of (config data, path found) or ({}, None) when none exists
        """
        ...

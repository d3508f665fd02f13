"""Adapters for files and preset stores."""

from adgen.adapters.config_file_adapter import (
    ConfigFileAdapter,
    create_config_file_adapter,
)
from adgen.adapters.file_store import FileConfigurationStore
from adgen.adapters.http_store import HttpConfigurationStore
from adgen.adapters.store_factory import create_configuration_store


__all__ = [
    "ConfigFileAdapter",
    "FileConfigurationStore",
    "HttpConfigurationStore",
    "create_config_file_adapter",
    "create_configuration_store",
]

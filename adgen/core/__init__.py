"""Core infrastructure for adgen: errors and logging."""

from adgen.core.errors import (
    AdgenError,
    CatalogError,
    ConfigError,
    StoreError,
    StoreNetworkError,
    StoreResponseError,
)
from adgen.core.logging import get_logger, setup_logging
from adgen.core.structlog_logger import StructlogMixin, get_struct_logger


__all__ = [
    "AdgenError",
    "CatalogError",
    "ConfigError",
    "StoreError",
    "StoreNetworkError",
    "StoreResponseError",
    "StructlogMixin",
    "get_logger",
    "get_struct_logger",
    "setup_logging",
]

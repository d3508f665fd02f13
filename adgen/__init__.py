"""adgen - Ad request generator for the getad demo endpoint."""

from importlib.metadata import PackageNotFoundError, version

from .catalog import ParameterCatalog, ParameterEntry, get_catalog
from .configuration import (
    AdConfiguration,
    FieldError,
    OverrideEntry,
    PersistedConfiguration,
    ValidationResult,
    to_canonical,
    to_ordered,
    validate_configuration,
)
from .urls import AdPlacement, BuildContext, EndpointSettings, build_urls


try:
    __version__ = version(__package__ or "adgen")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AdConfiguration",
    "AdPlacement",
    "BuildContext",
    "EndpointSettings",
    "FieldError",
    "OverrideEntry",
    "ParameterCatalog",
    "ParameterEntry",
    "PersistedConfiguration",
    "ValidationResult",
    "__version__",
    "build_urls",
    "get_catalog",
    "to_canonical",
    "to_ordered",
    "validate_configuration",
]

"""Exception hierarchy for adgen.

Expected conditions (an unknown override key, a preset that does not exist,
an invalid form value) are never raised; they come back as ``None`` or as
``FieldError`` values. The exceptions below are for genuine failures.
"""

from typing import Any


class AdgenError(Exception):
    """Base class for all adgen errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class ConfigError(AdgenError):
    """User configuration could not be read, parsed or saved."""


class CatalogError(AdgenError):
    """The parameter catalog source data is malformed."""


class StoreError(AdgenError):
    """A preset store operation failed."""


class StoreNetworkError(StoreError):
    """The preset backend could not be reached."""


class StoreResponseError(StoreError):
    """The preset backend answered with an error or an unreadable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: Any = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.status_code = status_code
        self.response_data = response_data


__all__ = [
    "AdgenError",
    "CatalogError",
    "ConfigError",
    "StoreError",
    "StoreNetworkError",
    "StoreResponseError",
]

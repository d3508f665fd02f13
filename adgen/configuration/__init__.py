"""Configuration model, validation and the override codec."""

from adgen.configuration.codec import (
    from_persisted,
    to_canonical,
    to_ordered,
    to_persisted,
)
from adgen.configuration.models import (
    MAX_PLACEMENTS,
    MIN_PLACEMENTS,
    AdConfiguration,
    FieldError,
    OverrideEntry,
    PersistedConfiguration,
    ValidationResult,
)
from adgen.configuration.validation import validate_configuration


__all__ = [
    "AdConfiguration",
    "FieldError",
    "MAX_PLACEMENTS",
    "MIN_PLACEMENTS",
    "OverrideEntry",
    "PersistedConfiguration",
    "ValidationResult",
    "from_persisted",
    "to_canonical",
    "to_ordered",
    "to_persisted",
    "validate_configuration",
]

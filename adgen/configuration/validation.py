"""Turn raw form input into an AdConfiguration or a complete set of field errors."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from adgen.configuration.models import (
    AdConfiguration,
    FieldError,
    OverrideEntry,
    ValidationResult,
)
from adgen.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

# Names the form and older presets use for the same fields
FIELD_ALIASES = {
    "placementCount": "placement_count",
    "placements": "placement_count",
    "ads": "placement_count",
    "customParams": "overrides",
    "custom_params": "overrides",
}


def _override_row(item: Any) -> Any:
    if isinstance(item, OverrideEntry):
        return item.model_dump()
    if isinstance(item, tuple) and len(item) == 2:
        return {"key": item[0], "value": item[1]}
    return item


def normalize_raw_input(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map alias field names onto model field names.

    ``overrides`` may be given as mappings, ``OverrideEntry`` objects or
    ``(key, value)`` pairs. Objects and pairs become mappings here, so the
    validated model builds its own rows and never shares one with the caller.
    """
    data: dict[str, Any] = {}
    for name, value in raw.items():
        data[FIELD_ALIASES.get(name, name)] = value

    overrides = data.get("overrides")
    if overrides is None:
        data["overrides"] = []
    elif isinstance(overrides, list | tuple):
        data["overrides"] = [_override_row(item) for item in overrides]
    return data


def _reason(error: ErrorDetails) -> str:
    ctx = error.get("ctx") or {}
    error_type = error["type"]
    if error_type == "greater_than_equal":
        return f"must be at least {ctx['ge']}"
    if error_type == "less_than_equal":
        return f"must be at most {ctx['le']}"
    if error_type == "missing":
        return "is required"
    return error["msg"]


def field_errors_from(exc: ValidationError) -> list[FieldError]:
    """One FieldError per offending field, in the order pydantic reported them."""
    errors: dict[str, FieldError] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "input"
        if field not in errors:
            errors[field] = FieldError(field=field, reason=_reason(error))
    return list(errors.values())


def validate_configuration(raw: Mapping[str, Any] | AdConfiguration) -> ValidationResult:
    """Validate raw form input.

    Every field is checked, so the result carries all problems at once.
    Nothing is clamped or defaulted to hide an invalid value.

    Args:
        raw: Form values keyed by field name (or a known alias)

    Returns:
        ValidationResult with either ``model`` or ``errors`` set
    """
    if isinstance(raw, AdConfiguration):
        return ValidationResult(model=raw)
    if not isinstance(raw, Mapping):
        return ValidationResult(
            errors=[FieldError(field="input", reason="must be a mapping of fields")]
        )

    try:
        model = AdConfiguration.model_validate(normalize_raw_input(raw))
    except ValidationError as e:
        errors = field_errors_from(e)
        logger.debug(
            "configuration_invalid", fields=[error.field for error in errors]
        )
        return ValidationResult(errors=errors)

    return ValidationResult(model=model)


__all__ = ["field_errors_from", "normalize_raw_input", "validate_configuration"]

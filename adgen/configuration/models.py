"""Configuration models: the editing form, its persisted shape and field errors."""

import math
import re
import sys
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from adgen.models.base import AdgenBaseModel


MIN_PLACEMENTS = 1
MAX_PLACEMENTS = 20
MIN_DIMENSION = 1

DEFAULT_PLACEMENTS = 1
DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 250

NUMERIC_FIELDS = ("placement_count", "width", "height")

# Plain decimal notation as typed into a number input; no digit separators
NUMERIC_TEXT = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?", re.ASCII | re.IGNORECASE
)


def _whole_number_from_text(text: str) -> int:
    if not NUMERIC_TEXT.fullmatch(text):
        raise PydanticCustomError("not_a_number", "must be a number")
    number = Decimal(text)
    if number != number.to_integral_value():
        raise PydanticCustomError("not_whole_number", "must be a whole number")
    # int <-> str conversion is capped by the interpreter
    max_digits = sys.get_int_max_str_digits()
    if max_digits and number.adjusted() >= max_digits:
        raise PydanticCustomError("out_of_range", "is out of range")
    return int(number)


def coerce_whole_number(value: Any) -> int:
    """Turn a form value into an int without rounding.

    Accepts ints, integral floats and decimal number strings (ASCII digits,
    optional sign, fraction and exponent). Anything else raises a
    ``PydanticCustomError`` whose message is shown to the operator as is.
    """
    if isinstance(value, bool):
        raise PydanticCustomError("not_a_number", "must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise PydanticCustomError("missing_value", "is required")
        return _whole_number_from_text(text)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise PydanticCustomError("not_a_number", "must be a number")
        if not value.is_integer():
            raise PydanticCustomError("not_whole_number", "must be a whole number")
        return int(value)
    raise PydanticCustomError("not_a_number", "must be a number")


class OverrideEntry(AdgenBaseModel):
    """One editable key/value row.

    The key may be empty while the row is being edited; such rows are kept in
    the form but never reach a URL or a saved preset. Values are kept
    verbatim, including surrounding whitespace.
    """

    model_config = ConfigDict(str_strip_whitespace=False, coerce_numbers_to_str=True)

    key: str = ""
    value: str = ""

    @field_validator("key", mode="before")
    @classmethod
    def strip_key(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("value", mode="before")
    @classmethod
    def default_value(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_complete(self) -> bool:
        """True when the row has a key and therefore takes part in requests."""
        return bool(self.key)


class AdConfiguration(AdgenBaseModel):
    """A validated configuration being edited by the operator.

    Construction and assignment are both validated, so an instance always
    holds a usable placement count and dimensions. ``overrides`` keeps the
    operator's row order, duplicates and half-typed rows.
    """

    placement_count: int = Field(
        default=DEFAULT_PLACEMENTS,
        ge=MIN_PLACEMENTS,
        le=MAX_PLACEMENTS,
        description="Number of ad slots requesting the same placement",
    )
    width: int = Field(default=DEFAULT_WIDTH, ge=MIN_DIMENSION, description="Width in px")
    height: int = Field(
        default=DEFAULT_HEIGHT, ge=MIN_DIMENSION, description="Height in px"
    )
    overrides: list[OverrideEntry] = Field(
        default_factory=list, description="Query overrides in edit order"
    )

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> int:
        return coerce_whole_number(v)

    def active_overrides(self) -> list[OverrideEntry]:
        """Rows with a key, in edit order."""
        return [entry for entry in self.overrides if entry.is_complete]

    def prepend_override(self, key: str = "", value: str = "") -> OverrideEntry:
        """Insert a row at the top of the list, where new rows appear in the form."""
        entry = OverrideEntry(key=key, value=value)
        self.overrides.insert(0, entry)
        return entry

    def append_override(self, key: str = "", value: str = "") -> OverrideEntry:
        entry = OverrideEntry(key=key, value=value)
        self.overrides.append(entry)
        return entry

    def remove_override(self, index: int) -> OverrideEntry:
        """Remove and return the row at ``index``.

        Raises:
            IndexError: If there is no such row
        """
        return self.overrides.pop(index)

    def select_override_key(self, index: int, key: str, documented: bool) -> None:
        """Change the key of a row.

        Picking a documented key clears the typed value so the catalog
        placeholder shows through.
        """
        entry = self.overrides[index]
        entry.key = key
        if documented:
            entry.value = ""

    def snapshot(self) -> "AdConfiguration":
        """Independent deep copy, safe to hand to a pending save."""
        return self.model_copy(deep=True)


class FieldError(AdgenBaseModel):
    """Why one input field was rejected."""

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class ValidationResult(AdgenBaseModel):
    """Outcome of validating raw form input: a model or the full error set."""

    model: AdConfiguration | None = None
    errors: list[FieldError] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_exclusive(self) -> "ValidationResult":
        if (self.model is None) == (not self.errors):
            raise ValueError("A validation result holds either a model or errors")
        return self

    @property
    def success(self) -> bool:
        return self.model is not None

    def error_fields(self) -> list[str]:
        return [error.field for error in self.errors]

    def errors_by_field(self) -> dict[str, str]:
        return {error.field: error.reason for error in self.errors}


class PersistedConfiguration(AdgenBaseModel):
    """Shape of a named preset as exchanged with a configuration store.

    ``overrides`` is a plain mapping: keys are unique and carry no order.
    ``id`` and ``created_at`` are assigned by the store.
    """

    model_config = ConfigDict(str_strip_whitespace=False, coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1, description="Name chosen by the operator")
    placement_count: int = Field(..., ge=MIN_PLACEMENTS, le=MAX_PLACEMENTS)
    width: int = Field(..., ge=MIN_DIMENSION)
    height: int = Field(..., ge=MIN_DIMENSION)
    overrides: dict[str, str] = Field(default_factory=dict)
    id: str | None = None
    created_at: datetime | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> int:
        return coerce_whole_number(v)


__all__ = [
    "AdConfiguration",
    "FieldError",
    "MAX_PLACEMENTS",
    "MIN_PLACEMENTS",
    "OverrideEntry",
    "PersistedConfiguration",
    "ValidationResult",
    "coerce_whole_number",
]

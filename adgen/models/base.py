"""Base model for all adgen Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all adgen models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class AdgenBaseModel(BaseModel):
    """Base model class for all adgen Pydantic models.

    This class enforces consistent serialization behavior:
    - by_alias=True: Use field aliases for serialization
    - mode="json": Use JSON-compatible serialization (e.g., datetime -> ISO string)
    """

    model_config = ConfigDict(
        # Unknown input keys are dropped rather than stored on the model
        extra="ignore",
        # Strip whitespace from string fields
        str_strip_whitespace=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
        # Accept both field names and aliases on input
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


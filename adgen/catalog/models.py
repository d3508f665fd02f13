"""Parameter catalog models."""

from pydantic import ConfigDict, Field

from adgen.models.base import AdgenBaseModel


class ParameterEntry(AdgenBaseModel):
    """One documented override key.

    Entries are seeded once from the packaged catalog file and never change
    afterwards, hence ``frozen``.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    key: str = Field(..., min_length=1, description="Query parameter name")
    group: str = Field(..., description="Request object the key belongs to")
    description: str = Field(default="", description="What the key controls")
    example: str = Field(default="", description="Example value")
    default_hint: str | None = Field(
        default=None,
        alias="default",
        description="Placeholder shown when no value is typed",
    )

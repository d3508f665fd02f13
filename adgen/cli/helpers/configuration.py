"""Assemble and validate a configuration from CLI options."""

import asyncio
from typing import Any

import typer

from adgen.cli.helpers.output import print_error_message, print_field_errors
from adgen.cli.helpers.parameters import parse_param_options
from adgen.configuration.models import AdConfiguration
from adgen.configuration.validation import validate_configuration


def resolve_configuration(
    app_context: Any,
    width: str | None,
    height: str | None,
    placements: str | None,
    params: list[str] | None,
    preset: str | None = None,
) -> AdConfiguration:
    """Layer CLI options over a preset (or the configured defaults) and validate.

    Overrides given with ``--param`` are appended after the preset's rows.
    Prints every field error and exits with code 1 when the result is invalid.
    """
    if preset:
        base = asyncio.run(app_context.preset_service.load(preset))
        if base is None:
            print_error_message(f"Preset not found: {preset}")
            raise typer.Exit(1)
        raw: dict[str, Any] = {
            "placement_count": base.placement_count,
            "width": base.width,
            "height": base.height,
            "overrides": list(base.overrides),
        }
    else:
        defaults = app_context.user_config.data.defaults
        raw = {
            "placement_count": defaults.placement_count,
            "width": defaults.width,
            "height": defaults.height,
            "overrides": [],
        }

    if placements is not None:
        raw["placement_count"] = placements
    if width is not None:
        raw["width"] = width
    if height is not None:
        raw["height"] = height
    raw["overrides"].extend(parse_param_options(params))

    result = validate_configuration(raw)
    if result.model is None:
        print_field_errors(result.errors)
        raise typer.Exit(1)
    return result.model

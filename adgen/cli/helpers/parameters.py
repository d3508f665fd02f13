"""Shared CLI options and parsing of repeated ``--param`` values."""

from typing import Annotated

import typer

from adgen.configuration.models import OverrideEntry


WidthOption = Annotated[
    str | None, typer.Option("--width", "-w", help="Placement width in px")
]
HeightOption = Annotated[
    str | None, typer.Option("--height", "-H", help="Placement height in px")
]
PlacementsOption = Annotated[
    str | None,
    typer.Option("--placements", "-n", help="Number of placements (1-20)"),
]
ParamOption = Annotated[
    list[str] | None,
    typer.Option(
        "--param",
        "-p",
        help="Query override as key=value, repeatable, sent in the given order",
    ),
]
PageOption = Annotated[
    str | None,
    typer.Option("--page", help="Page reference to send (defaults to config 'page')"),
]
PresetOption = Annotated[
    str | None,
    typer.Option("--preset", help="Start from a saved preset, options apply on top"),
]


def parse_param_options(values: list[str] | None) -> list[OverrideEntry]:
    """Split ``key=value`` strings on the first ``=``.

    A value without ``=`` is a key with an empty value.
    """
    entries = []
    for raw in values or []:
        key, _, value = raw.partition("=")
        entries.append(OverrideEntry(key=key, value=value))
    return entries

"""Preset management commands."""

import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from adgen.cli.app import get_app_context
from adgen.cli.decorators import handle_errors
from adgen.cli.helpers import print_error_message, print_success_message
from adgen.cli.helpers.configuration import resolve_configuration
from adgen.cli.helpers.parameters import (
    HeightOption,
    ParamOption,
    PlacementsOption,
    PresetOption,
    WidthOption,
)


presets_app = typer.Typer(
    name="presets",
    help="Save and reload named configurations",
    no_args_is_help=True,
)


@presets_app.command(name="save")
@handle_errors
def save_preset(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name for the preset")],
    width: WidthOption = None,
    height: HeightOption = None,
    placements: PlacementsOption = None,
    params: ParamOption = None,
    preset: PresetOption = None,
) -> None:
    """Save a configuration under NAME.

    Saving under an existing name replaces it in the file store; the http
    store applies its own naming policy.
    """
    if not name.strip():
        print_error_message("Preset name must not be empty")
        raise typer.Exit(1)

    app_context = get_app_context(ctx)
    model = resolve_configuration(
        app_context, width, height, placements, params, preset
    )
    stored = asyncio.run(app_context.preset_service.save(name, model))
    print_success_message(
        f"Saved preset '{stored.name}' "
        f"({stored.width}x{stored.height}, {stored.placement_count} placement(s), "
        f"{len(stored.overrides)} override(s))"
    )


@presets_app.command(name="list")
@handle_errors
def list_presets(ctx: typer.Context) -> None:
    """List saved presets."""
    app_context = get_app_context(ctx)
    presets = asyncio.run(app_context.preset_service.list())

    if not presets:
        typer.echo("No presets found.")
        return

    table = Table(title=f"{len(presets)} preset(s)", title_justify="left")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Size")
    table.add_column("Placements", justify="right")
    table.add_column("Overrides", justify="right")
    table.add_column("Saved")
    for record in presets:
        saved = record.created_at.strftime("%Y-%m-%d %H:%M") if record.created_at else ""
        table.add_row(
            record.name,
            f"{record.width}x{record.height}",
            str(record.placement_count),
            str(len(record.overrides)),
            saved,
        )
    Console().print(table)


@presets_app.command(name="show")
@handle_errors
def show_preset(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Preset name or id")],
) -> None:
    """Show a saved preset."""
    app_context = get_app_context(ctx)
    record = asyncio.run(app_context.preset_service.get(name))
    if record is None:
        print_error_message(f"Preset not found: {name}")
        raise typer.Exit(1)

    typer.echo(f"Name:       {record.name}")
    if record.id:
        typer.echo(f"Id:         {record.id}")
    typer.echo(f"Size:       {record.width}x{record.height}")
    typer.echo(f"Placements: {record.placement_count}")
    if record.overrides:
        typer.echo("Overrides:")
        for key, value in record.overrides.items():
            typer.echo(f"  {key}={value}")
    else:
        typer.echo("Overrides:  (none)")


def register_commands(app: typer.Typer) -> None:
    """Register preset commands with the main app."""
    app.add_typer(presets_app, name="presets")

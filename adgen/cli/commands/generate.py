"""Generate ad request URLs."""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from adgen.cli.app import get_app_context
from adgen.cli.decorators import handle_errors
from adgen.cli.helpers.configuration import resolve_configuration
from adgen.cli.helpers.parameters import (
    HeightOption,
    PageOption,
    ParamOption,
    PlacementsOption,
    PresetOption,
    WidthOption,
)
from adgen.core.structlog_logger import get_struct_logger
from adgen.urls.builder import build_urls
from adgen.urls.models import AdPlacement


logger = get_struct_logger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    TABLE = "table"
    JSON = "json"


def _print_table(placements: list[AdPlacement]) -> None:
    table = Table(title=f"{len(placements)} placement(s)")
    table.add_column("#", justify="right")
    table.add_column("Size")
    table.add_column("URL", overflow="fold")
    for index, placement in enumerate(placements, start=1):
        table.add_row(str(index), f"{placement.width}x{placement.height}", placement.url)
    Console().print(table)


@handle_errors
def generate(
    ctx: typer.Context,
    width: WidthOption = None,
    height: HeightOption = None,
    placements: PlacementsOption = None,
    params: ParamOption = None,
    page: PageOption = None,
    preset: PresetOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text, table or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Build one request URL per placement.

    \b
    Examples:
        adgen generate -w 300 -H 250 -n 2
        adgen generate -p bidfloor=0.5 -p "ua=Mozilla/5.0 (X11)"
        adgen generate --preset mobile-floor -n 4 --format json
    """
    app_context = get_app_context(ctx)
    model = resolve_configuration(
        app_context, width, height, placements, params, preset
    )
    placements_built = build_urls(model, app_context.user_config.build_context(page))
    logger.info("placements_generated", count=len(placements_built))

    if output_format == OutputFormat.JSON:
        typer.echo(
            json.dumps([p.to_dict() for p in placements_built], indent=2)
        )
    elif output_format == OutputFormat.TABLE:
        _print_table(placements_built)
    else:
        for placement in placements_built:
            typer.echo(placement.url)


def register_commands(app: typer.Typer) -> None:
    """Register the generate command with the main app."""
    app.command(name="generate")(generate)

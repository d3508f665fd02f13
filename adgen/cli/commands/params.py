"""Browse the documented override parameters."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from adgen.catalog import ParameterEntry, get_catalog
from adgen.core.errors import CatalogError
from adgen.cli.decorators import handle_errors
from adgen.cli.helpers import print_error_message


params_app = typer.Typer(
    name="params",
    help="Browse documented query override parameters",
    no_args_is_help=True,
)


def complete_param_key(incomplete: str) -> list[str]:
    """Tab completion for catalog keys."""
    try:
        return [key for key in get_catalog().keys() if key.startswith(incomplete)]
    except CatalogError:
        return []


def _entries_table(title: str, entries: list[ParameterEntry]) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Example", overflow="fold")
    table.add_column("Default")
    for entry in entries:
        table.add_row(
            entry.key, entry.description, entry.example, entry.default_hint or ""
        )
    return table


@params_app.command(name="list")
@handle_errors
def list_params(
    group: Annotated[
        str | None, typer.Option("--group", "-g", help="Only show this group")
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Filter by text in key or description"),
    ] = None,
) -> None:
    """List documented parameters by group."""
    catalog = get_catalog()
    grouped = catalog.grouped_view()

    if group is not None and group not in grouped:
        print_error_message(
            f"Unknown group '{group}'. Groups: {', '.join(catalog.groups())}"
        )
        raise typer.Exit(1)

    matching = None
    if search:
        matching = {entry.key for entry in catalog.search(search)}

    console = Console()
    shown = 0
    for group_name, entries in grouped.items():
        if group is not None and group_name != group:
            continue
        if matching is not None:
            entries = [entry for entry in entries if entry.key in matching]
        if not entries:
            continue
        console.print(_entries_table(group_name, entries))
        shown += len(entries)

    if not shown:
        typer.echo("No parameters found.")


@params_app.command(name="show")
@handle_errors
def show_param(
    key: Annotated[
        str,
        typer.Argument(help="Parameter key", autocompletion=complete_param_key),
    ],
) -> None:
    """Show the documentation of one parameter."""
    entry = get_catalog().lookup(key)
    if entry is None:
        typer.echo(f"{key}: no description available (it can still be used)")
        return

    typer.echo(f"{entry.key} [{entry.group}]")
    typer.echo(f"  {entry.description}")
    typer.echo(f"  Example: {entry.example}")
    if entry.default_hint:
        typer.echo(f"  Default: {entry.default_hint}")


def register_commands(app: typer.Typer) -> None:
    """Register params commands with the main app."""
    app.add_typer(params_app, name="params")

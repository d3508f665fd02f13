"""Configuration display and editing commands."""

import json
from typing import Annotated, Any

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from adgen.cli.app import get_app_context
from adgen.cli.decorators import handle_errors
from adgen.cli.helpers import print_error_message, print_success_message


config_app = typer.Typer(
    name="config",
    help="Show and edit adgen configuration",
    no_args_is_help=True,
)

_MISSING = object()


def _flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    items: list[tuple[str, Any]] = []
    for key, value in data.items():
        current_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            items.extend(_flatten(value, current_key))
        else:
            items.append((current_key, value))
    return items


@config_app.command(name="show")
@handle_errors
def show_config(
    ctx: typer.Context,
    show_sources: Annotated[
        bool, typer.Option("--sources", help="Show configuration sources")
    ] = False,
) -> None:
    """Show the effective configuration."""
    user_config = get_app_context(ctx).user_config

    table = Table(title="adgen configuration", title_justify="left")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    if show_sources:
        table.add_column("Source", no_wrap=True)

    for key, value in _flatten(user_config.data.model_dump(mode="json")):
        row = [key, "" if value is None else str(value)]
        if show_sources:
            row.append(user_config.get_source(key))
        table.add_row(*row)

    Console().print(table)
    if user_config.config_path:
        typer.echo(f"Config file: {user_config.config_path}")


def _format_value(value: Any) -> str:
    if isinstance(value, BaseModel):
        return json.dumps(value.model_dump(mode="json"))
    return "" if value is None else str(value)


@config_app.command(name="edit")
@handle_errors
def edit_config(
    ctx: typer.Context,
    get: Annotated[
        list[str] | None,
        typer.Option("--get", help="Print a value by dotted key (repeatable)"),
    ] = None,
    set_values: Annotated[
        list[str] | None,
        typer.Option("--set", help="Set a value as key=value (repeatable)"),
    ] = None,
    reset: Annotated[
        bool, typer.Option("--reset", help="Reset every setting to its default first")
    ] = False,
    save: Annotated[
        bool, typer.Option("--save/--no-save", help="Save changes to the config file")
    ] = True,
) -> None:
    """Get, set or reset configuration values.

    \b
    Examples:
        adgen config edit --get endpoint.domain
        adgen config edit --set defaults.width=320 --set defaults.height=50
        adgen config edit --set store.api_url=https://adgen.example/api/ --set store.backend=http
        adgen config edit --reset
    """
    if not (get or set_values or reset):
        print_error_message("At least one of --get, --set or --reset must be given")
        raise typer.Exit(1)

    user_config = get_app_context(ctx).user_config

    if reset:
        user_config.reset_to_defaults()

    for pair in set_values or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            print_error_message(f"Invalid key=value format: {pair}")
            raise typer.Exit(1)
        try:
            user_config.set(key.strip(), value.strip())
        except ValueError as e:
            print_error_message(str(e))
            raise typer.Exit(1) from e
        typer.echo(f"Set {key.strip()} = {value.strip()}")

    for key in get or []:
        value = user_config.get(key, _MISSING)
        if value is _MISSING:
            print_error_message(f"Unknown configuration key: {key}")
            raise typer.Exit(1)
        typer.echo(f"{key}: {_format_value(value)}")

    if save and (set_values or reset):
        user_config.save()
        print_success_message(f"Configuration saved to {user_config.config_path}")


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main app."""
    app.add_typer(config_app, name="config")

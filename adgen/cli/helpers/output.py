"""Helper functions for CLI output formatting with Rich integration."""

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

from adgen.configuration.models import FieldError


def print_success_message(message: str) -> None:
    """Print a success message with a checkmark."""
    Console().print(f"[green]✓[/green] {escape(message)}")


def print_error_message(message: str) -> None:
    """Print an error message with an X symbol to stderr."""
    Console(stderr=True).print(f"[red]✗[/red] {escape(message)}")


def print_field_errors(errors: Iterable[FieldError]) -> None:
    """Print every rejected field, one line each, to stderr."""
    console = Console(stderr=True)
    console.print("[red]✗[/red] Invalid configuration:")
    for error in errors:
        console.print(f"    • {escape(error.field)}: {escape(error.reason)}")

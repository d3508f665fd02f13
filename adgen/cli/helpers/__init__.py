"""Helper functions for CLI commands."""

from adgen.cli.helpers.output import (
    print_error_message,
    print_field_errors,
    print_success_message,
)
from adgen.cli.helpers.parameters import parse_param_options


__all__ = [
    "parse_param_options",
    "print_error_message",
    "print_field_errors",
    "print_success_message",
]

"""Command line interface for adgen."""

from adgen.cli.app import app, main
from adgen.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]

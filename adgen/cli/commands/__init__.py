"""CLI command modules."""

import typer

from adgen.cli.commands.config import register_commands as register_config_commands
from adgen.cli.commands.generate import (
    register_commands as register_generate_commands,
)
from adgen.cli.commands.params import register_commands as register_params_commands
from adgen.cli.commands.presets import (
    register_commands as register_presets_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_generate_commands(app)
    register_params_commands(app)
    register_presets_commands(app)
    register_config_commands(app)

"""Main CLI application for adgen."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

import typer

from adgen.cli.decorators.error_handling import print_stack_trace_if_verbose
from adgen.cli.helpers.output import print_error_message
from adgen.config.user_config import UserConfig, create_user_config
from adgen.core.errors import ConfigError
from adgen.core.logging import setup_logging
from adgen.core.structlog_logger import get_struct_logger
from adgen.presets.service import PresetService, create_preset_service


try:
    __version__ = version("adgen")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["AppContext", "app", "get_app_context", "main", "__version__"]

logger = get_struct_logger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.user_config: UserConfig = create_user_config(cli_config_path=config_file)
        self._preset_service: PresetService | None = None

    @property
    def preset_service(self) -> PresetService:
        """Preset service for the configured store, created on first use."""
        if self._preset_service is None:
            self._preset_service = create_preset_service(self.user_config)
        return self._preset_service


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext stored by the main callback, creating one if missing."""
    if isinstance(ctx.obj, AppContext):
        return ctx.obj
    ctx.obj = AppContext()
    return ctx.obj


app = typer.Typer(
    name="adgen",
    help=f"""adgen Ad Request Generator v{__version__}

Assemble test requests for the getad endpoint: pick a placement size and
count, add query overrides from the documented parameter catalog, build the
request URLs and keep useful settings as named presets.

Common workflows:
  • Build URLs:      adgen generate -w 300 -H 250 -n 2 -p bidfloor=0.5
  • Browse params:   adgen params list --group device
  • Save a preset:   adgen presets save mobile-floor -w 320 -H 50 -p bidfloor=0.5
  • Reuse a preset:  adgen generate --preset mobile-floor""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    show_version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """adgen Ad Request Generator."""
    if show_version:
        typer.echo(f"adgen v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose, log_file=log_file, config_file=config_file
        )
    except ConfigError as e:
        print_error_message(f"Configuration error: {e}")
        raise typer.Exit(1) from e
    ctx.obj = app_context

    log_level = logging.WARNING
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    elif log_file is None:
        # No explicit CLI flags, use the config file log level
        log_level = app_context.user_config.get_log_level_int()

    setup_logging(level=log_level, log_file=log_file)
    logger.debug("cli_started", command=ctx.invoked_subcommand)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

"""Basic tests for CLI functionality."""

from adgen.cli import app
from adgen.cli.app import __version__


def test_help_command(cli_runner):
    """Test help command shows available commands."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    for command in ["generate", "params", "presets", "config"]:
        assert command in result.output


def test_version(cli_runner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"adgen v{__version__}"


def test_subcommand_help(invoke):
    for args in (["generate"], ["params", "list"], ["presets", "save"], ["config", "show"]):
        result = invoke(*args, "--help", catch_exceptions=False)
        assert result.exit_code == 0
        assert "Usage:" in result.output


def test_invalid_config_file_reported(invoke, clean_environment):
    (clean_environment / "work" / "adgen.yaml").write_text("defaults: [1, 2\n")

    result = invoke("generate")

    assert result.exit_code == 1
    assert "Configuration error" in result.output

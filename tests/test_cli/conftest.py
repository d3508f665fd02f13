"""Fixtures for CLI command tests."""

import logging
from collections.abc import Callable, Generator
from typing import Any

import pytest
from typer.testing import CliRunner, Result

from adgen.cli import app


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """The main callback reconfigures the root logger on every invocation."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def invoke(
    cli_runner: CliRunner, clean_environment: Any
) -> Callable[..., Result]:
    """Run the adgen CLI in an isolated environment."""

    def _invoke(*args: str, **kwargs: Any) -> Result:
        return cli_runner.invoke(app, list(args), **kwargs)

    return _invoke

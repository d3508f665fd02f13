"""Core test fixtures for the adgen project."""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from adgen.adapters.file_store import FileConfigurationStore
from adgen.catalog import ParameterCatalog, get_catalog
from adgen.configuration import AdConfiguration, OverrideEntry


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> ParameterCatalog:
    """The packaged parameter catalog."""
    return get_catalog()


@pytest.fixture
def sample_raw_input() -> dict[str, Any]:
    """Raw form values as the editing form submits them."""
    return {
        "placement_count": "2",
        "width": "300",
        "height": "250",
        "overrides": [
            {"key": "bidfloor", "value": "0.5"},
            {"key": "", "value": "ignored"},
            {"key": "ua", "value": "Mozilla/5.0 (X11)"},
        ],
    }


@pytest.fixture
def sample_configuration() -> AdConfiguration:
    """A valid configuration with a couple of overrides."""
    return AdConfiguration(
        placement_count=2,
        width=300,
        height=250,
        overrides=[
            OverrideEntry(key="bidfloor", value="0.5"),
            OverrideEntry(key="country", value="KEN"),
        ],
    )


# ---- Test Isolation Fixtures ----


@pytest.fixture
def clean_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Isolate tests from the user's configuration and data directories.

    - Removes ADGEN_* environment variables
    - Points XDG config/data homes into ``tmp_path``
    - Runs the test from an empty working directory
    """
    for key in list(os.environ):
        if key.upper().startswith("ADGEN_"):
            monkeypatch.delenv(key)

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    yield tmp_path


@pytest.fixture
def preset_file(tmp_path: Path) -> Path:
    return tmp_path / "presets" / "presets.json"


@pytest.fixture
def file_store(preset_file: Path) -> FileConfigurationStore:
    """A file store writing into a temporary directory."""
    return FileConfigurationStore(preset_file)

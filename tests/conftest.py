"""Shared test fixtures for oasprune.

Provides fixture documents loaded from ``tests/fixtures`` and resets the
global output state between tests so Typer's CliRunner stream swapping does
not leave stale consoles behind.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from oasprune.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    yield
    reset_output()


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """Load the raw petstore 3.1 document."""
    with open(FIXTURES_DIR / "petstore_3.1.json") as f:
        return json.load(f)


@pytest.fixture
def petstore_path() -> Path:
    return FIXTURES_DIR / "petstore_3.1.json"


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty working directory with no OASPRUNE_* variables set."""
    for var in ["OASPRUNE_CONFIG", "OASPRUNE_PRUNABLE", "OASPRUNE_FORMAT"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()

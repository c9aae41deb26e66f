"""Shared fixtures for the checker tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the bundled sample data sets."""
    return PROJECT_ROOT / "data"


@pytest.fixture
def cli_runner():
    """Typer CliRunner for invoking the CLI without a subprocess."""
    from typer.testing import CliRunner

    return CliRunner()

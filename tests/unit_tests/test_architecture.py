"""Unit test running the repository architecture boundary script."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "check_architecture.py"


def test_core_modules_stay_free_of_cli_imports(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure parsing modules import neither typer nor pydantic."""
    namespace = runpy.run_path(str(SCRIPT), run_name="architecture_check")
    namespace["main"]()
    assert "Architecture checks passed." in capsys.readouterr().out

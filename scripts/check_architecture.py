#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/bootstrap_params"

# Parsing and validation modules stay free of CLI and schema libraries.
CORE_MODULES = (
    "validation.py",
    "errors.py",
    "coordinates.py",
    "merge_rules.py",
    "exclude_file.py",
    "sbt_defaults.py",
    "params/checks.py",
)


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    for name in CORE_MODULES:
        _assert_no_imports(
            PACKAGE / name,
            [
                "import typer",
                "from typer",
                "import pydantic",
                "from pydantic",
                "bootstrap_params.cli",
            ],
        )

    for path in (PACKAGE / "params").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer", "bootstrap_params.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()

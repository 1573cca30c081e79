"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_input(tmp_path: Path):
    """Write *text* to a fresh file under ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "input.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write

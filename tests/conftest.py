"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_text(tmp_path: Path):
    """Return a helper that writes raw text (no newline translation) under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


def read_raw(path: Path) -> str:
    """Read a file without newline translation."""
    return path.read_bytes().decode("utf-8")

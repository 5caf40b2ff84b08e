"""Test fixtures: sample annotation files."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent


def load_queries_file(name: str = "users.sql") -> str:
    """Return the content of a sample annotation file.

    Args:
        name: File name inside the fixtures directory.
    """
    return (_FIXTURES_DIR / name).read_text(encoding="utf-8")

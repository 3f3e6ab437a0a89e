"""Reading puzzle inputs from disk."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from aoc2023.core.config import RunPaths


def read_text(path: Path) -> str:
    """Read a puzzle file with trailing whitespace trimmed.

    Args:
        path: Path to the puzzle input

    Returns:
        Puzzle text without trailing whitespace

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with path.open(encoding="utf-8") as handle:
        return handle.read().rstrip()


def read_stream(stream: TextIO | None = None) -> str:
    return (stream or sys.stdin).read().rstrip()


def read_input(day: int, paths: RunPaths | None = None) -> str:
    """Read the cached input for a day from the inputs directory.

    Args:
        day: Puzzle day
        paths: Filesystem layout (defaults to ``inputs/DD.txt``)

    Returns:
        Puzzle text without trailing whitespace
    """
    paths = paths or RunPaths()
    path = paths.input_for(day)
    if not path.exists():
        raise FileNotFoundError(
            f"No input for day {day} at {path}. Save the puzzle input there or pass --input."
        )
    return read_text(path)


__all__ = ["read_text", "read_stream", "read_input"]

"""Exceptions shared by the grid toolkit and the puzzle solvers."""

from __future__ import annotations


class InvalidPuzzleInput(ValueError):
    """Raised when puzzle text cannot be turned into a well-formed grid."""


__all__ = ["InvalidPuzzleInput"]

"""Advent of Code 2023 grid puzzles.

The reusable pieces live in ``aoc2023.grid`` (flat grids, neighbours,
infinite tiling) and ``aoc2023.search`` (breadth-first traversal and
constrained shortest paths); ``aoc2023.puzzles`` holds the day solvers.
"""

__version__ = "0.1.0"

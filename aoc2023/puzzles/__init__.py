"""Puzzle solvers built on the grid toolkit.

Each solver takes the raw puzzle text (trailing whitespace trimmed) and
returns the numeric answer, or None when the puzzle has no solution.
"""

from typing import Callable

from aoc2023.puzzles import beams, crucible, garden, pipes
from aoc2023.puzzles.beams import Contraption
from aoc2023.puzzles.crucible import HeatMap
from aoc2023.puzzles.garden import Garden
from aoc2023.puzzles.pipes import PipeMaze

Solver = Callable[[str], "int | None"]

# Solver registry keyed by (day, part)
SOLVERS: dict[tuple[int, int], Solver] = {
    (10, 1): pipes.solve_part_one,
    (10, 2): pipes.solve_part_two,
    (16, 1): beams.solve_part_one,
    (16, 2): beams.solve_part_two,
    (17, 1): crucible.solve_part_one,
    (17, 2): crucible.solve_part_two,
    (21, 1): garden.solve_part_one,
    (21, 2): garden.solve_part_two,
}


def get_solver(day: int, part: int) -> Solver:
    """Get the solver for a puzzle.

    Args:
        day: Puzzle day
        part: Puzzle part (1 or 2)

    Returns:
        Callable mapping puzzle text to its answer

    Raises:
        KeyError: If no solver is registered for the day and part
    """
    if (day, part) not in SOLVERS:
        available = ", ".join(f"{d}/{p}" for d, p in sorted(SOLVERS))
        raise KeyError(f"No solver for day {day} part {part}. Available: {available}")
    return SOLVERS[(day, part)]


__all__ = [
    "Contraption",
    "Garden",
    "HeatMap",
    "PipeMaze",
    "SOLVERS",
    "Solver",
    "get_solver",
]

"""Garden plots an elf can reach in an exact number of steps."""

from __future__ import annotations

from enum import Enum

from aoc2023.core.errors import InvalidPuzzleInput
from aoc2023.grid.grid import Grid
from aoc2023.grid.tiling import TiledGrid
from aoc2023.search.traversal import OpenTransition, reachable_count

PART_ONE_STEPS = 64
PART_TWO_STEPS = 26501365


class GardenCell(Enum):
    PLOT = "."
    ROCK = "#"
    START = "S"


GARDEN_TRANSITION = OpenTransition([GardenCell.ROCK])


class Garden:
    def __init__(self, grid: Grid[GardenCell]):
        self.grid = grid
        self.tiled = TiledGrid(list(grid), grid.columns)
        self.start_index = grid.find(GardenCell.START)
        if self.start_index < 0:
            raise InvalidPuzzleInput("invalid puzzle input: no start tile 'S'")

    @classmethod
    def from_text(cls, text: str) -> "Garden":
        return cls(Grid.from_text(text, parse=GardenCell))

    def reachable(self, steps: int, infinite: bool = False) -> int:
        """Number of plots the elf can end on after exactly ``steps`` steps.

        Args:
            steps: Step budget
            infinite: Walk a garden that repeats in every direction

        Returns:
            Count of distinct (tile, plot) positions
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        grid = self.tiled if infinite else self.grid
        return reachable_count(grid, self.start_index, steps, GARDEN_TRANSITION)

    def extrapolate(self, steps: int) -> int:
        """Reachable plots on the infinite garden for a step count too large to walk.

        Samples the walk at ``r``, ``r + w`` and ``r + 2w`` steps (``w`` the
        garden width, ``r = steps % w``) and evaluates the quadratic through
        those samples. Exact when the count grows quadratically per tile
        width, which holds for a square garden with clear lanes from the start.
        """
        width = self.grid.columns
        if self.grid.rows_count != width:
            raise ValueError(
                f"extrapolation needs a square garden, got {width}x{self.grid.rows_count}"
            )
        remainder = steps % width
        a0, a1, a2 = (self.reachable(remainder + k * width, infinite=True) for k in range(3))
        n = steps // width
        first = a1 - a0
        second = a2 - 2 * a1 + a0
        return a0 + n * first + n * (n - 1) // 2 * second


def solve_part_one(text: str) -> int:
    return Garden.from_text(text).reachable(PART_ONE_STEPS)


def solve_part_two(text: str) -> int:
    return Garden.from_text(text).extrapolate(PART_TWO_STEPS)


__all__ = [
    "GardenCell",
    "Garden",
    "PART_ONE_STEPS",
    "PART_TWO_STEPS",
    "solve_part_one",
    "solve_part_two",
]

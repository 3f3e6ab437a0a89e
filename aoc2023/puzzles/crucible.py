"""Crucible routing: least heat loss across a city block map."""

from __future__ import annotations

from aoc2023.grid.grid import Grid
from aoc2023.search.config import PathConfig
from aoc2023.search.shortest_path import PathResult, shortest_path


class HeatMap:
    """City blocks with the heat lost when a crucible enters each block."""

    def __init__(self, grid: Grid[int]):
        self.grid = grid

    @classmethod
    def from_text(cls, text: str) -> "HeatMap":
        return cls(Grid.from_text(text, parse=int))

    def least_heat_loss(
        self,
        min_consecutive: int = 1,
        max_consecutive: int = 3,
        collapse_axis: bool = False,
    ) -> PathResult:
        """Route from the top-left block to the bottom-right block."""
        config = PathConfig(
            min_consecutive=min_consecutive,
            max_consecutive=max_consecutive,
            collapse_axis=collapse_axis,
        )
        return shortest_path(self.grid, config)


def solve_part_one(text: str) -> int | None:
    return HeatMap.from_text(text).least_heat_loss().cost


def solve_part_two(text: str) -> int | None:
    return HeatMap.from_text(text).least_heat_loss(min_consecutive=4, max_consecutive=10).cost


__all__ = ["HeatMap", "solve_part_one", "solve_part_two"]

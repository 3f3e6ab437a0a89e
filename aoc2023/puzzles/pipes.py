"""Pipe maze: find the loop through the start tile and the area it encloses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import numpy as np

from aoc2023.core.errors import InvalidPuzzleInput
from aoc2023.grid.constants import DIRECTIONS, Direction
from aoc2023.grid.grid import Grid
from aoc2023.search.config import TraversalConfig, VisitKey
from aoc2023.search.traversal import OnlyTransition, SearchNode, Transition, flood_fill, traverse


class PipeCell(Enum):
    GROUND = "."
    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    START = "S"


class FillMark(Enum):
    """Flood-fill marker; never produced by parsing a maze."""

    OUTSIDE = "O"


# Directions each cell type opens towards
CONNECTIONS: dict[PipeCell, frozenset[Direction]] = {
    PipeCell.GROUND: frozenset(),
    PipeCell.VERTICAL: frozenset({Direction.UP, Direction.DOWN}),
    PipeCell.HORIZONTAL: frozenset({Direction.LEFT, Direction.RIGHT}),
    PipeCell.NORTH_EAST: frozenset({Direction.UP, Direction.RIGHT}),
    PipeCell.NORTH_WEST: frozenset({Direction.UP, Direction.LEFT}),
    PipeCell.SOUTH_WEST: frozenset({Direction.DOWN, Direction.LEFT}),
    PipeCell.SOUTH_EAST: frozenset({Direction.DOWN, Direction.RIGHT}),
    PipeCell.START: frozenset(DIRECTIONS),
}


class PipeTransition(Transition[PipeCell]):
    """Leave through the cell's openings; enter only through a matching opening."""

    def exits(self, value: PipeCell, heading: Direction | None) -> Iterable[Direction]:
        openings = CONNECTIONS[value]
        return [direction for direction in DIRECTIONS if direction in openings]

    def enters(self, value: PipeCell, heading: Direction) -> bool:
        return heading.opposite in CONNECTIONS[value]


PIPE_TRANSITION = PipeTransition()


@dataclass(frozen=True)
class LoopResult:
    """Main loop, starting at the start tile. ``steps == -1`` when there is none."""

    steps: int
    path: tuple[int, ...]

    @property
    def found(self) -> bool:
        return self.steps >= 0


def _inside_polygon(
    points_x: np.ndarray, points_y: np.ndarray, vertex_x: np.ndarray, vertex_y: np.ndarray
) -> np.ndarray:
    """Even-odd ray cast of every point against a closed polygon."""
    inside = np.zeros(points_x.shape, dtype=np.bool_)
    j = len(vertex_x) - 1
    for i in range(len(vertex_x)):
        xi, yi = vertex_x[i], vertex_y[i]
        xj, yj = vertex_x[j], vertex_y[j]
        j = i
        if yi == yj:
            continue
        crosses = (yi > points_y) != (yj > points_y)
        x_cross = (xj - xi) * (points_y - yi) / (yj - yi) + xi
        inside ^= crosses & (points_x < x_cross)
    return inside


class PipeMaze:
    def __init__(self, grid: Grid[PipeCell]):
        self.grid = grid
        self.start_index = grid.find(PipeCell.START)
        if self.start_index < 0:
            raise InvalidPuzzleInput("invalid puzzle input: no start tile 'S'")

    @classmethod
    def from_text(cls, text: str) -> "PipeMaze":
        return cls(Grid.from_text(text, parse=PipeCell))

    def find_main_loop(self) -> LoopResult:
        """Walk the pipes from the start tile until the walk comes back to it.

        The walk never steps straight back, and states are keyed by
        (position, heading) so the two directions around the loop do not
        block each other.
        """
        start = self.start_index
        result = traverse(
            self.grid,
            [SearchNode.start(self.grid, start)],
            PIPE_TRANSITION,
            TraversalConfig(backtrack=False, key=VisitKey.POSITION_HEADING),
            goal=lambda node: node.position == start and node.steps > 0,
        )
        if not result.found:
            return LoopResult(steps=-1, path=())
        # The goal node repeats the start tile at the end of the path.
        path = tuple(int(position) for position in result.path()[:-1])
        return LoopResult(steps=len(path), path=path)

    def farthest_distance(self) -> int:
        loop = self.find_main_loop()
        if not loop.found:
            return -1
        return loop.steps // 2

    def _padded_loop_grid(self, on_loop: set[int]) -> Grid[PipeCell | FillMark]:
        """Copy of the maze with a ground border and every non-loop tile cleared."""
        columns = self.grid.columns + 2
        cells = [PipeCell.GROUND] * columns
        for index, cell in enumerate(self.grid):
            if index % self.grid.columns == 0:
                cells.append(PipeCell.GROUND)
            cells.append(cell if index in on_loop else PipeCell.GROUND)
            if index % self.grid.columns == self.grid.columns - 1:
                cells.append(PipeCell.GROUND)
        cells.extend([PipeCell.GROUND] * columns)
        return Grid(cells, columns)

    def enclosed_count(self) -> int:
        """Number of tiles enclosed by the main loop."""
        loop = self.find_main_loop()
        if not loop.found:
            return 0

        padded = self._padded_loop_grid(set(loop.path))
        # Index 0 is border ground, so it always lies outside the loop.
        flood_fill(padded, 0, OnlyTransition([PipeCell.GROUND]), FillMark.OUTSIDE)

        candidates = padded.indices_of(PipeCell.GROUND)
        if not candidates:
            return 0
        points = np.array([padded.index_to_coordinate(idx) for idx in candidates], dtype=np.float64)
        vertices = np.array(
            [self.grid.index_to_coordinate(idx) for idx in loop.path], dtype=np.float64
        ) + 1.0
        inside = _inside_polygon(points[:, 0], points[:, 1], vertices[:, 0], vertices[:, 1])
        return int(inside.sum())


def solve_part_one(text: str) -> int:
    return PipeMaze.from_text(text).farthest_distance()


def solve_part_two(text: str) -> int:
    return PipeMaze.from_text(text).enclosed_count()


__all__ = [
    "PipeCell",
    "FillMark",
    "CONNECTIONS",
    "PipeTransition",
    "LoopResult",
    "PipeMaze",
    "solve_part_one",
    "solve_part_two",
]

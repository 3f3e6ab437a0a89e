"""Light beams bouncing through a contraption of mirrors and splitters."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from aoc2023.grid.constants import Axis, Direction
from aoc2023.grid.grid import Grid
from aoc2023.search.config import TraversalConfig, VisitKey
from aoc2023.search.traversal import SearchNode, Transition, traverse


class BeamCell(Enum):
    EMPTY = "."
    MIRROR = "/"
    BACK_MIRROR = "\\"
    SPLIT_HORIZONTAL = "-"
    SPLIT_VERTICAL = "|"


MIRROR_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
}
BACK_MIRROR_TURNS = {
    Direction.UP: Direction.LEFT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.UP,
}


class BeamTransition(Transition[BeamCell]):
    def exits(self, value: BeamCell, heading: Direction | None) -> Iterable[Direction]:
        if heading is None:
            return ()
        if value is BeamCell.MIRROR:
            return (MIRROR_TURNS[heading],)
        if value is BeamCell.BACK_MIRROR:
            return (BACK_MIRROR_TURNS[heading],)
        if value is BeamCell.SPLIT_HORIZONTAL and heading.axis is Axis.VERTICAL:
            return (Direction.LEFT, Direction.RIGHT)
        if value is BeamCell.SPLIT_VERTICAL and heading.axis is Axis.HORIZONTAL:
            return (Direction.UP, Direction.DOWN)
        return (heading,)


BEAM_TRANSITION = BeamTransition()


class Contraption:
    def __init__(self, grid: Grid[BeamCell]):
        self.grid = grid

    @classmethod
    def from_text(cls, text: str) -> "Contraption":
        return cls(Grid.from_text(text, parse=BeamCell))

    def energized(self, start: int = 0, heading: Direction = Direction.RIGHT) -> int:
        """Count tiles a beam passes through when it enters ``start`` moving ``heading``.

        Beam states are keyed by (tile, heading) since a tile crossed
        horizontally can still be crossed vertically by another beam.
        """
        result = traverse(
            self.grid,
            [SearchNode.start(self.grid, start, heading)],
            BEAM_TRANSITION,
            TraversalConfig(key=VisitKey.POSITION_HEADING),
        )
        return len(result.first_visits)

    def edge_entries(self) -> list[tuple[int, Direction]]:
        """Every border tile paired with the heading of a beam entering it from outside."""
        columns = self.grid.columns
        rows = self.grid.rows_count
        top = [(x, Direction.DOWN) for x in range(columns)]
        bottom = [((rows - 1) * columns + x, Direction.UP) for x in range(columns)]
        first_column = [(y * columns, Direction.RIGHT) for y in range(rows)]
        last_column = [(y * columns + columns - 1, Direction.LEFT) for y in range(rows)]
        return top + bottom + first_column + last_column

    def max_energized(self) -> int:
        return max(self.energized(index, heading) for index, heading in self.edge_entries())


def solve_part_one(text: str) -> int:
    return Contraption.from_text(text).energized()


def solve_part_two(text: str) -> int:
    return Contraption.from_text(text).max_energized()


__all__ = [
    "BeamCell",
    "BeamTransition",
    "Contraption",
    "solve_part_one",
    "solve_part_two",
]

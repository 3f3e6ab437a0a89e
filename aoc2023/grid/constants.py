from __future__ import annotations

from enum import Enum
from typing import Tuple


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(Enum):
    """Cardinal directions. Member order is the neighbour iteration order."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def axis(self) -> Axis:
        if self in (Direction.UP, Direction.DOWN):
            return Axis.VERTICAL
        return Axis.HORIZONTAL

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) of a single step."""
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)

__all__ = ["Axis", "Direction", "DIRECTIONS"]

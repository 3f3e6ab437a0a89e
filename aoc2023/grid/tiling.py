"""Infinite tiling of a finite grid.

A walk over a ``TiledGrid`` can cross the border of the base grid; the local
index wraps to the opposite edge and the tile id records which copy of the
base grid the walk is in. Nothing beyond the base cells is ever stored.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Hashable, NamedTuple, Tuple, TypeVar

from aoc2023.grid.constants import DIRECTIONS, Direction
from aoc2023.grid.grid import Grid, Neighbor, Neighbors

T = TypeVar("T")


@dataclass(frozen=True)
class TileId:
    """Number of tile widths travelled past each edge of the origin tile.

    Opposite components are never both non-zero: a step that crosses back
    over an edge cancels the opposite count before adding to its own.
    """

    up: int = 0
    right: int = 0
    down: int = 0
    left: int = 0

    ORIGIN: ClassVar["TileId"]

    def shift(self, direction: Direction) -> "TileId":
        if direction is Direction.UP:
            return replace(self, down=self.down - 1) if self.down > 0 else replace(self, up=self.up + 1)
        if direction is Direction.DOWN:
            return replace(self, up=self.up - 1) if self.up > 0 else replace(self, down=self.down + 1)
        if direction is Direction.RIGHT:
            return replace(self, left=self.left - 1) if self.left > 0 else replace(self, right=self.right + 1)
        return replace(self, right=self.right - 1) if self.right > 0 else replace(self, left=self.left + 1)

    @property
    def offset(self) -> Tuple[int, int]:
        """Net (dx, dy) of this tile relative to the origin, in tiles."""
        return self.right - self.left, self.down - self.up

    def __str__(self) -> str:
        return f"u{self.up}r{self.right}d{self.down}l{self.left}"


TileId.ORIGIN = TileId()


class TilePosition(NamedTuple):
    tile: TileId
    index: int


class TiledGrid(Grid[T]):
    """Grid that repeats itself in every direction when walked with ``adjacent``.

    ``neighbors`` keeps the finite semantics of the base grid; ``adjacent``
    always returns four neighbours whose positions are ``TilePosition`` values.
    """

    def origin(self, index: int) -> Hashable:
        return TilePosition(TileId.ORIGIN, index)

    def _wrap(self, index: int, direction: Direction) -> Tuple[int, bool]:
        """Return the local index one step away and whether an edge was crossed."""
        size = len(self)
        columns = self.columns
        x = index % columns
        if direction is Direction.UP:
            return (index - columns) % size, index - columns < 0
        if direction is Direction.DOWN:
            return (index + columns) % size, index + columns >= size
        if direction is Direction.RIGHT:
            if x == columns - 1:
                return index - x, True
            return index + 1, False
        if x == 0:
            return index + columns - 1, True
        return index - 1, False

    def adjacent(self, position: Hashable) -> Neighbors[T]:
        tile, index = position  # type: ignore[misc]
        found: dict[Direction, Neighbor[T]] = {}
        for direction in DIRECTIONS:
            local, crossed = self._wrap(index, direction)
            next_tile = tile.shift(direction) if crossed else tile
            found[direction] = Neighbor(
                index=local,
                value=self[local],
                position=TilePosition(next_tile, local),
            )
        return Neighbors(found)


__all__ = ["TileId", "TilePosition", "TiledGrid"]

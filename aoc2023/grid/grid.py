"""Flat row-major grid with coordinate arithmetic and 4-neighbour lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterator, Sequence, Tuple, TypeVar

from aoc2023.core.errors import InvalidPuzzleInput
from aoc2023.grid.constants import DIRECTIONS, Direction

T = TypeVar("T")


@dataclass(frozen=True)
class Neighbor(Generic[T]):
    """A cell one cardinal step away from another cell.

    Attributes:
        index: Flat index of the neighbour in the underlying cell array
        value: Cell value at that index
        position: Walk position of the neighbour. Equal to ``index`` on a plain
            grid, a ``TilePosition`` on a tiled grid.
    """

    index: int
    value: T
    position: Hashable


class Neighbors(Generic[T]):
    """Up to four neighbours keyed by direction.

    Iteration yields ``(direction, neighbor)`` pairs in UP, RIGHT, DOWN, LEFT
    order, skipping directions that fall off the grid.
    """

    __slots__ = ("_by_direction",)

    def __init__(self, by_direction: dict[Direction, Neighbor[T]]):
        self._by_direction = by_direction

    def __iter__(self) -> Iterator[Tuple[Direction, Neighbor[T]]]:
        for direction in DIRECTIONS:
            neighbor = self._by_direction.get(direction)
            if neighbor is not None:
                yield direction, neighbor

    def __len__(self) -> int:
        return len(self._by_direction)

    def __contains__(self, direction: object) -> bool:
        return direction in self._by_direction

    def get(self, direction: Direction) -> Neighbor[T] | None:
        return self._by_direction.get(direction)

    @property
    def up(self) -> Neighbor[T] | None:
        return self._by_direction.get(Direction.UP)

    @property
    def right(self) -> Neighbor[T] | None:
        return self._by_direction.get(Direction.RIGHT)

    @property
    def down(self) -> Neighbor[T] | None:
        return self._by_direction.get(Direction.DOWN)

    @property
    def left(self) -> Neighbor[T] | None:
        return self._by_direction.get(Direction.LEFT)


def split_rows(text: str) -> list[str]:
    """Split puzzle text into rows, checking that they form a rectangle.

    Args:
        text: Raw puzzle text, newline-delimited

    Returns:
        List of row strings

    Raises:
        InvalidPuzzleInput: If the text is empty or the rows differ in length
    """
    rows = text.rstrip().split("\n")
    if not rows or not rows[0]:
        raise InvalidPuzzleInput("invalid puzzle input: no rows")
    width = len(rows[0])
    for number, row in enumerate(rows):
        if len(row) != width:
            raise InvalidPuzzleInput(
                f"invalid puzzle input: row {number} has length {len(row)}, expected {width}"
            )
    return rows


class Grid(Generic[T]):
    """Rectangular cell array stored as a single row-major sequence.

    Index ``i`` maps to coordinate ``(i % columns, i // columns)``. The shape
    is fixed at construction; cell values may be overwritten in place.
    """

    def __init__(self, cells: Sequence[T], columns: int):
        if columns <= 0:
            raise InvalidPuzzleInput(f"columns must be positive, got {columns}")
        if not cells:
            raise InvalidPuzzleInput("invalid puzzle input: grid has no cells")
        if len(cells) % columns != 0:
            raise InvalidPuzzleInput(
                f"invalid puzzle input: {len(cells)} cells do not fill rows of {columns}"
            )
        self._cells: list[T] = list(cells)
        self._columns = columns

    @classmethod
    def from_text(cls, text: str, parse: Callable[[str], T] | None = None) -> "Grid[T]":
        """Build a grid from newline-delimited rows of equal length.

        Args:
            text: Raw puzzle text
            parse: Optional converter applied to every character

        Returns:
            Grid whose column count is the length of the first row
        """
        rows = split_rows(text)
        cells: list = []
        for row in rows:
            if parse is None:
                cells.extend(row)
            else:
                try:
                    cells.extend(parse(ch) for ch in row)
                except (KeyError, ValueError) as exc:
                    raise InvalidPuzzleInput(f"invalid puzzle input: {exc}") from exc
        return cls(cells, len(rows[0]))

    # Shape -----------------------------------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows_count(self) -> int:
        return len(self._cells) // self._columns

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> T:
        return self._cells[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._cells[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    # Coordinates -----------------------------------------------------------

    def coordinate_to_index(self, x: int, y: int) -> int:
        return y * self._columns + x

    def index_to_coordinate(self, index: int) -> Tuple[int, int]:
        y, x = divmod(index, self._columns)
        return x, y

    # Neighbours ------------------------------------------------------------

    def neighbor(self, index: int, direction: Direction) -> Neighbor[T] | None:
        """Return the neighbour one step in ``direction``, or None at the border."""
        x = index % self._columns
        if direction is Direction.UP:
            target = index - self._columns
            valid = target >= 0
        elif direction is Direction.DOWN:
            target = index + self._columns
            valid = target < len(self._cells)
        elif direction is Direction.LEFT:
            target = index - 1
            valid = x > 0
        else:
            target = index + 1
            valid = x < self._columns - 1
        if not valid:
            return None
        return Neighbor(index=target, value=self._cells[target], position=target)

    def neighbors(self, index: int) -> Neighbors[T]:
        """Return the in-bounds cardinal neighbours of ``index``."""
        found: dict[Direction, Neighbor[T]] = {}
        for direction in DIRECTIONS:
            neighbor = self.neighbor(index, direction)
            if neighbor is not None:
                found[direction] = neighbor
        return Neighbors(found)

    # Walk interface used by the traversal engine -----------------------------

    def origin(self, index: int) -> Hashable:
        """Walk position of a start index."""
        return index

    def adjacent(self, position: Hashable) -> Neighbors[T]:
        """Neighbours of a walk position. On a plain grid this is ``neighbors``."""
        return self.neighbors(position)  # type: ignore[arg-type]

    # Lookup and rendering --------------------------------------------------

    def find(self, value: T) -> int:
        """Return the first index holding ``value``, or -1."""
        try:
            return self._cells.index(value)
        except ValueError:
            return -1

    def indices_of(self, value: T) -> list[int]:
        return [idx for idx, cell in enumerate(self._cells) if cell == value]

    def rows(self) -> list[list[T]]:
        return [
            self._cells[start : start + self._columns]
            for start in range(0, len(self._cells), self._columns)
        ]

    def to_text(self, render: Callable[[T], str] = str) -> str:
        return "\n".join("".join(render(cell) for cell in row) for row in self.rows())


__all__ = ["Grid", "Neighbor", "Neighbors", "split_rows"]

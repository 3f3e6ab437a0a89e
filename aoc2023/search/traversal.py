"""Breadth-first traversal over grids driven by per-cell transition rules.

The same engine serves loop detection in pipe mazes, exterior flood fills,
step-limited reachability and beam propagation. What differs between those
uses is the ``Transition`` strategy, the visited-key composition and the goal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Hashable, Iterable, TypeVar

from aoc2023.grid.constants import DIRECTIONS, Direction
from aoc2023.grid.grid import Grid
from aoc2023.search.config import FrontierOrder, TraversalConfig, VisitKey

T = TypeVar("T")


@dataclass(frozen=True)
class SearchNode:
    """One frontier entry.

    Attributes:
        position: Walk position (index on a plain grid, TilePosition when tiled)
        index: Local cell index used for value lookups
        heading: Direction of the step that reached this node; None at a start
        steps: Number of steps taken from the start
        parent: Node this one was expanded from
    """

    position: Hashable
    index: int
    heading: Direction | None = None
    steps: int = 0
    parent: "SearchNode | None" = field(default=None, repr=False, compare=False)

    @classmethod
    def start(cls, grid: Grid[Any], index: int, heading: Direction | None = None) -> "SearchNode":
        return cls(position=grid.origin(index), index=index, heading=heading)

    def path(self) -> list[Hashable]:
        """Positions from the start node to this node, inclusive."""
        out: list[Hashable] = []
        node: SearchNode | None = self
        while node is not None:
            out.append(node.position)
            node = node.parent
        out.reverse()
        return out


class Transition(ABC, Generic[T]):
    """Per-cell movement rules.

    ``exits`` lists the directions a walker may leave a cell in, given the
    heading it arrived with. ``enters`` decides whether the neighbouring cell
    accepts a walker arriving with ``heading``.
    """

    @abstractmethod
    def exits(self, value: T, heading: Direction | None) -> Iterable[Direction]:
        pass

    def enters(self, value: T, heading: Direction) -> bool:
        return True


class OpenTransition(Transition[T]):
    """Move freely in all four directions, except onto blocked cell values."""

    def __init__(self, blocked: Iterable[T] = ()):
        self.blocked = frozenset(blocked)

    def exits(self, value: T, heading: Direction | None) -> Iterable[Direction]:
        return DIRECTIONS

    def enters(self, value: T, heading: Direction) -> bool:
        return value not in self.blocked


class OnlyTransition(Transition[T]):
    """Move in all four directions, but only onto cells holding ``allowed`` values."""

    def __init__(self, allowed: Iterable[T]):
        self.allowed = frozenset(allowed)

    def exits(self, value: T, heading: Direction | None) -> Iterable[Direction]:
        return DIRECTIONS

    def enters(self, value: T, heading: Direction) -> bool:
        return value in self.allowed


@dataclass
class TraversalResult:
    """Outcome of a traversal.

    Attributes:
        goal: Node that satisfied the goal predicate, or None
        first_visits: First node popped for each distinct position
        expanded: Number of nodes whose successors were generated
    """

    goal: SearchNode | None
    first_visits: dict[Hashable, SearchNode]
    expanded: int

    @property
    def found(self) -> bool:
        return self.goal is not None

    def positions(self) -> set[Hashable]:
        return set(self.first_visits)

    def count_where(self, predicate: Callable[[SearchNode], bool]) -> int:
        return sum(1 for node in self.first_visits.values() if predicate(node))

    def path(self) -> list[Hashable]:
        if self.goal is None:
            return []
        return self.goal.path()


def visit_key(node: SearchNode, kind: VisitKey) -> Hashable:
    if kind is VisitKey.POSITION_HEADING:
        return node.position, node.heading
    return node.position


def traverse(
    grid: Grid[T],
    starts: Iterable[SearchNode],
    transition: Transition[T],
    config: TraversalConfig | None = None,
    goal: Callable[[SearchNode], bool] | None = None,
) -> TraversalResult:
    """Explore ``grid`` from ``starts`` until the frontier empties or ``goal`` holds.

    Args:
        grid: Grid (or tiled grid) to walk
        starts: Initial nodes, see ``SearchNode.start``
        transition: Movement rules per cell value
        config: Frontier order, step budget, backtracking and key options
        goal: Optional predicate checked on every newly visited node

    Returns:
        TraversalResult; ``goal`` is None when the predicate was never met
    """
    config = config or TraversalConfig()
    frontier: deque[SearchNode] = deque(starts)
    pop = frontier.popleft if config.order is FrontierOrder.FIFO else frontier.pop
    visited: set[Hashable] = set()
    first_visits: dict[Hashable, SearchNode] = {}
    expanded = 0

    while frontier:
        node = pop()
        key = visit_key(node, config.key)
        if key in visited:
            continue
        visited.add(key)
        first_visits.setdefault(node.position, node)

        if goal is not None and goal(node):
            return TraversalResult(goal=node, first_visits=first_visits, expanded=expanded)
        if config.max_steps is not None and node.steps >= config.max_steps:
            continue

        expanded += 1
        neighbors = grid.adjacent(node.position)
        for direction in transition.exits(grid[node.index], node.heading):
            if not config.backtrack and node.heading is not None and direction is node.heading.opposite:
                continue
            neighbor = neighbors.get(direction)
            if neighbor is None or not transition.enters(neighbor.value, direction):
                continue
            child = SearchNode(
                position=neighbor.position,
                index=neighbor.index,
                heading=direction,
                steps=node.steps + 1,
                parent=node,
            )
            if visit_key(child, config.key) in visited:
                continue
            frontier.append(child)

    return TraversalResult(goal=None, first_visits=first_visits, expanded=expanded)


def reachable_count(grid: Grid[T], start: int, steps: int, transition: Transition[T]) -> int:
    """Count positions a walker can stand on after exactly ``steps`` moves.

    A position counts when it is first reached within the budget on a step
    count with the same parity as ``steps``; the walker can pace back and
    forth to burn the remaining moves.
    """
    result = traverse(
        grid,
        [SearchNode.start(grid, start)],
        transition,
        TraversalConfig(max_steps=steps),
    )
    parity = steps % 2
    return result.count_where(lambda node: node.steps % 2 == parity)


def flood_fill(grid: Grid[T], start: int, transition: Transition[T], marker: T) -> int:
    """Overwrite every cell reachable from ``start`` with ``marker``.

    Returns:
        Number of cells filled
    """
    result = traverse(grid, [SearchNode.start(grid, start)], transition)
    for node in result.first_visits.values():
        grid[node.index] = marker
    return len(result.first_visits)


__all__ = [
    "SearchNode",
    "Transition",
    "OpenTransition",
    "OnlyTransition",
    "TraversalResult",
    "traverse",
    "reachable_count",
    "flood_fill",
    "visit_key",
]

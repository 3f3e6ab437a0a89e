"""Least-cost path over a grid of entry costs with a straight-run constraint."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Hashable

import numpy as np

from aoc2023.grid.constants import DIRECTIONS, Direction
from aoc2023.grid.grid import Grid
from aoc2023.search.config import PathConfig

_UNREACHED = np.iinfo(np.int64).max
_DIRECTION_SLOT = {direction: slot for slot, direction in enumerate(DIRECTIONS)}


@dataclass(frozen=True)
class PathNode:
    index: int
    heading: Direction | None
    run: int
    cost: int
    previous: int | None = None
    parent: "PathNode | None" = field(default=None, repr=False, compare=False)

    def path(self) -> tuple[int, ...]:
        out: list[int] = []
        node: PathNode | None = self
        while node is not None:
            out.append(node.index)
            node = node.parent
        return tuple(reversed(out))


@dataclass(frozen=True)
class PathResult:
    """Least total cost, or ``cost=None`` when the target cannot be reached."""

    cost: int | None
    path: tuple[int, ...] = ()
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.cost is not None


def _state_key(node: PathNode, collapse_axis: bool) -> Hashable:
    if collapse_axis and node.heading is not None:
        return node.index, node.heading.axis, node.run
    return node.index, node.heading, node.run


def shortest_path(grid: Grid[int], config: PathConfig | None = None) -> PathResult:
    """Dijkstra search from ``config.source`` to ``config.target``.

    Each cell's value is paid when the path enters it; the source cell is free.
    A path never reverses, runs at most ``max_consecutive`` steps in one
    direction, turns only after ``min_consecutive`` straight steps, and can
    only stop at the target once that minimum is met.

    Args:
        grid: Grid of non-negative integer entry costs
        config: Run constraints and endpoints

    Returns:
        PathResult with the least cost and the cell indices along that path

    Raises:
        ValueError: If source or target lie outside the grid or a cost is negative
    """
    config = config or PathConfig()
    size = len(grid)
    target = size - 1 if config.target is None else config.target
    if config.source >= size or target >= size:
        raise ValueError(f"source/target must be < {size}, got {config.source}/{target}")
    if any(value < 0 for value in grid):
        raise ValueError("entry costs must be non-negative")

    if config.source == target:
        return PathResult(cost=0, path=(target,), expanded=0)

    max_run = config.max_consecutive
    min_run = config.min_consecutive
    best = np.full((size, len(DIRECTIONS), max_run + 1), _UNREACHED, dtype=np.int64)

    counter = itertools.count()
    start = PathNode(index=config.source, heading=None, run=0, cost=0)
    frontier: list[tuple[int, int, PathNode]] = [(0, next(counter), start)]
    visited: set[Hashable] = set()
    expanded = 0

    while frontier:
        cost, _, node = heapq.heappop(frontier)
        key = _state_key(node, config.collapse_axis)
        if key in visited:
            continue
        visited.add(key)

        if node.index == target and node.run >= min_run:
            return PathResult(cost=cost, path=node.path(), expanded=expanded)

        expanded += 1
        for direction, neighbor in grid.neighbors(node.index):
            if node.heading is not None and direction is node.heading.opposite:
                continue
            if node.heading is None or direction is node.heading:
                run = node.run + 1
                if run > max_run:
                    continue
            else:
                if node.run < min_run:
                    continue
                run = 1

            next_cost = cost + int(neighbor.value)
            slot = _DIRECTION_SLOT[direction]
            if next_cost >= best[neighbor.index, slot, run]:
                continue
            best[neighbor.index, slot, run] = next_cost

            child = PathNode(
                index=neighbor.index,
                heading=direction,
                run=run,
                cost=next_cost,
                previous=node.index,
                parent=node,
            )
            if _state_key(child, config.collapse_axis) in visited:
                continue
            heapq.heappush(frontier, (next_cost, next(counter), child))

    return PathResult(cost=None, path=(), expanded=expanded)


__all__ = ["PathNode", "PathResult", "shortest_path"]

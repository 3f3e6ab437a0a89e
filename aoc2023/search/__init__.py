"""Search engines built on ``aoc2023.grid``.

``traverse`` is a breadth-first walk steered by per-cell ``Transition`` rules;
``shortest_path`` is a priority search with a straight-run constraint.
"""

from aoc2023.search.config import FrontierOrder, PathConfig, TraversalConfig, VisitKey
from aoc2023.search.shortest_path import PathNode, PathResult, shortest_path
from aoc2023.search.traversal import (
    OnlyTransition,
    OpenTransition,
    SearchNode,
    Transition,
    TraversalResult,
    flood_fill,
    reachable_count,
    traverse,
)

__all__ = [
    "FrontierOrder",
    "VisitKey",
    "TraversalConfig",
    "PathConfig",
    "PathNode",
    "PathResult",
    "shortest_path",
    "SearchNode",
    "Transition",
    "OpenTransition",
    "OnlyTransition",
    "TraversalResult",
    "traverse",
    "reachable_count",
    "flood_fill",
]

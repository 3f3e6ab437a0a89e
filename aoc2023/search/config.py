"""Configuration dataclasses for grid searches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FrontierOrder(Enum):
    FIFO = "fifo"
    LIFO = "lifo"


class VisitKey(Enum):
    """Which parts of a search node identify it in the visited set."""

    POSITION = "position"
    POSITION_HEADING = "position_heading"


@dataclass(frozen=True)
class TraversalConfig:
    """Options for the breadth-first traversal engine.

    Attributes:
        order: Frontier discipline; FIFO gives shortest-first traversal
        max_steps: Nodes at this step count are recorded but not expanded
        backtrack: Whether a node may step straight back the way it came
        key: Composition of the visited key
    """

    order: FrontierOrder = FrontierOrder.FIFO
    max_steps: int | None = None
    backtrack: bool = True
    key: VisitKey = VisitKey.POSITION

    def __post_init__(self):
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")


@dataclass(frozen=True)
class PathConfig:
    """Move-run constraints for the priority search.

    Attributes:
        min_consecutive: Straight steps required before a turn (or a stop)
        max_consecutive: Straight steps allowed before a turn is forced
        source: Start index
        target: Destination index; None means the last cell of the grid
        collapse_axis: Key visited states by axis (horizontal or vertical)
            instead of exact direction. Explores fewer states but may miss
            the optimum.
    """

    min_consecutive: int = 1
    max_consecutive: int = 3
    source: int = 0
    target: int | None = None
    collapse_axis: bool = False

    def __post_init__(self):
        if self.min_consecutive < 1:
            raise ValueError(f"min_consecutive must be positive, got {self.min_consecutive}")
        if self.max_consecutive < self.min_consecutive:
            raise ValueError(
                f"max_consecutive ({self.max_consecutive}) must be >= "
                f"min_consecutive ({self.min_consecutive})"
            )
        if self.source < 0:
            raise ValueError(f"source must be non-negative, got {self.source}")
        if self.target is not None and self.target < 0:
            raise ValueError(f"target must be non-negative, got {self.target}")


__all__ = ["FrontierOrder", "VisitKey", "TraversalConfig", "PathConfig"]

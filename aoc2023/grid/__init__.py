"""Flat 2-D grids, the neighbour model and infinite tiling."""

from aoc2023.grid.constants import DIRECTIONS, Axis, Direction
from aoc2023.grid.grid import Grid, Neighbor, Neighbors, split_rows
from aoc2023.grid.tiling import TiledGrid, TileId, TilePosition

__all__ = [
    "Axis",
    "Direction",
    "DIRECTIONS",
    "Grid",
    "Neighbor",
    "Neighbors",
    "split_rows",
    "TiledGrid",
    "TileId",
    "TilePosition",
]

"""Unit tests for the infinitely tiled grid."""

import pytest

from aoc2023.grid import Direction, TiledGrid, TileId, TilePosition


@pytest.fixture
def tiled():
    """3x3 tiled grid of letters a..i."""
    return TiledGrid.from_text("abc\ndef\nghi")


def test_tile_shift_accumulates():
    """Test that repeated crossings count up."""
    tile = TileId.ORIGIN.shift(Direction.RIGHT).shift(Direction.RIGHT)
    assert tile == TileId(right=2)
    assert tile.offset == (2, 0)


def test_tile_shift_cancels_opposite():
    """Test that crossing back cancels instead of adding the opposite count."""
    tile = TileId.ORIGIN.shift(Direction.LEFT).shift(Direction.RIGHT)
    assert tile == TileId.ORIGIN
    tile = TileId.ORIGIN.shift(Direction.UP).shift(Direction.DOWN).shift(Direction.DOWN)
    assert tile == TileId(down=1)
    assert tile.up == 0


def test_tile_str():
    """Test the compact tile label."""
    assert str(TileId(up=1, left=2)) == "u1r0d0l2"


def test_interior_neighbors_stay_in_tile(tiled):
    """Test that steps inside the base grid keep the tile id."""
    nbrs = tiled.adjacent(tiled.origin(4))
    assert len(nbrs) == 4
    for _, neighbor in nbrs:
        assert neighbor.position.tile == TileId.ORIGIN


def test_corner_wraps(tiled):
    """Test wrapping from the top-left corner."""
    nbrs = tiled.adjacent(TilePosition(TileId.ORIGIN, 0))
    assert nbrs.up.position == TilePosition(TileId(up=1), 6)
    assert nbrs.up.value == "g"
    assert nbrs.left.position == TilePosition(TileId(left=1), 2)
    assert nbrs.left.value == "c"
    assert nbrs.right.position == TilePosition(TileId.ORIGIN, 1)
    assert nbrs.down.position == TilePosition(TileId.ORIGIN, 3)


def test_bottom_right_wraps(tiled):
    """Test wrapping from the bottom-right corner."""
    nbrs = tiled.adjacent(TilePosition(TileId.ORIGIN, 8))
    assert nbrs.down.position == TilePosition(TileId(down=1), 2)
    assert nbrs.right.position == TilePosition(TileId(right=1), 6)


def test_walking_around_returns_home(tiled):
    """Test that a full lap right then back left returns to the origin tile."""
    position = tiled.origin(3)
    for _ in range(3):
        position = tiled.adjacent(position).right.position
    assert position == TilePosition(TileId(right=1), 3)
    for _ in range(3):
        position = tiled.adjacent(position).left.position
    assert position == TilePosition(TileId.ORIGIN, 3)


def test_finite_neighbors_unchanged(tiled):
    """Test that the plain neighbour lookup keeps border semantics."""
    assert len(tiled.neighbors(0)) == 2

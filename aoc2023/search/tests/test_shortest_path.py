"""Unit tests for the run-constrained priority search."""

import random

import pytest

from aoc2023.grid import Grid
from aoc2023.search import PathConfig, shortest_path

HEAT_MAP = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533"""

UNFAIR_MAP = """\
111111111111
999999999991
999999999991
999999999991
999999999991"""


@pytest.fixture
def heat_grid():
    return Grid.from_text(HEAT_MAP, parse=int)


def _is_valid_path(grid, path, min_run, max_run):
    """Check adjacency, no reversals and the run limits along a path."""
    moves = []
    for a, b in zip(path, path[1:]):
        ax, ay = grid.index_to_coordinate(a)
        bx, by = grid.index_to_coordinate(b)
        if abs(ax - bx) + abs(ay - by) != 1:
            return False
        moves.append((bx - ax, by - ay))
    runs = []
    for move in moves:
        if runs and runs[-1][0] == move:
            runs[-1][1] += 1
        else:
            if runs and runs[-1][0] == (-move[0], -move[1]):
                return False
            runs.append([move, 1])
    return all(min_run <= length <= max_run for _, length in runs)


def test_uniform_grid_is_manhattan():
    """Test a uniform 3x3 grid: four unit steps from corner to corner."""
    grid = Grid([1] * 9, columns=3)
    result = shortest_path(grid, PathConfig(max_consecutive=10))
    assert result.cost == 4
    assert result.path[0] == 0 and result.path[-1] == 8
    assert _is_valid_path(grid, result.path, 1, 10)


def test_uniform_grid_default_constraints():
    """Test that the default run limit does not bind on a small grid."""
    grid = Grid([1] * 9, columns=3)
    assert shortest_path(grid).cost == 4


def test_heat_map_part_one(heat_grid):
    """Test the crucible example with at most three straight steps."""
    result = shortest_path(heat_grid, PathConfig(min_consecutive=1, max_consecutive=3))
    assert result.cost == 102
    assert _is_valid_path(heat_grid, result.path, 1, 3)
    assert sum(heat_grid[idx] for idx in result.path[1:]) == 102


def test_heat_map_ultra_crucible(heat_grid):
    """Test the example with four to ten straight steps."""
    result = shortest_path(heat_grid, PathConfig(min_consecutive=4, max_consecutive=10))
    assert result.cost == 94
    assert _is_valid_path(heat_grid, result.path, 4, 10)


def test_unfair_map_requires_min_run_at_target():
    """Test that the target only counts once the minimum run is met."""
    grid = Grid.from_text(UNFAIR_MAP, parse=int)
    assert shortest_path(grid, PathConfig(min_consecutive=4, max_consecutive=10)).cost == 71


@pytest.mark.parametrize(
    "looser,tighter",
    [
        ((1, 10), (1, 3)),
        ((1, 3), (1, 2)),
        ((1, 10), (4, 10)),
        ((2, 10), (4, 10)),
        ((1, 10), (2, 10)),
    ],
)
def test_tighter_constraints_never_cheaper(heat_grid, looser, tighter):
    """Test cost monotonicity in the run constraints."""
    loose = shortest_path(heat_grid, PathConfig(*looser))
    tight = shortest_path(heat_grid, PathConfig(*tighter))
    assert loose.cost <= tight.cost


def test_no_path():
    """Test that an impossible route is reported with cost None."""
    grid = Grid([1] * 5, columns=5)
    result = shortest_path(grid, PathConfig(max_consecutive=3))
    assert not result.found
    assert result.cost is None
    assert result.path == ()


def test_source_is_target():
    """Test a single-cell grid."""
    result = shortest_path(Grid([7], columns=1))
    assert result.cost == 0
    assert result.path == (0,)


def test_custom_endpoints():
    """Test routing between explicit source and target indices."""
    grid = Grid([1, 5, 1, 1, 1, 1], columns=3)
    result = shortest_path(grid, PathConfig(source=2, target=0))
    assert result.cost == 4
    assert result.path == (2, 5, 4, 3, 0)


@pytest.mark.parametrize("seed", range(8))
def test_axis_key_never_beats_exact_key(seed):
    """Compare axis-collapsed visited keys against exact-direction keys."""
    rng = random.Random(seed)
    columns = rng.randint(3, 8)
    rows = rng.randint(3, 8)
    grid = Grid([rng.randint(1, 9) for _ in range(columns * rows)], columns)
    for min_run, max_run in [(1, 3), (2, 5)]:
        exact = shortest_path(grid, PathConfig(min_run, max_run))
        axis = shortest_path(grid, PathConfig(min_run, max_run, collapse_axis=True))
        if axis.found:
            assert exact.found
            assert exact.cost <= axis.cost
            assert _is_valid_path(grid, axis.path, min_run, max_run)


def test_axis_key_on_example(heat_grid):
    """Test that axis collapsing finds a valid route no cheaper than the optimum."""
    result = shortest_path(heat_grid, PathConfig(1, 3, collapse_axis=True))
    assert result.found
    assert result.cost >= 102
    assert _is_valid_path(heat_grid, result.path, 1, 3)


def test_invalid_min():
    """Test that a zero minimum run is rejected."""
    with pytest.raises(ValueError, match="min_consecutive must be positive"):
        PathConfig(min_consecutive=0)


def test_max_below_min():
    """Test that max < min is rejected at construction."""
    with pytest.raises(ValueError, match=r"max_consecutive \(3\) must be >= min_consecutive \(4\)"):
        PathConfig(min_consecutive=4, max_consecutive=3)


def test_target_out_of_range():
    """Test that an out-of-range target is rejected."""
    with pytest.raises(ValueError, match="source/target"):
        shortest_path(Grid([1] * 4, columns=2), PathConfig(target=9))


def test_negative_cost_rejected():
    """Test that negative entry costs are rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        shortest_path(Grid([1, -1, 1, 1], columns=2))

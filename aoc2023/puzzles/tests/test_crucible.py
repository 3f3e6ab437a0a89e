"""Unit tests for crucible routing."""

import pytest

from aoc2023.core.errors import InvalidPuzzleInput
from aoc2023.puzzles.crucible import HeatMap, solve_part_one, solve_part_two

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


def test_part_one():
    assert solve_part_one(HEAT_MAP) == 102


def test_part_two():
    assert solve_part_two(HEAT_MAP) == 94


def test_route_ends_at_factory():
    """Test that the route runs from the top-left to the bottom-right block."""
    heat_map = HeatMap.from_text(HEAT_MAP)
    result = heat_map.least_heat_loss()
    assert result.path[0] == 0
    assert result.path[-1] == len(heat_map.grid) - 1


def test_blocked_route_has_no_answer():
    """Test a single row longer than the run limit."""
    assert solve_part_one("11111") is None


def test_non_digit_block_rejected():
    with pytest.raises(InvalidPuzzleInput):
        HeatMap.from_text("12\n3.")

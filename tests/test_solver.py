import pytest

from conftest import PUZZLE, SOLUTION

from smalldoku.data import CellKind, Grid
from smalldoku.solver import solve
from smalldoku.util import grid_from_string

# Blanking these makes a 1/3 deadly rectangle, so the grid has two solutions
RECTANGLE = ((3, 5), (3, 8), (4, 5), (4, 8))


def test_solved_grid_counts_once():
    grid = grid_from_string(SOLUTION)
    before = grid.copy()
    assert solve(grid) == 1
    assert grid == before


def test_full_grid_with_conflict_counts_zero():
    grid = grid_from_string(SOLUTION)
    grid[0, 0].value, grid[0, 1].value = grid[0, 1].value, grid[0, 0].value
    assert solve(grid) == 0


def test_unique_puzzle():
    grid = grid_from_string(PUZZLE)
    before = grid.copy()
    assert solve(grid) == 1
    assert grid == before


def test_two_solutions():
    grid = grid_from_string(SOLUTION)
    for key in RECTANGLE:
        grid[key].value = 0
    assert solve(grid) == 2
    assert solve(grid, limit=1) == 1


def test_user_cells_are_searched_through_user_value():
    grid = grid_from_string(SOLUTION)
    for key in RECTANGLE:
        grid[key].kind = CellKind.USER
    before = grid.copy()
    assert solve(grid) == 2
    assert grid == before
    for key in RECTANGLE:
        assert grid[key].user_value == 0
        assert grid[key].value in (1, 3)


def test_filled_in_user_values_are_treated_as_given():
    grid = grid_from_string(SOLUTION)
    for key in RECTANGLE:
        grid[key].kind = CellKind.USER
        grid[key].user_value = grid[key].value
    assert solve(grid) == 1


def test_no_completion():
    grid = grid_from_string(PUZZLE)
    # 1 fits at r0c2 by the rules but leads nowhere
    grid[0, 2].value = 1
    assert solve(grid) == 0


def test_empty_grid_has_many_solutions():
    grid = Grid()
    assert solve(grid, limit=2) == 2
    assert grid == Grid()


def test_limit_caps_the_count():
    grid = grid_from_string(PUZZLE)
    for key in ((0, 0), (0, 1), (1, 0)):
        grid[key].value = 0
    assert solve(grid, limit=1) == 1


@pytest.mark.parametrize('limit', [0, -3])
def test_limit_must_be_positive(limit):
    with pytest.raises(ValueError):
        solve(grid_from_string(PUZZLE), limit=limit)

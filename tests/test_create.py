import random

import pytest

from smalldoku.config import DIGITS
from smalldoku.constraints import find_conflicts, grid_filled
from smalldoku.create import shuffle, fill, hammer, check_unique, new_puzzle
from smalldoku.data import CellKind, Grid
from smalldoku.errors import HammerExhausted
from smalldoku.solver import solve
from smalldoku.util import grid_to_string

# What fill produces when every call to the rng returns its lower bound. Each
# cell then tries its digits in the order 9, 1, 2, ..., 8.
ALWAYS_MIN_FILL = (
    "912345678"
    "345678912"
    "678912345"
    "193254786"
    "254786193"
    "786193254"
    "429531867"
    "531867429"
    "867429531"
)


def test_shuffle_with_min_rng(min_rng):
    assert shuffle(list(DIGITS), min_rng) == [9, 1, 2, 3, 4, 5, 6, 7, 8]


def test_shuffle_keeps_items(rng):
    items = list(DIGITS)
    result = shuffle(items, rng)
    assert result is items
    assert sorted(result) == list(DIGITS)


def test_fill_golden(min_rng):
    grid = Grid()
    fill(grid, min_rng)
    assert grid_to_string(grid) == ALWAYS_MIN_FILL


def test_fill_makes_a_solution(filled_grid):
    assert grid_filled(filled_grid)
    assert find_conflicts(filled_grid) == set()
    for _, cell in filled_grid.items():
        assert cell.kind is CellKind.GENERATED
        assert cell.user_value == 0
        assert 1 <= cell.value <= 9
    assert solve(filled_grid) == 1


@pytest.mark.parametrize('seed', [1, 2, 3])
def test_fill_is_valid_for_any_seed(seed):
    grid = Grid()
    fill(grid, random.Random(seed).randint)
    assert grid_filled(grid)
    assert find_conflicts(grid) == set()


def test_fill_depends_on_rng():
    a, b = Grid(), Grid()
    fill(a, random.Random(1).randint)
    fill(b, random.Random(2).randint)
    assert a != b

    c = Grid()
    fill(c, random.Random(1).randint)
    assert a == c


@pytest.mark.parametrize('erase_count', [0, 1, 25, 40])
def test_hammer_keeps_solution_unique(filled_grid, rng, erase_count):
    solution = filled_grid.copy()
    hammer(filled_grid, erase_count, rng)

    user_keys = filled_grid.user_keys()
    assert len(user_keys) == erase_count
    for key, cell in filled_grid.items():
        assert cell.value == solution[key].value
        if cell.kind is CellKind.USER:
            assert cell.user_value == 0

    assert solve(filled_grid) == 1
    assert check_unique(filled_grid)

    # Filling in the right answers gives back the complete solution
    for key in user_keys:
        filled_grid[key].user_value = filled_grid[key].value
    assert solve(filled_grid) == 1
    assert grid_to_string(filled_grid) == grid_to_string(solution)


def test_hammer_gives_up_when_bounded(filled_grid, min_rng):
    # The rng only ever draws cell 0, so the second erasure can't happen
    with pytest.raises(HammerExhausted):
        hammer(filled_grid, 2, min_rng, max_attempts=10)
    assert filled_grid.user_keys() == [(0, 0)]


def test_check_unique_leaves_grid_alone(filled_grid, rng):
    hammer(filled_grid, 10, rng)
    before = filled_grid.copy()
    assert check_unique(filled_grid)
    assert filled_grid == before

    assert not check_unique(Grid())


def test_new_puzzle(rng):
    grid = new_puzzle(12, rng)
    assert len(grid.user_keys()) == 12
    assert check_unique(grid)

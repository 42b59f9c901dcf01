"""
This module defines the functions for generating new puzzles: fill makes a
randomized solved grid, and hammer erases cells from it while keeping the
solution unique.

All randomness comes from an rng argument, a function rng(min, max) that
returns a random integer in the inclusive range [min, max]. random.randint
has exactly that signature and is the default. Pass a seeded
random.Random().randint, or any stub with the same signature, to get
reproducible grids.
"""

import logging
from random import randint

from .config import CELL_COUNT, DEFAULT_ERASE_COUNT, DIGITS, index_to_key
from .constraints import digit_fits, grid_filled
from .data import CellKind, Grid
from .errors import HammerExhausted
from .solver import solve

logger = logging.getLogger(__name__)

def shuffle(items, rng=randint):
    """Shuffle a list in place and return it. Every position is swapped
    with a position drawn from the whole list.
    """
    last = len(items) - 1
    for i in range(len(items)):
        j = rng(0, last)
        if j != i:
            items[i], items[j] = items[j], items[i]
    return items

def _fill_from(grid, rng):
    """Fill the first empty cell with a digit that fits and recurse on the
    rest of the grid. If no digit works, put the grid back the way it was and
    return False so the caller can try its next digit.
    """
    backup = grid.copy()
    for index in range(CELL_COUNT):
        row, col = index_to_key(index)
        cell = grid[row, col]
        if cell.value != 0:
            continue
        for digit in shuffle(list(DIGITS), rng):
            if digit_fits(grid, row, col, digit):
                cell.value = digit
                if grid_filled(grid) or _fill_from(grid, rng):
                    return True
        break
    grid.restore(backup)
    return False

def fill(grid, rng=randint):
    """Fill an initialized grid with a random complete solution. Every cell
    stays a generated cell. A solution always exists, so there is nothing to
    report back.
    """
    _fill_from(grid, rng)
    logger.debug('Filled grid %r', grid)

def hammer(grid, erase_count, rng=randint, *, max_attempts=None):
    """Turn erase_count generated cells of a filled grid into empty user
    cells, one at a time. After each erasure the puzzle must still have
    exactly one solution; if it doesn't, the cell is turned back and another
    one is drawn.

    If erase_count is more than the grid can give up while staying unique,
    this never returns, unless max_attempts is given. In that case
    HammerExhausted is raised once a single erasure has failed max_attempts
    draws in a row.
    """
    for erased in range(erase_count):
        attempts = 0
        while True:
            if max_attempts is not None and attempts >= max_attempts:
                raise HammerExhausted(
                    'Gave up after {} draws with {} of {} cells erased'.format(
                        attempts, erased, erase_count)
                )
            attempts += 1
            row, col = index_to_key(rng(0, CELL_COUNT - 1))
            cell = grid[row, col]
            if cell.kind is CellKind.USER:
                continue
            cell.kind = CellKind.USER
            cell.user_value = 0
            if solve(grid, limit=2) == 1:
                break
            cell.kind = CellKind.GENERATED
        logger.debug('Erased (%d, %d) after %d draws', row, col, attempts)

def check_unique(grid):
    """Shortcut to check that a grid has exactly one completion. The grid
    passed in isn't touched.
    """
    return solve(grid.copy(), limit=2) == 1

def new_puzzle(erase_count=DEFAULT_ERASE_COUNT, rng=randint):
    """Make a new grid, fill it, and hammer it."""
    grid = Grid()
    fill(grid, rng)
    hammer(grid, erase_count, rng)
    logger.debug('Created puzzle with %d user cells', erase_count)
    return grid

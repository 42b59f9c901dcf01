"""
The solution counter. solve does a depth first search over the empty cells
of the grid in row-major order and counts every way to complete it.

Generated cells and user cells are both fair game. When the search writes a
digit it goes into the field that the effective value reads from: `value`
for a generated cell, `user_value` for a user cell. On a hammered grid every
generated cell is already filled in, so the search only ever writes user
values and the authored solution is left alone.

Every digit written during the search is set back to 0 before the next one
is tried, so the grid has the same shape when solve returns as when it was
called.
"""

from .config import CELL_COUNT, DIGITS, index_to_key
from .constraints import digit_fits, find_conflicts
from .data import CellKind

def _write(cell, digit):
    if cell.kind is CellKind.GENERATED:
        cell.value = digit
    else:
        cell.user_value = digit

def _count_from(grid, empties, pos, limit):
    """Count the completions of empties[pos:], given that everything before
    pos has already been filled in. Stops early once the count reaches limit.
    """
    row, col = empties[pos]
    cell = grid[row, col]
    count = 0
    for digit in DIGITS:
        if not digit_fits(grid, row, col, digit):
            continue
        _write(cell, digit)
        if pos == len(empties) - 1:
            # That was the last empty cell
            count += 1
        else:
            remaining = None if limit is None else limit - count
            count += _count_from(grid, empties, pos + 1, remaining)
        _write(cell, 0)
        if limit is not None and count >= limit:
            break
    return count

def solve(grid, limit=None):
    """Count the ways the empty cells of the grid can be filled in.

    A grid with no empty cells has one completion if it doesn't break any
    rules, and none if it does. If limit is given, the search stops as soon
    as limit completions have been found and limit is returned; this is
    enough to tell "unique" from "not unique" without exhausting the search.
    """
    if limit is not None and limit < 1:
        raise ValueError('limit must be positive, got {!r}'.format(limit))
    empties = [
        index_to_key(index) for index in range(CELL_COUNT)
            if grid.get_cell_value(*index_to_key(index)) == 0
    ]
    if not empties:
        return 0 if find_conflicts(grid) else 1
    return _count_from(grid, empties, 0, limit)

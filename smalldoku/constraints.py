"""
Duplicate checks for rows, columns, and boxes. These all look at effective
values, so a user cell counts with whatever the player typed into it.
"""

from .config import ROWS, COLS, BOXES, box_index

def _keyset_contains(grid, keyset, digit):
    for key in keyset:
        if grid[key].effective_value() == digit:
            return True
    return False

def row_contains(grid, row, digit):
    """True if any cell in the row has this digit."""
    return _keyset_contains(grid, ROWS[row], digit)

def column_contains(grid, col, digit):
    """True if any cell in the column has this digit."""
    return _keyset_contains(grid, COLS[col], digit)

def box_contains(grid, row, col, digit):
    """True if any cell in the box containing (row, col) has this digit."""
    return _keyset_contains(grid, BOXES[box_index(row, col)], digit)

def digit_fits(grid, row, col, digit):
    """A digit can go at (row, col) if none of its row, column, or box already
    has it.
    """
    return not (row_contains(grid, row, digit) or
                column_contains(grid, col, digit) or
                box_contains(grid, row, col, digit))

def grid_filled(grid):
    """True if no cell has an effective value of 0."""
    for key in grid:
        if grid[key].effective_value() == 0:
            return False
    return True

def find_conflicts(grid):
    """Return the set of keys whose digit also appears elsewhere in the same
    row, column, or box. Empty cells never conflict.
    """
    conflicting = set()
    for house in ROWS + COLS + BOXES:
        seen = {}
        for key in house:
            digit = grid[key].effective_value()
            if digit == 0:
                continue
            if digit in seen:
                conflicting.add(key)
                conflicting.add(seen[digit])
            else:
                seen[digit] = key
    return conflicting

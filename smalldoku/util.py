"""
Helpers for looking at grids as text: rendering them for a terminal, and
converting to and from 81 character strings like
'8..........36......7..9.2...5...7.......457.....1...3...1....68..85...1..9....4..'
"""

from .config import BOX_WIDTH, CELL_COUNT, GRID_SIZE, index_to_key
from .data import Grid
from .errors import GridFormatError

def format_grid(grid):
    """Render the effective values of a grid with box borders and row and
    column numbers. Empty cells are left blank.
    """
    border = '   +' + ('-' * (2 * BOX_WIDTH + 1) + '+') * (GRID_SIZE // BOX_WIDTH)
    header = '    '
    for col in range(GRID_SIZE):
        header += ' {}'.format(col)
        if col % BOX_WIDTH == BOX_WIDTH - 1 and col != GRID_SIZE - 1:
            header += '  '
    lines = [header, border]
    for row in range(GRID_SIZE):
        line = '{:2} |'.format(row)
        for col in range(GRID_SIZE):
            value = grid.get_cell_value(row, col)
            line += ' {}'.format(value if value else ' ')
            if col % BOX_WIDTH == BOX_WIDTH - 1:
                line += ' |'
        lines.append(line)
        if row % BOX_WIDTH == BOX_WIDTH - 1:
            lines.append(border)
    return '\n'.join(lines)

def print_grid(grid):
    print(format_grid(grid))

def grid_to_string(grid):
    """81 characters of effective values in row-major order, '.' for empty."""
    chars = []
    for key in grid:
        value = grid.get_cell_value(*key)
        chars.append(str(value) if value else '.')
    return ''.join(chars)

def grid_from_string(string):
    """Build a grid of generated cells from an 81 character string. Digits
    1-9 are clues; '.' and '0' are empty cells. Surrounding whitespace is
    ignored.
    """
    string = string.strip()
    if len(string) != CELL_COUNT:
        raise GridFormatError(
            'expected {} characters, got {}'.format(CELL_COUNT, len(string))
        )
    grid = Grid()
    for n, c in enumerate(string):
        if c in '.0':
            continue
        if c not in '123456789':
            raise GridFormatError('bad character {!r} at position {}'.format(c, n))
        grid[index_to_key(n)].value = int(c)
    return grid

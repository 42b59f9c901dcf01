"""
The grid data structure. A Grid is a fixed 9x9 matrix of Cell objects
addressed by (row, col) keys, the same keys used throughout config.py.

Every cell carries the digit the solution has at that position in `value`.
Generated cells show that digit to the player; user cells hide it and show
`user_value` instead, which is whatever the player typed in (0 for empty).
The digit that counts for the rules is the effective value, see
Cell.effective_value.
"""

from enum import Enum

from .config import GRID_SIZE
from .errors import CorruptCellError

class CellKind(Enum):
    GENERATED = 0
    USER = 1

class Annotation(Enum):
    """UI state attached to a cell. The engine never reads these; init is the
    only thing in the engine that touches them.
    """
    NONE = 0
    SELECTED = 1
    CORRECT = 2
    INCORRECT = 3

class Cell:
    """One square of the grid."""
    __slots__ = ('kind', 'value', 'user_value', 'annotation')

    def __init__(self, kind=CellKind.GENERATED, value=0, user_value=0,
                 annotation=Annotation.NONE):
        self.kind = kind
        self.value = value
        self.user_value = user_value
        self.annotation = annotation

    def effective_value(self):
        """The value for generated cells, the user value for user cells."""
        if self.kind is CellKind.GENERATED:
            return self.value
        if self.kind is CellKind.USER:
            return self.user_value
        raise CorruptCellError('cell has invalid kind {!r}'.format(self.kind))

    def reset(self):
        self.kind = CellKind.GENERATED
        self.value = 0
        self.user_value = 0
        self.annotation = Annotation.NONE

    def assign(self, other):
        """Copy the state of another cell into this one."""
        self.kind = other.kind
        self.value = other.value
        self.user_value = other.user_value
        self.annotation = other.annotation

    def copy(self):
        return Cell(self.kind, self.value, self.user_value, self.annotation)

    def _astuple(self):
        return self.kind, self.value, self.user_value, self.annotation

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __repr__(self):
        return 'Cell(kind={}, value={}, user_value={}, annotation={})'.format(
            self.kind.name if isinstance(self.kind, CellKind) else repr(self.kind),
            self.value, self.user_value, self.annotation.name
        )

class Grid:
    """A 9x9 grid of cells. Index it with a (row, col) key:

    >>> grid = Grid()
    >>> grid[0, 4].value = 7
    >>> grid.get_cell_value(0, 4)
    7

    A new grid is already initialized. Each Grid owns its cells; use copy to
    get an independent grid.
    """
    size = GRID_SIZE

    def __init__(self):
        self._cells = [[Cell() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]

    def __getitem__(self, key):
        row, col = key
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise IndexError('no cell at {}'.format(key))
        return self._cells[row][col]

    def __iter__(self):
        """Iterate over the keys in row-major order."""
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                yield row, col

    def items(self):
        for row, cells in enumerate(self._cells):
            for col, cell in enumerate(cells):
                yield (row, col), cell

    def init(self):
        """Reset every cell to an empty generated cell with no annotation."""
        for _, cell in self.items():
            cell.reset()

    def get_cell_value(self, row, col):
        return self[row, col].effective_value()

    def user_keys(self):
        """Keys of all user cells."""
        return [key for key, cell in self.items() if cell.kind is CellKind.USER]

    def copy(self):
        new = Grid.__new__(Grid)
        new._cells = [[cell.copy() for cell in cells] for cells in self._cells]
        return new

    def restore(self, snapshot):
        """Copy the cell states from snapshot back into this grid. The Cell
        objects themselves stay the same, so references to them held by a
        caller remain valid.
        """
        for key, cell in self.items():
            cell.assign(snapshot[key])

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self):
        values = ''.join(str(self.get_cell_value(*key)) for key in self)
        return 'Grid({!r})'.format(values)

def init(grid):
    """Zero every cell of the grid."""
    grid.init()

def get_cell_value(grid, row, col):
    """Read the effective value of a cell. Raises CorruptCellError if the
    cell's kind has been clobbered.
    """
    return grid.get_cell_value(row, col)

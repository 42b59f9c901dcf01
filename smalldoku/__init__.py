"""Generate, play, and check 9x9 sudoku puzzles."""

from .data import Annotation, Cell, CellKind, Grid, init, get_cell_value
from .constraints import (row_contains, column_contains, box_contains,
                          digit_fits, grid_filled, find_conflicts)
from .solver import solve
from .create import fill, hammer, check_unique, new_puzzle
from .game import Game
from .errors import (SudokuError, CorruptCellError, HammerExhausted,
                     InvalidDigitError, GridFormatError)

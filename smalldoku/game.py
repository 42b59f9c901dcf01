"""
A game session. This is everything a front end needs besides drawing:
starting new games, selecting a cell, typing digits into it, and checking
the answers. Front ends keep their own mapping from clicks and key presses
to these calls.
"""

import logging
from random import randint

from .config import DEFAULT_ERASE_COUNT, GRID_SIZE
from .create import fill, hammer
from .data import Annotation, CellKind, Grid
from .errors import InvalidDigitError

logger = logging.getLogger(__name__)

class Game:
    """Owns the grid for one player. Call begin to start a game:

    >>> game = Game()
    >>> game.begin()
    >>> game.select(*game.grid.user_keys()[0])
    True
    >>> game.enter(5)
    >>> game.check()
    False

    Annotations on the grid cells belong to this class. select clears them
    all before marking the new selection, and check overwrites them on every
    user cell.
    """
    def __init__(self, rng=randint, erase_count=DEFAULT_ERASE_COUNT, max_attempts=None):
        self.rng = rng
        self.erase_count = erase_count
        self.max_attempts = max_attempts
        self.grid = Grid()

    def begin(self):
        """Throw away the current grid and start a new game. Raises
        HammerExhausted if max_attempts is set and erase_count cells can't be
        erased while keeping the solution unique.
        """
        self.grid.init()
        fill(self.grid, self.rng)
        hammer(self.grid, self.erase_count, self.rng, max_attempts=self.max_attempts)
        logger.info('New game with %d cells to fill in', self.erase_count)

    def select(self, row, col):
        """Select a cell. Only user cells can be selected; selecting anything
        else, including a position off the board, just clears the selection.
        Returns True if a cell is selected afterwards.
        """
        for _, cell in self.grid.items():
            cell.annotation = Annotation.NONE
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            return False
        cell = self.grid[row, col]
        if cell.kind is not CellKind.USER:
            return False
        cell.annotation = Annotation.SELECTED
        return True

    @property
    def selected(self):
        """Key of the selected cell, or None."""
        for key, cell in self.grid.items():
            if cell.annotation is Annotation.SELECTED:
                return key
        return None

    def enter(self, digit):
        """Put a digit in the selected cell. 0 clears it. Does nothing if no
        cell is selected.
        """
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidDigitError('expected a digit from 0 to 9, got {!r}'.format(digit))
        for _, cell in self.grid.items():
            if cell.annotation is Annotation.SELECTED:
                cell.user_value = digit

    def check(self):
        """Mark every user cell as correct or incorrect. Returns True if all
        of them are correct.
        """
        wrong = 0
        for _, cell in self.grid.items():
            if cell.kind is not CellKind.USER:
                continue
            if cell.user_value == cell.value:
                cell.annotation = Annotation.CORRECT
            else:
                cell.annotation = Annotation.INCORRECT
                wrong += 1
        logger.info('Checked answers: %d wrong', wrong)
        return wrong == 0

    @property
    def solved(self):
        """True if every user cell holds the right digit."""
        return all(
            cell.user_value == cell.value
                for _, cell in self.grid.items() if cell.kind is CellKind.USER
        )

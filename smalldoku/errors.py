"""This is where exceptions defined for the smalldoku package are located."""

class SudokuError(Exception):
    """Base exception for any errors defined in this package."""

class CorruptCellError(SudokuError, AssertionError):
    """Raised when a cell's kind is neither GENERATED nor USER. This can only
    happen if something outside the engine wrote garbage into a cell, so it
    isn't meant to be caught; it's a programming error.
    """

class HammerExhausted(SudokuError):
    """Raised by hammer when it's given a max_attempts bound and a single
    erasure fails that many random draws in a row. Without a bound, hammer
    keeps drawing forever, which is what happens if the requested erase count
    can't be reached while keeping the solution unique.

    Normally erasing a cell takes a couple of draws. Once the board gets close
    to the minimum number of clues, almost every draw either hits a cell that
    was already erased or breaks uniqueness, and the loop can spin for a very
    long time. See hammer in create.py.
    """

class InvalidDigitError(SudokuError, ValueError):
    """Raised when a digit outside of 0-9 is entered into a game."""

class GridFormatError(SudokuError, ValueError):
    """Raised when a string can't be turned into a grid."""

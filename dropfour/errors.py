"""
errors.py - Exceptions raised by the dropfour engine

``InvalidMoveInput`` and its subclasses describe bad input from a human
player; the presentation layer shows the message and asks again.
``IllegalMove`` signals a caller bug: the engine was told to play a move
that should never have reached it.
"""

from dropfour.utils import COLS


class Connect4Error(Exception):
    """Base class for all engine errors."""


class InvalidMoveInput(Connect4Error):
    """A human-supplied move was rejected and should be asked for again."""


class InvalidColumnFormat(InvalidMoveInput):
    def __init__(self, text: str):
        super().__init__("Invalid input. Please enter a number.")
        self.text = text


class InvalidColumnRange(InvalidMoveInput):
    def __init__(self, column: int):
        super().__init__(
            f"Invalid column number. Please enter a number between 1 and {COLS}.")
        self.column = column


class ColumnFull(InvalidMoveInput):
    def __init__(self, column: int):
        super().__init__("Column is full! Choose another column.")
        self.column = column


class IllegalMove(Connect4Error):
    """A move was applied without being validated first."""


class GameOver(IllegalMove):
    """A move was applied to a session that has already finished."""

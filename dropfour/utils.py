"""
utils.py - Constants, enumerations and small helpers shared by the engine

Board geometry, scoring weights and the game status types live here so the
board, rules, AI and CLI modules agree on them.
"""

from enum import Enum, auto
from typing import Dict, Sequence, Tuple

import numpy as np

# Board geometry
ROWS = 6
COLS = 7
CONNECT_N = 4
MAX_MOVES = ROWS * COLS

# Cell contents
EMPTY = ' '
DEFAULT_MARKS = ('X', 'O')

# Heuristic weights
WIN_SCORE = 1_000_000
MAKE3_WEIGHT = 1000
BLOCK3_WEIGHT = 800
ADJACENCY_BONUS = 100

Coord = Tuple[int, int]  # (row, col), row 0 is the top of the board


class GameStatus(Enum):
    """Where a game session stands."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Difficulty(Enum):
    """Computer player strength."""
    EASY = "easy"
    HARD = "hard"


class Direction(Enum):
    """Line orientations checked for four-in-a-row."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
}


def is_valid_position(row: int, col: int) -> bool:
    """Check if (row, col) lies inside the board."""
    return 0 <= row < ROWS and 0 <= col < COLS


def validate_marks(marks: Sequence[str]) -> Tuple[str, str]:
    """
    Check a pair of player marks and return it as a tuple.

    Raises:
        ValueError: if there are not exactly two distinct single-character
            marks, or one of them is the empty cell marker
    """
    marks = tuple(marks)
    if len(marks) != 2:
        raise ValueError(f"Expected two marks, got {len(marks)}")
    for mark in marks:
        if not isinstance(mark, str) or len(mark) != 1 or mark == EMPTY:
            raise ValueError(f"Invalid mark: {mark!r}")
    if marks[0] == marks[1]:
        raise ValueError(f"Marks must differ, got {marks[0]!r} twice")
    return marks


def other_mark(mark: str, marks: Sequence[str] = DEFAULT_MARKS) -> str:
    """Return the mark of the opponent of ``mark`` within ``marks``."""
    first, second = marks
    if mark == first:
        return second
    if mark == second:
        return first
    raise ValueError(f"Mark {mark!r} is not one of {tuple(marks)}")


def render_board_ascii(cells: np.ndarray) -> str:
    """
    Render a cell matrix the way the console game draws it.

    Args:
        cells: ROWS x COLS array of marks

    Returns:
        Multi-line string with a 1-based column header
    """
    separator = "-" * (COLS * 2 + 1)
    lines = [" " + " ".join(str(c + 1) for c in range(COLS)), separator]

    for row in range(ROWS):
        line = "|"
        for col in range(COLS):
            cell = str(cells[row, col])
            line += cell + "|"
        lines.append(line)
        lines.append(separator)

    return "\n".join(lines)

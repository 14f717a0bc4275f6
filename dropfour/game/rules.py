"""
rules.py - Win detection for Connect Four

Each orientation is checked by AND-ing CONNECT_N shifted slices of a
boolean "cell holds this mark" matrix; every True left over is the start of
a complete run.
"""

from typing import List, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.game.board import Grid
from dropfour.utils import ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, Coord


def _run_starts(matches: np.ndarray, dr: int, dc: int) -> Tuple[np.ndarray, int]:
    """
    Find every cell that starts a run of CONNECT_N matches along (dr, dc).

    Returns:
        Boolean array of run starts and the board row its first row maps to
        (columns always map from 0)
    """
    span = CONNECT_N - 1
    row_lo = span if dr < 0 else 0
    row_hi = ROWS - (span if dr > 0 else 0)
    col_hi = COLS - (span if dc > 0 else 0)
    height = row_hi - row_lo

    starts = np.ones((height, col_hi), dtype=bool)
    for k in range(CONNECT_N):
        r = row_lo + dr * k
        c = dc * k
        starts &= matches[r:r + height, c:c + col_hi]

    return starts, row_lo


def has_four_in_a_row(grid: Grid, mark: str) -> bool:
    """
    Check whether ``mark`` has CONNECT_N in a row anywhere on the grid.

    Args:
        grid: The grid to scan
        mark: The mark to look for

    Returns:
        True if any horizontal, vertical or diagonal run is complete
    """
    matches = grid.cells == mark
    for dr, dc in DIRECTION_VECTORS.values():
        starts, _ = _run_starts(matches, dr, dc)
        if starts.any():
            return True
    return False


def winning_line(grid: Grid, mark: str) -> List[Coord]:
    """
    Get the cells of one complete run for ``mark``.

    Returns:
        CONNECT_N (row, col) positions, or an empty list if there is no win
    """
    matches = grid.cells == mark
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        starts, row_offset = _run_starts(matches, dr, dc)
        found = np.argwhere(starts)
        if len(found):
            row, col = int(found[0][0]) + row_offset, int(found[0][1])
            debug.debug(f"{mark!r} wins {direction.name.lower()} from ({row}, {col})", "rules")
            return [(row + dr * k, col + dc * k) for k in range(CONNECT_N)]
    return []


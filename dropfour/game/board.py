"""
board.py - Grid representation and drop mechanics for Connect Four

The Grid class holds the 6x7 matrix of cells as a numpy array of marks and
enforces gravity: a piece always lands on the lowest empty cell of its
column.
"""

from typing import List, Optional, Sequence

import numpy as np

from dropfour.debug import debug
from dropfour.errors import IllegalMove
from dropfour.utils import ROWS, COLS, EMPTY, render_board_ascii


class Grid:
    """
    A Connect Four board.

    Row 0 is the top of the board and row ROWS-1 the bottom, so a column is
    playable while its row 0 cell is still empty.
    """

    def __init__(self):
        """Initialize an empty grid."""
        self._cells = np.full((ROWS, COLS), EMPTY, dtype='<U1')

    @classmethod
    def from_rows(cls, rows: Sequence[str], empty: str = '.') -> 'Grid':
        """
        Build a grid from row strings, top row first.

        Args:
            rows: ROWS strings of COLS characters each
            empty: Character used for empty cells in ``rows``

        Returns:
            A new Grid with those contents

        Raises:
            ValueError: if the shape is wrong or a piece is floating
        """
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise ValueError(f"Position must be {ROWS} rows of {COLS} cells")

        grid = cls()
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                grid._cells[r, c] = EMPTY if ch in (empty, EMPTY) else ch

        # Gravity: no piece may sit above an empty cell
        occupied = grid._cells != EMPTY
        if np.any(occupied[:-1] & ~occupied[1:]):
            raise ValueError("Position has a piece above an empty cell")

        return grid

    @property
    def cells(self) -> np.ndarray:
        """Read-only snapshot of the cell matrix; later moves do not show up in it."""
        snapshot = self._cells.copy()
        snapshot.flags.writeable = False
        return snapshot

    def clone(self) -> 'Grid':
        """Create an independent copy of this grid."""
        new_grid = Grid()
        new_grid._cells = self._cells.copy()
        return new_grid

    def is_column_playable(self, col: int) -> bool:
        """Check if a piece can be dropped into ``col``."""
        return 0 <= col < COLS and bool(self._cells[0, col] == EMPTY)

    def playable_columns(self) -> List[int]:
        return [col for col in range(COLS) if self.is_column_playable(col)]

    def landing_row(self, col: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``col`` would land on.

        Returns:
            Row index, or None if the column is full or out of range
        """
        if not self.is_column_playable(col):
            return None
        for row in range(ROWS - 1, -1, -1):
            if self._cells[row, col] == EMPTY:
                return row
        return None

    def column_height(self, col: int) -> int:
        """Number of pieces stacked in ``col``."""
        return int(np.count_nonzero(self._cells[:, col] != EMPTY))

    def drop(self, col: int, mark: str) -> int:
        """
        Drop ``mark`` into ``col``.

        Args:
            col: Column index (0-indexed)
            mark: The player's mark

        Returns:
            The row the piece landed on

        Raises:
            IllegalMove: if the column is out of range or already full
            ValueError: if ``mark`` is not a single non-empty character
        """
        if not isinstance(mark, str) or len(mark) != 1 or mark == EMPTY:
            raise ValueError(f"Invalid mark: {mark!r}")

        row = self.landing_row(col)
        if row is None:
            raise IllegalMove(f"Column {col} is not playable")

        self._cells[row, col] = mark
        debug.trace(f"Placed {mark!r} at ({row}, {col})", "board")
        return row

    def get(self, row: int, col: int) -> str:
        return str(self._cells[row, col])

    def move_count(self) -> int:
        """Number of pieces on the board."""
        return int(np.count_nonzero(self._cells != EMPTY))

    def is_full(self) -> bool:
        return not np.any(self._cells[0] == EMPTY)

    def render(self) -> str:
        return render_board_ascii(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        return self.render()

"""
heuristic.py - One-ply column scoring for the hard computer player

The evaluation is deliberately shallow:
1. Take an immediate win, or block the opponent's immediate win
2. Refuse a move that hands the opponent a win on their very next move
3. Otherwise prefer cells that extend our own lines to three, then cells
   that cut the opponent's lines, then cells next to our own pieces

Every simulation runs on a clone, so the grid passed in is never modified.
"""

from typing import Dict, Sequence

from dropfour.debug import debug
from dropfour.errors import IllegalMove
from dropfour.game.board import Grid
from dropfour.game.rules import has_four_in_a_row
from dropfour.utils import (COLS, DEFAULT_MARKS, WIN_SCORE, MAKE3_WEIGHT, BLOCK3_WEIGHT,
                            ADJACENCY_BONUS, is_valid_position, other_mark, validate_marks)

# (row, col) steps; row 0 is the top of the board
DOWN = (1, 0)
UP = (-1, 0)
LEFT = (0, -1)
RIGHT = (0, 1)
UP_LEFT = (-1, -1)
UP_RIGHT = (-1, 1)
DOWN_LEFT = (1, -1)
DOWN_RIGHT = (1, 1)

# The cell above a landing cell is always empty, so "up" never extends a line
LINE_DIRECTIONS = (DOWN, LEFT, RIGHT, UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)
NEIGHBOUR_DIRECTIONS = LINE_DIRECTIONS + (UP,)

# Opposite neighbours whose pieces would be joined through the landing cell
MIDDLE_AXES = ((LEFT, RIGHT), (UP_LEFT, DOWN_RIGHT), (UP_RIGHT, DOWN_LEFT))


class HeuristicEvaluator:
    """
    Scores candidate columns for one of the two marks in a game.

    Args:
        marks: The two marks in play; the opponent of a scored mark is the
            other one
    """

    def __init__(self, marks: Sequence[str] = DEFAULT_MARKS):
        self.marks = validate_marks(marks)

    def score(self, grid: Grid, col: int, mark: str) -> int:
        """
        Score dropping ``mark`` into ``col``.

        Args:
            grid: Current position (not modified)
            col: A playable column
            mark: The mark about to move

        Returns:
            WIN_SCORE for a win or a block, -WIN_SCORE for a move that lets
            the opponent win next, else the local pattern score

        Raises:
            IllegalMove: if ``col`` is not playable
        """
        if not grid.is_column_playable(col):
            raise IllegalMove(f"Cannot score column {col}: not playable")

        opponent = other_mark(mark, self.marks)

        if self._wins_after_drop(grid, col, mark):
            debug.trace(f"Column {col}: {mark!r} wins", "ai")
            return WIN_SCORE

        if self._wins_after_drop(grid, col, opponent):
            debug.trace(f"Column {col}: blocks {opponent!r}", "ai")
            return WIN_SCORE

        if self._gives_away_win(grid, col, mark, opponent):
            debug.trace(f"Column {col}: lets {opponent!r} win next", "ai")
            return -WIN_SCORE

        return self._pattern_score(grid, col, mark, opponent)

    def score_all(self, grid: Grid, mark: str) -> Dict[int, int]:
        """Score every playable column, keyed by column index."""
        return {col: self.score(grid, col, mark) for col in grid.playable_columns()}

    def best_column(self, grid: Grid, mark: str) -> int:
        """
        Pick the highest scoring playable column. Ties go to the lowest index.

        Raises:
            IllegalMove: if the grid is full
        """
        best_col = None
        best_score = None
        for col, value in self.score_all(grid, mark).items():
            if best_score is None or value > best_score:
                best_col, best_score = col, value

        if best_col is None:
            raise IllegalMove("No playable column left")

        debug.debug(f"Best column for {mark!r}: {best_col} (score {best_score})", "ai")
        return best_col

    @staticmethod
    def _wins_after_drop(grid: Grid, col: int, mark: str) -> bool:
        trial = grid.clone()
        trial.drop(col, mark)
        return has_four_in_a_row(trial, mark)

    @staticmethod
    def _gives_away_win(grid: Grid, col: int, mark: str, opponent: str) -> bool:
        # Only the opponent's next move is simulated, nothing deeper
        after = grid.clone()
        after.drop(col, mark)
        return any(HeuristicEvaluator._wins_after_drop(after, reply, opponent)
                   for reply in range(COLS) if after.is_column_playable(reply))

    def _pattern_score(self, grid: Grid, col: int, mark: str, opponent: str) -> int:
        row = grid.landing_row(col)

        make3 = count_three_patterns(grid, row, col, mark)
        block3 = count_three_patterns(grid, row, col, opponent)
        adjacent = any(_holds(grid, row + dr, col + dc, mark)
                       for dr, dc in NEIGHBOUR_DIRECTIONS)

        score = MAKE3_WEIGHT * make3 + BLOCK3_WEIGHT * block3
        if adjacent:
            score += ADJACENCY_BONUS

        debug.trace(f"Column {col}: make3={make3} block3={block3} "
                    f"adjacent={adjacent} -> {score}", "ai")
        return score


def _holds(grid: Grid, row: int, col: int, mark: str) -> bool:
    # Off-board cells never match
    return is_valid_position(row, col) and grid.get(row, col) == mark


def count_three_patterns(grid: Grid, row: int, col: int, mark: str) -> int:
    """
    Count the three-in-a-row patterns ``mark`` would have through (row, col).

    An edge pattern is two ``mark`` pieces lined up on one side of the cell;
    a middle pattern is one ``mark`` piece on each side of it along the
    same line.
    """
    edges = sum(1 for dr, dc in LINE_DIRECTIONS
                if _holds(grid, row + dr, col + dc, mark)
                and _holds(grid, row + 2 * dr, col + 2 * dc, mark))

    middles = sum(1 for (dr1, dc1), (dr2, dc2) in MIDDLE_AXES
                  if _holds(grid, row + dr1, col + dc1, mark)
                  and _holds(grid, row + dr2, col + dc2, mark))

    return edges + middles

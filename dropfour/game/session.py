"""
session.py - Turn handling for a single game of Connect Four

A GameSession owns the grid and the two players, hands out moves from the
active player's move source, applies them and tracks whether the game has
been won or drawn. The user interface creates one session per game and
keeps hold of it; nothing here is global.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from dropfour.ai.players import Player, select_move
from dropfour.debug import debug
from dropfour.errors import ColumnFull, GameOver, IllegalMove, InvalidMoveInput
from dropfour.game.board import Grid
from dropfour.game.rules import has_four_in_a_row
from dropfour.utils import MAX_MOVES, GameStatus, validate_marks


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a session after a move."""
    status: GameStatus
    winner: Optional[str] = None
    move_count: int = 0

    def is_game_over(self) -> bool:
        return self.status.is_game_over()


class GameSession:
    """
    One game between two players. ``player_a`` moves first.

    Raises:
        ValueError: if the two players share a mark
    """

    def __init__(self, player_a: Player, player_b: Player):
        validate_marks((player_a.mark, player_b.mark))
        self.players: Tuple[Player, Player] = (player_a, player_b)
        self.reset()

    def reset(self) -> None:
        """Start a new game with the same players."""
        debug.debug("Resetting session", "session")
        self._grid = Grid()
        self._active = 0
        self._state = SessionState(GameStatus.IN_PROGRESS)

    @property
    def active_player(self) -> Player:
        return self.players[self._active]

    @property
    def move_count(self) -> int:
        return self._state.move_count

    def active_mark(self) -> str:
        return self.active_player.mark

    def opponent_mark(self) -> str:
        return self.players[1 - self._active].mark

    def current_grid(self) -> np.ndarray:
        """Read-only snapshot of the cells, for rendering."""
        return self._grid.cells

    def render(self) -> str:
        return self._grid.render()

    def state(self) -> SessionState:
        return self._state

    def request_move(self) -> int:
        """
        Ask the active player for a column.

        Returns:
            A playable 0-based column

        Raises:
            InvalidColumnFormat, InvalidColumnRange: bad text from a human
            ColumnFull: the chosen column has no room left
            GameOver: the game has already finished
        """
        if self._state.is_game_over():
            raise GameOver("The game is over; start a new session to play again")

        column = select_move(self.active_player.source, self._grid.clone(),
                             self.active_mark(), self.opponent_mark())
        if not self._grid.is_column_playable(column):
            raise ColumnFull(column)
        return column

    def apply_move(self, column: int) -> SessionState:
        """
        Play ``column`` for the active player.

        Returns:
            The state after the move

        Raises:
            GameOver: the game has already finished
            IllegalMove: the column is not playable
        """
        if self._state.is_game_over():
            raise GameOver("The game is over; start a new session to play again")
        if not self._grid.is_column_playable(column):
            raise IllegalMove(f"Column {column} is not playable")

        mark = self.active_mark()
        self._grid.drop(column, mark)
        moves = self._state.move_count + 1

        if has_four_in_a_row(self._grid, mark):
            self._state = SessionState(GameStatus.WON, mark, moves)
            debug.info(f"Player {mark} wins after {moves} moves", "session")
        elif moves == MAX_MOVES:
            self._state = SessionState(GameStatus.DRAW, None, moves)
            debug.info("Game ends in a draw", "session")
        else:
            self._state = SessionState(GameStatus.IN_PROGRESS, None, moves)
            self._active = 1 - self._active
            debug.debug(f"Move {moves}: {mark} in column {column}, "
                        f"{self.active_mark()} to play", "session")

        return self._state

    def play_turn(self, on_rejected: Optional[Callable[[InvalidMoveInput], None]] = None) -> SessionState:
        """
        Request moves from the active player until one is accepted, then apply it.

        Args:
            on_rejected: Called with each rejected input so it can be shown
                to the player before asking again

        Returns:
            The state after the move
        """
        while True:
            try:
                column = self.request_move()
            except InvalidMoveInput as e:
                debug.debug(f"Rejected move from {self.active_mark()}: {e}", "session")
                if on_rejected is not None:
                    on_rejected(e)
                continue
            return self.apply_move(column)


def new_session(player_a: Player, player_b: Player) -> GameSession:
    return GameSession(player_a, player_b)

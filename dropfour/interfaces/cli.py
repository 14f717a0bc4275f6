"""
cli.py - Command-line interface for the Connect Four engine

Provides a console game against another person or the computer, a
position analyzer that prints the heuristic score of every column, and a
self-play runner that pits the hard computer player against the easy one.
"""

import argparse
import sys
import time
from typing import Callable, List, Optional

from dropfour.ai.heuristic import HeuristicEvaluator
from dropfour.ai.players import Player, computer, human
from dropfour.debug import debug, DebugLevel
from dropfour.errors import InvalidMoveInput
from dropfour.game.board import Grid
from dropfour.game.rules import has_four_in_a_row, winning_line
from dropfour.game.session import GameSession, new_session
from dropfour.utils import DEFAULT_MARKS, Difficulty, GameStatus, validate_marks


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            input_fn: Reads a line of text after showing a prompt
            output_fn: Writes a line of text
        """
        self.input = input_fn
        self.output = output_fn
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game in the console')
        play_parser.add_argument('--opponent', choices=['human', 'easy', 'hard'], default='hard',
                                 help='Who plays the second mark')
        play_parser.add_argument('--first', choices=['human', 'computer'], default='human',
                                 help='Who moves first against a computer opponent')
        play_parser.add_argument('--marks', default=''.join(DEFAULT_MARKS),
                                 help='Two characters: first player mark, second player mark')
        play_parser.add_argument('--seed', type=int, help='Random seed for the easy computer')

        analyze_parser = subparsers.add_parser('analyze', help='Score every column of a position')
        analyze_parser.add_argument('--position', required=True,
                                    help='Comma-separated rows, top row first, "." for empty')
        analyze_parser.add_argument('--mark', default=DEFAULT_MARKS[0], help='Mark to move')
        analyze_parser.add_argument('--marks', default=''.join(DEFAULT_MARKS),
                                    help='The two marks used in the position')

        selfplay_parser = subparsers.add_parser('selfplay', help='Hard computer vs easy computer')
        selfplay_parser.add_argument('--games', type=int, default=20, help='Number of games')
        selfplay_parser.add_argument('--seed', type=int, help='Random seed for the easy computer')

        self.args = parser.parse_args(argv)
        self.configure_debug()
        return self.args

    def configure_debug(self) -> None:
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments. Returns an exit code."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'analyze':
                self.analyze_position()
            elif self.args.command == 'selfplay':
                self.self_play()
            else:
                self.output("Please specify a command. Use --help for options.")
                return 1
        except ValueError as e:
            self.output(f"Error: {e}")
            return 1
        except (EOFError, KeyboardInterrupt):
            self.output("\nQuitting game.")
            return 1
        return 0

    def _players(self) -> List[Player]:
        marks = validate_marks(self.args.marks)
        if self.args.opponent == 'human':
            return [human(marks[0], self.input), human(marks[1], self.input)]

        difficulty = Difficulty(self.args.opponent)
        if self.args.first == 'human':
            return [human(marks[0], self.input), computer(marks[1], difficulty, self.args.seed)]
        return [computer(marks[0], difficulty, self.args.seed), human(marks[1], self.input)]

    def play_game(self) -> None:
        """Play a Connect Four game in the console."""
        session = new_session(*self._players())
        a, b = session.players
        self.output("Let's Play Connect 4!")
        self.output(f"Player 1: {a.mark} | Player 2: {b.mark}\n")

        state = session.state()
        while not state.is_game_over():
            self.output(session.render())
            if not session.active_player.is_human:
                self.output(f"Player {session.active_mark()} is thinking...")
            state = session.play_turn(on_rejected=self._show_rejection)

        self.output(session.render())
        self.output(self.describe_result(session))

    def _show_rejection(self, error: InvalidMoveInput) -> None:
        self.output(str(error))

    @staticmethod
    def describe_result(session: GameSession) -> str:
        state = session.state()
        if state.status == GameStatus.WON:
            return f"Player {state.winner} wins!"
        if state.status == GameStatus.DRAW:
            return "It's a draw!"
        return "Game in progress."

    def analyze_position(self) -> None:
        """Print a position, any wins on it and the heuristic score of each column."""
        marks = validate_marks(self.args.marks)
        grid = Grid.from_rows([row.strip() for row in self.args.position.split(',')])
        self.output(grid.render())

        for mark in marks:
            if has_four_in_a_row(grid, mark):
                line = [(r, c + 1) for r, c in winning_line(grid, mark)]
                self.output(f"Win for {mark} at {line}")

        evaluator = HeuristicEvaluator(marks)
        scores = evaluator.score_all(grid, self.args.mark)
        if not scores:
            self.output("Board is full")
            return

        self.output(f"Column scores for {self.args.mark}:")
        for col, value in scores.items():
            self.output(f"  {col + 1}: {value}")
        best = evaluator.best_column(grid, self.args.mark)
        self.output(f"Best column: {best + 1}")

    def self_play(self) -> None:
        """Play hard vs easy computer games, alternating who starts."""
        a, b = DEFAULT_MARKS
        tally = {'hard': 0, 'easy': 0, 'draw': 0}
        start = time.perf_counter()

        for game in range(self.args.games):
            seed = None if self.args.seed is None else self.args.seed + game
            hard, easy = computer(a, Difficulty.HARD), computer(b, Difficulty.EASY, seed)
            session = new_session(hard, easy) if game % 2 == 0 else new_session(easy, hard)

            state = session.state()
            while not state.is_game_over():
                state = session.play_turn()

            if state.status == GameStatus.DRAW:
                tally['draw'] += 1
            else:
                tally['hard' if state.winner == a else 'easy'] += 1
            debug.info(f"Game {game + 1}: {self.describe_result(session)} "
                       f"in {state.move_count} moves", "cli")

        elapsed = time.perf_counter() - start
        self.output(f"Hard wins: {tally['hard']}, easy wins: {tally['easy']}, "
                    f"draws: {tally['draw']}")
        self.output(f"{self.args.games} games in {elapsed:.2f} seconds")


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())

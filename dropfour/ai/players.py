"""
players.py - Players and the move sources that choose their moves

A move source is plain data: either ``Human`` (moves come from a prompt
callback supplied by the user interface) or ``Computer`` (moves come from
the engine at a given difficulty). ``select_move`` dispatches on the type.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from dropfour.ai.heuristic import HeuristicEvaluator
from dropfour.debug import debug
from dropfour.errors import IllegalMove, InvalidColumnFormat, InvalidColumnRange
from dropfour.game.board import Grid
from dropfour.utils import COLS, Difficulty

PromptFn = Callable[[str], str]

PROMPT_TEMPLATE = "Player {mark}'s turn. Enter column number (1-{cols}): "


@dataclass(frozen=True)
class Human:
    """Moves are typed by a person; ``prompt`` shows a message and returns the raw reply."""
    prompt: PromptFn


@dataclass(frozen=True)
class Computer:
    """Moves are chosen by the engine."""
    difficulty: Difficulty = Difficulty.HARD
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)


MoveSource = Union[Human, Computer]


@dataclass(frozen=True)
class Player:
    mark: str
    source: MoveSource

    @property
    def is_human(self) -> bool:
        return isinstance(self.source, Human)


def human(mark: str, prompt: PromptFn) -> Player:
    return Player(mark, Human(prompt))


def computer(mark: str, difficulty: Difficulty = Difficulty.HARD,
             seed: Optional[int] = None) -> Player:
    return Player(mark, Computer(Difficulty(difficulty), random.Random(seed)))


def parse_column(text: str) -> int:
    """
    Turn a typed, 1-based column number into a 0-based column index.

    Raises:
        InvalidColumnFormat: if ``text`` is not an integer
        InvalidColumnRange: if the number is not between 1 and COLS
    """
    try:
        number = int(text.strip())
    except (AttributeError, ValueError):
        raise InvalidColumnFormat(text) from None

    if not 1 <= number <= COLS:
        raise InvalidColumnRange(number)

    return number - 1


def select_move(source: MoveSource, grid: Grid, mark: str, opponent: str) -> int:
    """
    Ask a move source for a column.

    Args:
        source: Where the move comes from
        grid: Current position (not modified)
        mark: Mark of the player to move
        opponent: Mark of the other player

    Returns:
        A 0-based column. Columns from a ``Human`` are in range but may be
        full; columns from a ``Computer`` are always playable.
    """
    if isinstance(source, Human):
        raw = source.prompt(PROMPT_TEMPLATE.format(mark=mark, cols=COLS))
        column = parse_column(raw)
        debug.debug(f"Human {mark!r} entered column {column}", "ai")
        return column

    if isinstance(source, Computer):
        return _computer_move(source, grid, mark, opponent)

    raise TypeError(f"Unknown move source: {source!r}")


def _computer_move(source: Computer, grid: Grid, mark: str, opponent: str) -> int:
    playable = grid.playable_columns()
    if not playable:
        raise IllegalMove("Computer asked to move on a full grid")

    if source.difficulty == Difficulty.EASY:
        column = source.rng.choice(playable)
    else:
        debug.start_timer("heuristic")
        column = HeuristicEvaluator((mark, opponent)).best_column(grid, mark)
        debug.end_timer("heuristic", "ai")

    debug.info(f"Computer {mark!r} ({source.difficulty.value}) plays column {column}", "ai")
    return column

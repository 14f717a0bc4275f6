from collections import Counter

import pytest

from dropfour.ai.players import Computer, Human, computer, human, parse_column, select_move
from dropfour.errors import IllegalMove, InvalidColumnFormat, InvalidColumnRange
from dropfour.game.board import Grid
from dropfour.utils import COLS, ROWS, Difficulty


def fill_column(grid, col):
    for i in range(ROWS):
        grid.drop(col, 'XO'[i % 2])


@pytest.mark.parametrize("text, column", [("1", 0), ("4", 3), (" 7 \n", 6)])
def test_parse_column(text, column):
    assert parse_column(text) == column


@pytest.mark.parametrize("text", ["", "abc", "3.5", "four"])
def test_parse_column_rejects_non_numbers(text):
    with pytest.raises(InvalidColumnFormat):
        parse_column(text)


@pytest.mark.parametrize("text", ["0", "8", "-2"])
def test_parse_column_rejects_out_of_range(text):
    with pytest.raises(InvalidColumnRange):
        parse_column(text)


def test_human_move_comes_from_prompt():
    prompts = []

    def prompt(text):
        prompts.append(text)
        return "5"

    assert select_move(Human(prompt), Grid(), 'X', 'O') == 4
    assert prompts == ["Player X's turn. Enter column number (1-7): "]


def test_human_move_is_not_checked_against_grid():
    grid = Grid()
    fill_column(grid, 0)
    assert select_move(Human(lambda _: "1"), grid, 'X', 'O') == 0


def test_easy_computer_picks_a_playable_column():
    grid = Grid()
    for col in range(COLS):
        if col != 5:
            fill_column(grid, col)

    player = computer('O', Difficulty.EASY, seed=3)
    for _ in range(10):
        assert select_move(player.source, grid, 'O', 'X') == 5


def test_easy_computer_is_reproducible_with_seed():
    first = computer('X', Difficulty.EASY, seed=42)
    second = computer('X', Difficulty.EASY, seed=42)
    grid = Grid()
    moves_a = [select_move(first.source, grid, 'X', 'O') for _ in range(20)]
    moves_b = [select_move(second.source, grid, 'X', 'O') for _ in range(20)]
    assert moves_a == moves_b
    assert all(0 <= col < COLS for col in moves_a)


def test_easy_computer_uses_every_playable_column():
    grid = Grid()
    fill_column(grid, 2)
    player = computer('X', Difficulty.EASY, seed=9)

    draws = 1200
    counts = Counter(select_move(player.source, grid, 'X', 'O') for _ in range(draws))

    assert set(counts) == {0, 1, 3, 4, 5, 6}
    expected = draws / 6
    for col, seen in counts.items():
        assert 0.7 * expected < seen < 1.3 * expected, (col, seen)


def test_hard_computer_takes_the_win():
    grid = Grid.from_rows([".......", ".......", ".......", ".......", "....O..", "...XXXO"])
    move = select_move(Computer(Difficulty.HARD), grid, 'X', 'O')
    assert move == 2


def test_hard_computer_on_empty_grid_picks_lowest_column():
    assert select_move(Computer(Difficulty.HARD), Grid(), 'O', 'X') == 0


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_computer_on_full_grid_raises(difficulty):
    grid = Grid()
    for col in range(COLS):
        fill_column(grid, col)
    with pytest.raises(IllegalMove):
        select_move(Computer(difficulty), grid, 'X', 'O')


def test_player_helpers():
    player = human('X', lambda _: "1")
    assert player.mark == 'X'
    assert player.is_human
    bot = computer('O', "easy")
    assert not bot.is_human
    assert bot.source.difficulty == Difficulty.EASY


def test_unknown_source_raises():
    with pytest.raises(TypeError):
        select_move(object(), Grid(), 'X', 'O')

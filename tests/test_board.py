import random

import numpy as np
import pytest

from dropfour.errors import IllegalMove
from dropfour.game.board import Grid
from dropfour.utils import ROWS, COLS, EMPTY


def test_new_grid_is_empty_and_playable():
    grid = Grid()
    assert grid.move_count() == 0
    assert grid.playable_columns() == list(range(COLS))
    assert np.all(grid.cells == EMPTY)


def test_drop_lands_on_lowest_empty_cell():
    grid = Grid()
    assert grid.drop(3, 'X') == ROWS - 1
    assert grid.drop(3, 'O') == ROWS - 2
    assert grid.get(ROWS - 1, 3) == 'X'
    assert grid.get(ROWS - 2, 3) == 'O'


def test_drop_only_changes_its_column():
    grid = Grid()
    grid.drop(0, 'X')
    before = grid.cells.copy()
    heights = [grid.column_height(c) for c in range(COLS)]

    grid.drop(4, 'O')

    after = grid.cells
    assert grid.column_height(4) == heights[4] + 1
    for col in range(COLS):
        if col != 4:
            assert grid.column_height(col) == heights[col]
            assert np.array_equal(before[:, col], after[:, col])


def test_full_column_is_not_playable():
    grid = Grid()
    for i in range(ROWS):
        grid.drop(2, 'X' if i % 2 == 0 else 'O')

    assert not grid.is_column_playable(2)
    assert grid.landing_row(2) is None
    with pytest.raises(IllegalMove):
        grid.drop(2, 'X')
    assert grid.move_count() == ROWS


@pytest.mark.parametrize("col", [-1, COLS, 100])
def test_out_of_range_column(col):
    grid = Grid()
    assert not grid.is_column_playable(col)
    with pytest.raises(IllegalMove):
        grid.drop(col, 'X')


def test_playable_iff_height_below_rows():
    rng = random.Random(7)
    grid = Grid()
    marks = 'XO'
    for turn in range(ROWS * COLS):
        for col in range(COLS):
            assert grid.is_column_playable(col) == (grid.column_height(col) < ROWS)
        grid.drop(rng.choice(grid.playable_columns()), marks[turn % 2])
        assert grid.move_count() == turn + 1

    assert grid.is_full()
    assert grid.playable_columns() == []


def test_clone_is_independent():
    grid = Grid()
    grid.drop(1, 'X')
    copy = grid.clone()
    copy.drop(1, 'O')
    copy.drop(5, 'X')

    assert grid.move_count() == 1
    assert grid.get(ROWS - 2, 1) == EMPTY
    assert grid != copy
    assert grid.clone() == grid


def test_cells_view_is_read_only():
    grid = Grid()
    with pytest.raises(ValueError):
        grid.cells[ROWS - 1, 0] = 'X'


def test_from_rows():
    grid = Grid.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "...O...",
        "..XXO..",
    ])
    assert grid.move_count() == 4
    assert grid.get(4, 3) == 'O'
    assert grid.column_height(3) == 2
    assert grid.landing_row(3) == 3


def test_from_rows_rejects_floating_piece():
    with pytest.raises(ValueError):
        Grid.from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            "...X...",
            ".......",
        ])


def test_from_rows_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Grid.from_rows(["......."] * (ROWS - 1))


def test_render_uses_one_based_header():
    grid = Grid()
    grid.drop(0, 'X')
    lines = grid.render().splitlines()
    assert lines[0] == " 1 2 3 4 5 6 7"
    assert lines[-2] == "|X| | | | | | |"


@pytest.mark.parametrize("mark", ['XO', EMPTY, '', None, 7])
def test_drop_rejects_bad_marks(mark):
    grid = Grid()
    with pytest.raises(ValueError):
        grid.drop(0, mark)
    assert grid.move_count() == 0
    assert grid.column_height(0) == 0


def test_cells_snapshot_does_not_share_memory():
    grid = Grid()
    snapshot = grid.cells
    snapshot.flags.writeable = True
    snapshot[ROWS - 1, 0] = 'O'

    assert grid.get(ROWS - 1, 0) == EMPTY
    assert grid.move_count() == 0

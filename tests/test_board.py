import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.utils import ROWS, COLS, COLUMN_FULL, Player, BoardBoundsError


def test_new_board_is_empty():
    board = Board()
    assert board.grid.shape == (ROWS, COLS)
    assert np.all(board.grid == Player.EMPTY.value)
    assert np.all(board.next_avail_row == ROWS - 1)
    assert board.disk_count() == 0
    assert not board.is_full()


def test_place_stacks_from_the_bottom():
    board = Board()
    assert board.place(2, Player.ONE) == ROWS - 1
    assert board.place(2, Player.TWO) == ROWS - 2

    assert board.cell(ROWS - 1, 2) == Player.ONE
    assert board.cell(ROWS - 2, 2) == Player.TWO
    assert board.cell(ROWS - 3, 2) == Player.EMPTY
    assert board.available_row(2) == ROWS - 3


def test_fill_pointer_tracks_disk_count():
    board = Board()
    for n in range(ROWS):
        assert board.available_row(4) == ROWS - 1 - n
        board.place(4, Player.ONE if n % 2 == 0 else Player.TWO)

    assert board.available_row(4) == COLUMN_FULL
    assert board.is_column_full(4)


def test_place_into_full_column_changes_nothing():
    board = Board()
    for _ in range(ROWS):
        board.place(0, Player.TWO)
    before = board.get_state()

    assert board.place(0, Player.ONE) == COLUMN_FULL
    assert np.array_equal(board.grid, before)
    assert board.available_row(0) == COLUMN_FULL


def test_reset_reuses_arrays():
    board = Board()
    grid, pointers = board.grid, board.next_avail_row
    board.place(3, Player.ONE)
    board.place(3, Player.TWO)

    board.reset()

    assert board.grid is grid
    assert board.next_avail_row is pointers
    assert np.all(board.grid == Player.EMPTY.value)
    assert np.all(board.next_avail_row == ROWS - 1)


def test_is_full_after_every_column_fills():
    board = Board()
    for col in range(COLS):
        for _ in range(ROWS):
            board.place(col, Player.ONE)
    assert board.is_full()
    assert board.disk_count() == ROWS * COLS


def test_get_state_is_a_copy():
    board = Board()
    state = board.get_state()
    state[0, 0] = Player.TWO.value
    assert board.cell(0, 0) == Player.EMPTY


@pytest.mark.parametrize("row,col", [(-1, 0), (ROWS, 0), (0, -1), (0, COLS)])
def test_cell_outside_board_raises(row, col):
    with pytest.raises(BoardBoundsError):
        Board().cell(row, col)


@pytest.mark.parametrize("col", [-1, COLS, 3.0, "3", True])
def test_bad_column_raises(col):
    with pytest.raises(BoardBoundsError):
        Board().available_row(col)


def test_render_shows_disks_and_column_numbers():
    board = Board()
    board.place(0, Player.ONE)
    board.place(6, Player.TWO)

    lines = board.render().splitlines()
    assert len(lines) == ROWS + 3
    assert lines[ROWS] == "| R . . . . . Y |"
    assert lines[-1].split() == [str(c) for c in range(COLS)]
    assert str(board) == board.render()


def test_place_rejects_empty_disk():
    board = Board()
    with pytest.raises(ValueError):
        board.place(3, Player.EMPTY)

    assert board.available_row(3) == ROWS - 1
    assert board.disk_count() == 0

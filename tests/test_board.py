"""Tests for the Board grid model."""

import pytest

from minimax4.core.board import Board
from minimax4.errors import ColumnFull
from minimax4.types import Cell

from boards import DRAWN


def test_new_board_is_empty():
    board = Board()
    assert len(board.grid) == 6
    assert all(len(row) == 7 for row in board.grid)
    assert all(cell == Cell.EMPTY for row in board.grid for cell in row)
    assert board.valid_moves() == list(range(7))


def test_drop_settles_in_lowest_empty_row():
    board = Board()
    assert board.drop(3, Cell.HUMAN) == 5
    assert board.drop(3, Cell.COMPUTER) == 4
    assert board.grid[5][3] == Cell.HUMAN
    assert board.grid[4][3] == Cell.COMPUTER
    assert board.top_row(3) == 4
    assert board.top_row(0) is None


def test_drop_into_full_column_raises_column_full():
    board = Board()
    for i in range(6):
        board.drop(0, Cell.HUMAN if i % 2 == 0 else Cell.COMPUTER)
    before = str(board)

    assert board.is_column_full(0)
    with pytest.raises(ColumnFull):
        board.drop(0, Cell.HUMAN)
    assert str(board) == before
    assert 0 not in board.valid_moves()


def test_column_full_is_a_value_error():
    assert issubclass(ColumnFull, ValueError)


def test_drop_rejects_bad_column_and_empty_piece():
    board = Board()
    with pytest.raises(ValueError):
        board.drop(7, Cell.HUMAN)
    with pytest.raises(ValueError):
        board.drop(-1, Cell.HUMAN)
    with pytest.raises(ValueError):
        board.drop(0, Cell.EMPTY)


def test_clone_is_structurally_independent():
    board = Board()
    board.drop(2, Cell.HUMAN)
    copy = board.clone()

    copy.drop(2, Cell.COMPUTER)
    copy.grid[5][6] = Cell.COMPUTER

    assert board.grid[4][2] == Cell.EMPTY
    assert board.grid[5][6] == Cell.EMPTY
    assert all(a is not b for a, b in zip(board.grid, copy.grid))


def test_is_full():
    assert not Board().is_full()
    assert Board.from_rows(DRAWN).is_full()


def test_from_rows_round_trips_through_str():
    rows = [
        ".......",
        ".......",
        ".......",
        "...C...",
        "..HH...",
        ".CHCH..",
    ]
    board = Board.from_rows(rows)
    assert str(board) == "\n".join(rows)
    assert board.grid[3][3] == Cell.COMPUTER


@pytest.mark.parametrize(
    "rows",
    [
        ["......."] * 5,
        ["......."] * 5 + ["......"],
        ["......."] * 5 + ["...X..."],
        ["......."] * 4 + ["H......", "......."],
    ],
)
def test_from_rows_rejects_malformed_boards(rows):
    with pytest.raises(ValueError):
        Board.from_rows(rows)

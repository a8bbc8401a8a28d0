"""Tests for the outcome detector."""

import pytest

from minimax4.core.board import Board
from minimax4.core.rules import check_outcome, check_outcome_with_line
from minimax4.types import Outcome

from boards import DRAWN


def test_vertical_computer_win():
    board = Board.from_rows([
        ".......",
        ".......",
        "...C...",
        "...C...",
        "...C...",
        "...C...",
    ])
    assert check_outcome(board, 3) == Outcome.COMPUTER_WINS


def test_horizontal_human_win_with_line():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "CCC....",
        "HHHH...",
    ])
    outcome, line = check_outcome_with_line(board, 3)
    assert outcome == Outcome.HUMAN_WINS
    assert line == [(5, 0), (5, 1), (5, 2), (5, 3)]


def test_horizontal_win_completed_in_the_middle():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".CCCC..",
    ])
    assert check_outcome(board, 2) == Outcome.COMPUTER_WINS


def test_ascending_diagonal_win():
    board = Board.from_rows([
        ".......",
        ".......",
        "...H...",
        "..HC...",
        ".HCC...",
        "HCCH...",
    ])
    outcome, line = check_outcome_with_line(board, 3)
    assert outcome == Outcome.HUMAN_WINS
    assert sorted(line) == [(2, 3), (3, 2), (4, 1), (5, 0)]


@pytest.mark.parametrize("last_col", [3, 6])
def test_descending_diagonal_win(last_col):
    board = Board.from_rows([
        ".......",
        ".......",
        "...C...",
        "...HC..",
        "...HHC.",
        "...HHHC",
    ])
    assert check_outcome(board, last_col) == Outcome.COMPUTER_WINS


def test_three_in_a_row_is_not_a_win():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        "...C...",
        "...C...",
        "H..C.HH",
    ])
    assert check_outcome(board, 3) == Outcome.INCOMPLETE


def test_run_broken_by_opponent_piece():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "HHCHH..",
    ])
    assert check_outcome(board, 4) == Outcome.INCOMPLETE


def test_full_board_without_line_is_draw():
    board = Board.from_rows(DRAWN)
    for col in range(7):
        assert check_outcome(board, col) == Outcome.DRAW


def test_only_lines_through_last_piece_count():
    # Column 0 holds a stale vertical four; the last drop was elsewhere.
    board = Board.from_rows([
        ".......",
        ".......",
        "H......",
        "H......",
        "H......",
        "H.....C",
    ])
    assert check_outcome(board, 6) == Outcome.INCOMPLETE
    assert check_outcome(board, 0) == Outcome.HUMAN_WINS


def test_empty_column_raises():
    with pytest.raises(ValueError):
        check_outcome(Board(), 0)

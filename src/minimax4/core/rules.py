from __future__ import annotations
from typing import List, Tuple

from minimax4.config import ROWS, COLS, CONNECT_N
from minimax4.core.board import Board
from minimax4.types import Cell, Coord, Outcome

# (d_row, d_col) for horizontal, vertical, diagonal down-right, diagonal up-right
AXES: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


def _run(board: Board, r: int, c: int, dr: int, dc: int, piece: Cell) -> List[Coord]:
    # Cells matching `piece` strictly after (r, c) in direction (dr, dc).
    out: List[Coord] = []
    r, c = r + dr, c + dc
    while 0 <= r < ROWS and 0 <= c < COLS and board.grid[r][c] == piece:
        out.append((r, c))
        r, c = r + dr, c + dc
    return out


def _win_for(piece: Cell) -> Outcome:
    return Outcome.HUMAN_WINS if piece == Cell.HUMAN else Outcome.COMPUTER_WINS


def check_outcome_with_line(board: Board, last_col: int) -> Tuple[Outcome, List[Coord]]:
    """
    Judge the position right after a drop into `last_col`.

    Only lines through the last-placed piece are scanned, so this must be
    called once per move. Returns the outcome and, for a win, the cells of
    the winning run (ordered along its axis).
    """
    row = board.top_row(last_col)
    if row is None:
        raise ValueError(f"Column {last_col + 1} is empty.")
    piece = board.grid[row][last_col]

    for dr, dc in AXES:
        back = _run(board, row, last_col, -dr, -dc, piece)
        fwd = _run(board, row, last_col, dr, dc, piece)
        if 1 + len(back) + len(fwd) >= CONNECT_N:
            return _win_for(piece), back[::-1] + [(row, last_col)] + fwd

    if board.is_full():
        return Outcome.DRAW, []
    return Outcome.INCOMPLETE, []


def check_outcome(board: Board, last_col: int) -> Outcome:
    return check_outcome_with_line(board, last_col)[0]

from __future__ import annotations
from typing import Iterable, Optional, Set

from minimax4.config import CLEAR_SCREEN
from minimax4.core.board import Board
from minimax4.types import Cell, Coord
from minimax4.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE

_PIECES = {
    Cell.EMPTY: ("·", FG_GRAY),
    Cell.HUMAN: ("H", FG_RED),
    Cell.COMPUTER: ("C", FG_YELLOW),
}


def _piece(cell: Cell, highlighted: bool = False) -> str:
    ch, color = _PIECES[cell]
    if highlighted:
        return c(ch, REVERSE, color)
    return c(ch, color)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4  (human H vs computer C)", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str(i + 1) for i in range(board.cols))
    print(c(nums, DIM))

    for r in range(board.rows):
        parts = [_piece(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        print(" | " + " ".join(parts) + " |")

    print(c("   " + "—" * (2 * board.cols - 1), DIM))
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))

from __future__ import annotations

from dataclasses import dataclass

from minimax4.config import COLS
from minimax4.core.board import Board
from minimax4.game.actions import replay
from minimax4.types import Outcome


@dataclass(frozen=True)
class PositionSpec:
    moves: str = ""  # 1-based columns, e.g. "4453"
    human_first: bool = True


def parse_moves(moves: str) -> list[int]:
    s = moves.replace(" ", "").replace(",", "")
    cols: list[int] = []
    for ch in s:
        if not ch.isdigit() or not 1 <= int(ch) <= COLS:
            raise ValueError(f"Invalid column {ch!r} in move list (use 1-{COLS}).")
        cols.append(int(ch) - 1)
    return cols


def load_position(spec: PositionSpec) -> Board:
    """Replay the move list and check the computer is the side to move."""
    cols = parse_moves(spec.moves)
    board, outcome = replay(cols, human_first=spec.human_first)

    if outcome != Outcome.INCOMPLETE:
        raise ValueError(f"Game is already over: {outcome.name}")

    computer_to_move = (len(cols) % 2 == 1) == spec.human_first
    if not computer_to_move:
        raise ValueError("It is the human's turn in this position; add a move or flip --computer-first.")

    return board

from __future__ import annotations
from dataclasses import dataclass

from minimax4.core.board import Board
from minimax4.types import Cell


@dataclass(slots=True)
class GameState:
    board: Board
    current: Cell
    last_status: str = ""

# src/minimax4/types.py

from __future__ import annotations
from enum import IntEnum
from typing import NewType, Tuple


class Cell(IntEnum):
    EMPTY = 0
    HUMAN = 1
    COMPUTER = 2


class Outcome(IntEnum):
    INCOMPLETE = 0
    HUMAN_WINS = 1
    COMPUTER_WINS = 2
    DRAW = 3


Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col)

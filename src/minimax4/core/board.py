from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from minimax4.config import ROWS, COLS
from minimax4.errors import ColumnFull
from minimax4.types import Cell, Move

_SYMBOLS = {".": Cell.EMPTY, "H": Cell.HUMAN, "C": Cell.COMPUTER}
_CHARS = {v: k for k, v in _SYMBOLS.items()}


@dataclass(slots=True)
class Board:
    # grid[row][col], row 0 is the top of the board
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(COLS)] for _ in range(ROWS)]

    @property
    def rows(self) -> int:
        return ROWS

    @property
    def cols(self) -> int:
        return COLS

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from its text form: ROWS strings of COLS characters,
        top row first, using '.', 'H' and 'C'.
        """
        lines = [r.strip() for r in rows]
        if len(lines) != ROWS or any(len(r) != COLS for r in lines):
            raise ValueError(f"Board must be {ROWS} rows of {COLS} cells.")
        try:
            grid = [[_SYMBOLS[ch] for ch in line] for line in lines]
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol: {e.args[0]!r}") from None

        # Gravity: nothing may float above an empty cell.
        for c in range(COLS):
            for r in range(ROWS - 1):
                if grid[r][c] != Cell.EMPTY and grid[r + 1][c] == Cell.EMPTY:
                    raise ValueError(f"Floating piece at row {r}, column {c}.")
        return cls(grid)

    def clone(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(COLS) if self.grid[0][c] == Cell.EMPTY]

    def is_column_full(self, col: int) -> bool:
        return self.grid[0][col] != Cell.EMPTY

    def is_full(self) -> bool:
        return all(self.grid[0][c] != Cell.EMPTY for c in range(COLS))

    def top_row(self, col: int) -> Optional[int]:
        """Row of the topmost piece in a column (the last one dropped there)."""
        for r in range(ROWS):
            if self.grid[r][col] != Cell.EMPTY:
                return r
        return None

    def drop(self, col: Move, piece: Cell) -> int:
        c = int(col)
        if c < 0 or c >= COLS:
            raise ValueError("Column out of range.")
        if piece == Cell.EMPTY:
            raise ValueError("Cannot drop an empty cell.")
        if self.grid[0][c] != Cell.EMPTY:
            raise ColumnFull(c)

        for r in range(ROWS - 1, -1, -1):
            if self.grid[r][c] == Cell.EMPTY:
                self.grid[r][c] = piece
                return r

        raise ColumnFull(c)

    def __str__(self) -> str:
        return "\n".join("".join(_CHARS[cell] for cell in row) for row in self.grid)

from __future__ import annotations


class ColumnFull(ValueError):
    """Drop attempted into a column whose top cell is occupied."""

    def __init__(self, col: int) -> None:
        super().__init__(f"Column {col + 1} is full.")
        self.col = col


class NoLegalMove(ValueError):
    """Move selection requested on a board with no playable column."""

    def __init__(self) -> None:
        super().__init__("No valid moves.")

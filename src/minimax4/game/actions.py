from __future__ import annotations
from typing import Iterable, Tuple

from minimax4.ai.minimax_agent import MinimaxTree
from minimax4.core.board import Board
from minimax4.core.rules import check_outcome
from minimax4.types import Cell, Move, Outcome


def initialise_board() -> Board:
    return Board()


def drop_piece(board: Board, move: Move, piece: Cell) -> Tuple[Board, Outcome]:
    """Play a real move. The given board is left as it was."""
    new_board = board.clone()
    new_board.drop(move, piece)
    return new_board, check_outcome(new_board, move)


def select_computer_move(board: Board) -> Move:
    return MinimaxTree(board).best_move()


def replay(moves: Iterable[int], human_first: bool = True) -> Tuple[Board, Outcome]:
    """
    Play a sequence of 0-based columns from the empty board, sides
    alternating. Moves after the game has ended are rejected.
    """
    board = initialise_board()
    outcome = Outcome.INCOMPLETE
    piece = Cell.HUMAN if human_first else Cell.COMPUTER

    for i, m in enumerate(moves):
        if outcome != Outcome.INCOMPLETE:
            raise ValueError(f"Move {i + 1} played after the game ended ({outcome.name}).")
        board, outcome = drop_piece(board, Move(m), piece)
        piece = Cell.COMPUTER if piece == Cell.HUMAN else Cell.HUMAN

    return board, outcome

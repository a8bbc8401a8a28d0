from __future__ import annotations
from typing import Optional

from minimax4.ai.base import Agent
from minimax4.ai.minimax_agent import MinimaxAgent
from minimax4.core.rules import check_outcome_with_line
from minimax4.game.actions import drop_piece, initialise_board
from minimax4.game.state import GameState
from minimax4.types import Cell, Outcome
from minimax4.ui.prompts import parse_move
from minimax4.ui.render import render

_NAMES = {Cell.HUMAN: "Human", Cell.COMPUTER: "Computer"}

_RESULT_TEXT = {
    Outcome.HUMAN_WINS: "HUMAN WINS!",
    Outcome.COMPUTER_WINS: "COMPUTER WINS!",
    Outcome.DRAW: "DRAW!",
}


def other(piece: Cell) -> Cell:
    return Cell.COMPUTER if piece == Cell.HUMAN else Cell.HUMAN


def _status_with_turn(status: str, current: Cell) -> str:
    header = f"Turn: {_NAMES[current]}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(human_first: bool = True, computer: Optional[Agent] = None) -> Optional[Outcome]:
    """
    Play one game in the terminal. Returns the final outcome, or None if
    the human quit.
    """
    agent = computer if computer is not None else MinimaxAgent()
    first = Cell.HUMAN if human_first else Cell.COMPUTER
    state = GameState(
        board=initialise_board(),
        current=first,
        last_status=f"{_NAMES[first]} starts.",
    )

    while True:
        render(state.board, _status_with_turn(state.last_status, state.current))

        try:
            if state.current == Cell.HUMAN:
                raw = input("Your move: ")
                move = parse_move(raw, state.board.cols)
                if move is None:
                    render(state.board, "Game quit.")
                    return None
                state.last_status = f"Human chose {int(move) + 1}"
            else:
                move = agent.choose_move(state)

                info = getattr(agent, "last_info", None)
                if info:
                    state.last_status = (
                        f"{agent.name} chose {info.get('move_col')} | "
                        f"d={info.get('depth')} | "
                        f"nodes={info.get('nodes')} | "
                        f"eval={info.get('value')} | "
                        f"{info.get('time_ms')}ms"
                    )
                else:
                    state.last_status = f"{agent.name} chose {int(move) + 1}"

            # drop_piece raises ColumnFull before anything changes
            state.board, outcome = drop_piece(state.board, move, state.current)

        except ValueError as e:
            state.last_status = str(e)
            continue

        if outcome != Outcome.INCOMPLETE:
            _, line = check_outcome_with_line(state.board, move)
            render(state.board, f"{state.last_status}\n{_RESULT_TEXT[outcome]}", highlight=line)
            return outcome

        state.current = other(state.current)

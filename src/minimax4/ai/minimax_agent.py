from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Dict, Iterator, List, Optional, Tuple

from minimax4.config import MAX_DEPTH, SCORE_SENTINEL, WIN_SCORE
from minimax4.core.board import Board
from minimax4.core.rules import check_outcome
from minimax4.errors import NoLegalMove
from minimax4.game.state import GameState
from minimax4.types import Cell, Move, Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchNode:
    """
    One ply of the game tree.

    A node owns the board *after* its move. `is_human_move` says whose move
    that was; the side choosing among the children is the other one, so a
    node for a human move maximizes over its children (computer to play)
    and a node for a computer move minimizes.
    """

    board: Board
    column: Move
    is_human_move: bool
    depth: int
    outcome: Outcome
    value: int
    children: Optional[Tuple["SearchNode", ...]] = None
    nodes: int = 1  # subtree size, this node included

    @classmethod
    def expand(
        cls,
        board: Board,
        column: Move,
        is_human_move: bool,
        depth: int,
        max_depth: int = MAX_DEPTH,
    ) -> "SearchNode":
        """
        Play `column` on `board` (which the node takes ownership of) and
        evaluate the resulting position down to `max_depth`.
        """
        board.drop(column, Cell.HUMAN if is_human_move else Cell.COMPUTER)
        outcome = check_outcome(board, column)

        if outcome == Outcome.COMPUTER_WINS:
            # faster wins score higher
            value = WIN_SCORE - depth
        elif outcome == Outcome.HUMAN_WINS:
            # slower losses score higher
            value = -WIN_SCORE + depth
        elif outcome == Outcome.DRAW:
            value = -depth
        elif depth >= max_depth:
            value = 0
        else:
            children = tuple(
                cls.expand(board.clone(), m, not is_human_move, depth + 1, max_depth)
                for m in board.valid_moves()
            )
            if not children:
                value = 0
            elif is_human_move:
                value = max(ch.value for ch in children)
            else:
                value = min(ch.value for ch in children)
            return cls(
                board=board,
                column=Move(column),
                is_human_move=is_human_move,
                depth=depth,
                outcome=outcome,
                value=value,
                children=children or None,
                nodes=1 + sum(ch.nodes for ch in children),
            )

        return cls(
            board=board,
            column=Move(column),
            is_human_move=is_human_move,
            depth=depth,
            outcome=outcome,
            value=value,
        )

    def principal_variation(self) -> List[Move]:
        """Columns along the line of best play, starting with this node's move."""
        line = [self.column]
        node = self
        while node.children:
            node = next(ch for ch in node.children if ch.value == node.value)
            line.append(node.column)
        return line

    def walk(self) -> Iterator["SearchNode"]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))


class MinimaxTree:
    """Full-width fixed-depth search over the computer's candidate moves."""

    def __init__(self, board: Board, max_depth: int = MAX_DEPTH) -> None:
        self.board = board.clone()
        self.max_depth = max_depth
        self.last_info: dict = {}

    def evaluate(self, col: Move) -> SearchNode:
        return SearchNode.expand(self.board.clone(), col, False, 0, self.max_depth)

    def best_move(self) -> Move:
        moves = self.board.valid_moves()
        if not moves:
            raise NoLegalMove()

        start = time.perf_counter()
        best_value = -SCORE_SENTINEL
        best_col = moves[0]
        nodes = 0
        root_values: Dict[int, int] = {}

        for m in moves:
            node = self.evaluate(m)
            logger.debug("col=%d value=%d nodes=%d", int(m) + 1, node.value, node.nodes)
            root_values[int(m) + 1] = node.value
            nodes += node.nodes

            # strict '>' so the lowest column wins ties
            if node.value > best_value:
                best_value = node.value
                best_col = m

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move_col": int(best_col) + 1,
            "value": best_value,
            "nodes": nodes,
            "depth": self.max_depth,
            "root_values": root_values,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.info("best move col=%d value=%d nodes=%d", int(best_col) + 1, best_value, nodes)
        return best_col


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    depth: int = MAX_DEPTH

    # Stats from the last search
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        tree = MinimaxTree(state.board, max_depth=self.depth)
        move = tree.best_move()
        self.last_info = tree.last_info
        return move

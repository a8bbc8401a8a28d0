from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import time

import pandas as pd

from minimax4.ai.minimax_agent import MinimaxTree
from minimax4.config import MAX_DEPTH
from minimax4.core.board import Board
from minimax4.errors import NoLegalMove


@dataclass(frozen=True)
class ReportConfig:
    max_depth: int = MAX_DEPTH


@dataclass(frozen=True)
class SearchSummary:
    roots: pd.DataFrame
    plies: pd.DataFrame
    best_col: int  # 1-based
    time_ms: int


def summarize_search(board: Board, cfg: ReportConfig) -> SearchSummary:
    """
    Run the computer's search once and tabulate it.

    `roots`: one row per playable column (col, value, outcome, nodes, pv, best).
    `plies`: nodes created at each depth across all root subtrees.
    """
    tree = MinimaxTree(board, max_depth=cfg.max_depth)
    moves = tree.board.valid_moves()
    if not moves:
        raise NoLegalMove()

    start = time.perf_counter()
    rows = []
    per_depth: Counter[int] = Counter()

    for m in moves:
        node = tree.evaluate(m)
        per_depth.update(n.depth for n in node.walk())
        rows.append(
            {
                "col": int(m) + 1,
                "value": node.value,
                "outcome": node.outcome.name,
                "nodes": node.nodes,
                "pv": " ".join(str(int(c) + 1) for c in node.principal_variation()),
            }
        )
        # subtree is dropped here, only the row survives

    elapsed = time.perf_counter() - start

    roots = pd.DataFrame(rows)
    # idxmax returns the first maximum, i.e. the lowest column on ties
    best_col = int(roots.loc[roots["value"].idxmax(), "col"])
    roots["best"] = roots["col"] == best_col

    plies = pd.DataFrame(
        [{"depth": d, "nodes": per_depth[d]} for d in sorted(per_depth)]
    )
    plies["cumulative"] = plies["nodes"].cumsum()

    return SearchSummary(
        roots=roots,
        plies=plies,
        best_col=best_col,
        time_ms=max(1, int(elapsed * 1000)),
    )


def root_table(board: Board, cfg: ReportConfig) -> pd.DataFrame:
    return summarize_search(board, cfg).roots


def ply_table(board: Board, cfg: ReportConfig) -> pd.DataFrame:
    return summarize_search(board, cfg).plies

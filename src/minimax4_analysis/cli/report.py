from __future__ import annotations

import argparse

from ..metrics.search_report import ReportConfig, summarize_search
from .common import add_position_args, board_from_args, setup_logging


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Explain the computer's move choice for a position.")
    add_position_args(ap)
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    board = board_from_args(ap, args)
    summary = summarize_search(board, ReportConfig(max_depth=args.depth))

    print("\n=== Position ===")
    print(board)

    print("\n=== Root moves ===")
    print(summary.roots.to_string(index=False))

    print("\n=== Nodes per ply ===")
    print(summary.plies.to_string(index=False))

    print(f"\nBest column: {summary.best_col}  ({summary.time_ms}ms)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

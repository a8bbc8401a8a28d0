from __future__ import annotations

import argparse
from pathlib import Path

from ..metrics.search_report import ReportConfig, summarize_search
from ..plots.chart import plot_nodes_per_ply, plot_root_values
from .common import add_position_args, board_from_args, setup_logging


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Chart the computer's search for a position.")
    add_position_args(ap)
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    board = board_from_args(ap, args)
    summary = summarize_search(board, ReportConfig(max_depth=args.depth))
    outdir = Path(args.outdir)

    plot_root_values(summary.roots, outdir, show=args.show)
    plot_nodes_per_ply(summary.plies, outdir, show=args.show)

    if not args.show:
        print(f"Saved figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import logging

from minimax4.config import MAX_DEPTH
from minimax4.core.board import Board

from ..io.positions import PositionSpec, load_position


def add_position_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--moves", type=str, default="", help="Moves played so far as 1-based columns, e.g. 4453")
    ap.add_argument("--computer-first", action="store_true", help="The computer made the first move")
    ap.add_argument("--depth", type=int, default=MAX_DEPTH, help="Search depth bound")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log each root value")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def board_from_args(ap: argparse.ArgumentParser, args: argparse.Namespace) -> Board:
    if args.depth < 0:
        ap.error("--depth must be >= 0")
    try:
        return load_position(PositionSpec(moves=args.moves, human_first=not args.computer_first))
    except ValueError as e:
        ap.error(str(e))

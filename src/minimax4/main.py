from __future__ import annotations

import logging
import time

from minimax4.config import LOG_LEVEL
from minimax4.game.controller import run_game
from minimax4.ui.prompts import ask_yes_no


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Select mode:")
    print("1) Human moves first")
    print("2) Computer moves first")

    choice = input("Choice: ").strip()
    if choice not in {"1", "2"}:
        print("\nInvalid choice. Defaulting to Human first.\n")
        time.sleep(1)
    human_first = choice != "2"

    while True:
        outcome = run_game(human_first=human_first)
        if outcome is None:
            return
        if not ask_yes_no("Play again? [y/N] "):
            return
        # The other side opens the next game.
        human_first = not human_first


if __name__ == "__main__":
    main()

from __future__ import annotations

import sys

from .cli.make_figures import main as figures_main
from .cli.report import main as report_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: text report
    if not argv:
        return report_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd == "report":
        return report_main(rest)

    if cmd in {"figures", "plots"}:
        return figures_main(rest)

    if cmd.startswith("-"):
        return report_main(argv)

    print("Usage:")
    print("  python -m minimax4_analysis report [--moves 4453] [--computer-first] [--depth N]")
    print("  python -m minimax4_analysis figures [--moves ...] [--outdir figures] [--show]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_root_values(roots: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Bar per candidate column; the chosen column is drawn in a stronger color."""
    if roots.empty:
        return None

    colors = ["tab:orange" if b else "tab:blue" for b in roots["best"]]
    fig = plt.figure(figsize=(8, 4.5))
    plt.bar(roots["col"].astype(str), roots["value"].astype(float), color=colors)
    plt.axhline(0, color="gray", linewidth=0.8)
    plt.title("Minimax value per root column")
    plt.xlabel("column")
    plt.ylabel("value (computer's perspective)")

    return _finish(fig, outdir, "root_values.png", show=show)


def plot_nodes_per_ply(plies: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if plies.empty:
        return None

    fig = plt.figure()
    plt.bar(plies["depth"].astype(str), plies["nodes"].astype(float))
    plt.yscale("log")
    plt.title("Search nodes per ply")
    plt.xlabel("depth")
    plt.ylabel("nodes (log scale)")

    return _finish(fig, outdir, "nodes_per_ply.png", show=show)

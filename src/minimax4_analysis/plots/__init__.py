from .chart import (
    plot_nodes_per_ply,
    plot_root_values,
)

__all__ = [
    "plot_nodes_per_ply",
    "plot_root_values",
]

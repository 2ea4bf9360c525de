"""
Visualization utilities.

- Edge cut over rounds
- Full run history (edge cut, swaps, migrations)
"""

from jabeja.viz.history import (
    plot_edge_cut,
    plot_run_history,
    save_figure,
)

__all__ = [
    "plot_edge_cut",
    "plot_run_history",
    "save_figure",
]

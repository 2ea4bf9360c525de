"""
Round-history plots.

Shows how the edge cut falls over the rounds, and how swap activity and
migrations evolve as the temperature cools.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from jabeja.analysis.partition import history_arrays

if TYPE_CHECKING:
    from jabeja.core.metrics import RoundReport


def plot_edge_cut(
    reports: Sequence["RoundReport"],
    title: str = "Edge Cut",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
    color: str = "tab:blue",
) -> tuple[Figure, Axes]:
    """
    Plot edge cut against round.

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    h = history_arrays(reports)
    ax.plot(h["round"], h["edge_cut"], color=color, linewidth=1.5)
    ax.set_title(title)
    ax.set_xlabel("round")
    ax.set_ylabel("edge cut")
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_run_history(
    reports: Sequence["RoundReport"],
    title: str = "Ja-be-Ja Run",
    figsize: tuple[float, float] = (8, 9),
) -> Figure:
    """Edge cut, swaps and migrations stacked on a shared round axis."""
    h = history_arrays(reports)
    fig, axes = plt.subplots(3, 1, figsize=figsize, sharex=True)

    plot_edge_cut(reports, title=title, ax=axes[0])

    axes[1].bar(h["round"], h["swaps"], color="tab:orange", width=1.0)
    axes[1].set_ylabel("swaps")
    axes[1].grid(True, alpha=0.3)

    axes[2].plot(h["round"], h["migrations"], color="tab:green", linewidth=1.5)
    axes[2].set_ylabel("migrations")
    axes[2].set_xlabel("round")
    axes[2].grid(True, alpha=0.3)

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)

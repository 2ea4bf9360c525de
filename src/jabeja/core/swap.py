"""Committing accepted swaps."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jabeja.core.graph import Graph
    from jabeja.core.state import RunState


class SwapExecutor:
    """
    Exchanges the current colors of two nodes.

    No validation and no rollback: callers run the acceptance test first.
    """

    def __init__(self, graph: "Graph"):
        self.graph = graph

    def swap(self, p_id: int, q_id: int, state: "RunState"):
        p = self.graph.get(p_id)
        q = self.graph.get(q_id)
        p_color, q_color = p.color, q.color
        self.graph.set_color(p_id, q_color)
        self.graph.set_color(q_id, p_color)
        state.swaps_this_round += 1
        state.total_swaps += 1

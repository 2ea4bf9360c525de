"""
Benefit of a prospective color swap.

For a candidate pair (p, q):
    old = d(p, c_p)^α + d(q, c_q)^α
    new = d(p, c_q)^α + d(q, c_p)^α

where d(node, c) counts the node's neighbors currently colored c.
α > 1 favors pairs that end up strongly embedded in one color.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jabeja.core.graph import Graph, Node


@dataclass(frozen=True)
class SwapScore:
    """Benefit of a pair before and after a hypothetical swap."""

    p: int
    q: int
    old_benefit: float
    new_benefit: float


class BenefitEvaluator:
    """Scores color homogeneity around nodes."""

    def __init__(self, graph: "Graph", alpha: float):
        self.graph = graph
        self.alpha = alpha

    def degree(self, node: "Node", color: int) -> int:
        """Number of node's neighbors whose current color is `color`."""
        return sum(1 for n in node.neighbors if self.graph.get(n).color == color)

    def _power(self, degree: int) -> float:
        # 0^α = 0 for α > 0; keep it explicit so α never sneaks in as 0^0
        return 0.0 if degree == 0 else float(degree) ** self.alpha

    def score(self, p_id: int, q_id: int) -> SwapScore:
        """Compute old and new benefit for swapping the colors of p and q."""
        p = self.graph.get(p_id)
        q = self.graph.get(q_id)

        old = self._power(self.degree(p, p.color)) + self._power(self.degree(q, q.color))
        new = self._power(self.degree(p, q.color)) + self._power(self.degree(q, p.color))

        return SwapScore(p=p_id, q=q_id, old_benefit=old, new_benefit=new)

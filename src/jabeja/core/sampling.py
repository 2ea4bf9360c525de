"""
Candidate selection for swap partners.

Two sampling strategies, both returning distinct ids that never include
the requesting node:
- local_sample: k random neighbors
- uniform_sample: k random nodes from the whole graph

Both draw by rejection sampling: pick a random index, keep it if not yet
chosen, stop once k are kept. The request is clipped to the size of the
eligible pool first, so the loop always terminates.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from jabeja.core.graph import Graph

logger = logging.getLogger(__name__)


class NodeSelector:
    """Draws candidate peers using the run's random generator."""

    def __init__(self, graph: "Graph", rng: np.random.Generator):
        self.graph = graph
        self.rng = rng

    def local_sample(self, node_id: int, k: int) -> list[int]:
        """
        Sample up to k distinct neighbors of node_id.

        If the node has at most k neighbors, all of them are returned in
        neighbor-list order.
        """
        # dict.fromkeys keeps order and drops repeated ids
        pool = [n for n in dict.fromkeys(self.graph.neighbors_of(node_id)) if n != node_id]
        if len(pool) <= k:
            return pool
        return self._rejection_sample(pool, k, exclude=None)

    def uniform_sample(self, node_id: int, k: int) -> list[int]:
        """Sample up to k distinct node ids from the whole graph, excluding node_id."""
        ids = self.graph.node_ids
        eligible = len(ids) - (1 if node_id in self.graph else 0)
        if k >= eligible:
            if k > eligible:
                logger.debug("uniform sample for node %s clipped from %d to %d", node_id, k, eligible)
            return [i for i in ids if i != node_id]
        return self._rejection_sample(ids, k, exclude=node_id)

    def _rejection_sample(self, pool: Sequence[int], k: int, exclude: int | None) -> list[int]:
        """Draw k distinct ids from pool. Caller guarantees k < eligible pool size."""
        chosen: list[int] = []
        seen: set[int] = set()
        size = len(pool)
        while len(chosen) < k:
            candidate = pool[int(self.rng.integers(0, size))]
            if candidate == exclude or candidate in seen:
                continue
            seen.add(candidate)
            chosen.append(candidate)
        return chosen

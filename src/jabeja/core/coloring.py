"""
Initial coloring and graph loading.

Three initial color policies:
- round_robin: color = position mod k
- random: uniform color in [0, k) per node
- batch: contiguous blocks of roughly n/k nodes per color

Positions are taken in ascending node id order.
"""

from __future__ import annotations
from typing import Mapping, Sequence

import numpy as np

from jabeja.core.config import InitColorPolicy
from jabeja.core.graph import Graph


def initial_colors(
    node_ids: Sequence[int],
    num_partitions: int,
    policy: InitColorPolicy,
    rng: np.random.Generator,
) -> dict[int, int]:
    """Assign a starting color to every node id."""
    n = len(node_ids)
    if policy == "round_robin":
        return {node_id: i % num_partitions for i, node_id in enumerate(node_ids)}
    if policy == "random":
        drawn = rng.integers(0, num_partitions, size=n)
        return {node_id: int(c) for node_id, c in zip(node_ids, drawn)}
    if policy == "batch":
        return {node_id: i * num_partitions // n for i, node_id in enumerate(node_ids)}
    raise ValueError(f"unknown init color policy {policy!r}")


def load_graph(
    adjacency: Mapping[int, Sequence[int]],
    num_partitions: int,
    policy: InitColorPolicy,
    rng: np.random.Generator,
) -> Graph:
    """
    Build a validated Graph from an adjacency mapping.

    Raises:
        NodeNotFound: a neighbor id has no entry in the adjacency
        ValueError: the adjacency is not symmetric
    """
    node_ids = sorted(adjacency)
    colors = initial_colors(node_ids, num_partitions, policy, rng)
    graph = Graph.from_adjacency(adjacency, colors)
    graph.validate()
    return graph

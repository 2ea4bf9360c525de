"""
Synthetic graph topologies.

Builders return plain adjacency mappings {id: [neighbor ids]} that are
symmetric and free of self loops. Ids run from 0 to n-1.

Grid neighborhoods mirror the usual lattice conventions:
- von_neumann: 4 neighbors (N, S, E, W)
- moore: 8 neighbors (adds the diagonals)
"""

from __future__ import annotations
from typing import Literal

import networkx as nx
import numpy as np

Adjacency = dict[int, list[int]]

DIRECTIONS_VON_NEUMANN = {
    "N": (0, -1),
    "S": (0, 1),
    "E": (1, 0),
    "W": (-1, 0),
}

DIRECTIONS_MOORE = {
    **DIRECTIONS_VON_NEUMANN,
    "NE": (1, -1),
    "NW": (-1, -1),
    "SE": (1, 1),
    "SW": (-1, 1),
}


def _from_networkx(graph: nx.Graph) -> Adjacency:
    """Adjacency with integer ids and sorted neighbor lists."""
    return {int(u): sorted(int(v) for v in graph.adj[u] if v != u) for u in sorted(graph)}


def ring_adjacency(n: int) -> Adjacency:
    """Cycle 0-1-...-(n-1)-0."""
    if n < 3:
        raise ValueError(f"a ring needs at least 3 nodes, got {n}")
    return _from_networkx(nx.cycle_graph(n))


def grid_adjacency(
    width: int,
    height: int,
    neighborhood: Literal["von_neumann", "moore"] = "von_neumann",
    boundary: Literal["periodic", "open"] = "periodic",
) -> Adjacency:
    """
    2D grid graph. Node id = y * width + x.

    With periodic boundaries, grids narrower than 3 in a dimension would
    create duplicate or self edges; those are dropped.
    """
    directions = DIRECTIONS_VON_NEUMANN if neighborhood == "von_neumann" else DIRECTIONS_MOORE
    adjacency: Adjacency = {}
    for y in range(height):
        for x in range(width):
            node_id = y * width + x
            neighbors: list[int] = []
            for dx, dy in directions.values():
                new_x, new_y = x + dx, y + dy
                if boundary == "periodic":
                    new_x, new_y = new_x % width, new_y % height
                elif not (0 <= new_x < width and 0 <= new_y < height):
                    continue
                neighbor_id = new_y * width + new_x
                if neighbor_id != node_id and neighbor_id not in neighbors:
                    neighbors.append(neighbor_id)
            adjacency[node_id] = neighbors
    return adjacency


def random_adjacency(n: int, p: float, rng: np.random.Generator) -> Adjacency:
    """Erdős–Rényi G(n, p) graph, seeded from rng."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")
    seed = int(rng.integers(0, 2**32))
    return _from_networkx(nx.erdos_renyi_graph(n, p, seed=seed))


def build_topology(description: str, rng: np.random.Generator) -> Adjacency:
    """
    Build an adjacency from a short description.

    Forms:
        ring:N
        grid:NXxNY
        random:N:P
    """
    kind, _, rest = description.partition(":")
    try:
        if kind == "ring":
            return ring_adjacency(int(rest))
        if kind == "grid":
            width, height = rest.lower().split("x")
            return grid_adjacency(int(width), int(height))
        if kind == "random":
            n, p = rest.split(":")
            return random_adjacency(int(n), float(p), rng)
    except ValueError as exc:
        raise ValueError(f"invalid graph description {description!r}: {exc}") from exc
    raise ValueError(f"unknown graph kind {kind!r} in {description!r} (expected ring, grid or random)")

"""
Partition quality derived from a graph and its round history.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy import sparse

if TYPE_CHECKING:
    from jabeja.core.graph import Graph
    from jabeja.core.metrics import RoundReport


@dataclass
class RunSummary:
    """Headline numbers for a finished run."""

    rounds: int
    final_edge_cut: int
    min_edge_cut: int
    best_round: int  # First round reaching min_edge_cut
    total_swaps: int
    final_migrations: int
    quiescent_round: int | None  # First round without any swap
    edge_cut_ratio: float  # final_edge_cut / number of edges


def partition_sizes(graph: "Graph") -> dict[int, int]:
    """Number of nodes per color, sorted by color."""
    return dict(sorted(Counter(node.color for node in graph).items()))


def adjacency_matrix(graph: "Graph") -> sparse.csr_matrix:
    """Sparse n×n adjacency in graph.node_ids order."""
    index = {node_id: i for i, node_id in enumerate(graph.node_ids)}
    rows, cols = [], []
    for node in graph:
        for neighbor_id in node.neighbors:
            rows.append(index[node.id])
            cols.append(index[neighbor_id])
    n = len(graph)
    data = np.ones(len(rows), dtype=np.int64)
    return sparse.csr_matrix((data, (rows, cols)), shape=(n, n))


def inter_partition_edges(graph: "Graph") -> tuple[list[int], np.ndarray]:
    """
    Edge counts between color classes.

    Returns:
        (colors, matrix) where matrix[i, j] is the number of undirected
        edges between colors[i] and colors[j]. The diagonal holds internal
        edges; the strict upper triangle sums to the edge cut.
    """
    colors = sorted({node.color for node in graph})
    column = {c: j for j, c in enumerate(colors)}
    n, k = len(graph), len(colors)

    membership = sparse.csr_matrix(
        (
            np.ones(n, dtype=np.int64),
            (np.arange(n), [column[node.color] for node in graph]),
        ),
        shape=(n, k),
    )
    # PᵀAP counts ordered pairs: off-diagonal entries are edges, diagonal twice the edges
    counts = (membership.T @ adjacency_matrix(graph) @ membership).toarray()
    diagonal = np.diag(counts) // 2
    matrix = counts.copy()
    np.fill_diagonal(matrix, diagonal)
    return colors, matrix


def history_arrays(reports: Sequence["RoundReport"]) -> dict[str, np.ndarray]:
    """Column arrays of a round history."""
    return {
        "round": np.array([r.round for r in reports], dtype=np.int64),
        "edge_cut": np.array([r.edge_cut for r in reports], dtype=np.int64),
        "swaps": np.array([r.swaps for r in reports], dtype=np.int64),
        "migrations": np.array([r.migrations for r in reports], dtype=np.int64),
    }


def summarize_run(reports: Sequence["RoundReport"], graph: "Graph") -> RunSummary:
    """
    Summarize a finished run.

    Raises:
        ValueError: if no round was reported
    """
    if not reports:
        raise ValueError("cannot summarize a run without reported rounds")

    h = history_arrays(reports)
    best = int(np.argmin(h["edge_cut"]))
    idle = np.flatnonzero(h["swaps"] == 0)
    n_edges = graph.edge_count()

    return RunSummary(
        rounds=len(reports),
        final_edge_cut=int(h["edge_cut"][-1]),
        min_edge_cut=int(h["edge_cut"][best]),
        best_round=int(h["round"][best]),
        total_swaps=int(h["swaps"].sum()),
        final_migrations=int(h["migrations"][-1]),
        quiescent_round=int(h["round"][idle[0]]) if idle.size else None,
        edge_cut_ratio=float(h["edge_cut"][-1]) / n_edges if n_edges else 0.0,
    )

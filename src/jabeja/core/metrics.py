"""
Per-round metrics: edge cut, swaps, migrations.

edge_cut counts each undirected edge with differently colored endpoints
once. It is computed by scanning every (node, neighbor) pair, which sees
each edge from both sides, and halving the mismatch count.

migrations counts nodes whose current color differs from their initial
color right now. It is recomputed each round, never accumulated.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jabeja.core.graph import Graph
    from jabeja.core.state import RunState
    from jabeja.io.sink import ResultSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundReport:
    """One row of the result stream."""

    round: int
    edge_cut: int
    swaps: int
    migrations: int

    def as_row(self) -> tuple[int, int, int, int]:
        return self.round, self.edge_cut, self.swaps, self.migrations


def count_mismatches(graph: "Graph") -> int:
    """Ordered (node, neighbor) pairs with different current colors."""
    mismatches = 0
    for node in graph:
        for neighbor_id in node.neighbors:
            if graph.get(neighbor_id).color != node.color:
                mismatches += 1
    return mismatches


def compute_edge_cut(graph: "Graph") -> int:
    return count_mismatches(graph) // 2


def compute_migrations(graph: "Graph") -> int:
    return sum(1 for node in graph if node.migrated)


class MetricsReporter:
    """Computes the round's metrics and emits them to the result sink."""

    def __init__(self, graph: "Graph", sink: "ResultSink"):
        self.graph = graph
        self.sink = sink

    def compute(self, state: "RunState") -> RoundReport:
        return RoundReport(
            round=state.round_index,
            edge_cut=compute_edge_cut(self.graph),
            swaps=state.swaps_this_round,
            migrations=compute_migrations(self.graph),
        )

    def report(self, state: "RunState") -> RoundReport:
        """
        Compute and emit the record for the round just completed.

        Sink failures propagate: a run with gaps in its report is aborted.
        """
        record = self.compute(state)
        logger.info(
            "round: %d, edge cut: %d, swaps: %d, migrations: %d",
            record.round, record.edge_cut, record.swaps, record.migrations,
        )
        self.sink.write(record)
        return record

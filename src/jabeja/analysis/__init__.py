"""
Analysis layer: derived quantities for reporting and visualization.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- partition_sizes: nodes per color (constant over a run, swaps preserve it)
- inter_partition_edges: edge counts between color classes
- history_arrays / summarize_run: numbers from a round history
"""

from jabeja.analysis.partition import (
    RunSummary,
    adjacency_matrix,
    history_arrays,
    inter_partition_edges,
    partition_sizes,
    summarize_run,
)

__all__ = [
    "RunSummary",
    "adjacency_matrix",
    "history_arrays",
    "inter_partition_edges",
    "partition_sizes",
    "summarize_run",
]

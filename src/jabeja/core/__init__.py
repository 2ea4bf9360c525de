"""
Core engine primitives.

This layer knows NOTHING about files, plots, or command lines.
It only knows:
- Nodes with a color and a fixed neighbor list
- Sampling swap candidates (local neighbors or the whole graph)
- Scoring a prospective swap (benefit)
- Accepting or rejecting it under a cooling temperature
- Counting edge cut, swaps and migrations per round

RoundOrchestrator wires these together and runs the rounds.
"""

from jabeja.core.errors import JabejaError, NodeNotFound, SinkFailure
from jabeja.core.config import JabejaConfig
from jabeja.core.graph import Graph, Node
from jabeja.core.topology import ring_adjacency, grid_adjacency, random_adjacency, build_topology
from jabeja.core.coloring import initial_colors, load_graph
from jabeja.core.sampling import NodeSelector
from jabeja.core.benefit import BenefitEvaluator, SwapScore
from jabeja.core.annealing import AnnealingController, AnnealingState
from jabeja.core.state import RunState
from jabeja.core.swap import SwapExecutor
from jabeja.core.metrics import MetricsReporter, RoundReport, compute_edge_cut, compute_migrations
from jabeja.core.orchestrator import RoundOrchestrator, make_rng

__all__ = [
    "JabejaError",
    "NodeNotFound",
    "SinkFailure",
    "JabejaConfig",
    "Graph",
    "Node",
    "ring_adjacency",
    "grid_adjacency",
    "random_adjacency",
    "build_topology",
    "initial_colors",
    "load_graph",
    "NodeSelector",
    "BenefitEvaluator",
    "SwapScore",
    "AnnealingController",
    "AnnealingState",
    "RunState",
    "SwapExecutor",
    "MetricsReporter",
    "RoundReport",
    "compute_edge_cut",
    "compute_migrations",
    "RoundOrchestrator",
    "make_rng",
]

"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def cycle4():
    """Adjacency of the 4-cycle 0-1-2-3-0."""
    from jabeja.core import ring_adjacency
    return ring_adjacency(4)


@pytest.fixture
def make_graph():
    """Build a Graph from an adjacency and an explicit {id: color} coloring."""
    from jabeja.core import Graph

    def _make(adjacency, colors):
        graph = Graph.from_adjacency(adjacency, colors)
        graph.validate()
        return graph

    return _make

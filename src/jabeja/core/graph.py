"""
Graph: the nodes taking part in the partitioning.

The graph stores ONLY engine primitives:
- Node id, initial color, current color
- Neighbor ids (fixed at construction)
- The node iteration order (fixed at construction)

It does NOT store edge cut, migrations, or any derived quantities.
Those are computed by the metrics and analysis layers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Sequence

from jabeja.core.errors import NodeNotFound


@dataclass
class Node:
    """A graph node and its partition label."""

    id: int
    initial_color: int  # Never mutated after construction
    neighbors: tuple[int, ...]
    color: int = field(init=False)  # Mutated only by SwapExecutor

    def __post_init__(self):
        self.neighbors = tuple(self.neighbors)
        self.color = self.initial_color

    @property
    def migrated(self) -> bool:
        """True if the node no longer holds its initial color."""
        return self.color != self.initial_color


class Graph:
    """
    Node state for the whole simulation.

    IMPORTANT: node_ids is captured once, in the order nodes were given,
    and every round iterates in that order. Never iterate the dict keys
    of another structure to drive a round.
    """

    def __init__(self, nodes: Iterable[Node]):
        self._nodes: dict[int, Node] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise ValueError(f"duplicate node id {node.id}")
            self._nodes[node.id] = node
        self.node_ids: tuple[int, ...] = tuple(self._nodes)

    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[int, Sequence[int]],
        colors: Mapping[int, int],
    ) -> Graph:
        """
        Build a graph from an adjacency mapping and an initial coloring.

        Nodes are created in ascending id order.
        """
        nodes = [
            Node(id=node_id, initial_color=colors[node_id], neighbors=tuple(adjacency[node_id]))
            for node_id in sorted(adjacency)
        ]
        return cls(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:
        """Iterate over nodes in the fixed construction order."""
        for node_id in self.node_ids:
            yield self._nodes[node_id]

    def get(self, node_id: int) -> Node:
        """Return the node with this id, or raise NodeNotFound."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFound(node_id) from None

    def neighbors_of(self, node_id: int) -> tuple[int, ...]:
        return self.get(node_id).neighbors

    def color_of(self, node_id: int) -> int:
        return self.get(node_id).color

    def set_color(self, node_id: int, color: int):
        """Set the current color of a node. Used only by SwapExecutor."""
        self.get(node_id).color = color

    def colors(self) -> dict[int, int]:
        """Snapshot of current colors, keyed by node id."""
        return {node.id: node.color for node in self}

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(node.neighbors) for node in self) // 2

    def validate(self):
        """
        Check the loader contract.

        Raises:
            NodeNotFound: a neighbor id is not in the graph
            ValueError: the neighbor relation is not symmetric
        """
        for node in self:
            for neighbor_id in node.neighbors:
                if node.id not in self.get(neighbor_id).neighbors:
                    raise ValueError(
                        f"asymmetric edge: {node.id} -> {neighbor_id} has no reverse"
                    )

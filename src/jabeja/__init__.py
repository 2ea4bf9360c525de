"""
jabeja: decentralized graph partitioning by pairwise color swaps.

A simulator of the Ja-be-Ja algorithm: every node holds a color (its
partition) and repeatedly proposes a color swap with a sampled peer.

Core concepts:
- Nodes only look at their neighbors' colors (local view)
- A swap is worth it when both endpoints end up with more same-colored neighbors
- A temperature relaxes the acceptance rule early on and cools every round
- Swaps exchange colors, so partition sizes never change
- The edge cut (edges between different colors) is the quality measure
"""

__version__ = "0.1.0"

"""Exceptions raised by the partitioning engine."""


class JabejaError(Exception):
    """Base class for all engine errors."""


class NodeNotFound(JabejaError, LookupError):
    """A node id is not part of the graph (malformed input graph)."""

    def __init__(self, node_id):
        super().__init__(f"node {node_id!r} is not in the graph")
        self.node_id = node_id


class SinkFailure(JabejaError):
    """The result sink could not be created or appended to."""

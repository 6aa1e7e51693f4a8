"""
Exceptions raised by the seqgraph containers and walkers.
"""


class InvalidArgumentError(ValueError):
    """Raised for malformed inputs: bad vertex counts, indices, ranges or edge endpoints."""


class NoEdgesError(Exception):
    """Raised when sampling a neighbor of a vertex that has no outgoing/undirected edges."""

"""
Edge representation for sequence graphs.
"""

from numbers import Number


class pyedge:
    """
    Relation between two vertex indices carrying a numeric value.

    An undirected edge is discoverable from both endpoints once added to a
    graph. No bounds checking happens here: an edge may reference indices
    that do not exist until it is inserted into a graph.
    """

    __slots__ = ('lVertexID_from', 'lVertexID_to', 'dValue', 'iFlag_directed')

    def __init__(self, lVertexID_from: int, lVertexID_to: int,
                 dValue: Number = 0.0, iFlag_directed: bool = False):
        """
        Initialize an edge.

        Args:
            lVertexID_from: Index of the source vertex
            lVertexID_to: Index of the target vertex
            dValue: Weight or value attached to the edge
            iFlag_directed: True for from -> to only, False for a bidirectional edge
        """
        self.lVertexID_from = lVertexID_from
        self.lVertexID_to = lVertexID_to
        self.dValue = dValue
        self.iFlag_directed = bool(iFlag_directed)

    def other_end(self, lVertexID: int) -> int:
        """
        Get the neighbor reached through this edge from ``lVertexID``.

        Args:
            lVertexID: Index of the vertex whose adjacency holds this edge

        Returns:
            ``lVertexID_to`` when the edge leaves ``lVertexID``, otherwise
            ``lVertexID_from`` (the vertex is the target of an undirected edge)
        """
        if self.lVertexID_from == lVertexID:
            return self.lVertexID_to
        return self.lVertexID_from

    def _key(self):
        return (self.lVertexID_from, self.lVertexID_to, self.dValue, self.iFlag_directed)

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        arrow = '->' if self.iFlag_directed else '--'
        return f"edge({self.lVertexID_from}{arrow}{self.lVertexID_to}, value={self.dValue})"

    __str__ = __repr__

"""
Vertex representation for sequence graphs.

A vertex wraps an arbitrary payload (typically a sequence element such as a
word or a document label) and carries the integer index it occupies in the
owning graph.
"""

from abc import ABC, abstractmethod
from typing import Any


class pyvertex:
    """
    Indexed wrapper around a user payload.

    The index is assigned when the vertex is created and never changes.
    Two vertices are equal when both index and payload are equal.
    """

    __slots__ = ('_lVertexID', 'pValue')

    def __init__(self, lVertexID: int, pValue: Any = None):
        """
        Initialize a vertex.

        Args:
            lVertexID: Position of the vertex in its graph (0-based)
            pValue: Payload attached to the vertex
        """
        self._lVertexID = int(lVertexID)
        self.pValue = pValue

    @property
    def lVertexID(self) -> int:
        return self._lVertexID

    def __eq__(self, other):
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._lVertexID == other._lVertexID and self.pValue == other.pValue

    def __hash__(self):
        # Payloads are not required to be hashable
        return hash(self._lVertexID)

    def __repr__(self):
        return f"vertex(idx={self._lVertexID}, value={self.pValue!r})"

    __str__ = __repr__


class VertexFactory(ABC):
    """Creates the vertex for a given index during fixed-count graph construction."""

    @abstractmethod
    def create(self, lVertexID: int) -> pyvertex:
        """Return a new vertex carrying exactly ``lVertexID``."""

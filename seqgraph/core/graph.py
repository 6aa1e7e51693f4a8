"""
Core graph data structure for sequence graphs.

This module provides the in-memory graph used as the backbone for
random-walk based embeddings. It provides:
- Vertex storage with stable 0-based indices
- Adjacency list maintenance for directed and undirected edges
- Optional suppression of multiple edges between the same vertices
- Single-hop neighbor queries and random neighbor sampling
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Union

import numpy as np

from ..classes.vertex import pyvertex, VertexFactory
from ..classes.edge import pyedge
from ..classes.exceptions import InvalidArgumentError, NoEdgesError

logger = logging.getLogger(__name__)


class pygraph:
    """
    Graph where all vertices and edges are stored in memory.

    Internally this is a directed graph with an adjacency list per vertex
    index. An undirected edge is stored in the adjacency of both endpoints
    (the same edge object, not a copy) so it can be looked up from either
    side. Unless ``iFlag_allow_multiple_edges`` is set, inserting an edge
    that duplicates an existing one is silently ignored.
    """

    def __init__(self, aVertex: Optional[List[pyvertex]] = None,
                 iFlag_allow_multiple_edges: bool = False):
        """
        Initialize the graph from an explicit vertex list.

        Args:
            aVertex: Vertices indexed 0..n-1; the list is copied. Omit for an
                empty graph built incrementally with add_vertex.
            iFlag_allow_multiple_edges: Keep duplicate edges instead of dropping them
        """
        self.iFlag_allow_multiple_edges = bool(iFlag_allow_multiple_edges)
        self.aVertex: List[pyvertex] = list(aVertex) if aVertex is not None else []

        # adjacency_list[i][j].lVertexID_to == k means an edge i -> k
        self.adjacency_list: List[List[pyedge]] = [[] for _ in self.aVertex]

    @classmethod
    def from_vertex_factory(cls, nVertex: int, pFactory: Union[VertexFactory, Callable[[int], pyvertex]],
                            iFlag_allow_multiple_edges: bool = False) -> 'pygraph':
        """
        Create a graph with a fixed number of vertices.

        Args:
            nVertex: Number of vertices, must be positive
            pFactory: VertexFactory (or callable taking an index) invoked once per index
            iFlag_allow_multiple_edges: Keep duplicate edges instead of dropping them

        Returns:
            Graph with vertices 0..nVertex-1 and no edges
        """
        if nVertex <= 0:
            logger.debug(f"Rejecting vertex count {nVertex}")
            raise InvalidArgumentError(f"Number of vertices must be positive, got {nVertex}")

        create = getattr(pFactory, 'create', pFactory)
        aVertex = []
        for lVertexID in range(nVertex):
            pVertex = create(lVertexID)
            if pVertex.lVertexID != lVertexID:
                logger.debug(f"Vertex factory returned {pVertex} for index {lVertexID}")
                raise InvalidArgumentError(
                    f"Vertex factory returned index {pVertex.lVertexID} for requested index {lVertexID}")
            aVertex.append(pVertex)

        return cls(aVertex, iFlag_allow_multiple_edges)

    @classmethod
    def from_elements(cls, aElement: Iterable[Any],
                      iFlag_allow_multiple_edges: bool = False) -> 'pygraph':
        """
        Create a graph wrapping each element in a new vertex.

        Args:
            aElement: Payloads, assigned indices 0, 1, 2, ... in iteration order
            iFlag_allow_multiple_edges: Keep duplicate edges instead of dropping them

        Returns:
            Graph with one vertex per element and no edges
        """
        aVertex = [pyvertex(idx, element) for idx, element in enumerate(aElement)]
        return cls(aVertex, iFlag_allow_multiple_edges)

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, pVertex: pyvertex,
                   aEdge: Union[pyedge, Iterable[pyedge], None] = None):
        """
        Append a vertex and optionally the edges attached to it.

        The vertex must already carry the next free index; it is not re-indexed.

        Args:
            pVertex: Vertex to append
            aEdge: A single edge, an iterable of edges, or None
        """
        self.aVertex.append(pVertex)
        self.adjacency_list.append([])

        if aEdge is None:
            return
        if isinstance(aEdge, pyedge):
            aEdge = [aEdge]
        for pEdge in aEdge:
            self.add_edge(pEdge)

    def add_edge(self, pEdge: pyedge):
        """
        Add an edge, duplicating it into the target's adjacency if undirected.

        Args:
            pEdge: Edge whose endpoints are existing vertex indices

        Raises:
            InvalidArgumentError: If either endpoint is out of range
        """
        nVertex = len(self.aVertex)
        lFrom = pEdge.lVertexID_from
        lTo = pEdge.lVertexID_to
        if not (0 <= lFrom < nVertex and 0 <= lTo < nVertex):
            logger.debug(f"Rejecting {pEdge} for graph with {nVertex} vertices")
            raise InvalidArgumentError(f"Invalid edge: {pEdge}, from/to indexes out of range")

        self._add_edge_to_slot(pEdge, self.adjacency_list[lFrom])

        if pEdge.iFlag_directed or lFrom == lTo:
            return

        # Store the other way too, for lookup from the target vertex
        self._add_edge_to_slot(pEdge, self.adjacency_list[lTo])

    def add_edge_between(self, lVertexID_from: int, lVertexID_to: int,
                         dValue: Any = 0.0, iFlag_directed: bool = False):
        """
        Convenience method building an edge and adding it to the graph.

        Args:
            lVertexID_from: Source vertex index
            lVertexID_to: Target vertex index
            dValue: Edge value
            iFlag_directed: Whether the edge is directed
        """
        self.add_edge(pyedge(lVertexID_from, lVertexID_to, dValue, iFlag_directed))

    def _add_edge_to_slot(self, pEdge: pyedge, aSlot: List[pyedge]):
        if self.iFlag_allow_multiple_edges:
            aSlot.append(pEdge)
            return

        # aSlot is already keyed by the source vertex, so directed edges only compare targets
        if pEdge.iFlag_directed:
            iFlag_duplicate = any(e.lVertexID_to == pEdge.lVertexID_to for e in aSlot)
        else:
            iFlag_duplicate = any(
                (e.lVertexID_from == pEdge.lVertexID_from and e.lVertexID_to == pEdge.lVertexID_to)
                or (e.lVertexID_to == pEdge.lVertexID_from and e.lVertexID_from == pEdge.lVertexID_to)
                for e in aSlot)

        if not iFlag_duplicate:
            aSlot.append(pEdge)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def num_vertices(self) -> int:
        """Get the number of vertices in the graph."""
        return len(self.aVertex)

    def __len__(self):
        return len(self.aVertex)

    def num_edges(self) -> int:
        """
        Get the number of logical edges.

        An undirected edge stored in the adjacency of both endpoints counts once.
        """
        nEdge = 0
        for lVertexID, aSlot in enumerate(self.adjacency_list):
            for pEdge in aSlot:
                if pEdge.iFlag_directed or pEdge.lVertexID_from == lVertexID:
                    nEdge += 1
        return nEdge

    def get_vertex(self, lVertexID: int) -> pyvertex:
        """
        Get a vertex by its index.

        Raises:
            InvalidArgumentError: If the index is out of range
        """
        self._check_index(lVertexID)
        return self.aVertex[lVertexID]

    def get_vertices(self, aIndex: Iterable[int]) -> List[pyvertex]:
        """Get the vertices at each of the given indices, in order."""
        return [self.get_vertex(lVertexID) for lVertexID in aIndex]

    def get_vertex_range(self, lVertexID_from: int, lVertexID_to: int) -> List[pyvertex]:
        """
        Get the vertices with indices from ``lVertexID_from`` to ``lVertexID_to`` inclusive.

        Raises:
            InvalidArgumentError: If the range is reversed or exceeds the vertex count
        """
        if (lVertexID_to < lVertexID_from or lVertexID_from < 0
                or lVertexID_to >= len(self.aVertex)):
            logger.debug(f"Rejecting range {lVertexID_from}..{lVertexID_to} "
                         f"for graph with {len(self.aVertex)} vertices")
            raise InvalidArgumentError(
                f"Invalid range: from={lVertexID_from}, to={lVertexID_to}")
        return self.aVertex[lVertexID_from:lVertexID_to + 1]

    def get_edges_out(self, lVertexID: int) -> List[pyedge]:
        """
        Get the edges leaving (or, if undirected, touching) a vertex.

        Returns:
            Copy of the vertex adjacency, in insertion order; empty if it has no edges
        """
        self._check_index(lVertexID)
        return self.adjacency_list[lVertexID].copy()

    def get_vertex_degree(self, lVertexID: int) -> int:
        """Get the number of edges in a vertex adjacency (undirected edges count once per endpoint)."""
        self._check_index(lVertexID)
        return len(self.adjacency_list[lVertexID])

    def get_connected_vertices(self, lVertexID: int) -> List[pyvertex]:
        """Get the neighbors of a vertex, one per adjacency entry."""
        return [self.aVertex[lNeighbor] for lNeighbor in self.get_connected_vertex_indices(lVertexID)]

    def get_connected_vertex_indices(self, lVertexID: int) -> np.ndarray:
        """
        Get the neighbor indices of a vertex.

        Args:
            lVertexID: Vertex index

        Returns:
            Integer array with one neighbor index per adjacency entry, in insertion order
        """
        self._check_index(lVertexID)
        aSlot = self.adjacency_list[lVertexID]
        return np.fromiter((pEdge.other_end(lVertexID) for pEdge in aSlot),
                           dtype=np.int64, count=len(aSlot))

    def get_random_connected_vertex(self, lVertexID: int, rng) -> pyvertex:
        """
        Sample a neighbor uniformly over the vertex adjacency entries.

        Args:
            lVertexID: Vertex index
            rng: Random source exposing ``integers(bound)``, e.g. numpy.random.Generator

        Returns:
            The vertex at the other end of the sampled edge

        Raises:
            InvalidArgumentError: If the index is out of range
            NoEdgesError: If the vertex has no edges
        """
        self._check_index(lVertexID)
        aSlot = self.adjacency_list[lVertexID]
        if not aSlot:
            logger.debug(f"Vertex {lVertexID} has no edges to sample from")
            raise NoEdgesError(f"Cannot generate random connected vertex: vertex {lVertexID} "
                               f"has no outgoing/undirected edges")

        pEdge = aSlot[int(rng.integers(len(aSlot)))]
        return self.aVertex[pEdge.other_end(lVertexID)]

    def _check_index(self, lVertexID: int):
        if not 0 <= lVertexID < len(self.aVertex):
            logger.debug(f"Rejecting vertex index {lVertexID} for graph with {len(self.aVertex)} vertices")
            raise InvalidArgumentError(f"Invalid vertex index: {lVertexID}")

    # ========================================================================
    # EQUALITY AND DISPLAY
    # ========================================================================

    def __eq__(self, other):
        if not isinstance(other, pygraph):
            return NotImplemented
        return (self.iFlag_allow_multiple_edges == other.iFlag_allow_multiple_edges
                and self.aVertex == other.aVertex
                and self.adjacency_list == other.adjacency_list)

    def __hash__(self):
        return hash((self.iFlag_allow_multiple_edges,
                     tuple(self.aVertex),
                     tuple(tuple(aSlot) for aSlot in self.adjacency_list)))

    def __str__(self):
        aLine = ["Graph {", "Vertices {"]
        aLine.extend(f"\t{pVertex}" for pVertex in self.aVertex)
        aLine.append("}")
        aLine.append("Edges {")
        for lVertexID, aSlot in enumerate(self.adjacency_list):
            aLine.append(f"\t{lVertexID}:" + "".join(f" {pEdge}" for pEdge in aSlot))
        aLine.append("}")
        aLine.append("}")
        return "\n".join(aLine)

    def __repr__(self):
        return (f"pygraph(vertices={len(self.aVertex)}, edges={self.num_edges()}, "
                f"allow_multiple_edges={self.iFlag_allow_multiple_edges})")

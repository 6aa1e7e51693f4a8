"""
Random walk generation over sequence graphs.

Walks are produced by repeatedly sampling a random neighbor of the current
vertex, which is the input an embedding model consumes as a "sentence" of
vertex indices.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional

import numpy as np

from ..classes.vertex import pyvertex
from ..classes.exceptions import InvalidArgumentError, NoEdgesError
from ..core.graph import pygraph

logger = logging.getLogger(__name__)


class NoEdgeHandling(Enum):
    """What a walk does on reaching a vertex with no edges."""
    EXCEPTION_ON_DISCONNECTED = "exception"
    SELF_LOOP_ON_DISCONNECTED = "self_loop"
    CUTOFF_ON_DISCONNECTED = "cutoff"


class RandomWalker:
    """
    Generates fixed-length random walks over a graph.

    The walker owns its random generator so a seeded walker reproduces the
    same walks for the same graph. Not safe to share across threads.
    """

    def __init__(self, graph: pygraph, walk_length: int,
                 no_edge_handling: NoEdgeHandling = NoEdgeHandling.EXCEPTION_ON_DISCONNECTED,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the walker.

        Args:
            graph: Graph to walk over
            walk_length: Maximum number of vertices per walk, including the start
            no_edge_handling: Behaviour on vertices without edges
            seed: Seed for a new numpy generator, ignored when rng is given
            rng: Random source exposing ``integers(bound)``
        """
        if walk_length < 1:
            logger.debug(f"Rejecting walk length {walk_length}")
            raise InvalidArgumentError(f"Walk length must be at least 1, got {walk_length}")

        self.graph = graph
        self.walk_length = walk_length
        self.no_edge_handling = no_edge_handling
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def walk(self, lVertexID_start: int) -> List[int]:
        """
        Generate one walk.

        Args:
            lVertexID_start: Index of the first vertex

        Returns:
            Vertex indices visited, starting with lVertexID_start

        Raises:
            NoEdgesError: On a vertex without edges under EXCEPTION_ON_DISCONNECTED
        """
        self.graph.get_vertex(lVertexID_start)
        lCurrent = int(lVertexID_start)
        aWalk = [lCurrent]

        while len(aWalk) < self.walk_length:
            try:
                lCurrent = self.graph.get_random_connected_vertex(lCurrent, self.rng).lVertexID
            except NoEdgesError:
                if self.no_edge_handling == NoEdgeHandling.SELF_LOOP_ON_DISCONNECTED:
                    aWalk.extend([lCurrent] * (self.walk_length - len(aWalk)))
                    break
                elif self.no_edge_handling == NoEdgeHandling.CUTOFF_ON_DISCONNECTED:
                    break
                raise
            aWalk.append(lCurrent)

        return aWalk

    def walk_vertices(self, lVertexID_start: int) -> List[pyvertex]:
        """Generate one walk resolved to vertex objects."""
        return self.graph.get_vertices(self.walk(lVertexID_start))

    def walks(self, aStart: Optional[Iterable[int]] = None,
              iFlag_shuffle: bool = False) -> Iterator[List[int]]:
        """
        Generate one walk per start vertex.

        Args:
            aStart: Start vertex indices; defaults to every vertex in index order
            iFlag_shuffle: Visit the start vertices in random order

        Yields:
            One walk (list of vertex indices) per start vertex
        """
        if aStart is None:
            aStart = np.arange(self.graph.num_vertices())
        aStart = np.asarray(list(aStart), dtype=np.int64)
        if iFlag_shuffle:
            # Fisher-Yates, drawing only through integers(bound)
            for i in range(len(aStart) - 1, 0, -1):
                j = int(self.rng.integers(i + 1))
                aStart[i], aStart[j] = aStart[j], aStart[i]

        logger.debug(f"Generating {len(aStart)} walks of length {self.walk_length} "
                     f"({self.no_edge_handling.value} on disconnected vertices)")

        for lVertexID in aStart:
            yield self.walk(int(lVertexID))

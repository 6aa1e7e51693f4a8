"""
seqgraph - In-memory graphs for random-walk sequence embeddings

A Python library holding vertices and edges in memory as the structural
backbone for graph-based embedding algorithms. Handles directed and
undirected edges, optional multi-edge suppression, and random neighbor
sampling for walk generation.

Main Classes:
    pygraph: Graph container with adjacency lists
    pyvertex: Indexed vertex wrapping a payload
    pyedge: Directed or undirected edge between vertex indices
    RandomWalker: Random walk generator over a pygraph

Example:
    >>> import numpy as np
    >>> from seqgraph import pygraph
    >>> graph = pygraph.from_elements(['a', 'b', 'c'])
    >>> graph.add_edge_between(0, 1, 1.0)
    >>> graph.get_random_connected_vertex(0, np.random.default_rng(42))
    vertex(idx=1, value='b')
"""

__version__ = "0.1.0"

from seqgraph.classes.vertex import pyvertex, VertexFactory
from seqgraph.classes.edge import pyedge
from seqgraph.classes.exceptions import InvalidArgumentError, NoEdgesError
from seqgraph.core.graph import pygraph
from seqgraph.analysis.walks import RandomWalker, NoEdgeHandling

__all__ = [
    'pygraph',
    'pyvertex',
    'pyedge',
    'VertexFactory',
    'InvalidArgumentError',
    'NoEdgesError',
    'RandomWalker',
    'NoEdgeHandling',
]

"""
Core data classes for sequence graph representation.

This module contains the fundamental data structures used throughout
the seqgraph library.
"""

from .vertex import pyvertex, VertexFactory
from .edge import pyedge
from .exceptions import InvalidArgumentError, NoEdgesError

__all__ = [
    'pyvertex',
    'VertexFactory',
    'pyedge',
    'InvalidArgumentError',
    'NoEdgesError',
]

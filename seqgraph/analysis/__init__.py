"""
Analysis modules for walk generation over sequence graphs.
"""

from .walks import RandomWalker, NoEdgeHandling

__all__ = ['RandomWalker', 'NoEdgeHandling']

"""
Core graph data structures and management.

This module contains the fundamental graph representation and its
single-hop queries.
"""

from .graph import pygraph

__all__ = ['pygraph']

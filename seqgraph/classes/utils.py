"""
Utility functions for seqgraph.

This module provides diagnostics shared across the package: consistency
checks of the adjacency representation and summary statistics, used when
logging or debugging graphs built by callers.
"""

import logging
from typing import Any, Dict

import numpy as np

logger = logging.getLogger(__name__)


def validate_graph_structure(graph) -> Dict[str, Any]:
    """
    Validate the internal consistency of the graph structure.

    Args:
        graph: pygraph instance to check

    Returns:
        Dictionary containing validation results
    """
    validation_results = {
        'is_valid': True,
        'issues': [],
        'statistics': {}
    }

    nVertex = len(graph.aVertex)

    if len(graph.adjacency_list) != nVertex:
        validation_results['issues'].append(
            f"Adjacency slot count {len(graph.adjacency_list)} does not match vertex count {nVertex}")

    for lVertexID, pVertex in enumerate(graph.aVertex):
        if pVertex.lVertexID != lVertexID:
            validation_results['issues'].append(
                f"Vertex at position {lVertexID} carries index {pVertex.lVertexID}")

    nEdge_stored = 0
    for lVertexID, aSlot in enumerate(graph.adjacency_list):
        aPair_seen = set()
        for pEdge in aSlot:
            nEdge_stored += 1
            lFrom = pEdge.lVertexID_from
            lTo = pEdge.lVertexID_to

            if not (0 <= lFrom < nVertex and 0 <= lTo < nVertex):
                validation_results['issues'].append(
                    f"Edge {pEdge} in slot {lVertexID} references a vertex out of range")

            if lFrom != lVertexID and (pEdge.iFlag_directed or lTo != lVertexID):
                validation_results['issues'].append(
                    f"Edge {pEdge} stored in slot {lVertexID} does not touch that vertex")

            if graph.iFlag_allow_multiple_edges:
                continue
            if pEdge.iFlag_directed:
                pKey = ('directed', lTo)
            else:
                pKey = ('undirected', frozenset((lFrom, lTo)))
            if pKey in aPair_seen:
                validation_results['issues'].append(
                    f"Duplicate edge {pEdge} in slot {lVertexID}")
            aPair_seen.add(pKey)

    validation_results['is_valid'] = not validation_results['issues']
    validation_results['statistics'] = {
        'total_vertices': nVertex,
        'total_edges': graph.num_edges(),
        'stored_edges': nEdge_stored,
    }

    if validation_results['is_valid']:
        logger.debug(f"Graph structure valid: {nVertex} vertices, {nEdge_stored} stored edges")
    else:
        logger.warning(f"Graph structure has {len(validation_results['issues'])} issues")

    return validation_results


def get_graph_statistics(graph) -> Dict[str, Any]:
    """
    Get summary statistics about the graph structure.

    Args:
        graph: pygraph instance to summarize

    Returns:
        Dictionary containing graph statistics
    """
    aDegree = np.array([len(aSlot) for aSlot in graph.adjacency_list], dtype=np.int64)

    nDirected = 0
    nUndirected = 0
    for lVertexID, aSlot in enumerate(graph.adjacency_list):
        for pEdge in aSlot:
            if pEdge.iFlag_directed:
                nDirected += 1
            elif pEdge.lVertexID_from == lVertexID:
                nUndirected += 1

    stats = {
        'vertices': {
            'total': len(graph.aVertex),
            'isolated': int(np.count_nonzero(aDegree == 0)),
        },
        'edges': {
            'total': nDirected + nUndirected,
            'directed': nDirected,
            'undirected': nUndirected,
            'stored': int(aDegree.sum()),
        },
        'connectivity': {
            'avg_degree': float(aDegree.mean()) if aDegree.size else 0.0,
            'max_degree': int(aDegree.max()) if aDegree.size else 0,
            'min_degree': int(aDegree.min()) if aDegree.size else 0,
        },
        'allow_multiple_edges': graph.iFlag_allow_multiple_edges,
    }

    return stats

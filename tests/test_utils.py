import pytest

from seqgraph import pygraph, pyvertex, pyedge
from seqgraph.classes.utils import validate_graph_structure, get_graph_statistics


def test_valid_graph(cycle_graph):
    results = validate_graph_structure(cycle_graph)

    assert results['is_valid']
    assert results['issues'] == []
    assert results['statistics'] == {'total_vertices': 4, 'total_edges': 4, 'stored_edges': 8}


def test_misplaced_vertex_index_reported():
    graph = pygraph([pyvertex(0, 'a'), pyvertex(5, 'b')])
    results = validate_graph_structure(graph)

    assert not results['is_valid']
    assert any('carries index 5' in issue for issue in results['issues'])


def test_tampered_adjacency_reported(cycle_graph):
    cycle_graph.adjacency_list[2].append(pyedge(0, 1, 1.0, True))
    cycle_graph.adjacency_list[0].append(pyedge(0, 1, 1.0, False))
    results = validate_graph_structure(cycle_graph)

    assert not results['is_valid']
    assert any('does not touch' in issue for issue in results['issues'])
    assert any('Duplicate edge' in issue for issue in results['issues'])


def test_multiple_edges_not_reported_when_allowed():
    graph = pygraph.from_elements('ab', iFlag_allow_multiple_edges=True)
    graph.add_edge_between(0, 1, 1.0)
    graph.add_edge_between(1, 0, 1.0)

    assert validate_graph_structure(graph)['is_valid']


def test_statistics(cycle_graph):
    cycle_graph.add_vertex(pyvertex(4, 'e'))
    cycle_graph.add_edge_between(0, 2, 1.0, True)
    stats = get_graph_statistics(cycle_graph)

    assert stats['vertices'] == {'total': 5, 'isolated': 1}
    assert stats['edges'] == {'total': 5, 'directed': 1, 'undirected': 4, 'stored': 9}
    assert stats['connectivity']['max_degree'] == 3
    assert stats['connectivity']['min_degree'] == 0
    assert stats['connectivity']['avg_degree'] == pytest.approx(9 / 5)


def test_statistics_empty_graph():
    stats = get_graph_statistics(pygraph())
    assert stats['edges']['total'] == 0
    assert stats['connectivity']['avg_degree'] == 0.0

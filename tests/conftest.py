import pytest

from seqgraph import pygraph, pyvertex, VertexFactory


class LabelVertexFactory(VertexFactory):
    """Creates vertices labelled v0, v1, ..."""

    def __init__(self):
        self.calls = []

    def create(self, lVertexID):
        self.calls.append(lVertexID)
        return pyvertex(lVertexID, f"v{lVertexID}")


class ZeroRng:
    """Random source that always picks the first adjacency entry."""

    def integers(self, high):
        return 0


class LastRng:
    """Random source that always picks the last adjacency entry."""

    def integers(self, high):
        return high - 1


@pytest.fixture
def factory():
    return LabelVertexFactory()


@pytest.fixture
def zero_rng():
    return ZeroRng()


@pytest.fixture
def last_rng():
    return LastRng()


@pytest.fixture
def cycle_graph():
    """Undirected 4-cycle 0-1-2-3-0 without multi-edges."""
    graph = pygraph.from_elements(['a', 'b', 'c', 'd'])
    graph.add_edge_between(0, 1, 1.0)
    graph.add_edge_between(1, 2, 1.0)
    graph.add_edge_between(2, 3, 1.0)
    graph.add_edge_between(3, 0, 1.0)
    return graph

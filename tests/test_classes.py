import pytest

from seqgraph import pyvertex, pyedge, InvalidArgumentError


class TestVertex:

    def test_equality_uses_index_and_value(self):
        assert pyvertex(1, 'a') == pyvertex(1, 'a')
        assert pyvertex(1, 'a') != pyvertex(2, 'a')
        assert pyvertex(1, 'a') != pyvertex(1, 'b')

    def test_index_is_read_only(self):
        vertex = pyvertex(3, 'x')
        with pytest.raises(AttributeError):
            vertex.lVertexID = 4
        assert vertex.lVertexID == 3

    def test_unhashable_payload_still_hashes(self):
        vertex = pyvertex(0, ['list', 'payload'])
        assert hash(vertex) == hash(pyvertex(0, ['list', 'payload']))

    def test_repr(self):
        assert repr(pyvertex(2, 'w')) == "vertex(idx=2, value='w')"


class TestEdge:

    def test_equality_uses_all_fields(self):
        assert pyedge(0, 1, 2.0, True) == pyedge(0, 1, 2.0, True)
        assert pyedge(0, 1, 2.0, True) != pyedge(1, 0, 2.0, True)
        assert pyedge(0, 1, 2.0, True) != pyedge(0, 1, 3.0, True)
        assert pyedge(0, 1, 2.0, True) != pyedge(0, 1, 2.0, False)

    def test_hash_matches_equality(self):
        assert len({pyedge(0, 1, 1.0, False), pyedge(0, 1, 1.0, False)}) == 1

    def test_construction_does_not_validate_indices(self):
        edge = pyedge(-5, 1000, 0.5, False)
        assert edge.lVertexID_from == -5
        assert edge.lVertexID_to == 1000

    def test_other_end(self):
        edge = pyedge(2, 7, 1.0, False)
        assert edge.other_end(2) == 7
        assert edge.other_end(7) == 2

    def test_repr_shows_direction(self):
        assert repr(pyedge(0, 1, 1.5, True)) == "edge(0->1, value=1.5)"
        assert repr(pyedge(0, 1, 1.5, False)) == "edge(0--1, value=1.5)"


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgumentError, ValueError)

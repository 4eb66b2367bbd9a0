import operator

import pytest

from vf2.graph import LabeledGraph
from vf2.iter import IsomorphismIter

QUERY_EDGES = [(0, 2), (1, 2), (2, 3), (3, 4)]
DATA_EDGES = [(0, 3), (1, 3), (2, 3), (1, 2), (3, 4), (4, 5), (3, 6), (7, 6)]


def make_iter(induced=False):
    query = LabeledGraph.from_edges(QUERY_EDGES, True)
    data = LabeledGraph.from_edges(DATA_EDGES, True)
    return IsomorphismIter(query, data, None, None, induced)


@pytest.mark.parametrize(
    "advance",
    [IsomorphismIter.next_ref, IsomorphismIter.into_next, next],
    ids=["next_ref", "into_next", "next"],
)
def test_first_map(advance):
    assert advance(make_iter()) == [0, 1, 3, 4, 5]


@pytest.mark.parametrize(
    ("induced", "expected"),
    [
        (False, [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]),
        (True, [(0, 1), (0, 2), (1, 0), (2, 0)]),
    ],
)
def test_iteration_yields_all_maps(induced, expected):
    assert list(make_iter(induced)) == [[a, b, 3, 4, 5] for a, b in expected]


def test_yielded_maps_are_independent_copies():
    it = make_iter()
    first = next(it)
    second = next(it)
    assert (first, second) == ([0, 1, 3, 4, 5], [0, 2, 3, 4, 5])


def test_exhausted_iterator_stays_exhausted():
    it = make_iter(induced=True)
    assert len(list(it)) == 4
    assert it.next_ref() is None
    assert it.into_next() is None
    with pytest.raises(StopIteration):
        next(it)


def test_iter_returns_self():
    it = make_iter()
    assert iter(it) is it


def test_equality_functions_are_used():
    query = LabeledGraph(directed=True)
    for label in ("a", "b"):
        query.add_node(label)
    query.add_edge(0, 1, "x")
    data = LabeledGraph(directed=True)
    for label in ("b", "a", "b"):
        data.add_node(label)
    data.add_edge(1, 0, "x")
    data.add_edge(1, 2, "y")
    it = IsomorphismIter(query, data, operator.eq, operator.eq, False)
    assert list(it) == [[1, 0]]


def test_empty_query_raises():
    data = LabeledGraph.from_edges([(0, 1), (1, 2)])
    with pytest.raises(ValueError):
        IsomorphismIter(LabeledGraph(directed=True), data, None, None, True)


def test_repr_names_class():
    assert repr(make_iter()).startswith("IsomorphismIter(")
import pytest

from vf2.graph import Direction, Graph, LabeledGraph

EDGES = [(0, 2), (1, 2), (2, 3)]


def test_graph_is_abstract():
    with pytest.raises(TypeError):
        Graph()


def test_from_edges_node_count():
    graph = LabeledGraph.from_edges(EDGES)
    assert graph.node_count() == 4


def test_from_edges_directed_flag():
    assert LabeledGraph.from_edges(EDGES).is_directed() is True
    assert LabeledGraph.from_edges(EDGES, directed=False).is_directed() is False


def test_directed_contains_edge_one_way():
    graph = LabeledGraph.from_edges(EDGES)
    assert graph.contains_edge(0, 2) is True
    assert graph.contains_edge(2, 0) is False


def test_undirected_contains_edge_both_ways():
    graph = LabeledGraph.from_edges(EDGES, directed=False)
    for source, target in EDGES:
        assert graph.contains_edge(source, target) is True
        assert graph.contains_edge(target, source) is True
    assert graph.contains_edge(0, 1) is False


def test_contains_edge_missing_node_is_false():
    graph = LabeledGraph.from_edges(EDGES)
    assert graph.contains_edge(10, 0) is False
    assert graph.contains_edge(0, 10) is False


def test_directed_neighbors():
    graph = LabeledGraph.from_edges(EDGES)
    assert set(graph.neighbors(2, Direction.OUTGOING)) == {3}
    assert set(graph.neighbors(2, Direction.INCOMING)) == {0, 1}


def test_undirected_neighbors_ignore_direction():
    graph = LabeledGraph.from_edges(EDGES, directed=False)
    outgoing = set(graph.neighbors(2, Direction.OUTGOING))
    incoming = set(graph.neighbors(2, Direction.INCOMING))
    assert outgoing == incoming == {0, 1, 3}


def test_neighbors_of_missing_node():
    graph = LabeledGraph.from_edges(EDGES)
    with pytest.raises(IndexError):
        graph.neighbors(7, Direction.OUTGOING)


def test_add_node_returns_consecutive_indices_and_labels():
    graph = LabeledGraph()
    labels = ["a", "b", "c"]
    indices = [graph.add_node(label) for label in labels]
    assert indices == [0, 1, 2]
    assert [graph.node_label(index) for index in indices] == labels


def test_from_edges_labels_are_none():
    graph = LabeledGraph.from_edges(EDGES)
    assert graph.node_label(0) is None
    assert graph.edge_label(0, 2) is None


def test_edge_label_round_trip_directed():
    graph = LabeledGraph()
    first, second = graph.add_node("x"), graph.add_node("y")
    graph.add_edge(first, second, "label")
    assert graph.edge_label(first, second) == "label"
    with pytest.raises(KeyError):
        graph.edge_label(second, first)


def test_edge_label_round_trip_undirected():
    graph = LabeledGraph(directed=False)
    first, second = graph.add_node(), graph.add_node()
    graph.add_edge(first, second, "label")
    assert graph.edge_label(first, second) == "label"
    assert graph.edge_label(second, first) == "label"


def test_add_edge_replaces_label():
    graph = LabeledGraph()
    first, second = graph.add_node(), graph.add_node()
    graph.add_edge(first, second, "old")
    graph.add_edge(first, second, "new")
    assert graph.edge_label(first, second) == "new"
    assert list(graph.neighbors(first, Direction.OUTGOING)) == [second]


def test_node_label_missing_node():
    graph = LabeledGraph.from_edges(EDGES)
    with pytest.raises(IndexError):
        graph.node_label(graph.node_count())


def test_add_edge_missing_node():
    graph = LabeledGraph()
    graph.add_node()
    with pytest.raises(IndexError):
        graph.add_edge(0, 1)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)
"""Graph interface used by the matcher, and a simple labelled graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

NodeIndex = int
"""A node index."""

Isomorphism = list
"""A mapping from query nodes to data nodes.

The value at index ``i`` is the data node that query node ``i`` maps to.
"""


class Direction(Enum):
    """Edge direction, either outgoing or incoming."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"


class Graph(ABC):
    """A graph whose nodes are numbered ``0`` to ``node_count() - 1``."""

    @abstractmethod
    def is_directed(self) -> bool:
        """Return True if the graph is directed, False if undirected."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""

    @abstractmethod
    def node_label(self, node: int) -> Any:
        """Return the label of ``node``; raise IndexError if it does not exist."""

    @abstractmethod
    def neighbors(self, node: int, direction: Direction) -> Iterator[int]:
        """Iterate over the neighbours of ``node``.

        Directed graphs yield neighbours in ``direction`` only; undirected
        graphs ignore ``direction`` and yield all neighbours.
        """

    @abstractmethod
    def contains_edge(self, source: int, target: int) -> bool:
        """Return True if there is an edge from ``source`` to ``target``.

        For undirected graphs, an edge between the two nodes suffices.
        """

    @abstractmethod
    def edge_label(self, source: int, target: int) -> Any:
        """Return the label of the edge from ``source`` to ``target``.

        Raise KeyError if there is no such edge.
        """


class LabeledGraph(Graph):
    """An adjacency-map graph with arbitrary node and edge labels.

    Adding an edge that already exists replaces its label.
    """

    def __init__(self, directed: bool = True) -> None:
        self._directed = directed
        self._labels: list[Any] = []
        self._outgoing: list[dict[int, Any]] = []
        self._incoming: list[dict[int, Any]] = []

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[int, int]], directed: bool = True
    ) -> LabeledGraph:
        """Build a graph from ``(source, target)`` pairs.

        Nodes are created as needed up to the largest index seen; all node
        and edge labels are None.
        """
        graph = cls(directed)
        for source, target in edges:
            while graph.node_count() <= max(source, target):
                graph.add_node()
            graph.add_edge(source, target)
        return graph

    def add_node(self, label: Any = None) -> int:
        """Add a node with ``label`` and return its index."""
        self._labels.append(label)
        self._outgoing.append({})
        self._incoming.append({})
        return len(self._labels) - 1

    def add_edge(self, source: int, target: int, label: Any = None) -> None:
        """Add an edge from ``source`` to ``target`` carrying ``label``."""
        self._check_node(source)
        self._check_node(target)
        self._outgoing[source][target] = label
        if self._directed:
            self._incoming[target][source] = label
        else:
            self._outgoing[target][source] = label

    def is_directed(self) -> bool:
        return self._directed

    def node_count(self) -> int:
        return len(self._labels)

    def node_label(self, node: int) -> Any:
        self._check_node(node)
        return self._labels[node]

    def neighbors(self, node: int, direction: Direction) -> Iterator[int]:
        self._check_node(node)
        if self._directed and direction is Direction.INCOMING:
            return iter(self._incoming[node])
        return iter(self._outgoing[node])

    def contains_edge(self, source: int, target: int) -> bool:
        return 0 <= source < len(self._labels) and target in self._outgoing[source]

    def edge_label(self, source: int, target: int) -> Any:
        if not self.contains_edge(source, target):
            raise KeyError((source, target))
        return self._outgoing[source][target]

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._labels):
            raise IndexError(f"node {node} does not exist")

    def __repr__(self) -> str:
        edges = [
            (source, target)
            for source, targets in enumerate(self._outgoing)
            for target in targets
            if self._directed or source <= target
        ]
        return (
            f"{type(self).__name__}(directed={self._directed}, "
            f"nodes={self._labels!r}, edges={edges!r})"
        )
"""Entry points that configure and run the VF2 search.

Example::

    query = LabeledGraph.from_edges([(0, 1)])
    data = LabeledGraph.from_edges([(0, 1), (1, 2)])
    subgraph_isomorphisms(query, data).vec()   # [[0, 1], [1, 2]]
"""

from __future__ import annotations

import operator
from enum import Enum

from .graph import Graph
from .iter import IsomorphismIter
from .state import LabelEq


class Problem(Enum):
    """Kind of matching problem."""

    ISOMORPHISM = "isomorphism"
    SUBGRAPH_ISOMORPHISM = "subgraph_isomorphism"
    INDUCED_SUBGRAPH_ISOMORPHISM = "induced_subgraph_isomorphism"

    @property
    def induced(self) -> bool:
        return self is not Problem.SUBGRAPH_ISOMORPHISM


class Vf2Builder:
    """Configuration of one VF2 search.

    Configuration methods return a new builder and leave this one unchanged.
    Node and edge labels are not compared unless an equality is set.
    """

    def __init__(
        self,
        problem: Problem,
        query: Graph,
        data: Graph,
        node_eq: LabelEq | None = None,
        edge_eq: LabelEq | None = None,
    ) -> None:
        self._problem = problem
        self._query = query
        self._data = data
        self._node_eq = node_eq
        self._edge_eq = edge_eq

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(problem={self._problem}, query={self._query!r}, "
            f"data={self._data!r}, node_eq={self._node_eq!r}, edge_eq={self._edge_eq!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vf2Builder):
            return NotImplemented
        return (
            self._problem is other._problem
            and self._query is other._query
            and self._data is other._data
            and self._node_eq == other._node_eq
            and self._edge_eq == other._edge_eq
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def problem(self) -> Problem:
        return self._problem

    def default_eq(self) -> Vf2Builder:
        """Compare node and edge labels with ``==``."""
        return Vf2Builder(
            self._problem, self._query, self._data, operator.eq, operator.eq
        )

    def node_eq(self, node_eq: LabelEq) -> Vf2Builder:
        """Use ``node_eq(query_label, data_label)`` to compare node labels."""
        return Vf2Builder(
            self._problem, self._query, self._data, node_eq, self._edge_eq
        )

    def edge_eq(self, edge_eq: LabelEq) -> Vf2Builder:
        """Use ``edge_eq(query_label, data_label)`` to compare edge labels."""
        return Vf2Builder(
            self._problem, self._query, self._data, self._node_eq, edge_eq
        )

    def first(self) -> list[int] | None:
        """Return the first isomorphism, or None if there is none."""
        return self.iter().into_next()

    def vec(self) -> list[list[int]]:
        """Return all isomorphisms in search order."""
        return list(self.iter())

    def iter(self) -> IsomorphismIter:
        """Return an iterator over the isomorphisms.

        Raise ValueError if the graphs cannot be matched for this problem.
        """
        if (
            self._problem is Problem.ISOMORPHISM
            and self._query.node_count() != self._data.node_count()
        ):
            raise ValueError("graphs must be the same size")
        return IsomorphismIter(
            self._query, self._data, self._node_eq, self._edge_eq, self._problem.induced
        )

    def __iter__(self) -> IsomorphismIter:
        return self.iter()


def isomorphisms(query: Graph, data: Graph) -> Vf2Builder:
    """Configure a search for isomorphisms from ``query`` to ``data``."""
    return Vf2Builder(Problem.ISOMORPHISM, query, data)


def subgraph_isomorphisms(query: Graph, data: Graph) -> Vf2Builder:
    """Configure a search for subgraph isomorphisms from ``query`` to ``data``."""
    return Vf2Builder(Problem.SUBGRAPH_ISOMORPHISM, query, data)


def induced_subgraph_isomorphisms(query: Graph, data: Graph) -> Vf2Builder:
    """Configure a search for induced subgraph isomorphisms."""
    return Vf2Builder(Problem.INDUCED_SUBGRAPH_ISOMORPHISM, query, data)
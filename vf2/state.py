"""Search state of the VF2 algorithm."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, NamedTuple

from .graph import Direction, Graph

LabelEq = Callable[[Any, Any], bool]


class _Source(Enum):
    """Where candidate pairs are drawn from."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    UNCOVERED = "uncovered"


class _Pair(NamedTuple):
    query_node: int
    data_node: int


def _source_target(node: int, neighbor: int, direction: Direction) -> tuple[int, int]:
    if direction is Direction.OUTGOING:
        return node, neighbor
    return neighbor, node


class _GraphState:
    """Partial map and terminal sets of one graph.

    A terminal-set entry is the search depth at which the node entered the
    set, or 0 when it is not in the set.
    """

    def __init__(self, graph: Graph) -> None:
        count = graph.node_count()
        self.graph = graph
        self.directed = graph.is_directed()
        self.map: list[int | None] = [None] * count
        self.outgoing = [0] * count
        self.outgoing_size = 0
        self.incoming = [0] * count
        self.incoming_size = 0
        self.node_stack = [0] * count

    def is_covered(self, node: int) -> bool:
        return self.map[node] is not None

    def next_node(self, source: _Source, skip: int = 0) -> int | None:
        nodes = range(skip, len(self.map))
        if source is _Source.UNCOVERED:
            candidates = (node for node in nodes if self.map[node] is None)
        else:
            terminal = self.outgoing if source is _Source.OUTGOING else self.incoming
            candidates = (
                node for node in nodes if terminal[node] and self.map[node] is None
            )
        return next(candidates, None)

    def push(self, node: int, to_node: int, depth: int) -> None:
        self.node_stack[depth - 1] = node
        self.map[node] = to_node
        if self.outgoing[node]:
            self.outgoing_size -= 1
        self.outgoing_size += self._mark(self.outgoing, node, Direction.OUTGOING, depth)
        if self.directed:
            if self.incoming[node]:
                self.incoming_size -= 1
            self.incoming_size += self._mark(
                self.incoming, node, Direction.INCOMING, depth
            )

    def pop(self, depth: int) -> int:
        node = self.node_stack[depth - 1]
        self.map[node] = None
        if self.outgoing[node]:
            self.outgoing_size += 1
        self.outgoing_size -= self._unmark(
            self.outgoing, node, Direction.OUTGOING, depth
        )
        if self.directed:
            if self.incoming[node]:
                self.incoming_size += 1
            self.incoming_size -= self._unmark(
                self.incoming, node, Direction.INCOMING, depth
            )
        return node

    def _mark(self, terminal: list[int], node: int, direction: Direction, depth: int) -> int:
        added = 0
        for neighbor in self.graph.neighbors(node, direction):
            if not terminal[neighbor]:
                terminal[neighbor] = depth
                if self.map[neighbor] is None:
                    added += 1
        return added

    def _unmark(
        self, terminal: list[int], node: int, direction: Direction, depth: int
    ) -> int:
        removed = 0
        for neighbor in self.graph.neighbors(node, direction):
            if terminal[neighbor] == depth:
                terminal[neighbor] = 0
                if self.map[neighbor] is None:
                    removed += 1
        return removed


class State:
    """Depth-first walk over the VF2 state space.

    Call :meth:`step` repeatedly; when it returns True either a complete
    map is ready (:meth:`all_covered` is True) or the search is over.
    """

    def __init__(
        self,
        query: Graph,
        data: Graph,
        node_eq: LabelEq | None = None,
        edge_eq: LabelEq | None = None,
        induced: bool = False,
    ) -> None:
        if query.node_count() == 0:
            raise ValueError("query graph cannot be empty")
        if query.node_count() > data.node_count():
            raise ValueError("query graph cannot have more nodes than data graph")
        self._induced = induced
        self._depth = 0
        self._query = _GraphState(query)
        self._data = _GraphState(data)
        self._source_stack = [_Source.OUTGOING] * query.node_count()
        self._previous: _Pair | None = None
        self._node_eq = node_eq
        self._edge_eq = edge_eq
        self._directed = query.is_directed()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self._depth}, induced={self._induced}, "
            f"query_map={self._query.map!r})"
        )

    def step(self) -> bool:
        """Advance the search one step.

        Return True if the map is complete or the search is finished.
        """
        pair = self._next_pair()
        if pair is not None:
            self._previous = pair
            if self._feasible(pair):
                self._push(pair)
            return self.all_covered()
        if self._depth > 0:
            self._pop()
            return False
        return True

    def all_covered(self) -> bool:
        """Return True if every query node is mapped."""
        return self._depth == len(self._query.map)

    def query_map(self) -> list[int | None]:
        """Return the current partial map from query nodes to data nodes."""
        return self._query.map

    def _push(self, pair: _Pair) -> None:
        self._depth += 1
        self._previous = None
        self._query.push(pair.query_node, pair.data_node, self._depth)
        self._data.push(pair.data_node, pair.query_node, self._depth)

    def _pop(self) -> None:
        self._previous = _Pair(
            self._query.pop(self._depth), self._data.pop(self._depth)
        )
        self._depth -= 1

    def _next_pair(self) -> _Pair | None:
        if self.all_covered():
            return None
        if self._previous is not None:
            source = self._source_stack[self._depth]
            data_node = self._data.next_node(source, self._previous.data_node + 1)
            if data_node is None:
                return None
            return _Pair(self._previous.query_node, data_node)
        source = self._first_source()
        query_node = self._query.next_node(source)
        if query_node is None:
            return None
        data_node = self._data.next_node(source)
        if data_node is None:
            return None
        self._source_stack[self._depth] = source
        return _Pair(query_node, data_node)

    def _first_source(self) -> _Source:
        if self._query.outgoing_size > 0 and self._data.outgoing_size > 0:
            return _Source.OUTGOING
        if self._query.incoming_size > 0 and self._data.incoming_size > 0:
            return _Source.INCOMING
        return _Source.UNCOVERED

    def _directions(self) -> tuple[Direction, ...]:
        # Undirected graphs yield every neighbour for either direction.
        if self._directed:
            return (Direction.INCOMING, Direction.OUTGOING)
        return (Direction.INCOMING,)

    def _feasible(self, pair: _Pair) -> bool:
        return self._feasible_syntactic(pair) and self._feasible_semantic(pair)

    def _feasible_syntactic(self, pair: _Pair) -> bool:
        return all(
            self._rule_neighbors(pair, direction) for direction in self._directions()
        )

    def _rule_neighbors(self, pair: _Pair, direction: Direction) -> bool:
        query, data = self._query, self._data
        for neighbor in query.graph.neighbors(pair.query_node, direction):
            mapped = query.map[neighbor]
            if mapped is None:
                continue
            source, target = _source_target(pair.data_node, mapped, direction)
            if not data.graph.contains_edge(source, target):
                return False
        if not self._induced:
            return True
        for neighbor in data.graph.neighbors(pair.data_node, direction):
            mapped = data.map[neighbor]
            if mapped is None:
                continue
            source, target = _source_target(pair.query_node, mapped, direction)
            if not query.graph.contains_edge(source, target):
                return False
        return True

    def _feasible_semantic(self, pair: _Pair) -> bool:
        return self._nodes_are_eq(pair) and all(
            self._edges_are_eq(pair, direction) for direction in self._directions()
        )

    def _nodes_are_eq(self, pair: _Pair) -> bool:
        if self._node_eq is None:
            return True
        return self._node_eq(
            self._query.graph.node_label(pair.query_node),
            self._data.graph.node_label(pair.data_node),
        )

    def _edges_are_eq(self, pair: _Pair, direction: Direction) -> bool:
        if self._edge_eq is None:
            return True
        query, data = self._query, self._data
        for neighbor in query.graph.neighbors(pair.query_node, direction):
            mapped = query.map[neighbor]
            if mapped is None:
                continue
            query_edge = _source_target(pair.query_node, neighbor, direction)
            data_edge = _source_target(pair.data_node, mapped, direction)
            if not self._edge_eq(
                query.graph.edge_label(*query_edge),
                data.graph.edge_label(*data_edge),
            ):
                return False
        return True
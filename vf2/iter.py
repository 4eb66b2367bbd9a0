"""Lazy enumeration of isomorphisms."""

from __future__ import annotations

from collections.abc import Iterator

from .graph import Graph
from .state import LabelEq, State


class IsomorphismIter(Iterator[list[int]]):
    """Walk the VF2 state space and yield isomorphisms as they are found.

    Each yielded isomorphism is a list whose value at index ``i`` is the
    data node that query node ``i`` maps to.
    """

    def __init__(
        self,
        query: Graph,
        data: Graph,
        node_eq: LabelEq | None = None,
        edge_eq: LabelEq | None = None,
        induced: bool = False,
    ) -> None:
        self._state = State(query, data, node_eq, edge_eq, induced)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r})"

    def __iter__(self) -> IsomorphismIter:
        return self

    def __next__(self) -> list[int]:
        found = self.next_ref()
        if found is None:
            raise StopIteration
        return list(found)

    def next_ref(self) -> list[int] | None:
        """Advance the search and return the live map, or None when done.

        The returned list belongs to the search state and changes as the
        search continues; copy it to keep it.
        """
        while not self._state.step():
            pass
        if self._state.all_covered():
            return self._state.query_map()  # type: ignore[return-value]
        return None

    def into_next(self) -> list[int] | None:
        """Advance the search and return the next isomorphism, or None."""
        found = self.next_ref()
        return None if found is None else list(found)
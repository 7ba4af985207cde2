"""Read-only graph interface used by the partitioning algorithms."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PartitionableGraph(Protocol):
    """A graph that partitioners can read: vertices, neighbours and degrees."""

    def vertices(self) -> list[Any]: ...

    def neighbors(self, v: Any) -> list[Any]: ...

    def degree(self, v: Any) -> int: ...


class AdjacencyGraph:
    """In-memory graph given by an adjacency mapping ``vertex -> neighbours``."""

    def __init__(self, adjacency: Mapping[Hashable, Iterable[Hashable]]) -> None:
        self._adj: dict[Hashable, list[Hashable]] = {
            v: list(ns) for v, ns in adjacency.items()
        }

    def vertices(self) -> list[Hashable]:
        """All vertices, in the order of the adjacency mapping."""
        return list(self._adj)

    def neighbors(self, v: Hashable) -> list[Hashable]:
        """Neighbours of ``v``; empty for an unknown vertex."""
        return list(self._adj.get(v, ()))

    def degree(self, v: Hashable) -> int:
        """Number of neighbours of ``v``."""
        return len(self._adj.get(v, ()))

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"AdjacencyGraph({self._adj!r})"


def edges(graph: PartitionableGraph) -> Iterator[tuple[Any, Any]]:
    """Yield each ``(u, v)`` with ``u < v`` found among the neighbour lists."""
    for u in graph.vertices():
        for v in graph.neighbors(u):
            if u < v:
                yield u, v
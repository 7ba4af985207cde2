"""Pull per-point slices out of a map along closure or star traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Protocol

from meshsieve.errors import MeshSieveError
from meshsieve.section import Section


class _Traversable(Protocol):
    def closure(self, seeds: Iterable[int]) -> Iterable[int]: ...

    def star(self, seeds: Iterable[int]) -> Iterable[int]: ...


class _PointMap(Protocol):
    def get(self, p: int) -> list[Any]: ...


class ReadOnlyMap:
    """Read-only view of a :class:`Section`; unknown points read as empty."""

    def __init__(self, section: Section) -> None:
        self.section = section

    def get(self, p: int) -> list[Any]:
        """Values stored for ``p``, or an empty list if the point is unknown."""
        try:
            return self.section.restrict(p)
        except MeshSieveError:
            return []

    def __repr__(self) -> str:
        return f"ReadOnlyMap({self.section!r})"


def restrict_closure(
    sieve: _Traversable, mapping: _PointMap, seeds: Iterable[int]
) -> Iterator[tuple[int, list[Any]]]:
    """Yield ``(point, values)`` for every point in the closure of ``seeds``."""
    for p in sieve.closure(seeds):
        yield p, mapping.get(p)


def restrict_star(
    sieve: _Traversable, mapping: _PointMap, seeds: Iterable[int]
) -> Iterator[tuple[int, list[Any]]]:
    """Yield ``(point, values)`` for every point in the star of ``seeds``."""
    for p in sieve.star(seeds):
        yield p, mapping.get(p)


def restrict_closure_list(
    sieve: _Traversable, mapping: _PointMap, seeds: Iterable[int]
) -> list[tuple[int, list[Any]]]:
    """Collected form of :func:`restrict_closure`."""
    return list(restrict_closure(sieve, mapping, seeds))


def restrict_star_list(
    sieve: _Traversable, mapping: _PointMap, seeds: Iterable[int]
) -> list[tuple[int, list[Any]]]:
    """Collected form of :func:`restrict_star`."""
    return list(restrict_star(sieve, mapping, seeds))
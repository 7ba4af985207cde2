"""Per-point field data stored in one contiguous buffer described by an atlas."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from meshsieve.atlas import Atlas
from meshsieve.errors import (
    AtlasInsertionFailedError,
    MeshSieveError,
    MissingSectionPointError,
    PointNotInAtlasError,
    ScatterChunkMismatchError,
    ScatterLengthMismatchError,
    SliceLengthMismatchError,
)


class Section:
    """Field data for mesh points, laid out according to an :class:`Atlas`.

    Every degree of freedom starts out as ``default``.
    """

    def __init__(self, atlas: Atlas, default: Any = 0) -> None:
        self._atlas = atlas.copy()
        self._default = default
        self._data: list[Any] = [default] * self._atlas.total_len()

    @property
    def atlas(self) -> Atlas:
        """A copy of the atlas describing the data layout."""
        return self._atlas.copy()

    @property
    def data(self) -> list[Any]:
        """A copy of the whole contiguous data buffer."""
        return list(self._data)

    def _span(self, p: int) -> tuple[int, int]:
        span = self._atlas.get(p)
        if span is None:
            raise PointNotInAtlasError(p)
        offset, length = span
        if offset + length > len(self._data):
            raise MissingSectionPointError(p)
        return offset, length

    def restrict(self, p: int) -> list[Any]:
        """Return the values stored for point ``p``."""
        offset, length = self._span(p)
        return self._data[offset : offset + length]

    def get(self, p: int) -> list[Any]:
        """Mapping-style access; identical to :meth:`restrict`."""
        return self.restrict(p)

    def set(self, p: int, values: Sequence[Any]) -> None:
        """Overwrite the values of ``p``; the length must match exactly."""
        offset, length = self._span(p)
        found = len(values)
        if found != length:
            raise SliceLengthMismatchError(p, length, found)
        self._data[offset : offset + length] = list(values)

    def items(self) -> Iterator[tuple[int, list[Any]]]:
        """Yield ``(point, values)`` pairs in atlas order."""
        for p in self._atlas.points():
            try:
                yield p, self.restrict(p)
            except MeshSieveError:
                continue

    def __iter__(self) -> Iterator[tuple[int, list[Any]]]:
        return self.items()

    def __contains__(self, p: object) -> bool:
        return p in self._atlas

    def __len__(self) -> int:
        return len(self._atlas)

    def add_point(self, p: int, length: int) -> None:
        """Register a new point with ``length`` default-valued entries."""
        try:
            self._atlas.insert(p, length)
        except MeshSieveError as exc:
            raise AtlasInsertionFailedError(p, exc) from exc
        missing = self._atlas.total_len() - len(self._data)
        self._data.extend([self._default] * missing)

    def remove_point(self, p: int) -> None:
        """Remove ``p`` and compact the buffer so slices stay contiguous."""
        old_atlas = self._atlas.copy()
        self._atlas.remove_point(p)
        new_data: list[Any] = []
        for pid in self._atlas.points():
            span = old_atlas.get(pid)
            if span is None:
                raise MissingSectionPointError(pid)
            offset, length = span
            if offset + length > len(self._data):
                raise MissingSectionPointError(pid)
            new_data.extend(self._data[offset : offset + length])
        self._data = new_data

    def scatter_from(
        self, other: Sequence[Any], atlas_map: Iterable[tuple[int, int]]
    ) -> None:
        """Copy consecutive chunks of ``other`` into ``(offset, length)`` spans."""
        spans = [(int(offset), int(length)) for offset, length in atlas_map]
        expected = sum(length for _, length in spans)
        found = len(other)
        if expected != found:
            raise ScatterLengthMismatchError(expected, found)
        start = 0
        for offset, length in spans:
            end = start + length
            if end > found:
                raise ScatterChunkMismatchError(start, length)
            if offset < 0 or offset + length > len(self._data):
                raise ScatterChunkMismatchError(offset, length)
            self._data[offset : offset + length] = list(other[start:end])
            start = end

    def copy(self) -> Section:
        clone = Section(self._atlas, self._default)
        clone._data = list(self._data)
        return clone

    def __repr__(self) -> str:
        return f"Section({list(self.items())!r})"
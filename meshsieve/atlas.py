"""Mapping of mesh points to contiguous slices of a flat data buffer."""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from meshsieve.errors import (
    DuplicatePointError,
    MissingAtlasPointError,
    ZeroLengthSliceError,
)


class Atlas:
    """Maps each point to an ``(offset, length)`` slice, in insertion order."""

    def __init__(self) -> None:
        self._slices: dict[int, tuple[int, int]] = {}
        self._total_len = 0

    def insert(self, p: int, length: int) -> int:
        """Register point ``p`` with a slice of ``length``; return its offset."""
        if length < 0:
            raise ValueError(f"slice length must be non-negative, got {length}")
        if length == 0:
            raise ZeroLengthSliceError()
        if p in self._slices:
            raise DuplicatePointError(p)
        offset = self._total_len
        self._slices[p] = (offset, length)
        self._total_len += length
        return offset

    def get(self, p: int) -> tuple[int, int] | None:
        """Return ``(offset, length)`` for ``p``, or ``None`` if absent."""
        return self._slices.get(p)

    def total_len(self) -> int:
        """Sum of all slice lengths, i.e. the size of the data buffer."""
        return self._total_len

    def points(self) -> Iterator[int]:
        """Iterate registered points in insertion order."""
        return iter(list(self._slices))

    def remove_point(self, p: int) -> None:
        """Remove ``p`` (if present) and recompute all offsets contiguously."""
        self._slices.pop(p, None)
        next_offset = 0
        for pt, (_, length) in self._slices.items():
            self._slices[pt] = (next_offset, length)
            next_offset += length
        self._total_len = next_offset

    def copy(self) -> Atlas:
        clone = Atlas()
        clone._slices = dict(self._slices)
        clone._total_len = self._total_len
        return clone

    def __len__(self) -> int:
        return len(self._slices)

    def __contains__(self, p: object) -> bool:
        return p in self._slices

    def __iter__(self) -> Iterator[int]:
        return self.points()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atlas):
            return NotImplemented
        return (
            list(self._slices.items()) == list(other._slices.items())
            and self._total_len == other._total_len
        )

    def __repr__(self) -> str:
        return f"Atlas({list(self._slices.items())!r}, total_len={self._total_len})"

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form: slice map, insertion order and total length."""
        return {
            "map": {str(p): [off, length] for p, (off, length) in self._slices.items()},
            "order": list(self._slices),
            "total_len": self._total_len,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Atlas:
        """Rebuild an atlas from :meth:`to_dict` output."""
        raw_map = {int(k): (int(v[0]), int(v[1])) for k, v in data["map"].items()}
        atlas = cls()
        for p in data["order"]:
            p = int(p)
            if p not in raw_map:
                raise MissingAtlasPointError(p)
            atlas._slices[p] = raw_map[p]
        atlas._total_len = int(data["total_len"])
        return atlas

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Atlas:
        return cls.from_dict(json.loads(text))
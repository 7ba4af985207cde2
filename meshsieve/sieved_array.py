"""Per-point value arrays supporting refinement and assembly between meshes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from meshsieve.atlas import Atlas
from meshsieve.errors import (
    SievedArrayPointNotInAtlasError,
    SievedArrayPrimitiveConversionError,
    SievedArraySliceLengthMismatchError,
)
from meshsieve.orientation import Orientation


def _divide(value: Any, count: int) -> Any:
    """Divide by ``count``; integers truncate toward zero."""
    if isinstance(value, int):
        quotient = abs(value) // count
        return quotient if value >= 0 else -quotient
    try:
        return value / count
    except TypeError as exc:
        raise SievedArrayPrimitiveConversionError(count) from exc


class SievedArray:
    """Values indexed by mesh points through an :class:`Atlas`."""

    def __init__(self, atlas: Atlas, default: Any = 0) -> None:
        self._atlas = atlas.copy()
        self._default = default
        self._data: list[Any] = [default] * self._atlas.total_len()

    @property
    def atlas(self) -> Atlas:
        """A copy of the atlas describing the layout."""
        return self._atlas.copy()

    @property
    def data(self) -> list[Any]:
        """A copy of the contiguous data buffer."""
        return list(self._data)

    def _span(self, p: int) -> tuple[int, int]:
        span = self._atlas.get(p)
        if span is None:
            raise SievedArrayPointNotInAtlasError(p)
        return span

    def get(self, p: int) -> list[Any]:
        """Values stored for ``p``."""
        offset, length = self._span(p)
        return self._data[offset : offset + length]

    def set(self, p: int, values: Sequence[Any]) -> None:
        """Overwrite the values of ``p``; the length must match."""
        offset, length = self._span(p)
        if len(values) != length:
            raise SievedArraySliceLengthMismatchError(p, length, len(values))
        self._data[offset : offset + length] = list(values)

    def items(self) -> Iterator[tuple[int, list[Any]]]:
        """Yield ``(point, values)`` in atlas order."""
        for p in self._atlas.points():
            yield p, self.get(p)

    def __iter__(self) -> Iterator[tuple[int, list[Any]]]:
        return self.items()

    def __len__(self) -> int:
        return len(self._atlas)

    def __contains__(self, p: object) -> bool:
        return p in self._atlas

    def refine_with_sifter(
        self,
        coarse: SievedArray,
        refinement: Iterable[tuple[int, Iterable[tuple[int, Orientation]]]],
    ) -> None:
        """Copy coarse values onto fine points, honouring each orientation."""
        for coarse_pt, fine_pts in refinement:
            coarse_values = coarse.get(coarse_pt)
            for fine_pt, orientation in fine_pts:
                offset, length = self._span(fine_pt)
                if len(coarse_values) != length:
                    raise SievedArraySliceLengthMismatchError(
                        fine_pt, len(coarse_values), length
                    )
                target = self._data[offset : offset + length]
                orientation.apply(coarse_values, target)
                self._data[offset : offset + length] = target

    def refine(
        self, coarse: SievedArray, refinement: Iterable[tuple[int, Iterable[int]]]
    ) -> None:
        """Refine with every fine point in forward orientation."""
        sifter = [
            (coarse_pt, [(f, Orientation.FORWARD) for f in fine_pts])
            for coarse_pt, fine_pts in refinement
        ]
        self.refine_with_sifter(coarse, sifter)

    def assemble(
        self, coarse: SievedArray, refinement: Iterable[tuple[int, Iterable[int]]]
    ) -> None:
        """Write into ``coarse`` the average of the fine values of each point."""
        for coarse_pt, fine_pts in refinement:
            accum = [self._default] * len(coarse.get(coarse_pt))
            count = 0
            for fine_pt in fine_pts:
                values = self.get(fine_pt)
                if len(values) != len(accum):
                    raise SievedArraySliceLengthMismatchError(
                        fine_pt, len(accum), len(values)
                    )
                accum = [a + v for a, v in zip(accum, values)]
                count += 1
            if count > 0:
                coarse.set(coarse_pt, [_divide(a, count) for a in accum])

    def copy(self) -> SievedArray:
        clone = SievedArray(self._atlas, self._default)
        clone._data = list(self._data)
        return clone

    def __repr__(self) -> str:
        return f"SievedArray({list(self.items())!r})"
"""Orientation of an arrow, used to copy slices forward or reversed."""

from __future__ import annotations

import enum
from collections.abc import MutableSequence, Sequence
from typing import Any

from meshsieve.errors import DeltaLengthMismatchError


class Orientation(enum.Enum):
    """How values travel along an arrow: as-is or in reverse order."""

    FORWARD = "forward"
    REVERSE = "reverse"

    def apply(self, src: Sequence[Any], dest: MutableSequence[Any]) -> None:
        """Write ``src`` into ``dest`` in place, reversed for ``REVERSE``."""
        expected = len(src)
        found = len(dest)
        if expected != found:
            raise DeltaLengthMismatchError(expected, found)
        if self is Orientation.FORWARD:
            dest[:] = list(src)
        else:
            dest[:] = list(reversed(src))
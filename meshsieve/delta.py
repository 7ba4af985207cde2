"""Rules for restricting values and fusing incoming fragments across overlaps.

Values are treated as immutable: ``fuse`` returns the new local value.
"""

from __future__ import annotations

import copy
from typing import Any


class CopyDelta:
    """Restrict by copying; fusing overwrites the local value."""

    @staticmethod
    def restrict(value: Any) -> Any:
        return copy.copy(value)

    @staticmethod
    def fuse(local: Any, incoming: Any) -> Any:
        return copy.copy(incoming)


class ZeroDelta:
    """Restrict to the type's default value; fusing leaves the local value alone."""

    @staticmethod
    def restrict(value: Any) -> Any:
        return type(value)()

    @staticmethod
    def fuse(local: Any, incoming: Any) -> Any:
        return copy.copy(local)


class AddDelta:
    """Restrict by copying; fusing adds the incoming value to the local one."""

    @staticmethod
    def restrict(value: Any) -> Any:
        return copy.copy(value)

    @staticmethod
    def fuse(local: Any, incoming: Any) -> Any:
        return local + incoming
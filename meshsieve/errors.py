"""Error types raised by the mesh data structures."""

from __future__ import annotations

from typing import Any


def point_id(value: int) -> int:
    """Validate and return a point identifier (a positive integer).

    Zero is reserved as an invalid sentinel and is rejected.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"point id must be an int, not {type(value).__name__}")
    if value < 1:
        raise InvalidPointIdError()
    return value


class MeshSieveError(Exception):
    """Base class for all mesh-sieve errors.

    Two errors compare equal when they are of the same kind and carry the
    same identifying fields.
    """

    def _key(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshSieveError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class CommError(Exception):
    """Low-level communicator failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


class InvalidPointIdError(MeshSieveError):
    def __init__(self) -> None:
        super().__init__("PointId must be non-zero (0 is reserved as invalid/sentinel)")


class UnsupportedStackOperationError(MeshSieveError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"Unsupported stack operation: {operation}")
        self.operation = operation

    def _key(self) -> tuple[Any, ...]:
        return (self.operation,)


class MissingPointInConeError(MeshSieveError):
    def __init__(self, point: str) -> None:
        super().__init__(
            f"Topology error: point `{point}` found in cone but not in point set"
        )
        self.point = point

    def _key(self) -> tuple[Any, ...]:
        return (self.point,)


class CycleDetectedError(MeshSieveError):
    def __init__(self) -> None:
        super().__init__("Topology error: cycle detected in mesh (expected DAG)")


class ZeroLengthSliceError(MeshSieveError):
    def __init__(self) -> None:
        super().__init__("Atlas error: zero-length slice is not allowed")


class _PointError(MeshSieveError):
    _template = "{point}"

    def __init__(self, point: int) -> None:
        super().__init__(self._template.format(point=point))
        self.point = point

    def _key(self) -> tuple[Any, ...]:
        return (self.point,)


class DuplicatePointError(_PointError):
    _template = "Atlas error: point {point} already present"


class MissingAtlasPointError(_PointError):
    _template = "Atlas internal error: missing length for point {point}"


class PointNotInAtlasError(_PointError):
    _template = "Section error: point {point} not found in atlas"


class SievedArrayPointNotInAtlasError(_PointError):
    _template = "SievedArray error: point {point} not found in atlas"


class MissingSectionPointError(_PointError):
    _template = "Section internal error: missing data for point {point}"


class _LengthMismatchError(MeshSieveError):
    _template = ""

    def __init__(self, point: int, expected: int, found: int) -> None:
        super().__init__(
            self._template.format(point=point, expected=expected, found=found)
        )
        self.point = point
        self.expected = expected
        self.found = found

    def _key(self) -> tuple[Any, ...]:
        return (self.point, self.expected, self.found)


class SliceLengthMismatchError(_LengthMismatchError):
    _template = (
        "Section error: slice length mismatch for {point}: "
        "expected {expected}, got {found}"
    )


class SievedArraySliceLengthMismatchError(_LengthMismatchError):
    _template = (
        "SievedArray error: slice length mismatch at {point}: "
        "expected {expected}, got {found}"
    )


class AtlasInsertionFailedError(MeshSieveError):
    def __init__(self, point: int, source: MeshSieveError) -> None:
        super().__init__(
            f"Section error: failed to add point {point} to atlas: {source}"
        )
        self.point = point
        self.source = source
        self.__cause__ = source

    def _key(self) -> tuple[Any, ...]:
        return (self.point,)


class ScatterLengthMismatchError(MeshSieveError):
    def __init__(self, expected: int, found: int) -> None:
        super().__init__(
            "Section error: scatter source length mismatch: "
            f"expected {expected}, got {found}"
        )
        self.expected = expected
        self.found = found

    def _key(self) -> tuple[Any, ...]:
        return (self.expected, self.found)


class ScatterChunkMismatchError(MeshSieveError):
    def __init__(self, offset: int, length: int) -> None:
        super().__init__(
            f"Section error: scatter chunk at offset {offset} "
            f"of length {length} out of bounds"
        )
        self.offset = offset
        self.length = length

    def _key(self) -> tuple[Any, ...]:
        return (self.offset, self.length)


class SievedArrayPrimitiveConversionError(MeshSieveError):
    def __init__(self, count: int) -> None:
        super().__init__(
            f"SievedArray error: cannot convert count {count} via FromPrimitive"
        )
        self.count = count

    def _key(self) -> tuple[Any, ...]:
        return (self.count,)


class DeltaLengthMismatchError(MeshSieveError):
    def __init__(self, expected: int, found: int) -> None:
        super().__init__(
            f"Delta error: slice length mismatch (src.len={expected}, dest.len={found})"
        )
        self.expected = expected
        self.found = found

    def _key(self) -> tuple[Any, ...]:
        return (self.expected, self.found)


class PartitionPointOverflowError(MeshSieveError):
    def __init__(self) -> None:
        super().__init__("Invalid partition owner: computed raw ID = 0")


class PartitionIndexOutOfBoundsError(MeshSieveError):
    def __init__(self, index: int) -> None:
        super().__init__(f"No partition mapping for point ID {index}")
        self.index = index

    def _key(self) -> tuple[Any, ...]:
        return (self.index,)


class CommunicationError(MeshSieveError):
    def __init__(self, error: CommError) -> None:
        super().__init__(f"communication error: {error}")
        self.error = error
        self.__cause__ = error

    def _key(self) -> tuple[Any, ...]:
        return (self.error.message,)


class MissingRecvCountError(MeshSieveError):
    def __init__(self, neighbor: int) -> None:
        super().__init__(f"Missing recv count for neighbor {neighbor}")
        self.neighbor = neighbor

    def _key(self) -> tuple[Any, ...]:
        return (self.neighbor,)


class SectionAccessError(MeshSieveError):
    def __init__(self, point: int, source: BaseException) -> None:
        super().__init__(f"Section access error at point {point}: {source}")
        self.point = point
        self.source = source
        self.__cause__ = source

    def _key(self) -> tuple[Any, ...]:
        return (self.point,)


class NeighborCommError(MeshSieveError):
    def __init__(self, neighbor: int, source: BaseException) -> None:
        super().__init__(f"Communication error with neighbor {neighbor}: {source}")
        self.neighbor = neighbor
        self.source = source
        self.__cause__ = source

    def _key(self) -> tuple[Any, ...]:
        return (self.neighbor,)


class _NeighborCountError(MeshSieveError):
    _template = ""

    def __init__(self, neighbor: int, expected: int, got: int) -> None:
        super().__init__(
            self._template.format(neighbor=neighbor, expected=expected, got=got)
        )
        self.neighbor = neighbor
        self.expected = expected
        self.got = got

    def _key(self) -> tuple[Any, ...]:
        return (self.neighbor, self.expected, self.got)


class BufferSizeMismatchError(_NeighborCountError):
    _template = (
        "Buffer size mismatch for neighbor {neighbor}: expected {expected}, got {got}"
    )


class PartCountMismatchError(_NeighborCountError):
    _template = (
        "Part count mismatch for neighbor {neighbor}: expected {expected}, got {got}"
    )
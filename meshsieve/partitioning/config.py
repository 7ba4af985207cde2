"""Configuration, partition maps and errors for graph partitioning."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass


@dataclass
class PartitionerConfig:
    """Parameters of the three-phase partitioner.

    ``epsilon`` is the allowed imbalance: ``max_load / min_load <= 1 + epsilon``.
    """

    n_parts: int = 2
    alpha: float = 0.75
    seed_factor: float = 4.0
    rng_seed: int = 42
    max_iters: int = 20
    epsilon: float = 0.05
    enable_phase1: bool = True
    enable_phase2: bool = True
    enable_phase3: bool = True


class PartitionMap(dict):
    """Mapping from vertex to the id of the part that holds it."""

    def part_of(self, v: Hashable) -> int:
        """Part id of ``v``; raises ``KeyError`` if the vertex is unmapped."""
        try:
            return self[v]
        except KeyError:
            raise KeyError(f"vertex {v!r} not found in PartitionMap") from None

    def __repr__(self) -> str:
        return f"PartitionMap({dict.__repr__(self)})"


class PartitionError(Exception):
    """Failure while building vertex cuts or calling a partitioner backend."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Partitioner error: {message}")
        self.message = message


class VertexNotFoundError(PartitionError):
    """A vertex returned by the graph was missing from the vertex index."""

    def __init__(self, vertex: Hashable) -> None:
        Exception.__init__(self, f"Owner lookup failed for vertex {vertex}")
        self.vertex = vertex
        self.message = str(self)


class MissingPartitionError(PartitionError):
    """The partition map had no entry for a vertex."""

    def __init__(self, vertex: Hashable) -> None:
        Exception.__init__(self, f"PartitionMap missing part for vertex {vertex}")
        self.vertex = vertex
        self.message = str(self)


class NoPartsError(PartitionError):
    """The partition map contained no parts at all."""

    def __init__(self) -> None:
        Exception.__init__(self, "Empty partition map: no parts available")
        self.message = str(self)


class PartitionerError(Exception):
    """Base class for failures of the partitioning pipeline."""


class MaxIterError(PartitionerError):
    """Clustering hit its iteration limit without converging."""

    def __init__(self) -> None:
        super().__init__("Louvain hit max iterations without converging")


class NoPositiveMergeError(PartitionerError):
    """The cluster merge phase never found an adjacency merge."""

    def __init__(self) -> None:
        super().__init__("cluster merge found no positive adjacency merge")


class UnbalancedError(PartitionerError):
    """Final part loads exceed the allowed imbalance."""

    def __init__(
        self, max_load: int, min_load: int, ratio: float, tolerance: float
    ) -> None:
        super().__init__(
            f"unbalanced parts: max_load={max_load} min_load={min_load} "
            f"ratio={ratio} > tolerance={tolerance}"
        )
        self.max_load = max_load
        self.min_load = min_load
        self.ratio = ratio
        self.tolerance = tolerance


class VertexCutError(PartitionerError):
    """Vertex-cut construction failed."""

    def __init__(self, error: PartitionError) -> None:
        super().__init__(f"vertex cut failed: {error}")
        self.error = error
        self.__cause__ = error


class DegreeLengthMismatchError(PartitionerError):
    """The degree list did not have one entry per vertex."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(
            f"degree list length mismatch: expected {expected}, got {got}"
        )
        self.expected = expected
        self.got = got
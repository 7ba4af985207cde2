"""Quality measures of a graph partitioning: edge cut and replication factor."""

from __future__ import annotations

from meshsieve.partitioning.config import PartitionMap
from meshsieve.partitioning.graph import PartitionableGraph


def edge_cut(graph: PartitionableGraph, pm: PartitionMap) -> int:
    """Number of edges ``(u, v)`` with ``u < v`` whose endpoints lie in different parts."""
    return sum(
        1
        for u in graph.vertices()
        for v in graph.neighbors(u)
        if u < v and pm.part_of(u) != pm.part_of(v)
    )


def replication_factor(graph: PartitionableGraph, pm: PartitionMap) -> float:
    """Average number of parts in which each vertex is present.

    A vertex is present in its own part and in the part of every neighbour.
    Returns ``0.0`` for an empty graph.
    """
    verts = list(graph.vertices())
    if not verts:
        return 0.0
    owners: dict[object, set[int]] = {v: set() for v in verts}
    for u in verts:
        pu = pm.part_of(u)
        owners[u].add(pu)
        for v in graph.neighbors(u):
            owners[v].add(pu)
    return sum(len(parts) for parts in owners.values()) / len(verts)
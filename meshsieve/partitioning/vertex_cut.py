"""Vertex-cut construction: primary owners and replica lists per vertex."""

from __future__ import annotations

import hashlib
from collections.abc import Hashable
from typing import Any

from meshsieve.partitioning.config import (
    MissingPartitionError,
    NoPartsError,
    PartitionMap,
    VertexNotFoundError,
)
from meshsieve.partitioning.graph import PartitionableGraph


def _salted_bit(salt: int, u: Hashable, v: Hashable) -> int:
    """A deterministic pseudo-random bit for the edge ``(u, v)``."""
    digest = hashlib.blake2b(f"{salt!r}:{u!r}:{v!r}".encode(), digest_size=8).digest()
    return int.from_bytes(digest, "little") & 1


def _part_of(pm: PartitionMap, v: Hashable) -> int:
    try:
        return pm[v]
    except KeyError:
        raise MissingPartitionError(v) from None


def build_vertex_cuts(
    graph: PartitionableGraph, pm: PartitionMap, salt: int
) -> tuple[list[int], list[list[tuple[Any, int]]]]:
    """Choose a primary owner part for every vertex and list its replicas.

    Every edge ``(u, v)`` with ``u < v`` whose endpoints lie in different
    parts is owned by the endpoint whose part currently holds fewer replicas;
    ties are broken by a hash of ``(salt, u, v)``.  Both endpoints take the
    owner's part as primary, and each records the other as a replica
    ``(neighbour, owner_part)``.  Vertices touched by no cut edge keep their
    own part.  Returns ``(primary_owner, replicas)`` indexed in vertex order.
    """
    verts = list(graph.vertices())
    index = {v: i for i, v in enumerate(verts)}
    if not pm:
        raise NoPartsError()
    num_parts = max(pm.values()) + 1
    replica_count = [0] * num_parts

    primary: list[int | None] = [None] * len(verts)
    replicas: list[list[tuple[Any, int]]] = [[] for _ in verts]

    def lookup(vertex: Hashable) -> int:
        try:
            return index[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    for u in verts:
        for v in graph.neighbors(u):
            if not u < v:
                continue
            pu = _part_of(pm, u)
            pv = _part_of(pm, v)
            if pu == pv:
                continue
            count_u, count_v = replica_count[pu], replica_count[pv]
            if count_u < count_v:
                owner, other, owner_part = u, v, pu
            elif count_v < count_u:
                owner, other, owner_part = v, u, pv
            elif _salted_bit(salt, u, v) == 0:
                owner, other, owner_part = u, v, pu
            else:
                owner, other, owner_part = v, u, pv
            owner_idx = lookup(owner)
            other_idx = lookup(other)
            replica_count[owner_part] += 1
            primary[owner_idx] = owner_part
            primary[other_idx] = owner_part
            replicas[owner_idx].append((other, owner_part))
            replicas[other_idx].append((owner, owner_part))

    replicas = [sorted(set(entries)) for entries in replicas]
    primary_owner = [
        part if part is not None else _part_of(pm, verts[i])
        for i, part in enumerate(primary)
    ]
    return primary_owner, replicas
"""Louvain-style clustering with a balance factor, for graph partitioning."""

from __future__ import annotations

import math
from typing import Any

from meshsieve.partitioning.config import PartitionerConfig
from meshsieve.partitioning.graph import PartitionableGraph


def _cluster_limit(cfg: PartitionerConfig) -> int:
    """Cluster count at which merging stops: ``max(ceil(seed_factor * n_parts), 1)``."""
    target = cfg.seed_factor * cfg.n_parts
    if math.isnan(target) or target <= 0:
        return 1
    if math.isinf(target):
        return 2**32 - 1
    return max(math.ceil(target), 1)


def _best_merge(
    intercluster: dict[tuple[int, int], int],
    volumes: dict[int, int],
    m: int,
    alpha: float,
) -> tuple[int, int] | None:
    """The cluster pair with the largest positive balanced modularity gain."""
    if m == 0:
        return None
    m_f = float(m)
    best: tuple[int, int, float] | None = None
    for (ci, cj), e_ij in intercluster.items():
        vol_i = float(volumes[ci])
        vol_j = float(volumes[cj])
        larger = max(vol_i, vol_j)
        if larger == 0.0:
            continue
        delta_mod = e_ij / m_f - (vol_i * vol_j) / (2.0 * m_f * m_f)
        balance = min(vol_i, vol_j) / larger
        gain = alpha * delta_mod * balance
        if gain > 0.0 and (best is None or gain > best[2]):
            best = (ci, cj, gain)
    if best is None:
        return None
    return best[0], best[1]


def louvain_cluster(graph: PartitionableGraph, cfg: PartitionerConfig) -> list[int]:
    """Cluster the vertices of ``graph``; one id per vertex, in vertex order.

    Repeatedly merges the pair of clusters with the largest positive
    modularity gain (scaled by ``cfg.alpha`` and by how similar the two
    cluster volumes are) until no such pair exists, ``cfg.max_iters`` merges
    have been made, or the cluster count drops to
    ``max(ceil(seed_factor * n_parts), 1)``.  The returned ids are renumbered
    to the contiguous range ``0..k``.
    """
    verts: list[Any] = list(graph.vertices())
    n = len(verts)
    if n == 0:
        return []
    index = {v: i for i, v in enumerate(verts)}
    degrees = [graph.degree(u) for u in verts]
    all_edges = [(u, v) for u in verts for v in graph.neighbors(u) if u < v]
    m = len(all_edges) // 2

    cluster_ids = list(range(n))
    volumes: dict[int, int] = dict(enumerate(degrees))
    limit = _cluster_limit(cfg)

    for _ in range(cfg.max_iters):
        intercluster: dict[tuple[int, int], int] = {}
        for u, v in all_edges:
            iu, iv = index[u], index[v]
            if iu < iv:
                cu, cv = cluster_ids[iu], cluster_ids[iv]
                if cu != cv:
                    key = (cu, cv) if cu < cv else (cv, cu)
                    intercluster[key] = intercluster.get(key, 0) + 1

        merge = _best_merge(intercluster, volumes, m, cfg.alpha)
        if merge is None:
            break
        keep, absorbed = merge
        cluster_ids = [keep if c == absorbed else c for c in cluster_ids]

        volumes = {}
        for cid, deg in zip(cluster_ids, degrees):
            volumes[cid] = volumes.get(cid, 0) + deg
        if len(volumes) <= limit:
            break

    remap = {old: new for new, old in enumerate(sorted(set(cluster_ids)))}
    return [remap[c] for c in cluster_ids]
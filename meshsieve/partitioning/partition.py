"""Three-phase graph partitioning: clustering, cluster merge, vertex cut."""

from __future__ import annotations

import logging
from typing import Any

from meshsieve.partitioning.binpack import Item, merge_clusters_into_parts
from meshsieve.partitioning.config import (
    PartitionError,
    PartitionerConfig,
    PartitionMap,
    VertexCutError,
    VertexNotFoundError,
)
from meshsieve.partitioning.graph import PartitionableGraph, edges
from meshsieve.partitioning.louvain import louvain_cluster
from meshsieve.partitioning.metrics import edge_cut, replication_factor
from meshsieve.partitioning.vertex_cut import build_vertex_cuts

_log = logging.getLogger(__name__)


def partition(graph: PartitionableGraph, cfg: PartitionerConfig) -> PartitionMap:
    """Partition the vertices of ``graph`` into ``cfg.n_parts`` parts.

    Phase 1 clusters the vertices (or leaves each vertex its own cluster),
    phase 2 merges clusters into parts along their adjacency (or assigns
    ``cid % n_parts``), phase 3 builds the vertex cut.  Raises a
    :class:`PartitionerError` when a phase fails.
    """
    verts: list[Any] = list(graph.vertices())
    n = len(verts)
    if n == 0:
        return PartitionMap()

    if cfg.enable_phase1:
        clusters = louvain_cluster(graph, cfg)
    else:
        clusters = [int(u) for u in verts]
    n_clusters = max(clusters, default=0) + 1

    if _log.isEnabledFor(logging.DEBUG):
        pm1 = PartitionMap(zip(verts, clusters))
        _log.debug(
            "Phase 1 (Louvain): clusters=%d  edge_cut=%d  replication_factor=%.3f",
            n_clusters,
            edge_cut(graph, pm1),
            replication_factor(graph, pm1),
        )

    vert_idx = {v: i for i, v in enumerate(verts)}

    def cluster_of(v: Any) -> int:
        try:
            return clusters[vert_idx[v]]
        except KeyError:
            raise VertexCutError(VertexNotFoundError(v)) from None

    cluster_adj: dict[tuple[int, int], int] = {}
    for u, v in edges(graph):
        cu, cv = cluster_of(u), cluster_of(v)
        if cu != cv:
            key = (cu, cv) if cu < cv else (cv, cu)
            cluster_adj[key] = cluster_adj.get(key, 0) + 1

    groups: dict[int, list[Any]] = {}
    loads: dict[int, int] = {}
    for v, cid in zip(verts, clusters):
        groups.setdefault(cid, []).append(v)
        loads[cid] = loads.get(cid, 0) + max(graph.degree(v), 1)
    cluster_to_verts = {cid: groups[cid] for cid in sorted(groups)}

    items = []
    for cid in cluster_to_verts:
        adj = []
        for (a, b), count in cluster_adj.items():
            if a == cid:
                adj.append((b, count))
            elif b == cid:
                adj.append((a, count))
        items.append(Item(cid=cid, load=loads.get(cid, 1), adj=adj))

    if cfg.enable_phase2:
        cluster_part = merge_clusters_into_parts(items, cfg.n_parts, cfg.epsilon)
    else:
        cluster_part = [item.cid % cfg.n_parts for item in items]

    pm = PartitionMap()
    for part, members in zip(cluster_part, cluster_to_verts.values()):
        for v in members:
            pm[v] = part

    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(
            "Phase 2 (Merge): parts=%d  edge_cut=%d  replication_factor=%.3f",
            cfg.n_parts,
            edge_cut(graph, pm),
            replication_factor(graph, pm),
        )

    if cfg.enable_phase3:
        try:
            primary, replicas = build_vertex_cuts(graph, pm, cfg.rng_seed)
        except PartitionError as exc:
            raise VertexCutError(exc) from exc
    else:
        primary = list(pm.values())
        replicas = [[] for _ in range(n)]
    _log.debug(
        "Phase 3 (VertexCut): primary_count=%d  total_replicas=%d",
        len(primary),
        sum(len(r) for r in replicas),
    )
    return pm
"""Degree-weighted choice of seed vertices, without replacement."""

from __future__ import annotations

import bisect
import math
import random
from collections.abc import Sequence
from typing import Any

from meshsieve.partitioning.config import DegreeLengthMismatchError, PartitionerConfig
from meshsieve.partitioning.graph import PartitionableGraph


def _seed_count(cfg: PartitionerConfig, n: int) -> int:
    target = cfg.seed_factor * cfg.n_parts
    wanted = 0 if math.isnan(target) or target <= 0 else n if math.isinf(target) else math.ceil(target)
    return max(min(wanted, n), 1)


def pick_seeds(
    graph: PartitionableGraph, degrees: Sequence[int], cfg: PartitionerConfig
) -> list[Any]:
    """Pick ``max(min(ceil(seed_factor * n_parts), n), 1)`` distinct seed vertices.

    Each vertex is chosen with probability proportional to its degree; if all
    degrees are zero the choice is uniform.  The random stream is seeded from
    ``cfg.rng_seed``.  Raises :class:`DegreeLengthMismatchError` when
    ``degrees`` does not have one entry per vertex.
    """
    vertices = list(graph.vertices())
    n = len(vertices)
    if len(degrees) != n:
        raise DegreeLengthMismatchError(n, len(degrees))
    if n == 0:
        return []

    num_seeds = _seed_count(cfg, n)
    weights = [int(w) for w in degrees]
    prefix: list[int] = []
    running = 0
    for w in weights:
        running += w
        prefix.append(running)

    rng = random.Random(cfg.rng_seed)
    chosen: list[Any] = []

    if running == 0:
        pool = list(range(n))
        for _ in range(num_seeds):
            if not pool:
                break
            chosen.append(vertices[pool.pop(rng.randrange(len(pool)))])
        return chosen

    for _ in range(num_seeds):
        total = prefix[-1]
        if total == 0:
            break
        t = rng.randrange(total)
        i = bisect.bisect_left(prefix, t)
        while i < n and weights[i] == 0:
            i += 1
        if i == n:
            break
        chosen.append(vertices[i])
        w = weights[i]
        weights[i] = 0
        for j in range(i, n):
            prefix[j] -= w
    return chosen
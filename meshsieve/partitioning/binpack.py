"""Assigning weighted clusters to parts by bin-packing and adjacency merging."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from meshsieve.partitioning.config import NoPositiveMergeError, UnbalancedError


@dataclass
class Item:
    """A cluster to be packed: id, load and ``(neighbour id, weight)`` pairs."""

    cid: int
    load: int
    adj: list[tuple[int, int]] = field(default_factory=list)


def _check_balance(loads: Sequence[int], epsilon: float) -> None:
    min_load = min(loads)
    max_load = max(loads)
    ratio = max_load / (min_load + sys.float_info.epsilon)
    tolerance = 1.0 + epsilon + 1e-6
    if ratio > tolerance:
        raise UnbalancedError(max_load, min_load, ratio, tolerance)


def _by_descending_load(items: Sequence[Item]) -> list[int]:
    return sorted(range(len(items)), key=lambda i: -items[i].load)


def partition_clusters(items: Sequence[Item], k: int, epsilon: float) -> list[int]:
    """Assign each item to one of ``k`` parts by first-fit decreasing.

    An item goes to a neighbour's part when that keeps the part under the
    balance threshold, otherwise to the least loaded part.  Raises
    :class:`UnbalancedError` when the result exceeds the tolerance.
    """
    if k <= 0:
        raise ValueError("Number of parts (k) must be >= 1")
    n = len(items)
    if n == 0:
        return []

    loads = [0] * k
    cluster_to_part = [0] * n
    total_load = sum(item.load for item in items)
    threshold = math.ceil((1.0 + epsilon) * (total_load / k))

    for idx in _by_descending_load(items):
        item = items[idx]
        chosen = None
        for nbr, _ in item.adj:
            if 0 <= nbr < n:
                part = cluster_to_part[nbr]
                if loads[part] + item.load <= threshold:
                    chosen = part
                    break
        if chosen is None:
            chosen = min(range(k), key=loads.__getitem__)
        cluster_to_part[idx] = chosen
        loads[chosen] += item.load

    _check_balance(loads, epsilon)
    return cluster_to_part


def merge_clusters_into_parts(
    items: Sequence[Item], k: int, epsilon: float
) -> list[int]:
    """Seed ``k`` parts with the heaviest items and grow them along adjacency.

    Each step attaches the unassigned neighbour with the heaviest edge; items
    left over go to the least loaded part.  Raises
    :class:`NoPositiveMergeError` if no merge was possible while items remain
    unassigned, and :class:`UnbalancedError` if the loads are out of balance.
    """
    if k <= 0 or not items:
        raise ValueError("need k >= 1 and at least one item")
    n = len(items)
    if k > n:
        raise ValueError(f"cannot seed {k} parts from {n} items")

    seeds = _by_descending_load(items)[:k]
    seed_loads = [items[i].load for i in seeds]
    seed_members = [[i] for i in seeds]
    unassigned = set(range(n)) - set(seeds)

    did_merge = False
    while True:
        best: tuple[int, int, int] | None = None
        for s, members in enumerate(seed_members):
            for cid in members:
                for nbr, weight in items[cid].adj:
                    if nbr in unassigned and (best is None or weight > best[2]):
                        best = (s, nbr, weight)
        if best is None:
            break
        seed_idx, pick, _ = best
        did_merge = True
        seed_members[seed_idx].append(pick)
        seed_loads[seed_idx] += items[pick].load
        unassigned.discard(pick)

    if not did_merge and unassigned:
        raise NoPositiveMergeError()

    for cid in sorted(unassigned):
        s = min(range(k), key=seed_loads.__getitem__)
        seed_members[s].append(cid)
        seed_loads[s] += items[cid].load

    result = [0] * n
    for part, members in enumerate(seed_members):
        for cid in members:
            result[cid] = part

    _check_balance(seed_loads, epsilon)
    return result
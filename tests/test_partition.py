import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from meshsieve.partitioning.config import (
    NoPositiveMergeError,
    PartitionerConfig,
    PartitionMap,
    UnbalancedError,
)
from meshsieve.partitioning.graph import AdjacencyGraph
from meshsieve.partitioning.metrics import edge_cut
from meshsieve.partitioning.partition import partition


def graph_from_edges(edges, n):
    adj = {v: [] for v in range(n)}
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return AdjacencyGraph(adj)


def cycle4():
    return AdjacencyGraph({0: [1, 3], 1: [0, 2], 2: [1, 3], 3: [2, 0]})


def test_empty_graph_gives_empty_map():
    assert partition(AdjacencyGraph({}), PartitionerConfig()) == {}


def test_edgeless_graph_has_no_positive_merge():
    g = AdjacencyGraph({0: [], 1: [], 2: [], 3: []})
    with pytest.raises(NoPositiveMergeError):
        partition(g, PartitionerConfig(n_parts=2))


def test_cycle_4_nodes_k2_greedy_merge_is_unbalanced():
    cfg = PartitionerConfig(n_parts=2, epsilon=0.05)
    with pytest.raises(UnbalancedError) as info:
        partition(cycle4(), cfg)
    assert info.value.max_load == 6
    assert info.value.min_load == 2
    assert info.value.ratio > info.value.tolerance


def test_two_components_split_cleanly():
    g = graph_from_edges([(0, 1), (2, 3)], 4)
    cfg = PartitionerConfig(n_parts=2, epsilon=0.05)
    pm = partition(g, cfg)
    assert pm == {0: 0, 1: 0, 2: 1, 3: 1}
    assert len(pm) == 4

    loads = [0, 0]
    for v, p in pm.items():
        loads[p] += max(g.degree(v), 1)
    assert max(loads) / min(loads) <= 1.0 + cfg.epsilon + 1e-6

    my_cut = edge_cut(g, pm)
    rng = random.Random(123)
    rnd_pm = PartitionMap({v: rng.randrange(2) for v in range(4)})
    assert my_cut <= edge_cut(g, rnd_pm)
    assert my_cut == 0


def test_phases_disabled_assign_by_modulo():
    cfg = PartitionerConfig(
        n_parts=2, enable_phase1=False, enable_phase2=False, enable_phase3=False
    )
    pm = partition(cycle4(), cfg)
    assert pm == {0: 0, 1: 1, 2: 0, 3: 1}


def test_result_is_partition_map():
    cfg = PartitionerConfig(n_parts=2, enable_phase2=False)
    pm = partition(cycle4(), cfg)
    assert pm.part_of(3) == pm[3]
    assert set(pm) == {0, 1, 2, 3}


@settings(max_examples=60, deadline=None)
@given(st.data())
def test_small_graphs_cover_every_vertex(data):
    n = data.draw(st.integers(min_value=2, max_value=9))
    k = data.draw(st.integers(min_value=2, max_value=4))
    edges = [
        (u, v)
        for u in range(n)
        for v in range(u + 1, n)
        if data.draw(st.booleans())
    ]
    g = graph_from_edges(edges, n)
    cfg = PartitionerConfig(n_parts=k, epsilon=0.1, enable_phase2=False)
    pm = partition(g, cfg)
    assert len(pm) == n
    assert set(pm) == set(range(n))
    assert all(0 <= p < k for p in pm.values())
    assert edge_cut(g, pm) <= len(edges)


@settings(max_examples=40, deadline=None)
@given(st.integers(min_value=2, max_value=9), st.integers(min_value=2, max_value=4))
def test_path_partition_is_deterministic(n, k):
    g = graph_from_edges([(i, i + 1) for i in range(n - 1)], n)
    cfg = PartitionerConfig(n_parts=k, enable_phase2=False)
    first = partition(g, cfg)
    second = partition(g, cfg)
    assert first == second
    assert set(first) == set(range(n))
    assert all(0 <= p < k for p in first.values())
    assert edge_cut(g, first) <= n - 1
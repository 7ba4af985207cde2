import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from meshsieve.partitioning.config import PartitionerConfig
from meshsieve.partitioning.graph import AdjacencyGraph
from meshsieve.partitioning.louvain import louvain_cluster


def path_graph(n):
    adj = {}
    for v in range(n):
        ns = []
        if v > 0:
            ns.append(v - 1)
        if v + 1 < n:
            ns.append(v + 1)
        adj[v] = ns
    return AdjacencyGraph(adj)


def make_cfg(**kwargs):
    base = dict(
        n_parts=2,
        alpha=0.5,
        seed_factor=2.0,
        rng_seed=123,
        max_iters=10,
        epsilon=0.05,
    )
    base.update(kwargs)
    return PartitionerConfig(**base)


def test_louvain_path_graph_small():
    g = path_graph(10)
    cfg = make_cfg()
    clustering = louvain_cluster(g, cfg)
    unique = sorted(set(clustering))
    allowed = 4
    assert len(clustering) == 10
    assert allowed <= len(unique) <= 10


def test_no_merge_if_alpha_zero():
    g = path_graph(5)
    cfg = make_cfg(n_parts=1, alpha=0.0, seed_factor=1.0, rng_seed=42, max_iters=5)
    clustering = louvain_cluster(g, cfg)
    assert len(clustering) == 5
    assert len(set(clustering)) == 5


def test_empty_graph_gives_empty_clustering():
    assert louvain_cluster(AdjacencyGraph({}), make_cfg()) == []


def test_zero_iterations_keeps_singletons():
    g = path_graph(6)
    clustering = louvain_cluster(g, make_cfg(max_iters=0))
    assert clustering == list(range(6))


def test_edgeless_graph_keeps_singletons():
    g = AdjacencyGraph({0: [], 1: [], 2: []})
    clustering = louvain_cluster(g, make_cfg())
    assert sorted(clustering) == [0, 1, 2]


def test_merging_stops_at_cluster_limit():
    g = path_graph(12)
    cfg = make_cfg(n_parts=1, seed_factor=3.0, alpha=1.0, max_iters=100)
    clustering = louvain_cluster(g, cfg)
    assert len(set(clustering)) >= 3


def test_merged_vertices_are_adjacent_in_a_path():
    g = path_graph(10)
    clustering = louvain_cluster(g, make_cfg())
    for cid in set(clustering):
        members = [v for v, c in enumerate(clustering) if c == cid]
        assert members == list(range(members[0], members[-1] + 1))


@settings(max_examples=40, deadline=None)
@given(st.integers(min_value=1, max_value=15), st.floats(min_value=0.0, max_value=2.0))
def test_cluster_ids_are_contiguous(n, alpha):
    clustering = louvain_cluster(path_graph(n), make_cfg(alpha=alpha))
    assert len(clustering) == n
    assert sorted(set(clustering)) == list(range(len(set(clustering))))


def test_neighbor_outside_vertex_set_raises():
    g = AdjacencyGraph({0: [1], 1: [0, 7]})
    with pytest.raises(KeyError):
        louvain_cluster(g, make_cfg())
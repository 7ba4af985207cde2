# meshsieve

meshsieve does three things for scientific computing and PDE codes:

- it stores data for each point of a mesh;
- it refines slices of that data onto finer points and assembles them back;
- it partitions graphs into balanced parts, in three phases.

## Installation

```
pip install meshsieve
```

To run the test suite:

```
pip install "meshsieve[test]"
pytest
```

## Storing data per mesh point

Points are positive integers. `meshsieve.errors.point_id` checks a value and
rejects zero.

`meshsieve.atlas.Atlas` maps each point to an `(offset, length)` slice of one
flat buffer and keeps the points in insertion order. When a point is removed
with `remove_point`, the offsets of the remaining points are recomputed. An
atlas can be turned into a dict or JSON with `to_dict` and `to_json`, and read
back with `from_dict` and `from_json`.

`meshsieve.section.Section` holds the values. Every entry starts as `default`,
which is `0` unless you give another value.

```python
from meshsieve.atlas import Atlas
from meshsieve.section import Section

atlas = Atlas()
atlas.insert(1, 2)   # point 1 has two values, at offset 0
atlas.insert(2, 1)   # point 2 has one value, at offset 2

section = Section(atlas)
section.set(1, [1.0, 2.0])
section.set(2, [3.5])
print(section.restrict(1))               # [1.0, 2.0]
print([p for p, _ in section.items()])   # [1, 2], in insertion order
section.scatter_from([4.0, 5.0, 6.0], [(0, 2), (2, 1)])
print(section.data)                      # [4.0, 5.0, 6.0]
```

`Section.add_point` appends a new point whose entries hold the default value.
`Section.remove_point` removes a point and compacts the buffer.

Errors are raised as subclasses of `meshsieve.errors.MeshSieveError`, for
example `ZeroLengthSliceError`, `DuplicatePointError`, `PointNotInAtlasError`
and `SliceLengthMismatchError`. Two errors compare equal when they are of the
same kind and carry the same fields.

## Refinement and assembly

`meshsieve.sieved_array.SievedArray` copies values from coarse points to fine
points. `meshsieve.orientation.Orientation` has two members: `FORWARD` copies
the values in order and `REVERSE` copies them reversed. `assemble` writes the
average of the fine values onto each coarse point. Integer averages truncate
toward zero.

```python
from meshsieve.atlas import Atlas
from meshsieve.sieved_array import SievedArray
from meshsieve.orientation import Orientation

coarse_atlas = Atlas(); coarse_atlas.insert(1, 2)
fine_atlas = Atlas(); fine_atlas.insert(2, 2); fine_atlas.insert(3, 2)
coarse, fine = SievedArray(coarse_atlas), SievedArray(fine_atlas)
coarse.set(1, [10, 20])
fine.refine_with_sifter(coarse, [(1, [(2, Orientation.FORWARD), (3, Orientation.REVERSE)])])
print(fine.get(3))   # [20, 10]
```

`meshsieve.delta` has three rules for combining values. Each has a static
`restrict` and a static `fuse`, and `fuse` returns the new local value:

- `CopyDelta` overwrites the local value.
- `AddDelta` adds the incoming value to it.
- `ZeroDelta` leaves it unchanged.

`meshsieve.helpers` yields `(point, values)` pairs along the closure or star
of some seed points. The functions are `restrict_closure` and `restrict_star`,
with the list forms `restrict_closure_list` and `restrict_star_list`. They
work with any sieve object that has `closure(seeds)` and `star(seeds)`
methods. `ReadOnlyMap` wraps a `Section`; a point that is not in the section
reads as an empty list.

## Graph partitioning

`meshsieve.partitioning.partition.partition` runs three phases:

1. Louvain-style balanced clustering.
2. Merging of clusters into `n_parts` parts, guided by adjacency.
3. Construction of the vertex cut.

It returns a `PartitionMap`, a dict from vertex to part id. Each phase can be
switched off in `PartitionerConfig`.

```python
from meshsieve.partitioning.graph import AdjacencyGraph
from meshsieve.partitioning.config import PartitionerConfig
from meshsieve.partitioning.partition import partition
from meshsieve.partitioning.metrics import edge_cut

graph = AdjacencyGraph({0: [1, 3], 1: [0, 2], 2: [1, 3], 3: [2, 0]})
pm = partition(graph, PartitionerConfig(n_parts=2))
print(pm.part_of(0), edge_cut(graph, pm))
```

Any object with `vertices()`, `neighbors(v)` and `degree(v)` can be
partitioned. The building blocks can also be used on their own:

| Name | Module |
| --- | --- |
| `louvain_cluster` | `meshsieve.partitioning.louvain` |
| `partition_clusters`, `merge_clusters_into_parts` and `Item` | `meshsieve.partitioning.binpack` |
| `build_vertex_cuts` | `meshsieve.partitioning.vertex_cut` |
| `pick_seeds` | `meshsieve.partitioning.seed_select` |
| `edge_cut` and `replication_factor` | `meshsieve.partitioning.metrics` |
| `ClusterIds`, a union-find | `meshsieve.partitioning.state` |

A failure raises a subclass of `PartitionerError`, such as
`NoPositiveMergeError` or `UnbalancedError`.

## What the package does not do

The package has no mesh topology structures: no sieve, no stack and no
overlap. The helpers in `meshsieve.helpers` need a sieve object that you
supply yourself.

There is no communication layer. Ghost exchange and distributed mesh
distribution across processes are not provided.

There are no thread-parallel helpers. Partitioning runs serially in one
process.
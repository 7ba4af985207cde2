import pytest

from meshsieve.atlas import Atlas
from meshsieve.errors import (
    AtlasInsertionFailedError,
    DuplicatePointError,
    PointNotInAtlasError,
    ScatterChunkMismatchError,
    ScatterLengthMismatchError,
    SliceLengthMismatchError,
    ZeroLengthSliceError,
)
from meshsieve.section import Section


def make_section():
    atlas = Atlas()
    atlas.insert(1, 2)
    atlas.insert(2, 1)
    return Section(atlas, 0.0)


def test_restrict_and_set():
    s = make_section()
    s.set(1, [1.0, 2.0])
    s.set(2, [3.5])
    assert s.restrict(1) == [1.0, 2.0]
    assert s.restrict(2) == [3.5]


def test_items_in_atlas_order():
    s = make_section()
    s.set(1, [9.0, 8.0])
    s.set(2, [7.0])
    assert [vals[0] for _, vals in s.items()] == [9.0, 7.0]


def test_get_matches_restrict():
    s = make_section()
    s.set(1, [1.0, 2.0])
    assert s.get(1) == s.restrict(1)


def test_integer_section_get():
    atlas = Atlas()
    atlas.insert(1, 1)
    s = Section(atlas)
    s.set(1, [42])
    assert s.get(1) == [42]


def test_scatter_from():
    s = make_section()
    assert s.data == [0.0, 0.0, 0.0]
    s.scatter_from([1.0, 2.0, 3.5], [(0, 2), (2, 1)])
    assert s.data == [1.0, 2.0, 3.5]


def test_round_trip_and_scatter():
    atlas = Atlas()
    atlas.insert(1, 2)
    atlas.insert(2, 1)
    s = Section(atlas, 0.0)
    s.set(1, [1.1, 2.2])
    s.set(2, [3.3])
    s2 = Section(atlas, 0.0)
    s2.scatter_from([1.1, 2.2, 3.3], [(0, 2), (2, 1)])
    assert s2.restrict(1) == s.restrict(1)
    assert s2.restrict(2) == s.restrict(2)


def test_scatter_length_mismatch():
    s = make_section()
    with pytest.raises(ScatterLengthMismatchError) as info:
        s.scatter_from([1.0, 2.0], [(0, 2), (2, 1)])
    assert info.value == ScatterLengthMismatchError(3, 2)


def test_scatter_chunk_out_of_bounds():
    s = make_section()
    with pytest.raises(ScatterChunkMismatchError) as info:
        s.scatter_from([1.0], [(5, 1)])
    assert info.value == ScatterChunkMismatchError(5, 1)
    assert s.data == [0.0, 0.0, 0.0]


def test_add_point_expands_and_defaults():
    atlas = Atlas()
    atlas.insert(1, 2)
    s = Section(atlas)
    assert len(list(s.items())) == 1
    s.add_point(2, 3)
    assert sorted(p for p, _ in s.items()) == [1, 2]
    assert s.restrict(2) == [0, 0, 0]
    s.set(2, [7, 8, 9])
    assert s.restrict(2) == [7, 8, 9]


def test_add_duplicate_point_wraps_error():
    s = make_section()
    with pytest.raises(AtlasInsertionFailedError) as info:
        s.add_point(1, 4)
    assert info.value.point == 1
    assert info.value.source == DuplicatePointError(1)


def test_add_zero_length_point_wraps_error():
    s = make_section()
    with pytest.raises(AtlasInsertionFailedError) as info:
        s.add_point(3, 0)
    assert info.value.source == ZeroLengthSliceError()
    assert 3 not in s


def test_remove_point_compacts_and_forgets():
    atlas = Atlas()
    atlas.insert(1, 2)
    atlas.insert(2, 1)
    atlas.insert(3, 2)
    s = Section(atlas)
    s.set(1, [10, 11])
    s.set(2, [22])
    s.set(3, [33, 34])
    s.remove_point(2)
    assert [p for p, _ in s.items()] == [1, 3]
    assert s.data == [10, 11, 33, 34]
    with pytest.raises(PointNotInAtlasError):
        s.restrict(2)


def test_remove_missing_point_is_noop():
    s = make_section()
    s.set(1, [1.0, 2.0])
    before = s.data
    s.remove_point(99)
    assert s.data == before


def test_restrict_missing_raises():
    s = make_section()
    with pytest.raises(PointNotInAtlasError) as info:
        s.restrict(99)
    assert info.value == PointNotInAtlasError(99)


def test_set_wrong_length_raises():
    s = make_section()
    with pytest.raises(SliceLengthMismatchError) as info:
        s.set(1, [1.0])
    assert info.value == SliceLengthMismatchError(1, 2, 1)


def test_restrict_returns_independent_copy():
    s = make_section()
    s.set(1, [1.0, 2.0])
    vals = s.restrict(1)
    vals[0] = 100.0
    assert s.restrict(1) == [1.0, 2.0]


def test_section_does_not_alias_atlas():
    atlas = Atlas()
    atlas.insert(1, 2)
    s = Section(atlas)
    atlas.insert(2, 5)
    assert 2 not in s
    assert s.atlas.total_len() == 2
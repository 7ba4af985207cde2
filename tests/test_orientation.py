import pytest
from hypothesis import given
from hypothesis import strategies as st

from meshsieve.errors import DeltaLengthMismatchError
from meshsieve.orientation import Orientation


def test_forward_noop():
    src = [1, 2, 3]
    dst = list(src)
    Orientation.FORWARD.apply(src, dst)
    assert dst == src


def test_reverse_reverses():
    src = [1, 2, 3, 4]
    dst = [0] * 4
    Orientation.REVERSE.apply(src, dst)
    assert dst == [4, 3, 2, 1]


def test_reverse_empty():
    dst = []
    Orientation.REVERSE.apply([], dst)
    assert dst == []


def test_mismatch_raises():
    src = [1, 2, 3]
    dst = [0] * 2
    with pytest.raises(DeltaLengthMismatchError) as info:
        Orientation.FORWARD.apply(src, dst)
    assert info.value == DeltaLengthMismatchError(3, 2)
    assert dst == [0, 0]


@given(st.lists(st.integers()))
def test_reverse_twice_is_identity(values):
    once = [0] * len(values)
    Orientation.REVERSE.apply(values, once)
    twice = [0] * len(values)
    Orientation.REVERSE.apply(once, twice)
    assert twice == values


@given(st.lists(st.integers()))
def test_forward_copies(values):
    dst = [None] * len(values)
    Orientation.FORWARD.apply(values, dst)
    assert dst == values
import copy
import operator

import numpy as np
import pytest

from IterNumTools import (
    Bounds,
    LinearInterpolation,
    Space,
    StepCountError,
    grid_space,
    grid_step,
    lin_space,
)


def ten():
    # 0.0, 1.0, ..., 9.0
    return lin_space(0.0, 9.0, 10)

def test_forward_and_backward():
    it = ten()
    assert next(it) == 0.0
    assert it.next_back() == 9.0
    assert len(it) == 8
    assert list(it) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    assert it.next_back() is None
    with pytest.raises(StopIteration):
        next(it)

def test_len_decreases_by_one_per_call():
    it = lin_space(0.0, 5.0, 6)
    expected_len = 6
    assert operator.length_hint(it) == expected_len
    while expected_len > 0:
        assert len(it) == expected_len
        next(it)
        expected_len -= 1
        assert len(it) == expected_len
        it.next_back()
        expected_len -= 1
    assert len(it) == 0

def test_reversed():
    assert list(reversed(ten())) == [9.0, 8.0, 7.0, 6.0, 5.0, 4.0, 3.0, 2.0, 1.0, 0.0]

def test_nth():
    it = ten()
    assert it.nth(2) == 2.0
    assert next(it) == 3.0
    assert it.nth(0) == 4.0
    assert len(it) == 5

def test_nth_past_the_end_exhausts():
    it = ten()
    assert it.nth(10) is None
    assert len(it) == 0
    assert it.nth(0) is None
    assert list(it) == []

def test_nth_back():
    it = ten()
    assert it.nth_back(1) == 8.0
    assert it.nth_back(0) == 7.0
    assert it.nth_back(100) is None
    assert len(it) == 0

@pytest.mark.parametrize("k", range(12))
def test_nth_matches_iterating(k):
    skipped = ten()
    stepped = ten()
    first = skipped.nth(k)
    expected = list(stepped)[k:]
    if k >= 10:
        assert first is None
        assert list(skipped) == []
    else:
        assert [first] + list(skipped) == expected

@pytest.mark.parametrize("k", range(12))
def test_nth_back_matches_iterating(k):
    skipped = ten()
    first = skipped.nth_back(k)
    expected = list(reversed(ten()))[k:]
    if k >= 10:
        assert first is None
    else:
        assert [first] + list(reversed(skipped)) == expected

def test_advance_by_reports_shortfall():
    it = ten()
    assert it.advance_by(3) == 0
    assert len(it) == 7
    assert it.advance_back_by(2) == 0
    assert list(it) == [3.0, 4.0, 5.0, 6.0, 7.0]

    it = ten()
    assert it.advance_by(12) == 2
    assert len(it) == 0
    assert it.advance_back_by(1) == 1
    with pytest.raises(ValueError):
        it.advance_by(-1)

def test_count_and_last():
    it = ten()
    next(it)
    assert it.count() == 9
    assert len(it) == 0

    it = ten()
    assert it.last() == 9.0
    assert len(it) == 0
    assert it.last() is None

def test_getitem_is_relative_to_remaining():
    it = ten()
    assert it[0] == 0.0
    assert it[-1] == 9.0
    next(it)
    assert it[0] == 1.0
    assert it[3] == 4.0
    assert it[-2] == 8.0
    assert len(it) == 9

def test_getitem_errors():
    it = ten()
    with pytest.raises(IndexError):
        it[10]
    with pytest.raises(IndexError):
        it[-11]
    with pytest.raises(TypeError):
        it["1"]
    with pytest.raises(TypeError):
        it[1.0]

def test_getitem_slices():
    it = ten()
    sub = it[2:5]
    assert isinstance(sub, Space)
    assert len(sub) == 3
    assert list(reversed(sub)) == [4.0, 3.0, 2.0]
    assert len(it) == 10

    assert it[::3] == [0.0, 3.0, 6.0, 9.0]
    assert it[::-4] == [9.0, 5.0, 1.0]
    assert len(it[7:2]) == 0

def test_clone_is_independent():
    it = ten()
    next(it)
    other = it.clone()
    assert list(it) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]
    assert len(other) == 9
    assert other.next_back() == 9.0

    copied = copy.copy(other)
    next(copied)
    assert len(other) == 8
    assert len(copied) == 7

def test_interpolation_is_idempotent():
    it = lin_space(0.1, 0.9, 9)
    before = it.interpolation.interpolate(4)
    it.next_back()
    it.next_back()
    next(it)
    assert it.interpolation.interpolate(4) == before
    assert it.nth(3) == before

def test_map_keeps_length_and_order():
    it = ten()
    next(it)
    doubled = it.map(lambda v: 2 * v)
    assert len(doubled) == 9
    assert doubled.next_back() == 18.0
    assert doubled.nth(1) == 4.0
    assert list(doubled) == [6.0, 8.0, 10.0, 12.0, 14.0, 16.0]
    assert doubled.bounds is None
    # the original cursor is untouched
    assert len(it) == 9

def test_to_array():
    arr = ten().to_array()
    assert isinstance(arr, np.ndarray)
    np.testing.assert_array_equal(arr, np.arange(10.0))

    arr = grid_space((0.0, 0.0), (1.0, 2.0), (2, 4), endpoint=False).to_array()
    assert arr.shape == (8, 2)

    empty = lin_space(0.0, 1.0, 0, endpoint=False).to_array()
    assert empty.shape == (0,)

    empty = grid_space((0.0, 0.0), (1.0, 1.0), (3, 0), endpoint=False).to_array()
    assert empty.shape == (0, 2)
    empty = grid_step((0, 0, 0), (2, 2, 0)).to_array()
    assert empty.shape == (0, 3)

def test_to_list_consumes():
    it = ten()
    assert it.to_list() == [float(i) for i in range(10)]
    assert it.to_list() == []

def test_bounds():
    assert lin_space(0.0, 1.0, 3).bounds == Bounds(0.0, 1.0, True)
    assert lin_space(0.0, 1.0, 3, endpoint=False).bounds == Bounds(0.0, 1.0, False)

def test_custom_interpolation():
    squares = Space(4, LinearInterpolation(0, 1)).map(lambda v: v * v)
    assert list(squares) == [0, 1, 4, 9]

def test_invalid_length():
    with pytest.raises(StepCountError):
        Space(-1, LinearInterpolation(0, 1))
    with pytest.raises(TypeError):
        Space(2.0, LinearInterpolation(0, 1))
    assert len(Space(np.int64(3), LinearInterpolation(0, 1))) == 3

def test_repr():
    assert "LinearInterpolation" in repr(ten())
    assert "range(0, 10)" in repr(ten())

def test_sum2_and_product2():
    assert lin_space(1.0, 4.0, 4).sum2() == 10.0
    assert lin_space(1.0, 4.0, 4).product2() == 24.0

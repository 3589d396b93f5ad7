import pytest

from datastruct.fixed_array import BoundedArray


def make(values, capacity=6):
    arr = BoundedArray(capacity)
    for v in values:
        arr.append(v)
    return arr


def test_append_keeps_order():
    arr = make([2, 4, 3, 1, 5])
    assert list(arr) == [2, 4, 3, 1, 5]
    assert len(arr) == 5


def test_append_when_full_raises():
    arr = make([1, 2, 3], capacity=3)
    assert arr.is_full()
    with pytest.raises(OverflowError):
        arr.append(4)
    assert list(arr) == [1, 2, 3]


def test_empty_state():
    arr = BoundedArray(4)
    assert arr.is_empty()
    assert not arr.is_full()
    with pytest.raises(IndexError):
        arr.delete(1)


def test_sort_ascending():
    values = [2, 4, 3, 1, 5]
    arr = make(values)
    arr.sort()
    assert list(arr) == sorted(values)


def test_invert():
    values = [2, 4, 3, 1, 5]
    arr = make(values)
    arr.invert()
    assert list(arr) == values[::-1]


def test_insert_positions():
    arr = make([2, 4, 3])
    arr.insert(1, 99)
    assert list(arr) == [99, 2, 4, 3]
    arr.insert(len(arr) + 1, 7)
    assert list(arr)[-1] == 7


def test_insert_out_of_range():
    arr = make([2, 4])
    with pytest.raises(IndexError):
        arr.insert(0, 1)
    with pytest.raises(IndexError):
        arr.insert(4, 1)


def test_insert_when_full():
    arr = make([1, 2], capacity=2)
    with pytest.raises(OverflowError):
        arr.insert(1, 5)


def test_delete_returns_value():
    arr = make([2, 4, 3, 1, 5])
    assert arr.delete(2) == 4
    assert list(arr) == [2, 3, 1, 5]
    with pytest.raises(IndexError):
        arr.delete(5)
import pytest

from datastruct.linked_list import LinkedList


def test_build_and_iterate():
    values = [5, 3, 8, 1]
    lst = LinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)
    assert not lst.is_empty()


def test_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.delete(1)


def test_sort():
    values = [5, 3, 8, 1, 3]
    lst = LinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)


def test_insert_front_middle_end():
    lst = LinkedList([1, 2, 3])
    lst.insert(2, 88)
    assert list(lst) == [1, 88, 2, 3]
    lst.insert(1, 0)
    assert list(lst)[0] == 0
    lst.insert(len(lst) + 1, 9)
    assert list(lst)[-1] == 9


def test_insert_out_of_range():
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert(0, 5)
    with pytest.raises(IndexError):
        lst.insert(4, 5)
    assert list(lst) == [1, 2]


def test_delete():
    lst = LinkedList([10, 20, 30])
    assert lst.delete(2) == 20
    assert list(lst) == [10, 30]
    with pytest.raises(IndexError):
        lst.delete(3)
    with pytest.raises(IndexError):
        lst.delete(0)


def test_insert_then_delete_round_trip():
    values = [4, 6, 2]
    lst = LinkedList(values)
    lst.insert(2, 77)
    assert lst.delete(2) == 77
    assert list(lst) == values
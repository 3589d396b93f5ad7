import random

import pytest

from datastruct.vector import DEFAULT_CAPACITY, Vector


def test_insert_at_end_returns_rank():
    v = Vector([1, 2, 3])
    assert v.insert(4) == 3
    assert list(v) == [1, 2, 3, 4]


def test_insert_at_rank_matches_list_insert():
    values = [5, 6, 7]
    v = Vector(values)
    expected = list(values)
    expected.insert(1, 9)
    assert v.insert(9, 1) == 1
    assert list(v) == expected


def test_insert_rank_out_of_range():
    v = Vector([1])
    with pytest.raises(IndexError):
        v.insert(2, 5)


def test_capacity_keeps_up_with_size():
    v = Vector()
    assert v.capacity == DEFAULT_CAPACITY
    for i in range(50):
        v.insert(i)
        assert v.capacity >= len(v)
    assert list(v) == list(range(50))


def test_item_access_and_assignment():
    v = Vector([1, 2, 3])
    v[1] = 8
    assert v[1] == 8
    assert list(v) == [1, 8, 3]


def test_remove_returns_element():
    v = Vector([1, 2, 3, 4])
    assert v.remove(1) == 2
    assert list(v) == [1, 3, 4]


def test_remove_out_of_range():
    v = Vector([1, 2])
    with pytest.raises(IndexError):
        v.remove(2)


def test_remove_range_returns_count():
    values = [1, 2, 3, 4, 5, 6, 7]
    v = Vector(values)
    assert v.remove_range(2, 5) == 3
    assert list(v) == values[:2] + values[5:]


def test_remove_empty_range():
    v = Vector([1, 2, 3])
    assert v.remove_range(1, 1) == 0
    assert list(v) == [1, 2, 3]


def test_find_last_occurrence_and_miss():
    v = Vector([4, 1, 4, 2])
    assert v.find(4) == 2
    assert v.find(4, 0, 2) == 0
    assert v.find(9, 1, 4) == 0


def test_deduplicate_keeps_first_occurrences():
    values = [3, 1, 3, 2, 1, 5, 2]
    v = Vector(values)
    expected = list(dict.fromkeys(values))
    assert v.deduplicate() == len(values) - len(expected)
    assert list(v) == expected


def test_disordered_counts_adjacent_inversions():
    assert Vector([1, 2, 3]).disordered() == 0
    assert Vector([3, 2, 1]).disordered() == 2


def test_uniquify_sorted_vector():
    values = [1, 1, 2, 3, 3, 3, 7]
    v = Vector(values)
    expected = sorted(set(values))
    assert v.uniquify() == len(values) - len(expected)
    assert list(v) == expected


def test_uniquify_empty():
    v = Vector()
    assert v.uniquify() == 0
    assert len(v) == 0


def test_search_finds_largest_not_greater():
    values = [1, 3, 3, 5, 8, 13]
    v = Vector(values)
    for e in range(0, 15):
        r = v.search(e)
        assert r == -1 or values[r] <= e
        assert r + 1 == len(values) or values[r + 1] > e


def test_search_below_all_returns_lo_minus_one():
    v = Vector([10, 20, 30])
    assert v.search(5, 1, 3) == 0


def test_bubble_sort_whole_vector():
    rng = random.Random(7)
    values = [rng.randrange(100) for _ in range(40)]
    v = Vector(values)
    v.bubble_sort()
    assert list(v) == sorted(values)
    assert v.disordered() == 0


def test_bubble_sort_partial_range():
    values = [9, 5, 4, 3, 1, 0]
    v = Vector(values)
    v.bubble_sort(1, 4)
    assert list(v) == values[:1] + sorted(values[1:4]) + values[4:]


def test_traverse_replaces_with_returned_values():
    v = Vector([1, 2, 3])
    v.traverse(lambda e: e * 2)
    assert list(v) == [2, 4, 6]


def test_traverse_keeps_elements_when_visit_returns_none():
    seen = []
    v = Vector([1, 2, 3])
    v.traverse(seen.append)
    assert seen == [1, 2, 3]
    assert list(v) == [1, 2, 3]
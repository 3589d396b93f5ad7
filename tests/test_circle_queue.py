import pytest

from datastruct.circle_queue import CircleQueue


def test_traverse_after_enqueue():
    q = CircleQueue()
    for v in [2, 7, 33, 4, 9]:
        q.enqueue(v)
    assert list(q) == [2, 7, 33, 4, 9]
    assert len(q) == 5


def test_holds_one_less_than_slots():
    q = CircleQueue(6)
    for v in range(5):
        q.enqueue(v)
    assert q.is_full()
    with pytest.raises(OverflowError):
        q.enqueue(99)


def test_traversal_does_not_consume():
    q = CircleQueue()
    q.enqueue(2)
    q.enqueue(7)
    list(q)
    assert q.dequeue() == 2
    assert q.dequeue() == 7
    assert q.is_empty()


def test_dequeue_empty_raises():
    q = CircleQueue()
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.dequeue()


def test_wraparound_preserves_fifo():
    q = CircleQueue(4)
    out = []
    for v in range(10):
        q.enqueue(v)
        if len(q) == 3:
            out.append(q.dequeue())
    while not q.is_empty():
        out.append(q.dequeue())
    assert out == list(range(10))


def test_too_few_slots():
    with pytest.raises(ValueError):
        CircleQueue(1)
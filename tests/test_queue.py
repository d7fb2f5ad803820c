import pytest

from schedsim.errors import CapacityExceededError, InputValidationError, ValidationErrorKind
from schedsim.queue import BoundedQueue


def test_fifo_order():
    q = BoundedQueue()
    for item in (3, 1, 2):
        q.enqueue(item)
    assert q.size() == 3
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [3, 1, 2]


def test_dequeue_empty_returns_none():
    q = BoundedQueue()
    assert q.dequeue() is None
    assert q.peek() is None
    assert q.is_empty()
    assert not q


def test_unbounded_by_default():
    q = BoundedQueue()
    assert q.capacity is None
    for i in range(1000):
        q.enqueue(i)
    assert len(q) == 1000


def test_capacity_exceeded():
    q = BoundedQueue(capacity=2)
    q.enqueue("a")
    q.enqueue("b")
    with pytest.raises(CapacityExceededError) as excinfo:
        q.enqueue("c")
    assert excinfo.value.capacity == 2
    # The failed enqueue leaves the queue untouched
    assert list(q) == ["a", "b"]


def test_capacity_frees_up_after_dequeue():
    q = BoundedQueue(capacity=1)
    q.enqueue(1)
    assert q.dequeue() == 1
    q.enqueue(2)
    assert q.peek() == 2
    assert q.size() == 1


def test_invalid_capacity():
    with pytest.raises(InputValidationError) as excinfo:
        BoundedQueue(capacity=0)
    assert excinfo.value.kind is ValidationErrorKind.INVALID_CAPACITY
    # Still a ValueError for callers that only know the queue
    assert isinstance(excinfo.value, ValueError)

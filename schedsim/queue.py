from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, Optional, TypeVar

from .errors import CapacityExceededError, InputValidationError, ValidationErrorKind

T = TypeVar("T")


class BoundedQueue(Generic[T]):
    """
    FIFO queue with an optional capacity ceiling.

    ``capacity=None`` means unbounded. ``dequeue`` on an empty queue returns
    ``None``; schedulers use that to detect that nothing is ready.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 1:
            raise InputValidationError(
                ValidationErrorKind.INVALID_CAPACITY,
                f"Queue capacity must be at least 1, got {capacity}",
            )
        self._capacity = capacity
        self._items: Deque[T] = deque()

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def enqueue(self, item: T) -> None:
        if self._capacity is not None and len(self._items) == self._capacity:
            raise CapacityExceededError(self._capacity)
        self._items.append(item)

    def dequeue(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self._items)!r}, capacity={self._capacity!r})"

"""
Fixed-capacity FIFO buffer used for rolling event history
"""

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class BoundedBuffer(Generic[T]):
    """
    Append-only ring buffer with FIFO eviction.

    Eviction policy: once ``len(buffer) == capacity`` every append drops the
    single oldest item. Items are never reordered. ``evicted`` counts the
    items dropped since construction or the last ``clear()``.
    """

    def __init__(self, capacity: int, items: Optional[Iterable[T]] = None):
        if capacity <= 0:
            raise ValueError("BoundedBuffer capacity must be positive")
        self.capacity = capacity
        self._items: Deque[T] = deque(maxlen=capacity)
        self.evicted = 0
        if items is not None:
            self.extend(items)

    def append(self, item: T) -> Optional[T]:
        """Append an item, returning the evicted item if one was dropped"""
        dropped = None
        if len(self._items) == self.capacity:
            dropped = self._items[0]
            self.evicted += 1
        self._items.append(item)
        return dropped

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def tail(self, count: int) -> List[T]:
        """The most recent ``count`` items, oldest first"""
        if count <= 0:
            return []
        if count >= len(self._items):
            return list(self._items)
        return list(self._items)[-count:]

    def clear(self) -> None:
        self._items.clear()
        self.evicted = 0

    def to_list(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

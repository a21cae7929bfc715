"""Fixed-capacity binary heap.

The heap lives in a pre-sized list: indices [0, size) hold live elements and
the remaining slots are None. Parent/child links are positional, the parent
of i is (i - 1) // 2 and its children are 2i + 1 and 2i + 2.

By default this is a max-heap. Pass ``min_heap=True`` to flip every
comparison and get a min-heap with the same API.
"""

import logging
import operator
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

T = TypeVar('T')

NOT_FOUND = -1


class HeapError(Exception):
    pass


class HeapFullError(HeapError):
    pass


class EmptyHeapError(HeapError, IndexError):
    pass


class HeapIndexError(HeapError, IndexError):
    pass


class BinaryHeap(Generic[T]):
    def __init__(self, capacity: int, min_heap: bool = False) -> None:
        if isinstance(capacity, bool):
            raise ValueError("capacity must be a non-negative integer")
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise ValueError("capacity must be a non-negative integer") from None
        if capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._capacity = capacity
        self._size = 0
        self._min_heap = min_heap
        self._data: List[Optional[T]] = [None] * capacity

    @staticmethod
    def from_array(arr: Iterable[T], min_heap: bool = False) -> 'BinaryHeap[T]':
        """Build a full heap from an array in O(n).

        Capacity is set to the array length. Creates a shallow copy of the
        input.
        """
        data = list(arr)
        heap: BinaryHeap[T] = BinaryHeap(len(data), min_heap=min_heap)
        heap._data = data
        heap._size = len(data)
        for i in range(heap._size // 2 - 1, -1, -1):
            heap._sift_down(i)
        logger.debug("built heap of %d elements (min_heap=%s)", heap._size, min_heap)
        return heap

    def top(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("top from empty heap")
        return self._data[0]

    def extract_top(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("extract_top from empty heap")
        result = self._data[0]
        last = self._size - 1
        self._data[0] = self._data[last]
        self._data[last] = None
        self._size = last
        self._sift_down(0)
        return result

    def insert(self, value: T) -> None:
        if self._size == self._capacity:
            raise HeapFullError(f"heap is full (capacity={self._capacity})")
        self._data[self._size] = value
        self._size += 1
        self._sift_up(self._size - 1)

    def remove(self, index: int) -> T:
        """Remove and return the element at ``index``.

        The last live element is moved into the hole and sifted in whichever
        direction it needs to go, so no sentinel value is required.
        """
        index = self._check_index(index, "remove")
        removed = self._data[index]
        last = self._size - 1
        moved = self._data[last]
        self._data[last] = None
        self._size = last
        if index != last:
            self._data[index] = moved
            if self._higher(moved, removed):
                self._sift_up(index)
            else:
                self._sift_down(index)
        logger.debug("removed index %d, %d elements left", index, self._size)
        return removed

    def change_priority(self, index: int, value: T) -> None:
        index = self._check_index(index, "change_priority")
        old = self._data[index]
        self._data[index] = value
        if self._higher(value, old):
            logger.debug("change_priority at %d: sift up", index)
            self._sift_up(index)
        else:
            logger.debug("change_priority at %d: sift down", index)
            self._sift_down(index)

    def find(self, value: T) -> int:
        """Return the index of the first live element equal to ``value``.

        Returns -1 if there is none. This is a linear scan, O(n).
        """
        for i in range(self._size):
            if self._data[i] == value:
                return i
        return NOT_FOUND

    def empty(self) -> bool:
        return self._size == 0

    def full(self) -> bool:
        return self._size == self._capacity

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    @property
    def min_heap(self) -> bool:
        return self._min_heap

    def clear(self) -> None:
        self._data = [None] * self._capacity
        self._size = 0

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._capacity, min_heap=self._min_heap)
        clone._data = self._data.copy()
        clone._size = self._size
        return clone

    def to_list(self) -> List[T]:
        """Live elements in storage order (not sorted)."""
        return self._data[:self._size]

    def _higher(self, a: T, b: T) -> bool:
        # True if a belongs above b
        if self._min_heap:
            return a < b
        return a > b

    def _check_index(self, index: int, op: str) -> int:
        if isinstance(index, bool):
            raise HeapIndexError(f"BinaryHeap.{op}: index must be an integer, not bool")
        try:
            position = operator.index(index)
        except TypeError:
            raise HeapIndexError(f"BinaryHeap.{op}: index must be an integer, not {type(index).__name__}") from None
        if position < 0 or position >= self._size:
            raise HeapIndexError(f"BinaryHeap.{op}: index {position} out of range")
        return position

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._higher(self._data[index], self._data[parent]):
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = self._size
        while True:
            best = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._higher(self._data[left], self._data[best]):
                best = left
            if right < size and self._higher(self._data[right], self._data[best]):
                best = right
            if best == index:
                break
            self._data[index], self._data[best] = self._data[best], self._data[index]
            index = best

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return self.find(value) != NOT_FOUND

    def __repr__(self) -> str:
        return f"BinaryHeap(capacity={self._capacity}, size={self._size}, data={self.to_list()})"

    def __str__(self) -> str:
        # every slot, including unused ones, in raw storage order
        return " ".join(str(x) for x in self._data)

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.empty():
            yield heap_copy.extract_top()

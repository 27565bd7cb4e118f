import copy
import operator
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from src.binary_heap.exceptions import EmptyHeapError, RangeError

T = TypeVar("T")


def _less(x: Any, y: Any) -> bool:
    return x < y


class BinaryHeap(Generic[T]):
    """
    Binary heap over a Python list, ordered by a user supplied predicate.

    By default the smallest element sits at the top of the heap. Supplying
    ``compare=lambda a, b: a > b`` keeps the largest element on top, and a
    predicate comparing a field of a record gives a priority queue over
    structured data.

    Parameters
    ----------
    compare : Callable[[T, T], bool], optional
        Strict weak ordering, returns True when the first argument should be
        closer to the top than the second. Defaults to ``a < b``.
    data : Iterable[T], optional
        Elements pushed onto the heap at construction, in iteration order.
    clone : Callable[[T], T], optional
        Copy function used by `peek` and `peek_array` so callers cannot break
        the heap by mutating what they get back. Defaults to
        ``copy.deepcopy``.
    """

    def __init__(
        self,
        compare: Optional[Callable[[T, T], bool]] = None,
        data: Optional[Iterable[T]] = None,
        clone: Optional[Callable[[T], T]] = None
    ) -> None:
        self._data: list[T] = []
        self._compare = compare if compare is not None else _less
        self._clone = clone if clone is not None else copy.deepcopy

        if data is not None:
            self.push_array(data)

    @classmethod
    def min_heap(
        cls,
        data: Optional[Iterable[T]] = None,
        key: Optional[Callable[[T], Any]] = None
    ) -> "BinaryHeap[T]":
        """Heap with the smallest element (or smallest ``key(element)``) on top."""
        if key is None:
            return cls(_less, data)
        return cls(lambda x, y: key(x) < key(y), data)

    @classmethod
    def max_heap(
        cls,
        data: Optional[Iterable[T]] = None,
        key: Optional[Callable[[T], Any]] = None
    ) -> "BinaryHeap[T]":
        """Heap with the largest element (or largest ``key(element)``) on top."""
        if key is None:
            return cls(lambda x, y: x > y, data)
        return cls(lambda x, y: key(x) > key(y), data)

    @property
    def compare(self) -> Callable[[T, T], bool]:
        return self._compare

    def push(self, elt: T) -> None:
        """Insert a single element. O(log n)."""
        self._data.append(elt)
        self._sift_up()

    def pop(self) -> T:
        """
        Remove and return the top element of the heap. O(log n).

        Raises
        ------
        EmptyHeapError
            If the heap holds no elements.
        """
        if not self._data:
            raise EmptyHeapError("BinaryHeap.pop() - heap is empty")
        ret = self._data[0]
        self._sift_down()
        return ret

    def push_array(self, arr: Iterable[T]) -> None:
        """Push every element of `arr` in iteration order."""
        for elt in arr:
            self.push(elt)

    def pop_array(self, n: Optional[int] = None) -> list[T]:
        """
        Remove the top `n` elements and return them in heap order.

        Parameters
        ----------
        n : int, optional
            Number of elements to remove. When omitted the whole heap is
            drained, which amounts to a heapsort.

        Returns
        -------
        list[T]
            The removed elements, top first.

        Raises
        ------
        RangeError
            If `n` is not an integer, is negative or exceeds the size of the
            heap. The heap is left untouched.
        """
        n = self._check_count("pop_array", n)
        return [self.pop() for _ in range(n)]

    def peek(self) -> T:
        """Return a clone of the top element without removing it."""
        if not self._data:
            raise EmptyHeapError("BinaryHeap.peek() - heap is empty")
        return self._clone(self._data[0])

    def peek_unsafe(self) -> T:
        """
        Return the top element itself, not a copy.

        The caller must not mutate the returned object.
        """
        if not self._data:
            raise EmptyHeapError("BinaryHeap.peek_unsafe() - heap is empty")
        return self._data[0]

    def peek_array(self, n: Optional[int] = None) -> list[T]:
        """
        Return clones of the top `n` elements in the order `pop` would
        produce them, leaving the heap unmodified.

        Parameters
        ----------
        n : int, optional
            Number of elements to read, by default the whole heap.

        Returns
        -------
        list[T]
            Cloned elements, top first.

        Raises
        ------
        RangeError
            If `n` is not an integer, is negative or exceeds the size of the
            heap.
        """
        n = self._check_count("peek_array", n)
        return [self._clone(self._data[i]) for i in self._sorted_indices(n)]

    def peek_array_unsafe(self, n: Optional[int] = None) -> list[T]:
        """Same as `peek_array` but returns the stored objects themselves."""
        n = self._check_count("peek_array_unsafe", n)
        return [self._data[i] for i in self._sorted_indices(n)]

    def size(self) -> int:
        return len(self._data)

    def empty(self) -> bool:
        return len(self._data) == 0

    def _check_count(self, name: str, n: Optional[int]) -> int:
        size = len(self._data)
        if n is None:
            return size
        try:
            n = operator.index(n)
        except TypeError:
            raise RangeError(
                f"BinaryHeap.{name}(n) - n: {n!r}, must be an integer"
            ) from None
        if n < 0:
            raise RangeError(
                f"BinaryHeap.{name}(n) - n: {n}, must not be negative"
            )
        if n > size:
            raise RangeError(
                f"BinaryHeap.{name}(n) - n: {n}, "
                f"exceeds binary heap of size {size}"
            )
        return n

    def _sorted_indices(self, n: int) -> list[int]:
        """
        Indices of the first `n` elements in heap order, found without
        touching `_data`.

        A second heap holds the frontier of (element, index) pairs whose
        parents were already emitted. Since every node ranks no better than
        its parent, the best pair on the frontier is always the next element
        in heap order. Each emitted node adds at most its two children, so
        the cost is O(n log n) regardless of the size of this heap.
        """
        if n == 0:
            return []

        compare = self._compare
        queue = BinaryHeap(lambda x, y: compare(x[0], y[0]))
        queue.push((self._data[0], 0))

        ret = []
        while len(ret) < n and not queue.empty():
            _, index = queue.pop()
            for child in self._find_children(index):
                if child is not None:
                    queue.push((self._data[child], child))
            ret.append(index)
        return ret

    def _sift_up(self) -> None:
        """Move the last element up until its parent no longer ranks below it."""
        index = len(self._data) - 1
        comp = self._compare

        while index > 0:
            parent = self._find_parent(index)
            if comp(self._data[index], self._data[parent]):
                self._swap_at(index, parent)
                index = parent
            else:
                break

    def _sift_down(self) -> None:
        """
        Drop the top element: swap it with the last one, remove it, then move
        the new top down until no child ranks above it.
        """
        index = 0
        comp = self._compare

        self._swap_at(index, len(self._data) - 1)
        self._data.pop()

        size = len(self._data)
        while index < size:
            child = self._find_min_child(index)
            if child is not None and comp(self._data[child], self._data[index]):
                self._swap_at(child, index)
                index = child
            else:
                break

    @staticmethod
    def _find_parent(n: int) -> int:
        return (n + 1) // 2 - 1

    def _find_min_child(self, n: int) -> Optional[int]:
        """Index of the higher ranking child of `n`, or None for a leaf."""
        child_r = (n + 1) * 2
        child_l = child_r - 1
        size = len(self._data)

        if child_l >= size:
            return None
        # the left child wins ties
        if child_r < size and self._compare(self._data[child_r], self._data[child_l]):
            return child_r
        return child_l

    def _find_children(self, n: int) -> tuple[Optional[int], Optional[int]]:
        child_r = (n + 1) * 2
        child_l = child_r - 1
        size = len(self._data)
        return (
            child_l if child_l < size else None,
            child_r if child_r < size else None
        )

    def _swap_at(self, x: int, y: int) -> None:
        self._data[x], self._data[y] = self._data[y], self._data[x]

    def _validate(self) -> bool:
        """Check the heap property at every non-root index."""
        comp = self._compare
        for i in range(1, len(self._data)):
            if comp(self._data[i], self._data[self._find_parent(i)]):
                return False
        return True

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

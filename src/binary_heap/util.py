import logging
from typing import Callable, Iterable, Optional, TypeVar

from src.binary_heap.binary_heap import BinaryHeap

logger = logging.getLogger(__name__)

T = TypeVar("T")


def heapify(
    arr: Iterable[T],
    compare: Optional[Callable[[T, T], bool]] = None
) -> BinaryHeap[T]:
    """Build a new heap holding the elements of `arr`; `arr` is not modified."""
    heap = BinaryHeap(compare)
    heap.push_array(arr)
    logger.debug("heapify: built heap of size %d", heap.size())
    return heap


def heapsort(
    arr: Iterable[T],
    compare: Optional[Callable[[T, T], bool]] = None
) -> list[T]:
    """
    Return the elements of `arr` as a new list, sorted so that no element
    ranks above the one before it under `compare` (ascending by default).
    """
    heap = heapify(arr, compare)
    logger.debug("heapsort: draining %d elements", heap.size())
    return heap.pop_array()

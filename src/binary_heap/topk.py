import logging
from typing import Any

from src.binary_heap.binary_heap import BinaryHeap

logger = logging.getLogger(__name__)


def get_topk(heap: BinaryHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    For a min heap the K elements with the lowest priority are retrieved; for
    a max heap the K elements with the highest priority. Unlike
    `BinaryHeap.peek_array`, asking for more elements than the heap holds is
    not an error: the whole heap is returned instead.

    Parameters
    ----------
    heap : BinaryHeap
        A BinaryHeap object, left unmodified.
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        Clones of the 'top-K' elements, in heap order.
    """
    if k <= 0:
        return []
    if heap.empty():
        return []

    if k > heap.size():
        logger.debug("k=%d exceeds heap size %d, clamping", k, heap.size())
        k = heap.size()
    return heap.peek_array(k)

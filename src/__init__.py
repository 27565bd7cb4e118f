import logging

from src.binary_heap.binary_heap import BinaryHeap
from src.binary_heap.exceptions import EmptyHeapError, HeapError, RangeError
from src.binary_heap.topk import get_topk
from src.binary_heap.util import heapify, heapsort

logging.getLogger(__name__).addHandler(logging.NullHandler())

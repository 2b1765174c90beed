from .algorithms import heap_sort
from .datastructures import EmptyHeapError, HeapError, InvalidKeyError, MinHeap, ScalarMinHeap

__version__ = "0.1.0"

__all__ = [
    "MinHeap",
    "ScalarMinHeap",
    "HeapError",
    "EmptyHeapError",
    "InvalidKeyError",
    "heap_sort",
]

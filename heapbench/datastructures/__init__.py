from .heap import MAX_KEY, EmptyHeapError, HeapError, InvalidKeyError, MinHeap, Node
from .scalar_heap import ScalarMinHeap

__all__ = [
    "MinHeap",
    "ScalarMinHeap",
    "Node",
    "MAX_KEY",
    "HeapError",
    "EmptyHeapError",
    "InvalidKeyError",
]

"""Heap-sort built on ``ScalarMinHeap`` plus the reference used to check it.

The reference sort is Python's built-in ``sorted``; it shares no code with the
heap, which is what makes it useful as an oracle.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from ..datastructures.scalar_heap import ScalarMinHeap

V = TypeVar("V")

__all__ = ["heap_sort", "oracle_sort", "arrays_equal"]


def heap_sort(values: Iterable[V]) -> List[V]:
    """Return ``values`` in ascending order by filling a min-heap and draining it.

    The input is never mutated. Equal values may come out in any relative
    order; the sort is not stable.
    """
    heap: ScalarMinHeap[V] = ScalarMinHeap()
    for v in values:
        heap.insert(v)
    n = heap.size()
    return [heap.remove_min() for _ in range(n)]


def oracle_sort(values: Iterable[V]) -> List[V]:
    """Return a new ascending list using the built-in sort."""
    return sorted(values)


def arrays_equal(a: Sequence[V], b: Sequence[V]) -> bool:
    """True when ``a`` and ``b`` hold the same values in the same order."""
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if x != y:
            return False
    return True

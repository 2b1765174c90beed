from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from .heap import MinHeap

V = TypeVar("V")


class ScalarMinHeap(MinHeap[V, V]):
    """A min-heap whose stored values are their own keys."""

    __slots__ = ()

    def __init__(self, it: Optional[Iterable[V]] = None) -> None:
        super().__init__()
        if it:
            for value in it:
                self.insert(value)

    @classmethod
    def from_array(cls, values: Iterable[V]) -> "ScalarMinHeap[V]":
        """Build a heap by inserting every value in ``values`` (O(n log n))."""
        return cls(values)

    def insert(self, value: V) -> None:  # type: ignore[override]
        super().insert(value, value)

    def to_sorted_list(self, n: Optional[int] = None) -> List[V]:
        """Remove the ``n`` smallest values (all by default) and return them ascending.

        Requesting more values than the heap holds raises ``EmptyHeapError``
        once the heap runs dry.
        """
        if n is None:
            n = self.size()
        return [self.remove_min() for _ in range(n)]

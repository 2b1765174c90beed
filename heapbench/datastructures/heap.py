from __future__ import annotations

import copy as _copy
import functools
import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K")

logger = logging.getLogger(__name__)


class HeapError(Exception):
    """Base class for heap contract violations."""


class EmptyHeapError(HeapError, IndexError):
    """Raised when removing from (or inspecting) an empty heap."""


class InvalidKeyError(HeapError, ValueError):
    """Raised when a key decrease would actually raise the key."""


@functools.total_ordering
class _MaxKey:
    """Sentinel key that compares greater than any other object."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return other is self

    def __lt__(self, other: object) -> bool:
        return False

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return "MAX_KEY"

    def __copy__(self) -> "_MaxKey":
        return self

    def __deepcopy__(self, memo) -> "_MaxKey":
        return self


MAX_KEY: Any = _MaxKey()


class Node(Generic[T, K]):
    """A payload paired with the key used to order it."""

    __slots__ = ("data", "key")

    def __init__(self, data: T, key: K) -> None:
        self.data = data
        self.key = key

    def __repr__(self) -> str:
        return f"Node({self.data!r}, {self.key!r})"


class MinHeap(Generic[T, K]):
    """An array-backed binary min-heap of ``(payload, key)`` pairs.

    Slot 0 of the backing list is a placeholder so the root sits at index 1
    and ``parent(i) = i // 2``, ``left(i) = 2i``, ``right(i) = 2i + 1``.
    Iteration and ``str()`` walk the storage order, which is heap order and
    not sorted order.
    """

    __slots__ = ("_vec",)

    def __init__(self, it: Optional[Iterable[Tuple[T, K]]] = None) -> None:
        self._vec: List[Node] = [Node(None, MAX_KEY)]
        if it:
            for value, key in it:
                self.insert(value, key)

    # -----------------------------
    # Index arithmetic
    # -----------------------------
    @staticmethod
    def _parent(i: int) -> int:
        return i >> 1

    @staticmethod
    def _left(i: int) -> int:
        return i << 1

    @staticmethod
    def _right(i: int) -> int:
        return (i << 1) + 1

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _swap(self, i: int, j: int) -> None:
        vec = self._vec
        vec[i], vec[j] = vec[j], vec[i]

    def _decrease_key(self, i: int, key: K) -> None:
        """Lower the key of slot ``i`` to ``key`` and sift it toward the root.

        Raises ``InvalidKeyError`` without touching any slot if ``key`` is
        greater than the current key. Every comparison runs before the first
        write, so an error from comparing keys also leaves the slots as they were.
        """
        vec = self._vec
        if key > vec[i].key:
            logger.debug("rejected key increase at slot %d: %r -> %r", i, vec[i].key, key)
            raise InvalidKeyError(f"new key {key!r} greater than current key {vec[i].key!r}")

        # find the destination first so a failing comparison leaves every slot as it was
        top = i
        p = self._parent(top)
        while top > 1 and vec[p].key > key:
            top = p
            p = self._parent(top)

        vec[i].key = key
        while i > top:
            p = self._parent(i)
            self._swap(i, p)
            i = p

    def _sift_down(self, i: int) -> None:
        vec = self._vec
        n = len(vec) - 1
        while True:
            left = self._left(i)
            right = self._right(i)
            smallest = i
            if left <= n and vec[left].key < vec[i].key:
                smallest = left
            if right <= n and vec[right].key < vec[smallest].key:
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest

    def _copy_from(self, heap: "MinHeap[T, K]", memo: Optional[dict] = None) -> None:
        if memo is None:
            memo = {}
        for node in heap._vec[1:]:
            self._vec.append(Node(_copy.deepcopy(node.data, memo), node.key))

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T, key: K) -> None:
        """Insert ``value`` ordered by ``key`` (O(log n))."""
        self._vec.append(Node(value, MAX_KEY))
        try:
            self._decrease_key(self.size(), key)
        except BaseException:
            self._vec.pop()
            raise

    def remove_min(self) -> T:
        """Remove the element with the smallest key and return its payload (O(log n))."""
        if self.size() == 0:
            raise EmptyHeapError("remove_min from empty heap")
        vec = self._vec
        smallest = vec[1].data
        last = vec.pop()
        if len(vec) > 1:
            vec[1] = last
            self._sift_down(1)
        return smallest

    def peek(self) -> Optional[T]:
        """Return the payload with the smallest key without removing it (O(1))."""
        return self._vec[1].data if self.size() else None

    def min_key(self) -> K:
        if self.size() == 0:
            raise EmptyHeapError("min_key of empty heap")
        return self._vec[1].key

    def size(self) -> int:
        return len(self._vec) - 1

    def is_empty(self) -> bool:
        return len(self._vec) == 1

    def clear(self) -> None:
        """Drop every stored element, keeping the placeholder slot."""
        del self._vec[1:]

    def copy(self) -> "MinHeap[T, K]":
        """Return an independent copy with the same slots in the same order."""
        clone = self.__class__()
        clone._copy_from(self)
        return clone

    def assign(self, heap: "MinHeap[T, K]") -> "MinHeap[T, K]":
        """Replace this heap's contents with a copy of ``heap``'s."""
        if heap is not self:
            self.clear()
            self._copy_from(heap)
        return self

    def has_heap_property(self) -> bool:
        vec = self._vec
        return all(vec[i].key >= vec[self._parent(i)].key for i in range(2, len(vec)))

    def items(self) -> List[Tuple[T, K]]:
        """``(payload, key)`` pairs in storage order."""
        return [(node.data, node.key) for node in self._vec[1:]]

    def to_list(self) -> List[T]:
        return [node.data for node in self._vec[1:]]

    def __copy__(self) -> "MinHeap[T, K]":
        return self.copy()

    def __deepcopy__(self, memo) -> "MinHeap[T, K]":
        clone = self.__class__()
        memo[id(self)] = clone
        clone._copy_from(self, memo)
        return clone

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        # Storage order (heap order, not sorted order)
        return (node.data for node in self._vec[1:])

    def __str__(self) -> str:
        return "[" + ", ".join(str(node.data) for node in self._vec[1:]) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.items()!r})"

import os
import random
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapbench.datastructures import EmptyHeapError, MinHeap, ScalarMinHeap


def test_scalar_heap_is_a_min_heap():
    heap = ScalarMinHeap()
    assert isinstance(heap, MinHeap)
    heap.insert(4)
    heap.insert(-2)
    assert heap.peek() == -2
    assert heap.min_key() == -2


def test_from_array_and_to_sorted_list():
    heap = ScalarMinHeap.from_array([3, 1, 5, 2, 4, -5])
    assert heap.size() == 6
    assert heap.to_sorted_list() == [-5, 1, 2, 3, 4, 5]
    assert heap.is_empty()


def test_to_sorted_list_partial():
    heap = ScalarMinHeap([9, 7, 8, 1])
    assert heap.to_sorted_list(2) == [1, 7]
    assert heap.size() == 2
    assert heap.to_sorted_list() == [8, 9]


def test_to_sorted_list_past_exhaustion_raises():
    heap = ScalarMinHeap([1, 2])
    with pytest.raises(EmptyHeapError):
        heap.to_sorted_list(3)


def test_copy_keeps_scalar_type():
    heap = ScalarMinHeap([5, 3, 9])
    clone = heap.copy()
    assert isinstance(clone, ScalarMinHeap)
    assert clone.to_sorted_list() == [3, 5, 9]
    assert heap.size() == 3


def test_assign_from_generic_heap_copy():
    a = ScalarMinHeap([10, 20])
    b = ScalarMinHeap([1])
    b.assign(a)
    a.clear()
    assert b.to_sorted_list() == [10, 20]


def test_duplicates_are_kept():
    values = [2, 2, 1, 1, 3, 3, 2]
    heap = ScalarMinHeap(values)
    assert heap.to_sorted_list() == sorted(values)


def test_random_values_heap_property():
    rng = random.Random(99)
    heap = ScalarMinHeap(rng.randrange(200) for _ in range(15))
    assert heap.size() == 15
    assert heap.has_heap_property()

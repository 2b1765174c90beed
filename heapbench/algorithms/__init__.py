from .sorting import arrays_equal, heap_sort, oracle_sort

__all__ = ["heap_sort", "oracle_sort", "arrays_equal"]

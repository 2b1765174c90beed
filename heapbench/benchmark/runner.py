"""
Benchmark drivers for the heap.

Two entry points:
- `run_oracle_check`: sort a pseudo-random integer array with the heap and
  compare it element by element against a reference sort of the same input.
- `run_benchmarks`: time heap operations over exponentially growing inputs
  and write the results to a CSV file.
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import time
from typing import Callable, List, NamedTuple, Optional, Tuple

from ..algorithms.sorting import arrays_equal, heap_sort, oracle_sort
from ..datastructures.scalar_heap import ScalarMinHeap

logger = logging.getLogger(__name__)

# Defaults used by the CLI when no flag overrides them
DEFAULT_SIZE = 100_000
DEFAULT_BASE_INPUT = 100
DEFAULT_STEPS = 12
DEFAULT_ITERATIONS = 5
DEFAULT_OUTPUT_CSV = "min_heap_performance.csv"

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
]


class OracleResult(NamedTuple):
    size: int
    seed: Optional[int]
    equal: bool
    heap_ms: float
    reference_ms: float


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, seed: Optional[int] = None, upper: Optional[int] = None) -> List[int]:
    """Generate ``size`` random integers in ``[0, upper)``; ``upper`` defaults to ``size``."""
    rng = random.Random(seed)
    bound = upper if upper is not None else max(size, 1)
    return [rng.randrange(bound) for _ in range(size)]


def measure_operation_time(
    operation: Callable[[List[int]], object],
    input_size: int,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
) -> Tuple[float, float]:
    """Run the operation multiple times and return average + std deviation (ms)."""
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    times = []
    for i in range(iterations):
        data = generate_random_list(input_size, None if seed is None else seed + i)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_insert(data: List[int]) -> ScalarMinHeap[int]:
    heap: ScalarMinHeap[int] = ScalarMinHeap()
    for item in data:
        heap.insert(item)
    return heap


def op_remove_min(data: List[int]) -> ScalarMinHeap[int]:
    heap = op_insert(data)
    while not heap.is_empty():
        heap.remove_min()
    return heap


def op_heap_sort(data: List[int]) -> List[int]:
    return heap_sort(data)


OPERATIONS = {
    "insert": op_insert,
    "remove_min": op_remove_min,
    "heap_sort": op_heap_sort,
}


# ----------------------------
# Oracle check
# ----------------------------

def run_oracle_check(size: int = DEFAULT_SIZE, seed: Optional[int] = None) -> OracleResult:
    """Heap-sort ``size`` random integers and compare against the reference sort."""
    if seed is None:
        seed = time.time_ns()
    values = generate_random_list(size, seed)
    logger.info("generated %d random integers (seed=%d)", size, seed)

    start = time.perf_counter()
    by_heap = heap_sort(list(values))
    heap_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    by_reference = oracle_sort(list(values))
    reference_ms = (time.perf_counter() - start) * 1000

    equal = arrays_equal(by_heap, by_reference)
    if equal:
        logger.info("heap sort matches reference sort (%.1f ms vs %.1f ms)", heap_ms, reference_ms)
    else:
        logger.error("heap sort output differs from reference sort for seed=%d", seed)
    return OracleResult(size, seed, equal, heap_ms, reference_ms)


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    steps: int = DEFAULT_STEPS,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
) -> List[List[str]]:
    """Run exponential performance tests for heap operations and write them as CSV."""
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows: List[List[str]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations, seed)
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}"]
                writer.writerow(row)
                rows.append(row)
                logger.info("%-10s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms",
                            op_name, size, avg_time, std_time)

    logger.info("benchmark completed, results saved to %s", output_file)
    return rows

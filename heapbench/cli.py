"""
Heap Command-Line Interface (CLI)

This script exposes the heap demo and benchmarks via subcommands. It ties
together:
- The generic and scalar min-heaps (demo walkthrough)
- Heap-sort and its reference oracle (sort-check)
- The timing grid (benchmark)

Usage examples:
    python -m heapbench demo
    python -m heapbench sort-check --size 100000 --seed 42
    python -m heapbench benchmark --path results.csv --steps 8
"""

import argparse
import logging
import random
import sys

from .benchmark import runner
from .datastructures import MinHeap, ScalarMinHeap

logger = logging.getLogger(__name__)

# Jobs inserted by the demo, as (name, priority)
DEMO_JOBS = [
    ("job c", 3),
    ("job a", 1),
    ("job e", 5),
    ("job b", 2),
    ("job d", 4),
    ("RUSH!", -5),
]
DEMO_SEED = 68333


# -------------------------------------------------------------------
# Utility: heap status lines
# -------------------------------------------------------------------
def print_heap(heap, label="Heap size"):
    """Print a heap's size followed by its contents in storage order."""
    print(f"{label}: {heap.size()}")
    print(heap)


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Walk through insert, remove_min, copy and assignment on small heaps."""
    heap = MinHeap()
    print_heap(heap)

    for name, priority in DEMO_JOBS:
        heap.insert(name, priority)
        print_heap(heap)

    snapshot = heap.copy()

    while not heap.is_empty():
        print(f"Removed {heap.remove_min()}")
        print_heap(heap)

    print_heap(snapshot, "Copy heap size")
    print(heap)

    rng = random.Random(args.seed)
    numbers = ScalarMinHeap(rng.randrange(200) for _ in range(15))
    print_heap(numbers, "Dynamic heap size")

    assigned = ScalarMinHeap().assign(numbers)
    numbers.clear()
    print_heap(assigned, "Assignment heap size")
    print(f"Sorted: {assigned.to_sorted_list()}")
    return 0


def cmd_sort_check(args):
    """Sort random integers with the heap and compare against the reference sort."""
    result = runner.run_oracle_check(args.size, args.seed)
    print(f"The arrays {'are' if result.equal else 'are not'} equal!")
    return 0 if result.equal else 1


def cmd_benchmark(args):
    """Time heap operations over growing inputs and export a CSV."""
    rows = runner.run_benchmarks(
        args.path,
        base_input=args.base_input,
        steps=args.steps,
        iterations=args.iterations,
        seed=args.seed,
    )
    print(f"Wrote {len(rows)} rows to {args.path}")
    return 0


# -------------------------------------------------------------------
# Argument types
# -------------------------------------------------------------------
def positive_int(text):
    """argparse type accepting integers >= 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="heapbench", description="Binary min-heap demo and benchmarks")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Walk through heap operations")
    s.add_argument("--seed", type=int, default=DEMO_SEED)
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("sort-check", help="Compare heap sort with the reference sort")
    s.add_argument("--size", type=positive_int, default=runner.DEFAULT_SIZE)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_sort_check)

    s = sub.add_parser("benchmark", help="Time heap operations and write a CSV")
    s.add_argument("--path", default=runner.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=positive_int, default=runner.DEFAULT_BASE_INPUT)
    s.add_argument("--steps", type=positive_int, default=runner.DEFAULT_STEPS)
    s.add_argument("--iterations", type=positive_int, default=runner.DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_benchmark)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m heapbench`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("running %s", args.cmd)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

import csv
import logging
import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapbench.benchmark import runner


def test_generate_random_list_is_seeded_and_bounded():
    a = runner.generate_random_list(50, seed=1)
    b = runner.generate_random_list(50, seed=1)
    assert a == b
    assert len(a) == 50
    assert all(0 <= v < 50 for v in a)
    assert all(0 <= v < 7 for v in runner.generate_random_list(30, seed=2, upper=7))


def test_measure_operation_time_returns_mean_and_stdev():
    avg, std = runner.measure_operation_time(runner.op_heap_sort, 20, iterations=3, seed=5)
    assert avg >= 0.0
    assert std >= 0.0
    _, single_std = runner.measure_operation_time(runner.op_insert, 20, iterations=1)
    assert single_std == 0.0


def test_remove_min_operation_drains_heap():
    heap = runner.op_remove_min([4, 2, 9])
    assert heap.is_empty()


def test_run_oracle_check_reports_equal(caplog):
    with caplog.at_level(logging.INFO, logger="heapbench.benchmark.runner"):
        result = runner.run_oracle_check(1000, seed=11)
    assert result.equal
    assert result.size == 1000
    assert result.seed == 11
    assert "matches reference sort" in caplog.text


def test_run_oracle_check_picks_a_seed():
    result = runner.run_oracle_check(10)
    assert result.seed is not None
    assert result.equal


def test_run_benchmarks_writes_csv(tmp_path):
    out = tmp_path / "bench.csv"
    rows = runner.run_benchmarks(str(out), base_input=4, steps=2, iterations=2, seed=0)
    assert len(rows) == 2 * len(runner.OPERATIONS)

    with open(out, newline="") as f:
        written = list(csv.reader(f))
    assert written[0] == runner.CSV_HEADER
    assert written[1:] == rows
    assert {r[1] for r in rows} == {"insert", "remove_min", "heap_sort"}
    assert {r[0] for r in rows} == {"4", "8"}


def test_measure_operation_time_rejects_zero_iterations():
    with pytest.raises(ValueError):
        runner.measure_operation_time(runner.op_insert, 10, iterations=0)

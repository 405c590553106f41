import csv

import pytest

from chaindict import benchmark, cli


def test_demo_prints_item_and_listing(capsys):
    cli.main(["demo"])
    out = capsys.readouterr().out
    assert out == "1\n{\n    { Test : 1 }\n}\n"


def test_bench_writes_csv(tmp_path, capsys):
    path = tmp_path / "bench.csv"
    cli.main(["bench", "--path", str(path), "--base-input", "4", "--rounds", "2", "--iterations", "2"])

    with open(path, newline="") as f:
        rows = list(csv.reader(f))

    assert rows[0] == benchmark.CSV_HEADER
    assert len(rows) == 1 + 2 * len(benchmark.OPERATIONS)
    assert {r[1] for r in rows[1:]} == set(benchmark.OPERATIONS)
    assert {r[0] for r in rows[1:]} == {"4", "8"}
    assert f"Wrote {2 * len(benchmark.OPERATIONS)} rows" in capsys.readouterr().out


def test_run_benchmarks_returns_rows(tmp_path):
    rows = benchmark.run_benchmarks(str(tmp_path / "out.csv"), base_input=3, rounds=1, iterations=1)
    assert [name for _, name, _, _ in rows] == list(benchmark.OPERATIONS)
    assert all(size == 3 and avg >= 0.0 and std == 0.0 for size, _, avg, std in rows)


@pytest.mark.parametrize("kwargs", [
    {"base_input": 0},
    {"rounds": 0},
    {"iterations": -1},
])
def test_run_benchmarks_rejects_non_positive_sizes(tmp_path, kwargs):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "out.csv"), **kwargs)


def test_operations_leave_expected_state():
    data = [(1, 10), (2, 20), (3, 30), (2, 21)]
    assert benchmark.op_insert(data).items() == [(1, 10), (2, 21), (3, 30)]
    assert benchmark.op_remove_if(data).keys() == [1, 3]
    assert len(benchmark.op_remove(data)) == 0
    assert benchmark.op_equals(data) is True

import csv

from indexed_heap import benchmarks
from indexed_heap.cli import build_parser, main


def write_csv(path, rows):
    with open(path, "w", newline="") as f:
        csv.writer(f).writerows(rows)


def test_sort_prints_rows_in_priority_order(tmp_path, capsys):
    src = tmp_path / "jobs.csv"
    write_csv(src, [["backup", "5"], ["deploy", "1.5"], ["lint", "3"], ["alert", "0"]])

    assert main(["sort", "--path", str(src)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["alert,0", "deploy,1.5", "lint,3", "backup,5"]


def test_sort_writes_output_file(tmp_path, capsys):
    src = tmp_path / "jobs.csv"
    dst = tmp_path / "ordered.csv"
    write_csv(src, [["b", "2"], ["a", "1"], [], ["c", "3"]])

    assert main(["sort", "--path", str(src), "--output", str(dst)]) == 0

    with open(dst, newline="") as f:
        assert list(csv.reader(f)) == [["a", "1"], ["b", "2"], ["c", "3"]]
    assert "Wrote 3 rows" in capsys.readouterr().out


def test_sort_duplicate_value_is_an_error(tmp_path, capsys):
    src = tmp_path / "jobs.csv"
    write_csv(src, [["a", "1"], ["a", "2"]])

    assert main(["sort", "--path", str(src)]) == 1
    assert "already in the heap" in capsys.readouterr().err


def test_sort_bad_priority_is_an_error(tmp_path, capsys):
    src = tmp_path / "jobs.csv"
    write_csv(src, [["a", "soon"]])

    assert main(["sort", "--path", str(src)]) == 1
    assert "not a number" in capsys.readouterr().err


def test_sort_missing_file_is_an_error(tmp_path, capsys):
    assert main(["sort", "--path", str(tmp_path / "nope.csv")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_dump_table(capsys):
    assert main(["dump-table", "--keys", "x", "y", "--capacity", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Table size: 2 capacity: 3"
    assert len(out) == 4


def test_bench_writes_report(tmp_path, capsys):
    dst = tmp_path / "bench.csv"
    assert main(["bench", "--path", str(dst), "--base-input", "4", "--steps", "2", "--iterations", "2"]) == 0

    with open(dst, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][:3] == ["Input Size", "Structure", "Operation"]
    n_ops = sum(len(ops) for ops in benchmarks.OPERATIONS.values())
    assert len(rows) == 1 + 2 * n_ops
    assert {r[1] for r in rows[1:]} == {"array", "table", "heap"}
    assert "Benchmark completed" in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args(["bench", "--path", "x.csv"])
    assert (args.base_input, args.steps, args.iterations) == (100, 8, 5)
    assert args.log_level == "WARNING"


def test_sort_writes_priorities_back_unchanged(tmp_path, capsys):
    src = tmp_path / "jobs.csv"
    write_csv(src, [["a", "1234567.5"], ["b", "0.1234567"], ["c", "1e-9"], ["d", "007"]])

    assert main(["sort", "--path", str(src)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["c,1e-9", "b,0.1234567", "d,007", "a,1234567.5"]


def test_sort_rejects_non_finite_priorities(tmp_path, capsys):
    for text in ("nan", "inf", "-inf"):
        src = tmp_path / f"{text}.csv"
        write_csv(src, [["a", "3"], ["b", text], ["c", "1"]])

        assert main(["sort", "--path", str(src)]) == 1
        captured = capsys.readouterr()
        assert "not a finite number" in captured.err
        assert captured.out == ""

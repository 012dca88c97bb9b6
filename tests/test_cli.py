from pathlib import Path

from apps.cli import bench, solve
from lockpuzzle.solvers import REGISTRY
from lockpuzzle.solvers.backtracking import BacktrackingSolver

DATA = Path(__file__).resolve().parents[1] / "lockpuzzle" / "datasets" / "data"
CLASSIC_ARGS = ["--length", "3", "--hint", "682:1:0", "--hint", "614:0:1",
                "--hint", "206:0:2", "--hint", "738:0:0", "--hint", "780:0:1"]


def test_solve_inline_hints(capsys):
    assert solve.main(CLASSIC_ARGS) == 0
    out = capsys.readouterr().out
    assert "Possible Solutions:" in out
    assert out.strip().splitlines()[-1] == "042"

def test_solve_hints_file_with_check_and_stats(capsys):
    rc = solve.main(["--hints-file", str(DATA / "classic_lock_3.txt"), "--check", "--stats"])
    assert rc == 0
    captured = capsys.readouterr()
    assert "042" in captured.out
    assert "check OK" in captured.err and "nodes=" in captured.err

def test_solve_no_solution(capsys):
    assert solve.main(["--hint", "12:2:0", "--hint", "12:0:0"]) == 0
    assert "No solution found." in capsys.readouterr().out

def test_solve_length_mismatch_is_input_error(capsys):
    assert solve.main(["--length", "3", "--hint", "6821:1:0"]) == 2
    assert "expected 3 but got 4" in capsys.readouterr().err

def test_solve_needs_length_or_hints(capsys):
    assert solve.main([]) == 2
    assert "--length is required" in capsys.readouterr().err

def test_solve_interactive_reprompts(monkeypatch, capsys):
    answers = iter([
        "2",       # length
        "x", "1",  # hint count (bad, then good)
        "123",     # too long
        "1a",      # not digits
        "12",
        "2", "0",
    ])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert solve.main(["--interactive"]) == 0
    out = capsys.readouterr().out
    assert "exactly 2 characters" in out
    assert "only numbers" in out
    assert "whole number" in out
    assert out.strip().splitlines()[-1] == "12"

def test_bench_writes_csv_and_manifest(tmp_path: Path, capsys):
    rc = bench.main([str(DATA / "classic_lock_3.txt"), "--solver", "backtracking",
                     "--outdir", str(tmp_path), "--no-progress"])
    assert rc == 0
    assert len(list(tmp_path.glob("bench_*.csv"))) == 1
    assert len(list(tmp_path.glob("bench_*_manifest.json"))) == 1
    assert "classic_lock_3.txt" in capsys.readouterr().out

def test_bench_rejects_invalid_files(tmp_path: Path):
    bad = tmp_path / "bad.txt"
    bad.write_text("12x 0 0\n", encoding="utf-8")
    assert bench.main([str(bad), "--outdir", str(tmp_path), "--no-progress"]) == 2

def test_solve_check_mismatch_exits_1(monkeypatch, capsys):
    class DropFirstSolver(BacktrackingSolver):
        def solve(self):
            return super().solve()[1:]

    monkeypatch.setitem(REGISTRY, "backtracking", DropFirstSolver)
    assert solve.main(["--hint", "12:2:0", "--check"]) == 1
    err = capsys.readouterr().err
    assert "check FAILED" in err and "missing=['12']" in err

def test_solve_hints_file_is_directory(tmp_path: Path, capsys):
    assert solve.main(["--hints-file", str(tmp_path)]) == 2
    assert capsys.readouterr().err.startswith("error: ")

def test_solve_interactive_closed_input(monkeypatch, capsys):
    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert solve.main(["--interactive"]) == 2
    assert "input closed" in capsys.readouterr().err

def test_bench_skips_non_utf8_file(tmp_path: Path):
    bad = tmp_path / "binary.txt"
    bad.write_bytes(b"682 1 0\n\xff\xfe 1 0\n")
    assert bench.main([str(bad), "--outdir", str(tmp_path / "out"), "--no-progress"]) == 2

# apps/cli/bench.py
"""
Benchmark solvers over a set of hints files.

This script:
  1) Validates each hints file (prints hint count + SHA, flags bad lines).
  2) Runs every requested solver on every valid puzzle with a progress bar.
  3) Writes:
       - CSV:  one row per (puzzle, solver) with solutions, timing and
               search counters (nodes, pruned, leaves)
       - JSON: manifest with config, file hashes, git commit, etc.

Example:
    python -m apps.cli.bench lockpuzzle/datasets/data/*.txt --outdir reports
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from lockpuzzle.datasets import load_hints, pretty_summary, validate_hints_file
from lockpuzzle.harness import run_case, write_csv, write_manifest
from lockpuzzle.harness.io import git_commit_or_unknown, timestamp_id
from lockpuzzle.solvers import get_solver_ids


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate hints files, run the benchmark, and write outputs.
    """
    solver_choices = get_solver_ids()

    ap = argparse.ArgumentParser(description="lockpuzzle: benchmark solvers on hints files")
    ap.add_argument("files", nargs="+", help="hints files (one puzzle per file)")
    ap.add_argument("--solver", action="append", choices=solver_choices,
                    help="solver id to run (repeatable; default: all registered)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    args = ap.parse_args(argv)

    solver_ids = args.solver or solver_choices

    # 1) Validate every file; skip the ones that fail
    reports = []
    puzzles = []
    for path in args.files:
        rep = validate_hints_file(path)
        reports.append(rep)
        print(pretty_summary(rep))
        if not rep["passed"]:
            for issue in rep["issues"]:
                sys.stderr.write(f"  {issue}\n")
            continue
        length, hints = load_hints(path)
        puzzles.append((Path(path).stem, length, hints))

    if not puzzles:
        sys.stderr.write("error: no valid hints files to run\n")
        return 2

    # 2) Run every (puzzle, solver) pair
    cases = [(p, sid) for p in puzzles for sid in solver_ids]
    results = []
    for (name, length, hints), sid in tqdm(cases, ncols=80, desc="Solving", unit="case",
                                           disable=args.no_progress):
        results.append(run_case(sid, length, hints, name=name))

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"bench_{run_id}.csv"
    manifest_path = outdir / f"bench_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "solvers": list(solver_ids),
        "puzzles": reports,
        "num_cases": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

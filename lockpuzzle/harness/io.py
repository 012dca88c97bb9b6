"""
I/O utilities for benchmark runs.

Responsibilities:
- write_csv:     flatten per-case results into a tidy CSV (one row per case).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Solutions are prefixed with an apostrophe to keep Excel from stripping
  leading zeros ("042" would otherwise display as 42).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = [
    "name", "solver", "length", "num_hints", "num_solutions",
    "time_ms", "nodes", "pruned", "leaves", "solutions",
]


def _excel_safe_code(code: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "042" -> "'042"
    """
    return "'" + code if code else code


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of case results to CSV.

    Schema (columns): see CSV_FIELDS. `solutions` is a space-separated list.

    Args:
      results  : list of dicts returned by harness.run_case.
      path     : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "name": r.get("name", ""),
                "solver": r.get("solver_id", "?"),
                "length": r["length"],
                "num_hints": r["num_hints"],
                "num_solutions": r["num_solutions"],
                "time_ms": round(float(r["time_ms"]), 3),
                "nodes": r["nodes"],
                "pruned": r["pruned"],
                "leaves": r["leaves"],
                "solutions": " ".join(_excel_safe_code(s) for s in r["solutions"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and hints-file validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solvers, files, outdir)
      - puzzles: output of datasets.validate_hints_file(...) per file
      - num_cases: number of rows in the CSV
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

"""
Hints-file validator for lockpuzzle.

What this module does:
- Validate a hints file (see datasets.puzzles for the format).
- Enforce formatting rules (digits only, well + wrong <= length, one hint per line,
  every hint the same length as the puzzle).
- Detect duplicate hints and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from lockpuzzle.datasets import validate_hints_file, pretty_summary
    rep = validate_hints_file("puzzles/lock_3.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from .puzzles import parse_line


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class HintsFileReport:
    """Per-file diagnostics and metadata."""
    path: str                  # file path (as given)
    exists: bool               # did the file exist on disk?
    sha256: str                # SHA-256 of raw file bytes (empty string if missing)
    length: Optional[int]      # puzzle length (directive, expected N, or first hint)
    count: int                 # number of VALID hints
    duplicate_hints: int       # valid hints repeated verbatim
    invalid_lines: int         # number of invalid lines encountered
    invalid_line_numbers: List[int] = field(default_factory=list)
    passed: bool = False
    issues: List[str] = field(default_factory=list)  # human-friendly problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_hints_file(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a hints file, optionally against an expected code length N.

    Never raises; missing, unreadable or non-UTF-8 files and bad lines are
    all reported in `issues`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see HintsFileReport schema). `passed`
        is strict: file exists, at least one hint, no invalid lines, no
        length conflicts.
    """
    p = Path(path)
    if not p.exists():
        rep = HintsFileReport(path, False, "", N, 0, 0, 0,
                              issues=[f"hints file not found: {path}"])
        return asdict(rep)

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        rep = HintsFileReport(str(p), True, _sha256_file(p), N, 0, 0, 0,
                              issues=["hints file is not valid UTF-8"])
        return asdict(rep)
    except OSError as e:
        rep = HintsFileReport(str(p), True, "", N, 0, 0, 0,
                              issues=[f"hints file unreadable: {e}"])
        return asdict(rep)

    issues: List[str] = []
    length = N
    seen = set()
    count = 0
    duplicates = 0
    bad_lines: List[int] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        try:
            parsed = parse_line(raw)
        except ValueError as e:
            bad_lines.append(lineno)
            issues.append(f"line {lineno}: {e}")
            continue
        if parsed is None:
            continue

        kind, value = parsed
        if kind == "length":
            if length is not None and value != length:
                bad_lines.append(lineno)
                issues.append(f"line {lineno}: length={value} conflicts with expected {length}")
            else:
                length = value
            continue

        # First hint fixes the length when nothing else did
        if length is None:
            length = len(value.digits)
        if len(value.digits) != length:
            bad_lines.append(lineno)
            issues.append(
                f"line {lineno}: hint {value.digits!r} has {len(value.digits)} digits, expected {length}")
            continue

        count += 1
        if value in seen:
            duplicates += 1
        seen.add(value)

    if count == 0:
        issues.append("hints file contains 0 valid hints")
    if duplicates:
        issues.append(f"hints file contains {duplicates} duplicate hint(s)")

    rep = HintsFileReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        length=length,
        count=count,
        duplicate_hints=duplicates,
        invalid_lines=len(bad_lines),
        invalid_line_numbers=bad_lines,
        # duplicates are harmless to the search, so they don't fail validation
        passed=(count > 0 and not bad_lines),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        lock_3.txt | N=3 | hints=5 (dupes=0, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | N={report['length']} | hints={report['count']} "
        f"(dupes={report['duplicate_hints']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )

"""
Hints files: one puzzle per file, one hint per line.

Format:
    # classic 3-digit lock
    length=3
    682 1 0
    614:0:1
    206,0,2

  - '#' starts a comment; blank lines are skipped
  - hint lines are DIGITS WELL WRONG separated by whitespace, ':' or ','
  - `length=N` is optional; without it the first hint's length is used
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from lockpuzzle.engine import Hint, check_hint_lengths

_LENGTH_DIRECTIVE = re.compile(r"^length\s*=\s*(\d+)$", re.IGNORECASE)

# One parsed line: ("length", int), ("hint", Hint), or None for blanks/comments
ParsedLine = Optional[Tuple[str, object]]


def parse_line(raw: str) -> ParsedLine:
    """
    Parse a single line of a hints file.
    Raises ValueError if the line is neither blank, a directive, nor a hint.
    """
    text = raw.split("#", 1)[0].strip()
    if not text:
        return None
    m = _LENGTH_DIRECTIVE.match(text)
    if m:
        return "length", int(m.group(1))
    return "hint", Hint.parse(text)


def parse_hints(lines: Iterable[str]) -> Tuple[Optional[int], List[Hint]]:
    """
    Parse hints-file lines into (length, hints).

    Length is the `length=` directive if present, else the first hint's
    length, else None (empty file). Every hint must have that length.
    """
    length: Optional[int] = None
    hints: List[Hint] = []
    for lineno, raw in enumerate(lines, start=1):
        try:
            parsed = parse_line(raw)
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e
        if parsed is None:
            continue
        kind, value = parsed
        if kind == "length":
            if length is not None and length != value:
                raise ValueError(f"line {lineno}: conflicting length={value} (already {length})")
            length = value
        else:
            hints.append(value)

    if length is None and hints:
        length = len(hints[0].digits)
    if length is not None:
        check_hint_lengths(length, hints)
    return length, hints


def load_hints(path: Path | str) -> Tuple[Optional[int], List[Hint]]:
    """
    Read and parse a UTF-8 hints file. See `parse_hints`.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        return parse_hints(p.read_text(encoding="utf-8").splitlines())
    except ValueError as e:
        raise ValueError(f"{p}: {e}") from e


def dump_hints(hints: Iterable[Hint], path: Path | str, length: Optional[int] = None) -> str:
    """
    Write hints in the file format above, with a trailing newline.
    Returns the string path written.
    """
    lines: List[str] = []
    if length is not None:
        lines.append(f"length={length}")
    lines += [f"{h.digits} {h.well_placed} {h.wrong_placed}" for h in hints]

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)

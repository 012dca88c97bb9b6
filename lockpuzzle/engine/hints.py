"""
Hint records: one guessed code plus the feedback it received.

A hint is the only input the search consumes. It is immutable and checked
for shape on construction; the puzzle-length check happens later, when a
solver is built for a specific length (see `check_hint_lengths`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

# Alphabet of every code, in the order the search tries digits.
DIGITS = "0123456789"

# "682:1:0", "682 1 0", "682,1,0"
_HINT_SPLIT = re.compile(r"[\s:,]+")


class HintLengthError(ValueError):
    """A hint's digit sequence does not match the configured code length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"All hints must match code length: expected {expected} but got {actual}")


def is_digit_code(s: str) -> bool:
    """True iff `s` consists only of the characters 0-9 (the empty code counts)."""
    return all(ch in DIGITS for ch in s)


@dataclass(frozen=True)
class Hint:
    digits: str        # the guessed code
    well_placed: int   # right digit, right position
    wrong_placed: int  # right digit, other position

    def __post_init__(self):
        if not isinstance(self.digits, str) or not is_digit_code(self.digits):
            raise ValueError(f"Hint digits must contain only 0-9; got {self.digits!r}")
        for field_name in ("well_placed", "wrong_placed"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{field_name} must be a non-negative int; got {value!r}")
        if self.well_placed + self.wrong_placed > len(self.digits):
            raise ValueError(
                f"well_placed + wrong_placed exceeds code length for {self.digits!r}: "
                f"{self.well_placed} + {self.wrong_placed} > {len(self.digits)}")

    def __str__(self) -> str:
        return f"{self.digits}:{self.well_placed}:{self.wrong_placed}"

    @property
    def total(self) -> int:
        """Digits of this guess that appear in the code, in any position."""
        return self.well_placed + self.wrong_placed

    @classmethod
    def parse(cls, text: str) -> "Hint":
        """
        Build a hint from its textual form.

        Accepts "DIGITS:WELL:WRONG" with ':', ',' or whitespace as separators.
        Raises ValueError on anything else.
        """
        parts = [p for p in _HINT_SPLIT.split(text.strip()) if p]
        if len(parts) != 3:
            raise ValueError(f"Expected DIGITS:WELL:WRONG, got {text!r}")
        digits, well, wrong = parts
        try:
            return cls(digits, int(well), int(wrong))
        except ValueError as e:
            raise ValueError(f"Bad hint {text!r}: {e}") from e


def check_hint_lengths(length: int, hints: Iterable[Hint]) -> None:
    """Guardrail: every hint must be exactly `length` digits long."""
    for hint in hints:
        if len(hint.digits) != length:
            raise HintLengthError(length, len(hint.digits))

"""
Mastermind-style scoring (feedback) for a single (candidate, hint) pair.

Conventions:
  - well placed  : correct digit in the correct position
  - wrong placed : correct digit in the wrong position

This implementation is:
  - N-aware (any code length)
  - duplicate-safe (each hint slot is consumed at most once)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, consume-once):
  1) First pass marks every exact positional match as well placed and
     consumes that position on both sides.
  2) Second pass scans the remaining hint slots left-to-right for each
     unconsumed candidate digit; the first match counts as wrong placed and
     consumes both slots.
"""

from typing import Iterable, List, Sequence, Tuple

from .hints import Hint

# (well_placed, wrong_placed)
Feedback = Tuple[int, int]


def score(candidate: Sequence[str], hint_digits: Sequence[str]) -> Feedback:
    """
    Compute (well_placed, wrong_placed) for `candidate` against `hint_digits`.

    Preconditions:
      - len(candidate) == len(hint_digits)

    Examples:
      score("042", "682") -> (1, 0)
      score("042", "206") -> (0, 2)
      score("121", "112") -> (1, 2)
    """
    n = len(candidate)
    if len(hint_digits) != n:
        raise ValueError(
            f"Candidate and hint must be the same length: {n} != {len(hint_digits)}")

    used_candidate: List[bool] = [False] * n
    used_hint: List[bool] = [False] * n

    # Pass 1: exact positional matches.
    well = 0
    for i in range(n):
        if candidate[i] == hint_digits[i]:
            well += 1
            used_candidate[i] = True
            used_hint[i] = True

    # Pass 2: leftmost unconsumed hint slot holding the same digit.
    wrong = 0
    for i in range(n):
        if used_candidate[i]:
            continue
        for j in range(n):
            if not used_hint[j] and candidate[i] == hint_digits[j]:
                wrong += 1
                used_candidate[i] = True
                used_hint[j] = True
                break  # one slot per candidate digit

    return well, wrong


def matches(candidate: Sequence[str], hint: Hint) -> bool:
    """True iff scoring `candidate` against the hint reproduces its recorded feedback."""
    return score(candidate, hint.digits) == (hint.well_placed, hint.wrong_placed)


def matches_all(candidate: Sequence[str], hints: Iterable[Hint]) -> bool:
    """
    True iff `candidate` is consistent with EVERY hint.

    Stops at the first hint that disagrees.
    """
    for hint in hints:
        if not matches(candidate, hint):
            return False
    return True

"""
Early rejection of partial candidates.

Given:
  - a prefix of a candidate code (length k <= N)
  - a hint (a full N-digit guess plus its feedback)

Decide:
  - whether the prefix can still grow into a code consistent with the hint.

Two lower bounds on the eventual feedback are checked against the hint:
  - well placed so far: exact positional matches within the prefix. Only
    grows as digits are appended.
  - possible matches so far: prefix digits that also occur in the hint,
    each hint digit usable as many times as it appears there. This is the
    multiset overlap of the prefix with the hint, which can only grow
    toward the final well + wrong.

If either already exceeds what the hint recorded, no completion can match.
Passing does not mean the completed code matches; the solver still runs the
exact scorer on every complete candidate.
"""

from collections import Counter
from typing import Iterable, Sequence
from .hints import Hint


def is_viable(partial: Sequence[str], hint: Hint) -> bool:
    """
    Return False if `partial` already exceeds what `hint` allows.

    Args:
      partial : the digits placed so far (any length up to len(hint.digits))
      hint    : hint to test against
    """
    digits = hint.digits
    supply = Counter(digits)
    well = 0
    possible = 0
    for i, d in enumerate(partial):
        if d == digits[i]:
            well += 1
        # a hint digit can back at most as many matches as it has copies
        if supply[d] > 0:
            supply[d] -= 1
            possible += 1

    # Too many exact matches already
    if well > hint.well_placed:
        return False
    # Too many digits that will count as one kind of match or the other
    if possible > hint.total:
        return False
    return True


def is_viable_all(partial: Sequence[str], hints: Iterable[Hint]) -> bool:
    """True iff `partial` is viable against every hint."""
    for hint in hints:
        if not is_viable(partial, hint):
            return False
    return True

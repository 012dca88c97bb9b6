"""
Lightweight code validation.

This module answers the question: "Is this string a usable code right now?"
A code is valid iff:
  - it is a string
  - it consists of decimal digits 0-9 only
  - it has exact length N

The CLI uses this to re-prompt for a guess before a Hint is ever built;
the solvers themselves assume well-formed hints.
"""

from .hints import is_digit_code


def validate_code(code, N: int) -> bool:
    """
    Return True if `code` is a valid N-digit code per the rules above.

    Surrounding whitespace is ignored, so raw console input can be passed in.
    """
    if not isinstance(code, str):
        return False

    c = code.strip()

    # Shape/characters check
    return len(c) == N and is_digit_code(c)

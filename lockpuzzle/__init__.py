"""
lockpuzzle: find every digit code consistent with a set of Mastermind-style hints.

    >>> from lockpuzzle import Hint, solve
    >>> solve(3, [Hint("682", 1, 0), Hint("614", 0, 1), Hint("206", 0, 2),
    ...           Hint("738", 0, 0), Hint("780", 0, 1)])
    ['042']
"""

from __future__ import annotations
from typing import Iterable, List

from .engine import Hint, HintLengthError
from .solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

__all__ = ["Hint", "HintLengthError", "solve", "create_solver", "get_solver_ids"]


def solve(length: int, hints: Iterable[Hint], solver: str = DEFAULT_SOLVER) -> List[str]:
    """Solve one puzzle with the named solver; returns codes in ascending order."""
    return create_solver(solver, length, hints).solve()

"""
Exhaustive solver (no pruning).

Strategy:
  - Score every code of the configured length, "000..." through "999...",
    against all hints and keep the ones that match.

Notes:
  - 10^length candidates; fine for the 3- and 4-digit locks this is meant
    for, slow beyond that.
  - Shares the scorer with the backtracking solver, so it serves as the
    reference when checking that pruning never drops a solution.
"""

from __future__ import annotations

from itertools import product
from typing import List

from lockpuzzle.engine import DIGITS, matches_all
from .base import BaseSolver, SearchStats, register


@register
class ExhaustiveSolver(BaseSolver):
    id = "exhaustive"
    name = "Exhaustive (brute force)"
    version = "1.0.0"

    def solve(self) -> List[str]:
        solutions: List[str] = []
        stats = SearchStats()

        # product() yields in lexicographic order == ascending numeric order
        for code in product(DIGITS, repeat=self.length):
            stats.leaves += 1
            if matches_all(code, self.hints):
                solutions.append("".join(code))

        stats.nodes = stats.leaves
        stats.solutions = len(solutions)
        self.stats = stats
        return solutions

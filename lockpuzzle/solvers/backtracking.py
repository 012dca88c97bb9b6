"""
Backtracking solver (depth-first, with pruning).

Strategy:
  - Build the code one position at a time, trying digits 0..9 in order.
  - After each placement, ask the pruner whether the prefix can still satisfy
    every hint; if not, skip the whole subtree.
  - At full length, run the exact scorer against every hint and keep the
    code if all agree.

Notes:
  - Digits are tried in ascending order and earlier positions are more
    significant, so solutions come out sorted ascending with no duplicates.
  - The buffer and result list live inside one solve() call; the solver
    instance holds nothing mutable during the search, so it is reentrant.
"""

from __future__ import annotations

from typing import List

from lockpuzzle.engine import DIGITS, matches_all, is_viable_all
from .base import BaseSolver, SearchStats, register


@register
class BacktrackingSolver(BaseSolver):
    id = "backtracking"
    name = "Backtracking (pruned DFS)"
    version = "1.0.0"

    def solve(self) -> List[str]:
        """
        Enumerate every code of `self.length` digits consistent with all hints.

        Returns:
            List of codes in ascending numeric order (empty if none).
        """
        hints = self.hints
        length = self.length
        current: List[str] = []
        solutions: List[str] = []
        stats = SearchStats()

        def backtrack() -> None:
            # Complete candidate: exact check against every hint
            if len(current) == length:
                stats.leaves += 1
                if matches_all(current, hints):
                    solutions.append("".join(current))
                return

            for d in DIGITS:
                current.append(d)
                stats.nodes += 1
                if is_viable_all(current, hints):
                    backtrack()
                else:
                    stats.pruned += 1
                current.pop()  # undo before the next digit

        backtrack()

        stats.solutions = len(solutions)
        self.stats = stats
        return solutions

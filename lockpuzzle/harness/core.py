"""
Benchmark harness core primitives.

- run_case:  solve a single puzzle with a given solver and time it.
- run_batch: run many puzzles in sequence.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes. Configuration errors
(unknown solver, hint length mismatch) propagate to the caller.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence, Tuple

from lockpuzzle.engine import Hint
from lockpuzzle.solvers import create_solver

# (name, length, hints)
Puzzle = Tuple[str, int, Sequence[Hint]]


def run_case(
        solver_id: str,
        length: int,
        hints: Sequence[Hint],
        *,
        name: str = "",
) -> Dict:
    """
    Solve one puzzle and collect timing plus the solver's search counters.

    Returns:
        dict with keys:
            name, solver_id, length, num_hints, solutions (list[str]),
            num_solutions, time_ms, nodes, pruned, leaves
    """
    solver = create_solver(solver_id, length, hints)

    t0 = time.perf_counter_ns()
    solutions = solver.solve()
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    st = solver.stats
    return {
        "name": name,
        "solver_id": solver.id,
        "length": length,
        "num_hints": len(solver.hints),
        "solutions": solutions,
        "num_solutions": len(solutions),
        "time_ms": dt,
        "nodes": st.nodes,
        "pruned": st.pruned,
        "leaves": st.leaves,
    }


def run_batch(solver_id: str, puzzles: Iterable[Puzzle]) -> List[Dict]:
    """
    Run every (name, length, hints) puzzle back-to-back with one solver id.
    """
    out: List[Dict] = []
    for name, length, hints in puzzles:
        out.append(run_case(solver_id, length, hints, name=name))
    return out

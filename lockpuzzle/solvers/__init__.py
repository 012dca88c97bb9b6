from __future__ import annotations
from typing import Iterable, List

from lockpuzzle.engine import Hint
from .base import BaseSolver, REGISTRY, SearchStats, register

from . import backtracking  # noqa: F401
from . import exhaustive  # noqa: F401

DEFAULT_SOLVER = "backtracking"


def create_solver(solver_id: str, length: int, hints: Iterable[Hint]) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id for one puzzle.

    Raises HintLengthError if any hint does not have `length` digits.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(length, hints)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())

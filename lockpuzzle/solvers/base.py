from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Type

from lockpuzzle.engine import Hint, check_hint_lengths

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass
class SearchStats:
    """Counters from the most recent solve() call."""
    nodes: int = 0      # digit placements tried
    pruned: int = 0     # placements rejected before recursing
    leaves: int = 0     # complete candidates scored
    solutions: int = 0  # candidates accepted


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, length: int, hints: Iterable[Hint]):
        if not isinstance(length, int) or isinstance(length, bool) or length < 0:
            raise ValueError(f"length must be a non-negative int; got {length!r}")
        self.length: int = length
        self.hints: List[Hint] = list(hints)
        # Fail at construction, never at solve time
        check_hint_lengths(self.length, self.hints)
        self.stats = SearchStats()

    def solve(self) -> List[str]:
        raise NotImplementedError("Override in subclass")

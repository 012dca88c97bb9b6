import random

from lockpuzzle.engine import Hint, is_viable, is_viable_all, matches_all, score
from lockpuzzle.solvers import create_solver


def test_rejects_too_many_well_placed():
    h = Hint("682", 1, 0)
    assert is_viable("6", h) is True
    assert is_viable("68", h) is False  # two exact matches, hint allows one

def test_rejects_too_many_possible_matches():
    h = Hint("738", 0, 0)
    assert is_viable("0", h) is True
    assert is_viable("3", h) is False  # '3' is in the hint, which allows none

def test_empty_prefix_always_viable():
    assert is_viable("", Hint("123", 0, 0)) is True
    assert is_viable_all([], [Hint("123", 0, 0), Hint("456", 3, 0)]) is True

def test_repeated_digit_prefix_not_overcounted():
    # "113" scores (2, 0) against "123"; none of its prefixes may be pruned
    h = Hint("123", 2, 0)
    assert score("113", "123") == (2, 0)
    for k in range(4):
        assert is_viable("113"[:k], h) is True

def test_prefixes_of_solutions_are_viable_classic_lock():
    hints = [Hint("682", 1, 0), Hint("614", 0, 1), Hint("206", 0, 2),
             Hint("738", 0, 0), Hint("780", 0, 1)]
    for code in create_solver("exhaustive", 3, hints).solve():
        for k in range(len(code) + 1):
            assert is_viable_all(code[:k], hints)

def test_prefixes_of_solutions_are_viable_random_hints():
    rng = random.Random(1234)
    for _ in range(25):
        secret = "".join(rng.choice("0123") for _ in range(4))  # small alphabet -> many repeats
        guesses = ["".join(rng.choice("0123") for _ in range(4)) for _ in range(3)]
        hints = [Hint(g, *score(g, secret)) for g in guesses]
        assert matches_all(secret, hints)
        for k in range(5):
            assert is_viable_all(secret[:k], hints)

def test_possible_matches_bounded_by_hint_total():
    h = Hint("123", 1, 1)
    assert h.total == 2
    assert is_viable("31", h) is True   # two digits from the hint, none in place
    assert is_viable("312", h) is False  # a third one is more than the hint allows

import pytest
from lockpuzzle.engine import (
    Hint, HintLengthError, check_hint_lengths, score, matches, matches_all, validate_code,
)

# --- classic lock fixture: "042" against each of its five hints ---
@pytest.mark.parametrize("candidate,hint,expected", [
    ("042", "682", (1, 0)),
    ("042", "614", (0, 1)),
    ("042", "206", (0, 2)),
    ("042", "738", (0, 0)),
    ("042", "780", (0, 1)),
])
def test_score_classic_lock(candidate, hint, expected):
    assert score(candidate, hint) == expected

# --- repeated digits: each hint slot consumed at most once ---
@pytest.mark.parametrize("candidate,hint,expected", [
    ("111", "112", (2, 0)),
    ("112", "111", (2, 0)),
    ("121", "112", (1, 2)),
    ("1111", "1222", (1, 0)),
    ("1222", "1111", (1, 0)),
    ("1122", "2211", (0, 4)),
    ("1234", "4321", (0, 4)),
    ("0000", "0000", (4, 0)),
    ("", "", (0, 0)),
])
def test_score_repeated_digits(candidate, hint, expected):
    assert score(candidate, hint) == expected

def test_score_accepts_digit_lists():
    assert score(["0", "4", "2"], "206") == (0, 2)

def test_score_length_mismatch():
    with pytest.raises(ValueError):
        score("12", "123")

def test_score_counts_bounded_by_length():
    codes = ["0000", "0123", "1111", "1122", "9876", "0990"]
    for c in codes:
        for h in codes:
            well, wrong = score(c, h)
            assert well >= 0 and wrong >= 0
            assert well + wrong <= 4

def test_matches_and_matches_all():
    hints = [Hint("682", 1, 0), Hint("614", 0, 1), Hint("206", 0, 2)]
    assert matches("042", hints[0]) is True
    assert matches("682", hints[0]) is False
    assert matches_all("042", hints) is True
    assert matches_all("043", hints) is False
    # no hints: everything is consistent
    assert matches_all("999", []) is True

# --- Hint construction ---
def test_hint_parse_separators():
    assert Hint.parse("682:1:0") == Hint("682", 1, 0)
    assert Hint.parse(" 682 1 0 ") == Hint("682", 1, 0)
    assert Hint.parse("682,1,0") == Hint("682", 1, 0)
    assert str(Hint("042", 0, 2)) == "042:0:2"
    assert Hint("042", 1, 2).total == 3

@pytest.mark.parametrize("text", ["682:1", "68a:1:0", "682:x:0", "682:-1:0", "682:2:2", ""])
def test_hint_parse_rejects(text):
    with pytest.raises(ValueError):
        Hint.parse(text)

def test_hint_is_immutable():
    h = Hint("12", 1, 0)
    with pytest.raises(AttributeError):
        h.well_placed = 2

def test_check_hint_lengths():
    check_hint_lengths(3, [Hint("123", 0, 0)])
    with pytest.raises(HintLengthError) as ei:
        check_hint_lengths(3, [Hint("123", 0, 0), Hint("1234", 0, 0)])
    assert ei.value.expected == 3 and ei.value.actual == 4
    assert "expected 3 but got 4" in str(ei.value)
    # configuration errors are ValueErrors
    assert isinstance(ei.value, ValueError)

def test_validate_code():
    assert validate_code("042", N=3) is True
    assert validate_code(" 042\n", N=3) is True
    assert validate_code("0420", N=3) is False
    assert validate_code("04a", N=3) is False
    assert validate_code(42, N=2) is False

from .hints import DIGITS, Hint, HintLengthError, check_hint_lengths
from .scoring import score, matches, matches_all
from .pruning import is_viable, is_viable_all
from .validation import validate_code

__all__ = [
    "DIGITS", "Hint", "HintLengthError", "check_hint_lengths",
    "score", "matches", "matches_all",
    "is_viable", "is_viable_all",
    "validate_code",
]

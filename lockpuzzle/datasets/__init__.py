from .validator import validate_hints_file, pretty_summary
from .puzzles import parse_line, parse_hints, load_hints, dump_hints

__all__ = [
    "validate_hints_file", "pretty_summary",
    "parse_line", "parse_hints", "load_hints", "dump_hints",
]

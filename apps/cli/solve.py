# apps/cli/solve.py
"""
CLI entry point for solving one lock puzzle.

This script:
  1) Collects the code length and hints from --hint flags, a hints file,
     or interactive prompts (--interactive).
  2) Runs the requested solver (pruned backtracking by default).
  3) Prints every consistent code, or "No solution found." if there is none.

Exit status: 0 on success (including no solutions), 1 if --check finds a
disagreement with the exhaustive solver, 2 on bad input.

Example:
    python -m apps.cli.solve --length 3 \
        --hint 682:1:0 --hint 614:0:1 --hint 206:0:2 --hint 738:0:0 --hint 780:0:1
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, Tuple

from lockpuzzle.datasets import load_hints
from lockpuzzle.engine import Hint, validate_code
from lockpuzzle.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2


def _ask_int(ask: Callable[[str], str], prompt: str, *, minimum: int = 0) -> int:
    """Prompt until the answer is an integer >= minimum."""
    while True:
        raw = ask(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            print("❌ Please enter a whole number.")
            continue
        if value < minimum:
            print(f"❌ Must be at least {minimum}.")
            continue
        return value


def _interactive(ask: Optional[Callable[[str], str]] = None) -> Tuple[int, List[Hint]]:
    """
    Gather length and hints from the console, re-prompting on bad input.
    """
    ask = ask or input
    length = _ask_int(ask, "Enter code length: ")
    count = _ask_int(ask, "Enter number of hints: ")

    hints: List[Hint] = []
    for i in range(count):
        print(f"\nHint {i + 1}")
        # Digits must be exactly `length` characters, 0-9 only
        while True:
            digits = ask("Digits: ").strip()
            if len(digits) != length:
                print(f"❌ Digits must be exactly {length} characters long.")
                continue
            if not validate_code(digits, length):
                print("❌ Digits must contain only numbers.")
                continue
            break
        while True:
            well = _ask_int(ask, "Well placed count: ")
            wrong = _ask_int(ask, "Wrong placed count: ")
            try:
                hints.append(Hint(digits, well, wrong))
            except ValueError as e:
                print(f"❌ {e}")
                continue
            break
    return length, hints


def _collect(args: argparse.Namespace) -> Tuple[int, List[Hint]]:
    """
    Merge hints from --hints-file and --hint, and settle the code length.
    Raises ValueError when no length can be determined.
    """
    length = args.length
    hints: List[Hint] = []

    if args.hints_file:
        file_length, file_hints = load_hints(args.hints_file)
        if length is None:
            length = file_length
        hints.extend(file_hints)

    hints.extend(Hint.parse(h) for h in args.hint)

    if length is None:
        if not hints:
            raise ValueError("--length is required when no hints are given")
        length = len(hints[0].digits)
    return length, hints


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="lockpuzzle: find every code consistent with the hints")
    ap.add_argument("--length", type=int, help="code length (default: taken from the hints)")
    ap.add_argument("--hint", action="append", default=[], metavar="DIGITS:WELL:WRONG",
                    help="one guess and its feedback, e.g. 682:1:0 (repeatable)")
    ap.add_argument("--hints-file", help="file with one 'DIGITS WELL WRONG' hint per line")
    ap.add_argument("--interactive", action="store_true",
                    help="prompt for length and hints on the console")
    ap.add_argument("--solver", default=DEFAULT_SOLVER, choices=get_solver_ids(),
                    help="search strategy")
    ap.add_argument("--check", action="store_true",
                    help="cross-check the result against the exhaustive solver")
    ap.add_argument("--stats", action="store_true", help="print search counters to stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, solve, and print the solutions.
    """
    args = _build_parser().parse_args(argv)

    try:
        if args.interactive:
            length, hints = _interactive()
        else:
            length, hints = _collect(args)
        solver = create_solver(args.solver, length, hints)
    except (ValueError, OSError) as e:
        sys.stderr.write(f"error: {e}\n")
        return EXIT_BAD_INPUT
    except EOFError:
        sys.stderr.write("error: input closed before all hints were entered\n")
        return EXIT_BAD_INPUT

    solutions = solver.solve()

    print("\nPossible Solutions:")
    for code in solutions:
        print(code)
    if not solutions:
        print("No solution found.")

    if args.stats:
        st = solver.stats
        sys.stderr.write(
            f"[{solver.id}] nodes={st.nodes} pruned={st.pruned} "
            f"leaves={st.leaves} solutions={st.solutions}\n"
        )

    if args.check:
        reference = create_solver("exhaustive", length, hints).solve()
        if reference != solutions:
            missing = sorted(set(reference) - set(solutions))
            extra = sorted(set(solutions) - set(reference))
            sys.stderr.write(f"check FAILED: missing={missing} extra={extra}\n")
            return EXIT_MISMATCH
        sys.stderr.write(f"check OK: {len(reference)} solution(s) match exhaustive search\n")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

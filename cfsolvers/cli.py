"""Command line entry point that solves a named problem from its input text."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from . import advanced, basic, constructive, intermediate

_RUNNERS: dict[str, Callable[[str, str], str]] = {
    name: module.run
    for module in (basic, constructive, intermediate, advanced)
    for name in module.PROBLEMS
}


def problem_names() -> list[str]:
    """Return the names of every problem that can be solved, sorted."""
    return sorted(_RUNNERS)


def solve_text(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output text."""
    try:
        runner = _RUNNERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return runner(problem, text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read problem input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="cfsolvers", description="Solve a programming problem from its input."
    )
    parser.add_argument("problem", choices=problem_names(), help="problem to solve")
    parser.add_argument(
        "input", nargs="?", type=Path, help="input file (standard input if omitted)"
    )
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input is not None else sys.stdin.read()
    try:
        output = solve_text(args.problem, text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0
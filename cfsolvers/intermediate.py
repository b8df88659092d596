"""Solvers for counting, factorisation and run-length problems."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from itertools import groupby
from typing import Callable, Iterable, Iterator, Sequence

from .constructive import _Reader

_ALTERNATING_MOD = 998_244_353

_VERDICT = {True: "YES", False: "NO"}


def count_good_pairs(values: Sequence[int]) -> int:
    """Count pairs i < j (1-based) with ``a_i < i < a_j < j``."""
    below = sorted(value for index, value in enumerate(values, 1) if value < index)
    return sum(
        len(below) - bisect_right(below, index)
        for index, value in enumerate(values, 1)
        if value < index
    )


def _prime_factors(value: int) -> Iterator[int]:
    """Yield the prime factors of ``value`` with repetition."""
    divisor = 2
    while divisor * divisor <= value:
        while value % divisor == 0:
            value //= divisor
            yield divisor
        divisor += 1
    if value > 1:
        yield value


def can_divide_equalize(values: Sequence[int]) -> bool:
    """Tell whether moving prime factors between elements can make them all equal."""
    if not values:
        raise ValueError("at least one value is required")
    exponents: Counter[int] = Counter()
    for value in values:
        exponents.update(_prime_factors(value))
    return all(count % len(values) == 0 for count in exponents.values())


def count_divisible_pairs(values: Sequence[int], x: int, y: int) -> int:
    """Count pairs whose sum is divisible by ``x`` and whose difference is divisible by ``y``."""
    if x <= 0 or y <= 0:
        raise ValueError("x and y must be positive")
    seen: Counter[tuple[int, int]] = Counter()
    pairs = 0
    for value in values:
        need = (x - value % x) % x
        pairs += seen[(need, value % y)]
        seen[(value % x, value % y)] += 1
    return pairs


def different_pairs(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[tuple[int, int] | None]:
    """Answer each 1-based query (l, r) with positions of two differing values in [l, r], or None."""
    last_change = [0]
    previous = 0
    for index, value in enumerate(values, 1):
        last_change.append(index - 1 if value != previous else last_change[-1])
        previous = value
    answers: list[tuple[int, int] | None] = []
    for left, right in queries:
        if not 1 <= right <= len(values):
            raise ValueError(f"query end {right} is out of range")
        start = last_change[right]
        answers.append(None if start < left else (start, right))
    return answers


def has_redundant_set(sets: Sequence[Iterable[int]]) -> bool:
    """Tell whether some set's bits are all present in the other sets as well."""
    occurrences: Counter[int] = Counter()
    owner: dict[int, int] = {}
    for index, bits in enumerate(sets):
        for bit in bits:
            occurrences[bit] += 1
            owner[bit] = index
    essential = {owner[bit] for bit, count in occurrences.items() if count == 1}
    return len(essential) < len(sets)


def alternating_operations(s: str) -> tuple[int, int]:
    """Return the fewest deletions making ``s`` alternate and the number of ways, modulo 998244353."""
    run_lengths = [len(list(group)) for _, group in groupby(s, key=lambda ch: ch == "0")]
    operations = sum(length - 1 for length in run_lengths)
    ways = 1
    for length in run_lengths:
        ways = ways * length % _ALTERNATING_MOD
    for factor in range(2, operations + 1):
        ways = ways * factor % _ALTERNATING_MOD
    return operations, ways


def _pairs_inequality(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(count_good_pairs(reader.ints(n)))]


def _divide_and_equalize(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_VERDICT[can_divide_equalize(reader.ints(n))]]


def _divisible_pairs(reader: _Reader) -> list[str]:
    n, x, y = reader.ints(3)
    return [str(count_divisible_pairs(reader.ints(n), x, y))]


def _different_ones(reader: _Reader) -> list[str]:
    n = reader.int()
    values = reader.ints(n)
    q = reader.int()
    queries = [(reader.int(), reader.int()) for _ in range(q)]
    lines = [
        "-1 -1" if answer is None else f"{answer[0]} {answer[1]}"
        for answer in different_pairs(values, queries)
    ]
    lines.append("")
    return lines


def _gardener(reader: _Reader) -> list[str]:
    n = reader.int()
    sets = [reader.ints(reader.int()) for _ in range(n)]
    return [_VERDICT[has_redundant_set(sets)]]


def _make_it_alternating(reader: _Reader) -> list[str]:
    operations, ways = alternating_operations(reader.token())
    return [f"{operations} {ways}"]


_Handler = Callable[[_Reader], list[str]]


def _multi(handler: _Handler) -> _Handler:
    def solve_all(reader: _Reader) -> list[str]:
        cases = reader.int()
        return [line for _ in range(cases) for line in handler(reader)]

    return solve_all


_HANDLERS: dict[str, _Handler] = {
    "pairs-inequality": _multi(_pairs_inequality),
    "divide-and-equalize": _multi(_divide_and_equalize),
    "divisible-pairs": _multi(_divisible_pairs),
    "different-ones": _multi(_different_ones),
    "gardener-and-array": _multi(_gardener),
    "make-it-alternating": _multi(_make_it_alternating),
}

PROBLEMS = tuple(sorted(_HANDLERS))


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output text."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    lines = handler(_Reader(text))
    return "".join(f"{line}\n" for line in lines)
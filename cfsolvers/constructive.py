"""Solvers for constructive and greedy problems."""

from __future__ import annotations

from functools import lru_cache, reduce
from itertools import accumulate, chain, takewhile, zip_longest
from operator import xor
from typing import Callable, Sequence

_GRID_SIZE = 10
_DOUBLING_FACTOR = 25

_VERDICT = {True: "YES", False: "NO"}


def _unbounded_combination(items: Sequence[int], target: int) -> list[int] | None:
    """Find items (with repetition) summing to ``target``, trying the largest item first.

    The returned list holds the chosen items in the order they were settled,
    which is from the last choice back to the first.
    """
    pool = tuple(items)
    if any(item <= 0 for item in pool):
        raise ValueError("items must be positive")

    @lru_cache(maxsize=None)
    def search(count: int, remaining: int) -> tuple[int, ...] | None:
        if count == 0:
            return () if remaining == 0 else None
        largest = pool[count - 1]
        if largest <= remaining:
            found = search(count, remaining - largest)
            if found is not None:
                return found + (largest,)
        return search(count - 1, remaining)

    result = search(len(pool), target)
    return None if result is None else list(result)


def forbidden_integer_sum(n: int, k: int, x: int) -> list[int] | None:
    """Return numbers from 1 to ``k``, never ``x``, that sum to ``n``; None if impossible."""
    allowed = [value for value in range(1, k + 1) if value != x]
    return _unbounded_combination(allowed, n)


def grasshopper_jumps(x: int, k: int) -> list[int]:
    """Return jump lengths, none divisible by ``k``, that reach ``x``."""
    allowed = [value for value in range(1, x + 1) if value % k != 0]
    return _unbounded_combination(allowed, x) or []


def beautiful_arrangement(values: Sequence[int]) -> list[int] | None:
    """Order values so that none equals the sum of those before it; None if this fails."""
    if not values:
        raise ValueError("at least one value is required")
    ordered = sorted(values)
    split = (len(ordered) + 1) // 2
    small = ordered[:split]
    large = reversed(ordered[split:])
    missing = object()
    arrangement = [
        value
        for value in chain.from_iterable(zip_longest(small, large, fillvalue=missing))
        if value is not missing
    ]
    prefixes = accumulate(arrangement)
    if any(value == prefix for value, prefix in zip(arrangement[1:], prefixes)):
        return None
    return arrangement


def balanced_two_position(values: Sequence[int]) -> int | None:
    """Return the smallest 1-based split index with equal counts of 2 on both sides."""
    positions = [index for index, value in enumerate(values, 1) if value == 2]
    if len(positions) % 2:
        return None
    if not positions:
        return 1
    return positions[(len(positions) - 1) // 2]


def shortest_original_length(s: str) -> int:
    """Return the shortest string that prepending/appending opposite bits could grow into ``s``."""
    if len(s) == 1:
        return 1
    mismatched = sum(
        1 for _ in takewhile(lambda pair: pair[0] != pair[1], zip(s, reversed(s)))
    )
    return max(len(s) - 2 * mismatched, 0)


def sequence_game(values: Sequence[int]) -> list[int]:
    """Return a sequence from which the greedy non-decreasing pick recovers ``values``."""
    if not values:
        raise ValueError("at least one value is required")
    result = [values[0]]
    for value in values[1:]:
        if value < result[-1]:
            result.append(1)
        result.append(value)
    return result


def _mocha_gcd(a: int, b: int) -> int:
    while b:
        b = a % b
    return a


def serval_gcds(values: Sequence[int]) -> tuple[int, int]:
    """Return the fold over the sorted tail seeded by the first value, and that of the two smallest."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    ordered = sorted(values)
    folded = reduce(_mocha_gcd, ordered[1:], values[0])
    return folded, _mocha_gcd(ordered[0], ordered[1])


def min_doublings(x: str, s: str) -> int | None:
    """Return how many times ``x`` must be doubled to contain ``s``; None if never."""
    if not x:
        raise ValueError("the starting string must not be empty")
    if x == s:
        return 0
    target = len(s)
    doublings = 0
    while len(x) < target:
        x += x
        doublings += 1
    while s not in x:
        if len(x) >= _DOUBLING_FACTOR * target:
            return None
        x += x
        doublings += 1
    return doublings


def target_score(grid: Sequence[str]) -> int:
    """Return the points scored by the arrows marked 'X' on a 10x10 target."""
    rows = list(grid)
    if len(rows) != _GRID_SIZE or any(len(row) != _GRID_SIZE for row in rows):
        raise ValueError("the target must be a 10x10 grid")
    edge = _GRID_SIZE - 1
    return sum(
        min(i, j, edge - i, edge - j) + 1
        for i, row in enumerate(rows)
        for j, cell in enumerate(row)
        if cell == "X"
    )


def two_permutations_exist(n: int, a: int, b: int) -> bool:
    """Tell whether two permutations of length ``n`` share exactly a prefix ``a`` and suffix ``b``."""
    if n == a and n == b:
        return True
    return n - a - b >= 2


def unit_array_steps(values: Sequence[int]) -> int:
    """Return how many -1 entries must become 1 so the array sums to >= 0 with product 1."""
    minus = sum(1 for value in values if value == -1)
    plus = len(values) - minus
    steps = 0
    while minus % 2 or plus < minus:
        steps += 1
        minus -= 1
        plus += 1
    return steps


def split_united(values: Sequence[int]) -> tuple[list[int], list[int]] | None:
    """Split values into two non-empty groups where no element of the second divides one of the first."""
    if not values:
        raise ValueError("at least one value is required")
    ordered = sorted(values)
    first = [ordered[0]]
    second: list[int] = []
    for value in ordered[1:]:
        if value <= first[-1] and first[-1] % value == 0:
            first.append(value)
        else:
            second.append(value)
    if not second:
        return None
    return first, second


def walking_time(a: int, b: int, c: int, d: int) -> int | None:
    """Return the moves from (a, b) to (c, d) using (+1, +1) and (-1, 0); None if unreachable."""
    time = 0
    if b < d:
        climb = d - b
        time += climb
        a += climb
        b += climb
    if a > c:
        time += a - c
        a = c
    if a == c and b == d:
        return time
    return None


def zero_xor_value(values: Sequence[int]) -> int | None:
    """Return x such that xoring every value with x gives total xor zero; None if none exists."""
    total = reduce(xor, values, 0)
    if len(values) % 2 == 1 or total == 0:
        return total
    return None


class _Reader:
    """Reads whitespace-separated tokens, integers and characters from problem input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())
        self._pending = ""

    def token(self) -> str:
        if self._pending:
            token, self._pending = self._pending, ""
            return token
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        token = self.token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def chars(self, count: int) -> str:
        collected = ""
        while len(collected) < count:
            if not self._pending:
                self._pending = self.token()
            take = count - len(collected)
            collected += self._pending[:take]
            self._pending = self._pending[take:]
        return collected


def _joined(values: Sequence[int]) -> str:
    return " ".join(map(str, values))


def _or_minus_one(value: int | None) -> str:
    return "-1" if value is None else str(value)


def _forbidden_integer(reader: _Reader) -> list[str]:
    n, k, x = reader.ints(3)
    chosen = forbidden_integer_sum(n, k, x)
    if chosen is None:
        return ["NO"]
    return ["YES", str(len(chosen)), _joined(chosen)]


def _grasshopper(reader: _Reader) -> list[str]:
    x, k = reader.ints(2)
    jumps = grasshopper_jumps(x, k)
    return [str(len(jumps)), _joined(jumps)]


def _make_it_beautiful(reader: _Reader) -> list[str]:
    n = reader.int()
    arrangement = beautiful_arrangement(reader.ints(n))
    if arrangement is None:
        return ["NO"]
    return ["YES", _joined(arrangement)]


def _one_and_two(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_or_minus_one(balanced_two_position(reader.ints(n)))]


def _prepend_and_append(reader: _Reader) -> list[str]:
    reader.int()
    return [str(shortest_original_length(reader.token()))]


def _sequence_game(reader: _Reader) -> list[str]:
    n = reader.int()
    result = sequence_game(reader.ints(n))
    return [str(len(result)), _joined(result)]


def _serval_and_mocha(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_joined(serval_gcds(reader.ints(n)))]


def _substring(reader: _Reader) -> list[str]:
    reader.ints(2)
    x = reader.token()
    s = reader.token()
    return [_or_minus_one(min_doublings(x, s))]


def _target_practice(reader: _Reader) -> list[str]:
    cells = reader.chars(_GRID_SIZE * _GRID_SIZE)
    rows = [cells[start:start + _GRID_SIZE] for start in range(0, len(cells), _GRID_SIZE)]
    return [str(target_score(rows))]


def _two_permutation(reader: _Reader) -> list[str]:
    n, a, b = reader.ints(3)
    return [_VERDICT[two_permutations_exist(n, a, b)]]


def _unit_array(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(unit_array_steps(reader.ints(n)))]


def _united_we_stand(reader: _Reader) -> list[str]:
    n = reader.int()
    split = split_united(reader.ints(n))
    if split is None:
        return ["-1"]
    first, second = split
    return [f"{len(first)} {len(second)}", _joined(first), _joined(second)]


def _walking_master(reader: _Reader) -> list[str]:
    a, b, c, d = reader.ints(4)
    return [_or_minus_one(walking_time(a, b, c, d))]


def _we_need_the_zero(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_or_minus_one(zero_xor_value(reader.ints(n)))]


_Handler = Callable[[_Reader], list[str]]


def _multi(handler: _Handler) -> _Handler:
    def solve_all(reader: _Reader) -> list[str]:
        cases = reader.int()
        return [line for _ in range(cases) for line in handler(reader)]

    return solve_all


_HANDLERS: dict[str, _Handler] = {
    "forbidden-integer": _multi(_forbidden_integer),
    "grasshopper": _multi(_grasshopper),
    "make-it-beautiful": _multi(_make_it_beautiful),
    "one-and-two": _multi(_one_and_two),
    "prepend-and-append": _multi(_prepend_and_append),
    "sequence-game": _multi(_sequence_game),
    "serval-and-mocha": _multi(_serval_and_mocha),
    "substring": _multi(_substring),
    "target-practice": _multi(_target_practice),
    "two-permutation": _multi(_two_permutation),
    "unit-array": _multi(_unit_array),
    "united-we-stand": _multi(_united_we_stand),
    "walking-master": _multi(_walking_master),
    "we-need-the-zero": _multi(_we_need_the_zero),
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
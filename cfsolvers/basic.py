"""Solvers for simple array and arithmetic problems."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate, groupby, pairwise
from typing import Callable, Iterator, Sequence

_ROUND_LIMIT = 999_999
_ROUND_NUMBERS = tuple(
    digit * 10**power for power in range(6) for digit in range(1, 10)
)
_SORTED_ROUND_NUMBERS = tuple(sorted(_ROUND_NUMBERS))

_VERDICT = {True: "YES", False: "NO"}


def smallest_absolute(values: Sequence[int]) -> int:
    """Return the smallest absolute value among ``values``."""
    if not values:
        raise ValueError("at least one value is required")
    return min(abs(value) for value in values)


def can_color_array(values: Sequence[int]) -> bool:
    """Tell whether the array splits into a non-empty prefix and suffix whose sums share parity."""
    total = sum(values)
    prefixes = accumulate(values[:-1])
    return any((total - prefix) % 2 == prefix % 2 for prefix in prefixes)


def longest_zero_segment(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous window whose sum is zero, scanning greedily."""
    best = 0
    left = 0
    window = 0
    for right, value in enumerate(values):
        window += value
        while window != 0:
            window -= values[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def button_winner(a: int, b: int, c: int) -> str:
    """Return ``"First"`` or ``"Second"``: the winner of the button game."""
    shared = min(a, b)
    a -= shared
    b -= shared
    if a > b:
        return "First"
    if a == b:
        return "First" if c % 2 != 0 else "Second"
    return "Second"


def can_pay_coins(n: int, k: int) -> bool:
    """Tell whether ``n`` can be paid with 2-coins and k-coins."""
    return not (k % 2 == 0 and n % 2 == 1)


def min_desorting_operations(values: Sequence[int]) -> int:
    """Return the fewest operations that make the array unsorted."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    pairs = list(pairwise(values))
    if any(later < earlier for earlier, later in pairs):
        return 0
    return min(abs(earlier - later) // 2 + 1 for earlier, later in pairs)


def good_array_steps(values: Sequence[int]) -> int:
    """Return how many merges leave no two neighbours of equal parity."""
    return sum(
        len(list(group)) - 1 for _, group in groupby(values, key=lambda v: v % 2)
    )


def count_round_numbers(n: int) -> int:
    """Count the numbers from 1 to ``n`` (at most 999999) with one non-zero digit."""
    limit = min(n, _ROUND_LIMIT)
    if limit < 1:
        return 0
    return bisect_right(_SORTED_ROUND_NUMBERS, limit)


def missing_goal(goals: Sequence[int]) -> int:
    """Return the efficiency of the last team so that all efficiencies sum to zero."""
    return -sum(goals)


def can_sort_boxes(values: Sequence[int], k: int) -> bool:
    """Tell whether reversing sub-arrays of length at most ``k`` can sort the boxes."""
    if k >= 2:
        return True
    return all(earlier <= later for earlier, later in pairwise(values))


def contains_daytona(values: Sequence[int], k: int) -> bool:
    """Tell whether some segment has ``k`` as its most common element."""
    return k in values


def can_sort_jagged(values: Sequence[int]) -> bool:
    """Tell whether repeated jagged swaps sort the sequence."""
    items = list(values)
    size = len(items)
    for _ in range(1, size):
        for i in range(1, size - 1):
            if items[i] > items[i - 1] and items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return all(earlier <= later for earlier, later in pairwise(items))


def min_tank_volume(stations: Sequence[int], distance: int) -> int:
    """Return the smallest tank that covers the trip to ``distance`` and back."""
    farthest = 0
    widest_gap = 0
    for previous, station in pairwise([0, *stations]):
        farthest = max(farthest, station)
        widest_gap = max(widest_gap, farthest - previous)
    return max((distance - farthest) * 2, widest_gap)


class _Reader:
    """Reads whitespace-separated integers from problem input."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


def _ambitious_kid(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(smallest_absolute(reader.ints(n)))]


def _array_coloring(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_VERDICT[can_color_array(reader.ints(n))]]


def _blank_space(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(longest_zero_segment(reader.ints(n)))]


def _buttons(reader: _Reader) -> list[str]:
    a, b, c = reader.ints(3)
    return [button_winner(a, b, c)]


def _coins(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    return [_VERDICT[can_pay_coins(n, k)]]


def _desorting(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(min_desorting_operations(reader.ints(n)))]


def _good_arrays(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(good_array_steps(reader.ints(n)))]


def _extremely_round(reader: _Reader) -> list[str]:
    return [str(count_round_numbers(reader.int()))]


def _goals_of_victory(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(missing_goal(reader.ints(n - 1)))]


def _halloumi_boxes(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    return [_VERDICT[can_sort_boxes(reader.ints(n), k)]]


def _daytona(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    return [_VERDICT[contains_daytona(reader.ints(n), k)]]


def _jagged_swaps(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_VERDICT[can_sort_jagged(reader.ints(n))]]


def _line_trip(reader: _Reader) -> list[str]:
    n, distance = reader.ints(2)
    return [str(min_tank_volume(reader.ints(n), distance))]


_Handler = Callable[[_Reader], list[str]]


def _multi(handler: _Handler) -> _Handler:
    def solve_all(reader: _Reader) -> list[str]:
        cases = reader.int()
        return [line for _ in range(cases) for line in handler(reader)]

    return solve_all


_HANDLERS: dict[str, _Handler] = {
    "ambitious-kid": _ambitious_kid,
    "array-coloring": _multi(_array_coloring),
    "blank-space": _multi(_blank_space),
    "buttons": _multi(_buttons),
    "coins": _multi(_coins),
    "desorting": _multi(_desorting),
    "good-arrays": _multi(_good_arrays),
    "extremely-round": _multi(_extremely_round),
    "goals-of-victory": _multi(_goals_of_victory),
    "halloumi-boxes": _multi(_halloumi_boxes),
    "daytona": _multi(_daytona),
    "jagged-swaps": _multi(_jagged_swaps),
    "line-trip": _multi(_line_trip),
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
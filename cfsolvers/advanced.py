"""Solvers for bitwise, prefix-sum, tree and binary-search problems."""

from __future__ import annotations

from typing import Callable, Sequence

from .constructive import _Reader

_BITS = 31


def maximal_and(values: Sequence[int], k: int) -> int:
    """Return the largest AND of all values after setting at most ``k`` single bits."""
    if k < 0:
        raise ValueError("k must not be negative")
    result = 0
    for bit in reversed(range(_BITS)):
        missing = sum(1 for value in values if not (value >> bit) & 1)
        if missing <= k:
            k -= missing
            result |= 1 << bit
    return result


def has_equal_segment(values: Sequence[int]) -> bool:
    """Tell whether some segment has equal sums on its odd and even positions."""
    seen = {0}
    balance = 0
    for position, value in enumerate(values, 1):
        balance += -value if position % 2 else value
        if balance in seen:
            return True
        seen.add(balance)
    return False


def subsequence_scores(values: Sequence[int]) -> list[int]:
    """Return, for every prefix of the sorted sequence, the size of its best-scoring subsequence."""
    if not values:
        raise ValueError("at least one value is required")
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    scores = [1]
    start = 0
    for end in range(1, len(values)):
        while end - start + 1 > values[start]:
            start += 1
        scores.append(end - start + 1)
    return scores


def count_balanced_subtrees(parents: Sequence[int], colors: str) -> int:
    """Count the vertices whose subtree holds as many 'W' vertices as black ones.

    ``parents`` lists the parent of vertices 2..n, each smaller than its child.
    """
    size = len(colors)
    if size == 0:
        raise ValueError("the tree must have at least one vertex")
    if len(parents) != size - 1:
        raise ValueError("expected one parent for every vertex but the root")
    white = [0] + [1 if color == "W" else 0 for color in colors]
    black = [0] + [0 if color == "W" else 1 for color in colors]
    for child in range(size, 1, -1):
        parent = parents[child - 2]
        if not 1 <= parent < child:
            raise ValueError(f"vertex {child} has invalid parent {parent}")
        white[parent] += white[child]
        black[parent] += black[child]
    return sum(1 for w, b in zip(white[1:], black[1:]) if w == b)


def _triangle(count: int) -> int:
    return count * (count + 1) // 2


def chat_ban_messages(k: int, x: int) -> int:
    """Return how many messages of the emote triangle of size ``k`` are sent before ``x`` emotes are reached."""
    if k < 1:
        raise ValueError("k must be positive")
    last = 2 * k - 1

    def emotes(messages: int) -> int:
        if messages >= k:
            return _triangle(k) + _triangle(k - 1) - _triangle(last - messages)
        return _triangle(messages)

    low, high = 1, last
    answer = last
    while low <= high:
        middle = (low + high) // 2
        if emotes(middle) >= x:
            answer = middle
            high = middle - 1
        else:
            low = middle + 1
    return answer


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _maximal_and(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    return [str(maximal_and(reader.ints(n), k))]


def _romantic_glasses(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_yes_no(has_equal_segment(reader.ints(n)))]


def _scoring_subsequences(reader: _Reader) -> list[str]:
    n = reader.int()
    return [" ".join(map(str, subsequence_scores(reader.ints(n))))]


def _balanced_subtrees(reader: _Reader) -> list[str]:
    n = reader.int()
    parents = reader.ints(n - 1)
    colors = reader.token()
    return [str(count_balanced_subtrees(parents, colors))]


def _chat_ban(reader: _Reader) -> list[str]:
    k, x = reader.ints(2)
    return [str(chat_ban_messages(k, x))]


_Handler = Callable[[_Reader], list[str]]


def _multi(handler: _Handler) -> _Handler:
    def solve_all(reader: _Reader) -> list[str]:
        cases = reader.int()
        return [line for _ in range(cases) for line in handler(reader)]

    return solve_all


_HANDLERS: dict[str, _Handler] = {
    "maximal-and": _multi(_maximal_and),
    "romantic-glasses": _multi(_romantic_glasses),
    "scoring-subsequences": _multi(_scoring_subsequences),
    "balanced-subtrees": _multi(_balanced_subtrees),
    "chat-ban": _multi(_chat_ban),
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
from functools import reduce
from operator import and_

import pytest

from cfsolvers.advanced import (
    PROBLEMS,
    chat_ban_messages,
    count_balanced_subtrees,
    has_equal_segment,
    maximal_and,
    run,
    subsequence_scores,
)


@pytest.mark.parametrize("values", [[2, 1, 1, 7], [6, 6, 6], [1, 2, 4, 8], [1023]])
def test_maximal_and_without_changes_is_plain_and(values):
    assert maximal_and(values, 0) == reduce(and_, values)


def test_maximal_and_with_enough_changes_sets_every_bit():
    values = [0, 5, 9]
    assert maximal_and(values, 31 * len(values)) == (1 << 31) - 1


def test_maximal_and_grows_with_k():
    values = [3, 12, 7, 1, 30]
    results = [maximal_and(values, k) for k in range(12)]
    assert results == sorted(results)
    assert all(result >= reduce(and_, values) for result in results)


def test_maximal_and_rejects_negative_k():
    with pytest.raises(ValueError):
        maximal_and([1, 2], -1)


@pytest.mark.parametrize("prefix", [[], [3], [1, 4], [9, 2, 7]])
def test_equal_neighbours_form_a_segment(prefix):
    assert has_equal_segment(prefix + [5, 5])


def test_single_value_has_no_segment():
    assert has_equal_segment([3]) is False


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [2, 1, 1], [10, 3, 7, 1, 5], [1, 3, 8, 2]])
def test_equal_segment_is_symmetric_under_reversal(values):
    assert has_equal_segment(values) == has_equal_segment(list(reversed(values)))


def test_equal_segment_survives_extension():
    base = [4, 1, 2, 3]
    if_found = has_equal_segment(base)
    for extra in ([1], [7, 9], [2, 2, 2]):
        assert has_equal_segment(base + extra) or not if_found


def test_scores_start_with_one_and_never_shrink():
    values = [1, 2, 3, 3, 5, 6, 8]
    scores = subsequence_scores(values)
    assert len(scores) == len(values)
    assert scores[0] == values[0]
    assert scores == sorted(scores)
    assert all(score <= size for size, score in enumerate(scores, 1))


def test_scores_of_large_equal_values_count_up():
    values = [6] * 6
    assert subsequence_scores(values) == list(range(1, 7))


def test_scores_of_ones_stay_at_one():
    assert subsequence_scores([1, 1, 1, 1]) == [1, 1, 1, 1]


def test_scores_reject_bad_input():
    with pytest.raises(ValueError):
        subsequence_scores([])
    with pytest.raises(ValueError):
        subsequence_scores([0, 1])


def test_single_vertex_is_never_balanced():
    assert count_balanced_subtrees([], "W") == 0


def test_root_with_opposite_child_is_balanced():
    assert count_balanced_subtrees([1], "WB") == 1


def test_balanced_count_does_not_depend_on_colour_names():
    parents = [1, 1, 2, 2, 3]
    colors = "WBWBBW"
    swapped = "".join("B" if color == "W" else "W" for color in colors)
    result = count_balanced_subtrees(parents, colors)
    assert result == count_balanced_subtrees(parents, swapped)
    assert 0 <= result <= len(colors)


def test_balanced_subtrees_validate_tree():
    with pytest.raises(ValueError):
        count_balanced_subtrees([1, 1], "WB")
    with pytest.raises(ValueError):
        count_balanced_subtrees([2], "WB")


def test_chat_ban_first_message_suffices():
    assert chat_ban_messages(4, 1) == 1


def test_chat_ban_caps_at_every_message():
    k = 5
    assert chat_ban_messages(k, 10**9) == 2 * k - 1


@pytest.mark.parametrize("k", [1, 2, 4, 7])
def test_chat_ban_is_the_first_prefix_reaching_x(k):
    lines = list(range(1, k + 1)) + list(range(k - 1, 0, -1))
    total = sum(lines)
    for x in range(1, total + 1):
        answer = chat_ban_messages(k, x)
        assert sum(lines[:answer]) >= x
        assert sum(lines[: answer - 1]) < x


def test_chat_ban_rejects_empty_triangle():
    with pytest.raises(ValueError):
        chat_ban_messages(0, 3)


def test_run_matches_functions():
    output = run("chat-ban", "2\n4 6\n3 7\n")
    assert output == f"{chat_ban_messages(4, 6)}\n{chat_ban_messages(3, 7)}\n"


def test_run_romantic_glasses_and_scores():
    assert run("romantic-glasses", "2\n2\n5 5\n1\n3\n") == "YES\nNO\n"
    expected = " ".join(map(str, subsequence_scores([1, 2, 3]))) + "\n"
    assert run("scoring-subsequences", "1\n3\n1 2 3\n") == expected


def test_run_balanced_subtrees_reads_tree():
    expected = f"{count_balanced_subtrees([1, 1], 'WBB')}\n"
    assert run("balanced-subtrees", "1\n3\n1 1\nWBB\n") == expected


def test_run_rejects_unknown_problem_and_short_input():
    assert "maximal-and" in PROBLEMS
    with pytest.raises(ValueError):
        run("no-such-problem", "")
    with pytest.raises(ValueError):
        run("maximal-and", "1\n3 1\n1 2\n")
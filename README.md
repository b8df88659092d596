# cfsolvers

Solvers for a set of short algorithmic problems, such as array colouring,
chat bans, maximal AND and balanced subtrees. Each problem is a plain Python
function. The same solvers can also be reached from a command line that reads
problem input in the usual contest format: a number of test cases, then the
cases themselves.

The package needs nothing beyond the Python standard library and works on
Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Using the functions

The solvers are spread over four modules:

- `cfsolvers.basic`: `smallest_absolute`, `can_color_array`,
  `longest_zero_segment`, `button_winner`, `can_pay_coins`,
  `min_desorting_operations`, `good_array_steps`, `count_round_numbers`,
  `missing_goal`, `can_sort_boxes`, `contains_daytona`, `can_sort_jagged`,
  `min_tank_volume`
- `cfsolvers.constructive`: `forbidden_integer_sum`, `grasshopper_jumps`,
  `beautiful_arrangement`, `balanced_two_position`,
  `shortest_original_length`, `sequence_game`, `serval_gcds`,
  `min_doublings`, `target_score`, `two_permutations_exist`,
  `unit_array_steps`, `split_united`, `walking_time`, `zero_xor_value`
- `cfsolvers.intermediate`: `count_good_pairs`, `can_divide_equalize`,
  `count_divisible_pairs`, `different_pairs`, `has_redundant_set`,
  `alternating_operations`
- `cfsolvers.advanced`: `maximal_and`, `has_equal_segment`,
  `subsequence_scores`, `count_balanced_subtrees`, `chat_ban_messages`

Each function takes ordinary Python values and returns its answer. Yes/no
problems return a `bool`. Problems whose answer may not exist return `None`
in that case. Input that cannot be solved at all, such as an empty list where
values are required, raises `ValueError`.

```python
from cfsolvers.advanced import chat_ban_messages, maximal_and
from cfsolvers.basic import smallest_absolute
from cfsolvers.constructive import zero_xor_value

chat_ban_messages(4, 6)        # 3
maximal_and([2, 1, 1], 2)      # 2
smallest_absolute([2, -6, 5])  # 2
zero_xor_value([1, 2, 5])      # 6
```

Each module also has a `PROBLEMS` tuple and a `run(problem, text)` function.
`run` takes the name of one of the module's problems and the full input text,
and returns the output text with one answer per line. An unknown name or
malformed input raises `ValueError`.

## Using the command line

Installing the package provides the `cfsolvers` command:

```
cfsolvers PROBLEM [INPUT]
```

It reads the input from the file `INPUT`, or from standard input if no file
is given, and prints the answers. If the input cannot be read as that
problem's input, it prints an error to standard error and exits with status 1.

```
$ printf '1\n4 6\n' | cfsolvers chat-ban
3
```

These are the problem names:

- basic: `ambitious-kid`, `array-coloring`, `blank-space`, `buttons`,
  `coins`, `daytona`, `desorting`, `extremely-round`, `goals-of-victory`,
  `good-arrays`, `halloumi-boxes`, `jagged-swaps`, `line-trip`
- constructive: `forbidden-integer`, `grasshopper`, `make-it-beautiful`,
  `one-and-two`, `prepend-and-append`, `sequence-game`, `serval-and-mocha`,
  `substring`, `target-practice`, `two-permutation`, `unit-array`,
  `united-we-stand`, `walking-master`, `we-need-the-zero`
- intermediate: `pairs-inequality`, `divide-and-equalize`, `divisible-pairs`,
  `different-ones`, `gardener-and-array`, `make-it-alternating`
- advanced: `maximal-and`, `romantic-glasses`, `scoring-subsequences`,
  `balanced-subtrees`, `chat-ban`

Every problem begins with a test-case count, except `ambitious-kid`. That one
reads a single case.

From Python, `cfsolvers.cli.problem_names()` returns these names sorted.
`cfsolvers.cli.solve_text(problem, text)` does the same work as the command.
# dpkit

Dynamic-programming solutions to a set of classic counting and optimisation
problems. Each problem is a plain Python function that takes ordinary values
and returns its answer, and a small command reads contest-style input and
prints the answer. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

## Counting problems

These live in `dpkit.counting`. Counts are reported modulo 1,000,000,007
(`dpkit.counting.MOD`). Invalid arguments such as negative sizes or
non-positive coin values raise `ValueError`.

- `dice_combinations(n)` counts the ordered ways to reach the sum `n` with
  throws of a six-sided die.
- `ordered_coin_combinations(coins, target)` counts the ordered sequences of
  coins that sum to `target`.
- `unordered_coin_combinations(coins, target)` counts the distinct multisets
  of coins that sum to `target`; repeated coin values count as one kind.
- `grid_paths(grid)` counts the right/down paths from the top-left to the
  bottom-right cell of a square grid of strings, where `*` marks a trap.
- `counting_towers(n)` counts the towers of width 2 and height `n` (at least
  1) that can be built from rectangular blocks.
- `two_sets(n)` counts the ways to split `1..n` into two sets with equal sums.
- `array_descriptions(values, upper)` counts the ways to fill the unknown
  (zero) entries of `values` with numbers from `1..upper` so that neighbouring
  values differ by at most one.

```python
from dpkit.counting import dice_combinations, grid_paths

dice_combinations(3)           # 4
grid_paths(["..", ".."])       # 2
```

## Optimisation problems

These live in `dpkit.optimization`.

- `minimum_coins(coins, target)` gives the fewest coins that sum to `target`,
  or `None` when no combination reaches it.
- `removing_digits(n)` gives the number of steps needed to reduce `n` to zero
  when each step subtracts the largest digit of the current number.
- `book_shop(prices, pages, budget)` gives the most pages that can be bought
  within `budget`, each book at most once.
- `edit_distance(first, second)` gives the number of insertions, deletions
  and substitutions needed to turn one string into the other.
- `rectangle_cutting(width, height)` gives the fewest straight cuts that split
  a rectangle into squares.
- `longest_increasing_subsequence(values)` gives the length of the longest
  strictly increasing subsequence.
- `max_project_reward(projects)` gives the largest total reward from
  `Project(start, end, reward)` entries whose inclusive day ranges do not
  overlap.
- `removal_game(values)` gives the score the first player reaches when both
  players take numbers from either end of the list and play optimally.
- `money_sums(coins)` gives, in increasing order, every distinct positive sum
  that a subset of the coins can form.

```python
from dpkit.optimization import Project, edit_distance, max_project_reward, minimum_coins

edit_distance("LOVE", "MOVIE")   # 2
minimum_coins([1, 5, 7], 11)     # 3
minimum_coins([2], 3)            # None
max_project_reward([Project(2, 4, 4), Project(3, 6, 6), Project(6, 8, 2), Project(5, 7, 3)])  # 7
```

## Command line

Installing the package provides the `dpkit` command. It takes a problem name
and reads that problem's whitespace-separated input from a file, or from
standard input when no file is given, then prints the answer:

```
dpkit PROBLEM [INPUT]
echo 3 | dpkit dice-combinations
```

The problem names are `array-description`, `book-shop`,
`coin-combinations-1`, `coin-combinations-2`, `counting-towers`,
`dice-combinations`, `edit-distance`, `grid-paths`,
`increasing-subsequence`, `minimizing-coins`, `money-sums`, `projects`,
`rectangle-cutting`, `removal-game`, `removing-digits` and `two-sets-2`.
`minimizing-coins` prints `-1` when the target cannot be reached;
`money-sums` prints the number of sums and then the sums on one line;
`counting-towers` reads a test count and prints one answer per line.
Malformed input is reported on standard error with exit status 1.

From Python, `dpkit.cli.solve(problem, text)` does the same for input held in
a string and returns the output text; an unknown problem or malformed input
raises `ValueError`.

## Running the tests

```
pip install ".[test]"
pytest
```
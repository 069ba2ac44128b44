"""Command line front end reading problem input in whitespace-separated form."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from dpkit.counting import (
    array_descriptions,
    counting_towers,
    dice_combinations,
    grid_paths,
    ordered_coin_combinations,
    two_sets,
    unordered_coin_combinations,
)
from dpkit.optimization import (
    Project,
    book_shop,
    edit_distance,
    longest_increasing_subsequence,
    max_project_reward,
    minimum_coins,
    money_sums,
    rectangle_cutting,
    removal_game,
    removing_digits,
)


class _Input:
    """Whitespace-separated tokens read in order."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _dice(data: _Input) -> str:
    return str(dice_combinations(data.number()))


def _minimizing_coins(data: _Input) -> str:
    count, target = data.numbers(2)
    result = minimum_coins(data.numbers(count), target)
    return "-1" if result is None else str(result)


def _coin_combinations_1(data: _Input) -> str:
    count, target = data.numbers(2)
    return str(ordered_coin_combinations(data.numbers(count), target))


def _coin_combinations_2(data: _Input) -> str:
    count, target = data.numbers(2)
    return str(unordered_coin_combinations(data.numbers(count), target))


def _removing_digits(data: _Input) -> str:
    return str(removing_digits(data.number()))


def _grid_paths(data: _Input) -> str:
    size = data.number()
    return str(grid_paths([data.word() for _ in range(size)]))


def _book_shop(data: _Input) -> str:
    count, budget = data.numbers(2)
    prices = data.numbers(count)
    pages = data.numbers(count)
    return str(book_shop(prices, pages, budget))


def _array_description(data: _Input) -> str:
    count, upper = data.numbers(2)
    return str(array_descriptions(data.numbers(count), upper))


def _counting_towers(data: _Input) -> str:
    tests = data.number()
    return "\n".join(str(counting_towers(data.number())) for _ in range(tests))


def _edit_distance(data: _Input) -> str:
    first = data.word()
    second = data.word()
    return str(edit_distance(first, second))


def _rectangle_cutting(data: _Input) -> str:
    width, height = data.numbers(2)
    return str(rectangle_cutting(width, height))


def _money_sums(data: _Input) -> str:
    sums = money_sums(data.numbers(data.number()))
    return f"{len(sums)}\n{' '.join(map(str, sums))}"


def _removal_game(data: _Input) -> str:
    return str(removal_game(data.numbers(data.number())))


def _two_sets(data: _Input) -> str:
    return str(two_sets(data.number()))


def _increasing_subsequence(data: _Input) -> str:
    return str(longest_increasing_subsequence(data.numbers(data.number())))


def _projects(data: _Input) -> str:
    count = data.number()
    projects = [Project(*data.numbers(3)) for _ in range(count)]
    return str(max_project_reward(projects))


PROBLEMS: dict[str, Callable[[_Input], str]] = {
    "array-description": _array_description,
    "book-shop": _book_shop,
    "coin-combinations-1": _coin_combinations_1,
    "coin-combinations-2": _coin_combinations_2,
    "counting-towers": _counting_towers,
    "dice-combinations": _dice,
    "edit-distance": _edit_distance,
    "grid-paths": _grid_paths,
    "increasing-subsequence": _increasing_subsequence,
    "minimizing-coins": _minimizing_coins,
    "money-sums": _money_sums,
    "projects": _projects,
    "rectangle-cutting": _rectangle_cutting,
    "removal-game": _removal_game,
    "removing-digits": _removing_digits,
    "two-sets-2": _two_sets,
}


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the answer text."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return handler(_Input(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(prog="dpkit", description="Solve a dynamic programming problem.")
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file; standard input if omitted")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        answer = solve(args.problem, text)
    except ValueError as error:
        print(f"dpkit: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Optimisation problems solved by dynamic programming."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A project running from day ``start`` to day ``end`` inclusive, paying ``reward``."""

    start: int
    end: int
    reward: int


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    for coin in values:
        if coin <= 0:
            raise ValueError(f"coin values must be positive, got {coin}")
    return values


def minimum_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins adding up to ``target``, or None if no sum works.

    Every coin value may be used any number of times.
    """
    values = _positive_coins(coins)
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    best: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        options = [
            previous
            for coin in values
            if coin <= amount and (previous := best[amount - coin]) is not None
        ]
        best[amount] = min(options) + 1 if options else None
    return best[target]


def removing_digits(n: int) -> int:
    """Count the steps to reach 0 by repeatedly subtracting the largest digit."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    steps = 0
    while n:
        n -= max(int(digit) for digit in str(n))
        steps += 1
    return steps


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages obtainable by buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError(f"budget must be non-negative, got {budget}")
    for price in prices:
        if price < 0:
            raise ValueError(f"prices must be non-negative, got {price}")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for spent in range(budget, max(price, 1) - 1, -1):
            best[spent] = max(best[spent], best[spent - price] + count)
    return best[budget]


def edit_distance(first: str, second: str) -> int:
    """Return the fewest insertions, deletions and substitutions turning one string into the other."""
    previous = list(range(len(second) + 1))
    for row, left in enumerate(first, start=1):
        current = [row]
        for col, right in enumerate(second, start=1):
            if left == right:
                current.append(previous[col - 1])
            else:
                current.append(1 + min(previous[col], current[col - 1], previous[col - 1]))
        previous = current
    return previous[-1]


def rectangle_cutting(width: int, height: int) -> int:
    """Return the fewest straight cuts splitting a ``width`` x ``height`` rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError(f"sides must be positive, got {width} x {height}")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for w in range(1, width + 1):
        for h in range(1, height + 1):
            if w == h:
                continue
            vertical = (cuts[k][h] + cuts[w - k][h] for k in range(1, w // 2 + 1))
            horizontal = (cuts[w][k] + cuts[w][h - k] for k in range(1, h // 2 + 1))
            cuts[w][h] = 1 + min(min(vertical, default=float("inf")),
                                 min(horizontal, default=float("inf")))
    return int(cuts[width][height])


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def max_project_reward(projects: Iterable[Project]) -> int:
    """Return the largest total reward of projects whose day ranges do not overlap."""
    ordered = sorted(projects, key=lambda project: project.start)
    starts = [project.start for project in ordered]
    best = [0] * (len(ordered) + 1)
    for index in range(len(ordered) - 1, -1, -1):
        project = ordered[index]
        following = bisect_right(starts, project.end, lo=index + 1)
        best[index] = max(best[following] + project.reward, best[index + 1])
    return best[0]


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's score when both take from either end and play optimally."""
    if not values:
        raise ValueError("values must not be empty")
    count = len(values)
    # lead[i] is the best score difference for the player to move on values[i:i+length].
    lead = list(values)
    for length in range(2, count + 1):
        lead = [
            max(values[i] - lead[i + 1], values[i + length - 1] - lead[i])
            for i in range(count - length + 1)
        ]
    return (sum(values) + lead[0]) // 2


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return, in increasing order, every positive sum made from a subset of the coins."""
    reachable = 1
    for coin in _positive_coins(coins):
        reachable |= reachable << coin
    return [total for total in range(1, reachable.bit_length()) if reachable >> total & 1]
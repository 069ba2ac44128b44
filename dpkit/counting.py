"""Counting problems solved by dynamic programming, results taken modulo 10**9 + 7."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007

TRAP = "*"

# For each tower-level shape, the shapes of the level below that it may sit on.
# Shapes 0 and 1 are single full-width blocks; shapes 2 to 5 are the four ways
# a level can be split into two separate columns.
_TOWER_LINKS: tuple[tuple[int, ...], ...] = (
    (0, 1, 2),
    (0, 1, 2),
    (1, 2, 3, 4, 5),
    (1, 2, 3, 4, 5),
    (1, 2, 3, 4, 5),
    (1, 2, 3, 4, 5),
)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    for coin in values:
        if coin <= 0:
            raise ValueError(f"coin values must be positive, got {coin}")
    return values


def dice_combinations(n: int) -> int:
    """Count the ordered ways to reach the sum ``n`` by throwing a six-sided die."""
    _check_non_negative("n", n)
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def ordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count the ordered sequences of coins whose values add up to ``target``."""
    values = _check_coins(coins)
    _check_non_negative("target", target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in values if coin <= amount) % MOD
    return ways[target]


def unordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count the distinct multisets of coins whose values add up to ``target``.

    Repeated coin values are treated as one coin kind.
    """
    kinds = set(_check_coins(coins))
    _check_non_negative("target", target)
    ways = [1] + [0] * target
    for coin in kinds:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def grid_paths(grid: Sequence[str]) -> int:
    """Count paths moving right or down from the top-left to the bottom-right cell.

    ``grid`` is a square of rows in which ``*`` marks a trap that no path may enter.
    """
    size = len(grid)
    if size == 0:
        raise ValueError("grid must not be empty")
    for row in grid:
        if len(row) != size:
            raise ValueError("grid must be square")

    paths = [0] * size
    paths[0] = 1
    for row in grid:
        left = 0
        for col, cell in enumerate(row):
            if cell == TRAP:
                paths[col] = 0
            else:
                paths[col] = (paths[col] + left) % MOD
            left = paths[col]
    return paths[-1]


def counting_towers(n: int) -> int:
    """Count the ways to build a tower of width 2 and height ``n`` from blocks."""
    if n < 1:
        raise ValueError(f"tower height must be at least 1, got {n}")
    level = (0, 1, 0, 0, 0, 0)
    for _ in range(n):
        level = tuple(sum(level[lower] for lower in links) % MOD for links in _TOWER_LINKS)
    return (level[1] + level[2]) % MOD


def two_sets(n: int) -> int:
    """Count the ways to split 1..n into two sets of equal sum (unordered pairs)."""
    _check_non_negative("n", n)
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    # Every split puts n in exactly one of the two sets, so counting the sets
    # that hold n counts each split once.
    remaining = total // 2 - n
    if remaining < 0:
        return 0
    ways = [1] + [0] * remaining
    for number in range(1, n):
        for amount in range(remaining, number - 1, -1):
            ways[amount] = (ways[amount] + ways[amount - number]) % MOD
    return ways[remaining]


def array_descriptions(values: Sequence[int], upper: int) -> int:
    """Count the arrays matching ``values`` whose neighbours differ by at most 1.

    Every element lies in ``1..upper``; a 0 in ``values`` marks an unknown element.
    """
    if not values:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError(f"upper must be at least 1, got {upper}")
    for value in values:
        if not 0 <= value <= upper:
            raise ValueError(f"value {value} is outside 0..{upper}")

    ways = [0] + [1] * upper
    for following in reversed(values[1:]):
        current = [0] * (upper + 1)
        for value in range(1, upper + 1):
            if following:
                current[value] = ways[following] if abs(value - following) <= 1 else 0
            else:
                current[value] = sum(ways[value - 1:value + 2]) % MOD
        ways = current

    first = values[0]
    if first:
        return ways[first]
    return sum(ways) % MOD
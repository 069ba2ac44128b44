import pytest
from hypothesis import given
from hypothesis import strategies as st

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


def test_minimum_coins_single_coin_multiples():
    assert minimum_coins([4], 20) == 5


def test_minimum_coins_unit_coin_bound():
    assert minimum_coins([1], 17) == 17
    assert minimum_coins([1, 17], 17) == 1


def test_minimum_coins_impossible():
    assert minimum_coins([2], 3) is None
    assert minimum_coins([], 5) is None


def test_minimum_coins_zero_target():
    assert minimum_coins([3, 7], 0) == 0


def test_minimum_coins_rejects_bad_input():
    with pytest.raises(ValueError):
        minimum_coins([0, 1], 3)
    with pytest.raises(ValueError):
        minimum_coins([1], -1)


@given(st.integers(min_value=1, max_value=9))
def test_removing_digits_single_digit(n):
    assert removing_digits(n) == 1


@given(st.integers(min_value=1, max_value=5000))
def test_removing_digits_bounds(n):
    steps = removing_digits(n)
    assert -(-n // 9) <= steps <= n


def test_removing_digits_zero_and_negative():
    assert removing_digits(0) == 0
    with pytest.raises(ValueError):
        removing_digits(-3)


def test_book_shop_zero_budget():
    assert book_shop([4, 8], [5, 12], 0) == 0


def test_book_shop_everything_affordable():
    assert book_shop([4, 8, 5, 3], [5, 12, 8, 1], 20) == 5 + 12 + 8 + 1


def test_book_shop_each_book_once():
    assert book_shop([3], [7], 9) == 7


def test_book_shop_length_mismatch():
    with pytest.raises(ValueError):
        book_shop([1, 2], [3], 5)


def test_edit_distance_example():
    assert edit_distance("LOVE", "MOVIE") == 2


@given(st.text(alphabet="abc", max_size=8), st.text(alphabet="abc", max_size=8))
def test_edit_distance_properties(first, second):
    distance = edit_distance(first, second)
    assert distance == edit_distance(second, first)
    assert abs(len(first) - len(second)) <= distance <= max(len(first), len(second))
    assert edit_distance(first, first) == 0


def test_edit_distance_to_empty():
    assert edit_distance("hello", "") == len("hello")


@given(st.integers(min_value=1, max_value=12))
def test_rectangle_cutting_square_and_strip(n):
    assert rectangle_cutting(n, n) == 0
    assert rectangle_cutting(1, n) == n - 1


@given(st.integers(min_value=1, max_value=10), st.integers(min_value=1, max_value=10))
def test_rectangle_cutting_symmetric(width, height):
    assert rectangle_cutting(width, height) == rectangle_cutting(height, width)


def test_rectangle_cutting_rejects_non_positive():
    with pytest.raises(ValueError):
        rectangle_cutting(0, 3)


def test_longest_increasing_subsequence_example():
    assert longest_increasing_subsequence([7, 3, 5, 3, 6, 2, 9, 8]) == 4


def test_longest_increasing_subsequence_shapes():
    assert longest_increasing_subsequence(range(10)) == 10
    assert longest_increasing_subsequence(range(10, 0, -1)) == 1
    assert longest_increasing_subsequence([5, 5, 5]) == 1
    assert longest_increasing_subsequence([]) == 0


@given(st.lists(st.integers(-20, 20), max_size=30))
def test_longest_increasing_subsequence_bounds(values):
    length = longest_increasing_subsequence(values)
    assert min(1, len(values)) <= length <= len(set(values))


def test_projects_disjoint_rewards_add_up():
    projects = [Project(1, 2, 4), Project(3, 5, 6), Project(6, 6, 1)]
    assert max_project_reward(projects) == 4 + 6 + 1


def test_projects_touching_days_overlap():
    projects = [Project(1, 3, 5), Project(3, 4, 8)]
    assert max_project_reward(projects) == 8


def test_projects_order_does_not_matter():
    projects = [Project(2, 4, 4), Project(3, 6, 6), Project(6, 8, 2), Project(5, 7, 3)]
    assert max_project_reward(projects) == max_project_reward(reversed(projects))
    assert max_project_reward([]) == 0


def test_removal_game_single_value():
    assert removal_game([9]) == 9


@given(st.lists(st.integers(0, 50), min_size=1, max_size=16).filter(lambda v: len(v) % 2 == 0))
def test_removal_game_first_player_gets_half_on_even(values):
    score = removal_game(values)
    assert 2 * score >= sum(values)
    assert score <= sum(values)


def test_removal_game_empty():
    with pytest.raises(ValueError):
        removal_game([])


def test_money_sums_example():
    assert money_sums([4, 2, 5, 2]) == [2, 4, 5, 6, 7, 8, 9, 11, 13]


@given(st.lists(st.integers(1, 30), min_size=1, max_size=8))
def test_money_sums_symmetric(coins):
    total = sum(coins)
    sums = money_sums(coins)
    assert sums[-1] == total
    assert sums == sorted(set(sums))
    assert all(coin in sums for coin in coins)
    assert all(total - s in sums for s in sums if s != total)


def test_money_sums_rejects_non_positive():
    with pytest.raises(ValueError):
        money_sums([3, 0])
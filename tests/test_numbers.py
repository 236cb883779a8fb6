import random
import statistics
from itertools import combinations

import pytest

from leetkit.numbers import (
    check_powers_of_three,
    count_largest_group,
    find_median_sorted_arrays,
    is_palindrome_number,
    reordered_power_of_2,
    reverse_integer,
)


def test_count_largest_group_example():
    assert count_largest_group(13) == 4


@pytest.mark.parametrize("n", range(1, 10))
def test_count_largest_group_single_digits(n):
    assert count_largest_group(n) == n


@pytest.mark.parametrize("n", range(1, 300, 7))
def test_count_largest_group_bounds(n):
    result = count_largest_group(n)
    distinct_sums = len({sum(map(int, str(i))) for i in range(1, n + 1)})
    assert 1 <= result <= distinct_sums


@pytest.mark.parametrize("size", range(1, 5))
def test_check_powers_of_three_distinct_sums(size):
    powers = [3**k for k in range(8)]
    for subset in combinations(powers, size):
        assert check_powers_of_three(sum(subset))


@pytest.mark.parametrize("k", range(10))
def test_check_powers_of_three_repeated_power(k):
    assert not check_powers_of_three(2 * 3**k)
    assert not check_powers_of_three(2 * 3**k + 3 ** (k + 1))


def test_check_powers_of_three_edges():
    assert check_powers_of_three(0)
    assert not check_powers_of_three(-3)


@pytest.mark.parametrize("seed", range(20))
def test_reverse_integer_round_trip(seed):
    rng = random.Random(seed)
    x = rng.randint(1, 99_999)
    while x % 10 == 0:
        x += 1
    assert reverse_integer(reverse_integer(x)) == x
    assert reverse_integer(-x) == -reverse_integer(x)
    assert reverse_integer(x * 10) == reverse_integer(x)


def test_reverse_integer_overflow():
    assert reverse_integer(2**31 - 1) == 0
    assert reverse_integer(1534236469) == reverse_integer(2**31 - 1)
    assert reverse_integer(-(2**31)) == reverse_integer(2**31 - 1)


@pytest.mark.parametrize("k", range(30))
def test_reordered_power_of_2_powers(k):
    power = 2**k
    assert reordered_power_of_2(power)
    assert reordered_power_of_2(int(str(power)[::-1]))


def test_reordered_power_of_2_limits():
    assert not reordered_power_of_2(2**30)
    assert not reordered_power_of_2(0)
    assert not reordered_power_of_2(-1)


@pytest.mark.parametrize("seed", range(20))
def test_is_palindrome_number_constructed(seed):
    rng = random.Random(seed)
    half = str(rng.randint(1, 9999))
    palindrome = int(half + half[::-1])
    odd_palindrome = int(half + half[-2::-1])
    assert is_palindrome_number(palindrome)
    assert is_palindrome_number(odd_palindrome)
    assert not is_palindrome_number(-palindrome)
    assert not is_palindrome_number(palindrome * 10)


def test_find_median_from_worked_example():
    assert find_median_sorted_arrays([2, 3], [1]) == 2.0


@pytest.mark.parametrize("seed", range(30))
def test_find_median_matches_statistics(seed):
    rng = random.Random(seed)
    first = sorted(rng.randint(-50, 50) for _ in range(rng.randint(0, 10)))
    second = sorted(rng.randint(-50, 50) for _ in range(rng.randint(1, 10)))
    expected = statistics.median(first + second)
    assert find_median_sorted_arrays(first, second) == pytest.approx(expected)
    assert find_median_sorted_arrays(second, first) == pytest.approx(expected)


def test_find_median_rejects_empty():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])
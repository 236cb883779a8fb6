"""Integer and numeric puzzles: digit groups, reversals and medians."""

from __future__ import annotations

from collections import Counter
from heapq import merge
from itertools import count, takewhile
from typing import Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_POWER_LIMIT = 1_000_000_000


def _digit_signature(n: int) -> str:
    return "".join(sorted(str(n)))


_POWER_SIGNATURES = frozenset(
    _digit_signature(power)
    for power in takewhile(lambda p: p <= _POWER_LIMIT, (1 << k for k in count()))
)


def count_largest_group(n: int) -> int:
    """Number of digit-sum groups of 1..n that share the largest group size."""
    if n < 1:
        return 0
    sizes = Counter(sum(map(int, str(i))) for i in range(1, n + 1))
    largest = max(sizes.values())
    return sum(1 for size in sizes.values() if size == largest)


def check_powers_of_three(n: int) -> bool:
    """Whether ``n`` is a sum of distinct powers of three."""
    if n < 0:
        return False
    while n:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    result = int(str(abs(x))[::-1])
    if x < 0:
        result = -result
    return result if _INT_MIN <= result <= _INT_MAX else 0


def reordered_power_of_2(n: int) -> bool:
    """Whether the digits of ``n`` can be reordered into a power of two up to 10**9."""
    if n <= 0:
        return False
    return _digit_signature(n) in _POWER_SIGNATURES


def is_palindrome_number(x: int) -> bool:
    """Whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences."""
    merged = list(merge(nums1, nums2))
    if not merged:
        raise ValueError("at least one of the arrays must be non-empty")
    size = len(merged)
    return (merged[(size - 1) // 2] + merged[size // 2]) / 2
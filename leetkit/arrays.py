"""Array algorithms: pair sums, windows, partitions, merging and counting."""

from __future__ import annotations

from collections import Counter
from heapq import merge
from itertools import accumulate, count, groupby, pairwise
from operator import itemgetter
from typing import Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Indices ``(i, j)`` with ``i < j`` and ``nums[i] + nums[j] == target``, or None.

    When a value repeats, the latest earlier index holding the needed value is used.
    """
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return partner, i
        seen[num] = i
    return None


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two bars; fewer than two bars hold none."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        low, high = height[left], height[right]
        best = max(best, min(low, high) * (right - left))
        if low < high:
            left += 1
        else:
            right -= 1
    return best


def num_equiv_domino_pairs(dominoes: Sequence[Sequence[int]]) -> int:
    """Number of pairs of dominoes that are equal, possibly after turning one over."""
    counts = Counter((min(a, b), max(a, b)) for a, b in dominoes)
    return sum(n * (n - 1) // 2 for n in counts.values())


def max_absolute_sum(nums: Sequence[int]) -> int:
    """Largest absolute sum of any (possibly empty) contiguous subarray."""
    prefixes = list(accumulate(nums, initial=0))
    return max(prefixes) - min(prefixes)


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    following = [*nums[1:], *nums[:1]]
    return sum(a > b for a, b in zip(nums, following)) <= 1


def pivot_array(nums: Sequence[int], pivot: int) -> list[int]:
    """Values below ``pivot``, then equal, then above, each group in original order."""
    return (
        [x for x in nums if x < pivot]
        + [x for x in nums if x == pivot]
        + [x for x in nums if x > pivot]
    )


def longest_nice_subarray(nums: Sequence[int]) -> int:
    """Length of the longest subarray whose elements pairwise share no set bit."""
    if not nums:
        raise ValueError("nums must not be empty")
    used = 0
    left = 0
    best = 0
    for right, num in enumerate(nums):
        while used & num:
            used ^= nums[left]
            left += 1
        used |= num
        best = max(best, right - left + 1)
    return best


def apply_operations(nums: Sequence[int]) -> list[int]:
    """Double equal neighbours left to right, zeroing the right one, then push zeros to the end."""
    values = list(nums)
    for i in range(len(values) - 1):
        if values[i] == values[i + 1]:
            values[i] *= 2
            values[i + 1] = 0
    nonzero = [v for v in values if v != 0]
    return nonzero + [0] * (len(values) - len(nonzero))


def merge_arrays(
    nums1: Sequence[Sequence[int]], nums2: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Merge two id-sorted ``[id, value]`` lists, summing the values of shared ids."""
    first = itemgetter(0)
    merged = merge(nums1, nums2, key=first)
    return [
        [ident, sum(value for _, value in group)]
        for ident, group in groupby(merged, key=first)
    ]


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing or strictly decreasing subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = increasing = decreasing = 1
    for a, b in pairwise(nums):
        increasing = increasing + 1 if b > a else 1
        decreasing = decreasing + 1 if b < a else 1
        best = max(best, increasing, decreasing)
    return best


def count_subarrays(nums: Sequence[int]) -> int:
    """Number of length-3 windows whose outer sum equals half the middle element."""
    return sum(2 * (a + c) == b for a, b, c in zip(nums, nums[1:], nums[2:]))


def max_adjacent_distance(nums: Sequence[int]) -> int:
    """Largest absolute difference between neighbours, the ends counting as neighbours."""
    if not nums:
        raise ValueError("nums must not be empty")
    return max(abs(a - b) for a, b in zip(nums, [*nums[1:], nums[0]]))


def num_of_unplaced_fruits(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Place each fruit in the leftmost basket big enough; count fruits left over."""
    remaining = list(baskets)
    unplaced = 0
    for fruit in fruits:
        slot = next((i for i, cap in enumerate(remaining) if cap >= fruit), None)
        if slot is None:
            unplaced += 1
        else:
            remaining[slot] = 0
    return unplaced


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    return next(i for i in count(1) if i not in present)


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped between bars of the given heights."""
    if not height:
        return 0
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lm, rm) - h for h, lm, rm in zip(height, left_max, right_max))
"""String algorithms: pattern matching, substrings, encodings and counting."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from itertools import pairwise, product
from math import factorial, prod
from typing import Sequence

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_SUBTRACTIVE = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}


def is_match(s: str, p: str) -> bool:
    """Whole-string match of ``s`` against ``p``, where '.' is any char and 'x*' repeats."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals are ignored."""
    total = 0
    i = 0
    while i < len(s):
        pair = s[i : i + 2]
        if pair in _ROMAN_SUBTRACTIVE:
            total += _ROMAN_SUBTRACTIVE[pair]
            i += 2
        else:
            total += _ROMAN_VALUES.get(s[i], 0)
            i += 1
    return total


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for i, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= start:
            longest = max(longest, i - start)
            start = previous + 1
        last_seen[ch] = i
    return max(longest, len(s) - start)


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Start indices where ``s`` holds a concatenation of every word exactly once."""
    if not words:
        raise ValueError("words must not be empty")
    length = len(words[0])
    if length == 0:
        raise ValueError("words must not be empty strings")
    if any(len(word) != length for word in words):
        raise ValueError("all words must have the same length")
    wanted = Counter(words)
    count = len(words)
    total = count * length
    return [
        start
        for start in range(len(s) - total + 1)
        if Counter(s[start + k * length : start + (k + 1) * length] for k in range(count)) == wanted
    ]


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring."""
    open_positions: list[int] = []
    longest = 0
    section_start = 0
    for i, ch in enumerate(s):
        if ch == "(":
            open_positions.append(i)
        elif open_positions:
            open_positions.pop()
        else:
            longest = max(longest, i - section_start)
            section_start = i + 1
    bounds = [section_start - 1, *open_positions, len(s)]
    return max(longest, max(b - a - 1 for a, b in pairwise(bounds)))


def possible_string_count(word: str) -> int:
    """Number of strings that a single long key press could have turned into ``word``."""
    return sum(a == b for a, b in pairwise(word)) + 1


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    n = len(s)
    if n == 0:
        return ""
    best_length = 0
    best_start, best_end = 0, 1
    for half in range(1, 2 * n - 2):
        centre, odd = divmod(half, 2)
        if odd:
            left, right = centre, centre + 1
        else:
            left, right = centre - 1, centre + 1
        if n - right + 1 <= best_length // 2:
            break
        length = 0
        while left >= 0 and right < n and s[left] == s[right]:
            length = right - left + 1
            left -= 1
            right += 1
        if length > best_length:
            best_length = length
            best_start, best_end = left + 1, right
    if best_length == 0:
        return s[:1]
    return s[best_start:best_end]


def convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1 or num_rows >= len(s):
        return s
    cycle = 2 * (num_rows - 1)
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for i, ch in enumerate(s):
        position = i % cycle
        rows[min(position, cycle - position)].append(ch)
    return "".join("".join(row) for row in rows)


def find_different_binary_string(nums: Sequence[str]) -> str:
    """A binary string of length ``len(nums)`` that differs from every string in ``nums``."""
    flipped = []
    for i, binary in enumerate(nums):
        if i >= len(binary) or binary[i] not in "01":
            raise ValueError(f"nums[{i}] is not a binary string of length {len(nums)}")
        flipped.append("1" if binary[i] == "0" else "0")
    return "".join(flipped)


def num_tile_possibilities(tiles: str) -> int:
    """Number of distinct non-empty letter sequences that can be laid from ``tiles``."""
    counts = list(Counter(tiles).values())
    total = 0
    for picks in product(*(range(c + 1) for c in counts)):
        size = sum(picks)
        if size:
            total += factorial(size) // prod(factorial(k) for k in picks)
    return total
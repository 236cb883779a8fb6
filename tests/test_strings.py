import random
import re
from itertools import permutations

import pytest

from leetkit.strings import (
    convert,
    find_different_binary_string,
    find_substring,
    is_match,
    length_of_longest_substring,
    longest_palindrome,
    longest_valid_parentheses,
    num_tile_possibilities,
    possible_string_count,
    roman_to_int,
)

_ROMAN_TABLE = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
    (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def _random_pattern(rng):
    pieces = []
    for _ in range(rng.randint(0, 4)):
        piece = rng.choice("ab.")
        if rng.random() < 0.4:
            piece += "*"
        pieces.append(piece)
    return "".join(pieces)


@pytest.mark.parametrize("seed", range(40))
def test_is_match_agrees_with_re(seed):
    rng = random.Random(seed)
    for _ in range(20):
        pattern = _random_pattern(rng)
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 6)))
        assert is_match(text, pattern) == (re.fullmatch(pattern, text) is not None)


@pytest.mark.parametrize("text", ["", "a", "abc", "mississippi"])
def test_is_match_identity_and_wildcard(text):
    assert is_match(text, text)
    assert is_match(text, ".*")
    assert not is_match(text + "x", text)


@pytest.mark.parametrize("number", range(1, 4000))
def test_roman_round_trip(number):
    assert roman_to_int(_to_roman(number)) == number


def test_roman_ignores_unknown_characters():
    assert roman_to_int("XZ") == roman_to_int("X")


@pytest.mark.parametrize("block", ["a", "abc", "xyzw"])
def test_longest_substring_periodic(block):
    assert length_of_longest_substring(block * 5) == len(block)


@pytest.mark.parametrize("seed", range(20))
def test_longest_substring_invariants(seed):
    rng = random.Random(seed)
    text = "".join(rng.choice("abcde") for _ in range(rng.randint(1, 30)))
    result = length_of_longest_substring(text)
    assert 1 <= result <= len(set(text))
    assert any(len(set(text[i : i + result])) == result for i in range(len(text) - result + 1))
    assert not any(
        len(set(text[i : i + result + 1])) == result + 1 for i in range(len(text) - result)
    )


def test_find_substring_example():
    assert find_substring("barfoothefoobarman", ["foo", "bar"]) == [0, 9]


@pytest.mark.parametrize("seed", range(20))
def test_find_substring_windows_are_permutations(seed):
    rng = random.Random(seed)
    text = "".join(rng.choice("ab") for _ in range(rng.randint(4, 20)))
    words = ["ab", "ba"]
    for start in find_substring(text, words):
        chunks = [text[start : start + 2], text[start + 2 : start + 4]]
        assert sorted(chunks) == sorted(words)


def test_find_substring_rejects_bad_words():
    with pytest.raises(ValueError):
        find_substring("abc", [])
    with pytest.raises(ValueError):
        find_substring("abc", ["a", "bc"])


@pytest.mark.parametrize("n", range(1, 6))
def test_longest_valid_parentheses_constructed(n):
    assert longest_valid_parentheses("(" * n + ")" * n) == 2 * n
    assert longest_valid_parentheses("()" * n) == 2 * n
    assert longest_valid_parentheses(")" + "()" * n + "(") == 2 * n
    assert longest_valid_parentheses("(" * n) == 0


@pytest.mark.parametrize("n", range(1, 8))
def test_possible_string_count_runs(n):
    assert possible_string_count("a" * n) == n
    assert possible_string_count("ab" * n) == 1


@pytest.mark.parametrize("text", ["racecar", "abba", "x", "aa"])
def test_longest_palindrome_whole_palindrome(text):
    assert longest_palindrome(text) == text


@pytest.mark.parametrize("seed", range(30))
def test_longest_palindrome_invariants(seed):
    rng = random.Random(seed)
    text = "".join(rng.choice("abc") for _ in range(rng.randint(1, 25)))
    result = longest_palindrome(text)
    assert result
    assert result == result[::-1]
    assert result in text


def test_convert_example():
    assert convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@pytest.mark.parametrize("rows", range(1, 8))
def test_convert_is_permutation(rows):
    text = "THEQUICKBROWNFOX"
    assert sorted(convert(text, rows)) == sorted(text)


def test_convert_trivial_row_counts():
    assert convert("HELLO", 1) == "HELLO"
    assert convert("HELLO", 9) == "HELLO"
    assert convert("ABCDEF", 2) == "ABCDEF"[::2] + "ABCDEF"[1::2]
    with pytest.raises(ValueError):
        convert("HELLO", 0)


@pytest.mark.parametrize("seed", range(20))
def test_find_different_binary_string(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 8)
    nums = list({"".join(rng.choice("01") for _ in range(n)) for _ in range(n)})
    while len(nums) < n:
        nums.append(nums[0])
    result = find_different_binary_string(nums)
    assert len(result) == n
    assert result not in nums


def test_find_different_binary_string_rejects_non_binary():
    with pytest.raises(ValueError):
        find_different_binary_string(["2"])


def test_num_tile_possibilities_example():
    assert num_tile_possibilities("AAB") == 8


@pytest.mark.parametrize("tiles", ["A", "AB", "ABC", "AAB", "AABC", "ABBBC"])
def test_num_tile_possibilities_matches_enumeration(tiles):
    sequences = {p for k in range(1, len(tiles) + 1) for p in permutations(tiles, k)}
    assert num_tile_possibilities(tiles) == len(sequences)


@pytest.mark.parametrize("n", range(0, 6))
def test_num_tile_possibilities_single_letter(n):
    assert num_tile_possibilities("Z" * n) == n
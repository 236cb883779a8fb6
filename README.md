# leetkit

Small, dependency-free solutions to well-known algorithm puzzles, grouped by
the kind of data they work on. Everything is plain Python functions and a few
small classes; the package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `leetkit.linked_lists`

- `ListNode(val=0, next=None)`: a singly linked list node. Iterating over a
  node yields it and every node after it.
- `build_list(values)` / `list_values(head)`: convert between Python
  iterables and linked lists (an empty input gives `None`, and `None` gives
  `[]`).
- `add_two_numbers(l1, l2)`: add two numbers stored as reversed digit lists.
- `merge_two_lists(list1, list2)`: splice two sorted lists into one; on equal
  values the node from `list1` comes first.
- `merge_k_lists(lists)`: merge any number of sorted lists by pairwise merging;
  no lists gives `None`.
- `reverse_k_group(head, k)`: reverse the list in groups of `k`, leaving a
  short final group as it is. Raises `ValueError` if `k < 1`.

### `leetkit.trees`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `build_tree(values)` / `serialize_tree(root)`: convert between level-order
  lists (with `None` for missing children) and trees; trailing `None`s are
  trimmed when serializing.
- `FindElements(root)`: recovers a tree whose values were lost, taking the root
  as 0, a left child as `2x + 1` and a right child as `2x + 2`;
  `find(target)` tells whether a value is in the recovered tree.
- `minimum_operations(root)`: the least number of swaps that sorts every level
  of a tree with distinct values.
- `generate_trees(n)`: every structurally unique binary search tree holding
  `1..n`. Subtrees are shared between the returned trees.

### `leetkit.strings`

- `is_match(s, p)`: whole-string matching where `.` is any character and `x*`
  repeats the preceding character zero or more times.
- `roman_to_int(s)`: value of a Roman numeral; other characters are ignored.
- `length_of_longest_substring(s)`: longest substring without a repeated
  character.
- `find_substring(s, words)`: start indices of every concatenation of all the
  words, each used exactly once. Raises `ValueError` if `words` is empty,
  holds an empty string, or its words differ in length.
- `longest_valid_parentheses(s)`: longest well-formed parentheses substring.
- `possible_string_count(word)`: how many strings one over-long key press could
  have produced `word` from.
- `longest_palindrome(s)`: longest palindromic substring; the earliest wins a
  tie.
- `convert(s, num_rows)`: zigzag conversion. Raises `ValueError` if
  `num_rows < 1`.
- `find_different_binary_string(nums)`: a binary string differing from every
  string in `nums`. Raises `ValueError` if an entry is too short or not binary
  at the position it is read from.
- `num_tile_possibilities(tiles)`: number of distinct non-empty sequences that
  can be laid from the given letter tiles.

### `leetkit.numbers`

- `count_largest_group(n)`: how many digit-sum groups of `1..n` share the
  largest size (0 when `n < 1`).
- `check_powers_of_three(n)`: whether `n` is a sum of distinct powers of three.
- `reverse_integer(x)`: reversed decimal digits, or 0 when the result falls
  outside the signed 32-bit range.
- `reordered_power_of_2(n)`: whether the digits of `n` can be reordered into a
  power of two no greater than 10**9.
- `is_palindrome_number(x)`: whether `x` reads the same both ways; negative
  numbers never do.
- `find_median_sorted_arrays(nums1, nums2)`: median of two sorted sequences.
  Raises `ValueError` if both are empty.

### `leetkit.arrays`

- `two_sum(nums, target)`: a pair of indices `(i, j)` with `i < j` whose values
  sum to `target`, or `None`.
- `max_area(height)`: most water held between two bars.
- `num_equiv_domino_pairs(dominoes)`: pairs of dominoes equal up to rotation.
- `max_absolute_sum(nums)`: largest absolute sum of a contiguous subarray.
- `is_sorted_and_rotated(nums)`: whether `nums` is a rotated non-decreasing
  sequence.
- `pivot_array(nums, pivot)`: values below, equal to and above `pivot`, each
  group keeping its order.
- `longest_nice_subarray(nums)`: longest subarray whose elements share no set
  bit pairwise.
- `apply_operations(nums)`: double equal neighbours left to right, zero the
  right one, then move zeros to the end. The input is not modified.
- `merge_arrays(nums1, nums2)`: merge two id-sorted `[id, value]` lists,
  summing values that share an id.
- `longest_monotonic_subarray(nums)`: longest strictly increasing or strictly
  decreasing run.
- `count_subarrays(nums)`: length-3 windows whose outer sum is half the middle
  element.
- `max_adjacent_distance(nums)`: largest difference between neighbours, with
  the ends counted as neighbours.
- `num_of_unplaced_fruits(fruits, baskets)`: fruits left over after each takes
  the leftmost basket large enough. The input is not modified.
- `first_missing_positive(nums)`: smallest positive integer not in `nums`.
- `trap(height)`: rain water trapped between bars.

`longest_nice_subarray`, `longest_monotonic_subarray` and
`max_adjacent_distance` raise `ValueError` on an empty input.

### `leetkit.skyline`

- `get_skyline(buildings)`: the key points `[x, height]` of the outline of
  `[left, right, height]` buildings. Raises `ValueError` if a building does not
  have exactly three values.

### `leetkit.number_containers`

- `NumberContainers()`: maps indices to numbers. `change(index, number)` puts
  a number at an index, replacing the old one; `find(number)` returns the
  smallest index holding it, or -1.

### `leetkit.grids`

- `sort_matrix(grid)`: a new square matrix whose diagonals on or below the main
  diagonal are sorted in non-increasing order and those above it in
  non-decreasing order. Raises `ValueError` if the grid is not square.
- `len_of_v_diagonal(grid)`: longest diagonal segment following `1, 2, 0, 2, 0,
  ...` with at most one clockwise turn; 0 when the grid holds no 1.
- `solve_sudoku(board)`: fills a 9x9 board of digit characters and `"."` in
  place and returns `True`; an unsolvable board is left unchanged and `False`
  is returned. Raises `ValueError` for a board of the wrong shape or with other
  characters.
- `format_board(board)`: renders a board as text, cells separated by spaces and
  one row per line.

## Examples

```python
from leetkit.linked_lists import build_list, list_values, add_two_numbers

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))  # [7, 0, 8]
```

```python
from leetkit.trees import build_tree, FindElements

finder = FindElements(build_tree([-1, None, -1]))
print(finder.find(2), finder.find(1))  # True False
```

```python
from leetkit.strings import is_match, roman_to_int

print(is_match("aab", "c*a*b"))  # True
print(roman_to_int("MCMXCIV"))   # 1994
```

```python
from leetkit.number_containers import NumberContainers

containers = NumberContainers()
containers.change(2, 10)
containers.change(1, 10)
print(containers.find(10))  # 1
containers.change(1, 20)
print(containers.find(10))  # 2
```

```python
from leetkit.grids import solve_sudoku, format_board

board = [list(row) for row in (
    "53..7....", "6..195...", ".98....6.",
    "8...6...3", "4..8.3..1", "7...2...6",
    ".6....28.", "...419..5", "....8..79",
)]
if solve_sudoku(board):
    print(format_board(board))
```

## What it does not do

leetkit is a library only: it has no command-line program, and it reads and
writes no files. Inputs are passed as Python values and results are returned
the same way.
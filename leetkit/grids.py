"""Grid puzzles: diagonal sorting, V-shaped diagonal segments and sudoku."""

from __future__ import annotations

from itertools import cycle
from typing import MutableSequence, Optional, Sequence

_DIGITS = "123456789"
_EMPTY = "."
_SUDOKU_SIZE = 9

# Diagonal directions in clockwise order, so that the clockwise turn of a
# direction is the one after it.
_DIRECTIONS = ((-1, -1), (-1, 1), (1, 1), (1, -1))


def sort_matrix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Sort each diagonal of a square matrix into a new matrix.

    Diagonals on or below the main diagonal are sorted in non-increasing order,
    those above it in non-decreasing order.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    result = [list(row) for row in grid]
    for offset in range(-(n - 1), n):
        cells = [(r, r + offset) for r in range(n) if 0 <= r + offset < n]
        values = sorted((grid[r][c] for r, c in cells), reverse=offset <= 0)
        for (r, c), value in zip(cells, values):
            result[r][c] = value
    return result


def _in_bounds(grid: Sequence[Sequence[int]], r: int, c: int) -> bool:
    return 0 <= r < len(grid) and 0 <= c < len(grid[r])


def _ray(grid: Sequence[Sequence[int]], r: int, c: int, dr: int, dc: int) -> list[tuple[int, int]]:
    """Cells from (r, c) along (dr, dc) that follow the 2, 0, 2, 0 ... sequence."""
    path = [(r, c)]
    sequence = cycle((0, 2) if grid[r][c] == 2 else (2, 0))
    r, c = r + dr, c + dc
    for expected in sequence:
        if not (_in_bounds(grid, r, c) and grid[r][c] == expected):
            break
        path.append((r, c))
        r, c = r + dr, c + dc
    return path


def _longest_from(grid: Sequence[Sequence[int]], r: int, c: int) -> int:
    best = 1
    for i, (dr, dc) in enumerate(_DIRECTIONS):
        path = _ray(grid, r, c, dr, dc)
        best = max(best, len(path))
        turn_r, turn_c = _DIRECTIONS[(i + 1) % len(_DIRECTIONS)]
        for k, (pr, pc) in enumerate(path[1:], start=1):
            best = max(best, k + len(_ray(grid, pr, pc, turn_r, turn_c)))
    return best


def len_of_v_diagonal(grid: Sequence[Sequence[int]]) -> int:
    """Length of the longest diagonal segment 1, 2, 0, 2, 0 ... with at most one clockwise turn.

    Rows may have different lengths. A grid without a 1 gives 0.
    """
    return max(
        (
            _longest_from(grid, r, c)
            for r, row in enumerate(grid)
            for c, value in enumerate(row)
            if value == 1
        ),
        default=0,
    )


def _candidates(board: list[list[str]], r: int, c: int) -> list[str]:
    box_r, box_c = 3 * (r // 3), 3 * (c // 3)
    used = set(board[r])
    used.update(board[i][c] for i in range(_SUDOKU_SIZE))
    used.update(board[i][j] for i in range(box_r, box_r + 3) for j in range(box_c, box_c + 3))
    return [d for d in _DIGITS if d not in used]


def _search(board: list[list[str]]) -> Optional[list[list[str]]]:
    board = [row[:] for row in board]
    while True:
        options = {
            (r, c): _candidates(board, r, c)
            for r in range(_SUDOKU_SIZE)
            for c in range(_SUDOKU_SIZE)
            if board[r][c] == _EMPTY
        }
        if not options:
            return board
        if any(not opts for opts in options.values()):
            return None
        singles = [(pos, opts[0]) for pos, opts in options.items() if len(opts) == 1]
        if not singles:
            break
        for (r, c), digit in singles:
            if digit not in _candidates(board, r, c):
                return None
            board[r][c] = digit

    (r, c), opts = min(options.items(), key=lambda item: len(item[1]))
    for digit in opts:
        board[r][c] = digit
        solved = _search(board)
        if solved is not None:
            return solved
    return None


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill a 9x9 board of digit characters and '.' in place.

    Returns True when the board was solved; an unsolvable board is left unchanged
    and False is returned.
    """
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("board must be 9 rows of 9 cells")
    for row in board:
        for cell in row:
            if cell != _EMPTY and cell not in _DIGITS:
                raise ValueError(f"invalid sudoku cell {cell!r}")
    solved = _search([list(row) for row in board])
    if solved is None:
        return False
    for row, solved_row in zip(board, solved):
        row[:] = solved_row
    return True


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render a board with its cells separated by spaces, one row per line."""
    return "\n".join(" ".join(row) for row in board)
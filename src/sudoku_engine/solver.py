"""
Backtracking over a 9x9 board.

- ``is_valid``: can a value legally go into a cell?
- ``solve_random``: randomized fill producing one complete grid.
- ``count_solutions``: exhaustive search that stops at ``limit`` solutions,
  used as the uniqueness oracle when removing clues.

Both searches walk cells in row-major order (column fastest). Recursion
depth is bounded by the 81 cells.
"""

import threading
from typing import Optional

import numpy as np

from .board import Board, copy_board, empty_board, find_conflicts, validate_shape
from .constants import BOX, DIGITS, SIZE
from .errors import GenerationCancelled, GenerationFailure


def is_valid(board: Board, row: int, col: int, value: int) -> bool:
    """
    False iff ``value`` already appears in the row, column or box of (row, col).

    The cell (row, col) itself is not compared, so a filled cell never
    conflicts with its own value.
    """
    for i in range(SIZE):
        if i != col and board[row][i] == value:
            return False
        if i != row and board[i][col] == value:
            return False
    start_row, start_col = row - row % BOX, col - col % BOX
    for r in range(start_row, start_row + BOX):
        for c in range(start_col, start_col + BOX):
            if (r, c) != (row, col) and board[r][c] == value:
                return False
    return True


def _next_cell(row: int, col: int):
    if col == SIZE - 1:
        return row + 1, 0
    return row, col + 1


def check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise GenerationCancelled()


# ============================================================================
# Randomized fill
# ============================================================================

def solve_random(
    board: Optional[Board] = None,
    rng: Optional[np.random.RandomState] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Board:
    """
    Complete a board by randomized depth-first search.

    Args:
        board: Optional seed board; filled cells are kept as-is. Not mutated.
            Defaults to an empty board.
        rng: Random source for the candidate order. A fresh unseeded
            RandomState is used when omitted.
        cancel_event: Checked at every step; raises GenerationCancelled once set.

    Returns:
        A new, fully solved board.

    Raises:
        GenerationFailure: the seed has conflicting clues or no completion.
    """
    if board is None:
        work = empty_board()
    else:
        validate_shape(board)
        if find_conflicts(board):
            raise GenerationFailure(
                "Failed to generate a solved Sudoku board: seed has conflicting clues"
            )
        work = copy_board(board)
    if rng is None:
        rng = np.random.RandomState()

    def fill(row: int, col: int) -> bool:
        check_cancelled(cancel_event)
        if row == SIZE:
            return True
        next_row, next_col = _next_cell(row, col)
        if work[row][col] != 0:
            return fill(next_row, next_col)
        for value in rng.permutation(DIGITS):
            value = int(value)
            if is_valid(work, row, col, value):
                work[row][col] = value
                if fill(next_row, next_col):
                    return True
                work[row][col] = 0
        return False

    if not fill(0, 0):
        raise GenerationFailure("Failed to generate a solved Sudoku board.")
    return work


# ============================================================================
# Bounded solution counting
# ============================================================================

def count_solutions(
    board: Board,
    limit: int = 2,
    cancel_event: Optional[threading.Event] = None,
) -> int:
    """
    Count completions of ``board``, stopping once ``limit`` are found.

    The board is consumed: the search writes into it, so pass a copy you
    do not need afterwards. With ``limit=2`` the result tells "unique"
    (1) apart from "none" (0) and "ambiguous" (2).
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    found = 0

    def search(row: int, col: int) -> None:
        nonlocal found
        if found >= limit:
            return
        check_cancelled(cancel_event)
        if row == SIZE:
            found += 1
            return
        next_row, next_col = _next_cell(row, col)
        if board[row][col] != 0:
            search(next_row, next_col)
            return
        for value in DIGITS:
            if is_valid(board, row, col, value):
                board[row][col] = value
                search(next_row, next_col)
                board[row][col] = 0
                if found >= limit:
                    return

    search(0, 0)
    return found


def has_unique_solution(board: Board) -> bool:
    """True when ``board`` has exactly one completion. Leaves ``board`` untouched."""
    return count_solutions(copy_board(board), limit=2) == 1

"""
Symmetric clue removal.

Starting from a solved board, clears randomly drawn cell pairs
(r, c) / (8-r, 8-c) as long as the puzzle keeps exactly one solution.
A pair whose removal breaks uniqueness is locked and never drawn again
in the same run. The centre cell is its own partner, so it is locked
from the start and every accepted step clears exactly two cells.

The loop is a randomized trial, not an exhaustive search, so the removal
target is an upper bound rather than a promise.
"""

import threading
from typing import Optional, Set

import numpy as np

from .board import Board, Coord, all_coords, copy_board, symmetric_partner
from .constants import SIZE
from .solver import check_cancelled, count_solutions

CENTRE = (SIZE // 2, SIZE // 2)


def _removal_exhausted(board: Board, locked: Set[Coord]) -> bool:
    """True when every cell still holding a clue is locked."""
    return all(
        (r, c) in locked for r, c in all_coords() if board[r][c] != 0
    )


def reduce(
    solved: Board,
    removal_target: int,
    rng: Optional[np.random.RandomState] = None,
    limit: int = 2,
    max_attempts: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Board:
    """
    Clear up to ``removal_target`` cells from ``solved`` in symmetric pairs.

    Args:
        solved: Solved (or uniquely solvable) board. Not mutated.
        removal_target: Number of cells to try to clear.
        rng: Random source for coordinate draws.
        limit: Solution-count bound handed to the uniqueness oracle.
        max_attempts: Optional cap on coordinate draws; None means no cap.
        cancel_event: Checked on every draw.

    Returns:
        A new puzzle board with exactly one solution.
    """
    if removal_target < 0:
        raise ValueError(f"removal_target must be >= 0, got {removal_target}")
    if rng is None:
        rng = np.random.RandomState()

    board = copy_board(solved)
    locked: Set[Coord] = {CENTRE}
    removed = 0
    attempts = 0

    while removed < removal_target:
        if max_attempts is not None and attempts >= max_attempts:
            break
        check_cancelled(cancel_event)
        attempts += 1

        row, col = int(rng.randint(SIZE)), int(rng.randint(SIZE))
        sym_row, sym_col = symmetric_partner(row, col)
        if (
            board[row][col] == 0
            or board[sym_row][sym_col] == 0
            or (row, col) in locked
            or (sym_row, sym_col) in locked
        ):
            continue

        backup, sym_backup = board[row][col], board[sym_row][sym_col]
        board[row][col] = 0
        board[sym_row][sym_col] = 0

        if count_solutions(copy_board(board), limit, cancel_event) == 1:
            removed += 2
        else:
            board[row][col] = backup
            board[sym_row][sym_col] = sym_backup
            locked.add((row, col))
            locked.add((sym_row, sym_col))

        if _removal_exhausted(board, locked):
            break

    return board

import threading

import numpy as np
import pytest

from sudoku_engine.board import copy_board, empty_board
from sudoku_engine.errors import GenerationCancelled, GenerationFailure
from sudoku_engine.solver import (
    count_solutions,
    has_unique_solution,
    is_valid,
    solve_random,
)
from tests.helpers import assert_solved


def _unsolvable_seed():
    # Row 0 holds 1..8 and column 8 already has a 9: (0, 8) has no candidate.
    board = empty_board()
    board[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    board[1][8] = 9
    return board


# ---------------------------------------------------------------------------
# is_valid
# ---------------------------------------------------------------------------

def test_is_valid_rejects_row_column_and_box():
    board = empty_board()
    board[0][0] = 5
    assert not is_valid(board, 0, 8, 5)  # same row
    assert not is_valid(board, 8, 0, 5)  # same column
    assert not is_valid(board, 2, 2, 5)  # same box
    assert is_valid(board, 4, 4, 5)
    assert is_valid(board, 0, 8, 4)


def test_is_valid_is_self_consistent_on_solved_board(solved_board):
    for r in range(9):
        for c in range(9):
            value = solved_board[r][c]
            solved_board[r][c] = 0
            assert is_valid(solved_board, r, c, value)
            for other in range(1, 10):
                if other != value:
                    assert not is_valid(solved_board, r, c, other)
            solved_board[r][c] = value


def test_is_valid_ignores_the_cells_own_value(solved_board):
    for r in range(9):
        for c in range(9):
            assert is_valid(solved_board, r, c, solved_board[r][c])


def test_is_valid_on_filled_cell_still_sees_peers(solved_board):
    # (0, 0) holds 5; 3 sits at (0, 1) in the same row and box.
    assert not is_valid(solved_board, 0, 0, 3)


# ---------------------------------------------------------------------------
# solve_random
# ---------------------------------------------------------------------------

def test_solve_random_produces_solved_board(rng):
    assert_solved(solve_random(rng=rng))


def test_solve_random_is_reproducible_with_seed():
    first = solve_random(rng=np.random.RandomState(7))
    second = solve_random(rng=np.random.RandomState(7))
    assert first == second


def test_solve_random_differs_between_draws(rng):
    assert solve_random(rng=rng) != solve_random(rng=rng)


def test_solve_random_keeps_seed_clues_and_does_not_mutate(rng, solved_board):
    seed = copy_board(solved_board)
    for r in range(9):
        for c in range(9):
            if (r + c) % 2:
                seed[r][c] = 0
    before = copy_board(seed)

    result = solve_random(seed, rng=rng)

    assert seed == before
    assert_solved(result)
    for r in range(9):
        for c in range(9):
            if seed[r][c]:
                assert result[r][c] == seed[r][c]


def test_solve_random_raises_when_no_completion(rng):
    with pytest.raises(GenerationFailure):
        solve_random(_unsolvable_seed(), rng=rng)


def test_solve_random_rejects_conflicting_seed(rng):
    board = empty_board()
    board[0][0] = 5
    board[0][5] = 5
    with pytest.raises(GenerationFailure, match="conflicting"):
        solve_random(board, rng=rng)


def test_solve_random_honours_cancellation(rng):
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(GenerationCancelled):
        solve_random(rng=rng, cancel_event=cancel)


# ---------------------------------------------------------------------------
# count_solutions
# ---------------------------------------------------------------------------

def test_count_solutions_solved_board_is_one(solved_board):
    assert count_solutions(copy_board(solved_board)) == 1


def test_count_solutions_single_hole_is_one(solved_board):
    solved_board[4][4] = 0
    assert count_solutions(solved_board, limit=2) == 1


def test_count_solutions_stops_at_limit():
    assert count_solutions(empty_board(), limit=2) == 2
    assert count_solutions(empty_board(), limit=5) == 5
    assert count_solutions(empty_board(), limit=1) == 1


def test_count_solutions_zero_for_dead_end():
    assert count_solutions(_unsolvable_seed()) == 0


def test_count_solutions_rejects_bad_limit():
    with pytest.raises(ValueError):
        count_solutions(empty_board(), limit=0)


def test_count_solutions_honours_cancellation():
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(GenerationCancelled):
        count_solutions(empty_board(), cancel_event=cancel)


def test_has_unique_solution_leaves_board_untouched(solved_board):
    solved_board[0][0] = 0
    solved_board[8][8] = 0
    before = copy_board(solved_board)
    assert has_unique_solution(solved_board)
    assert solved_board == before
    assert not has_unique_solution(empty_board())

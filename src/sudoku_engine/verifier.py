"""
Strong verifier for 9x9 Sudoku.

Deterministic checker: validates Sudoku rules, ground truth, uniqueness
and clue symmetry. Every check returns ``(ok, message)``.
"""

from typing import List, Tuple

from .board import symmetric_partner
from .constants import BOX, DIGITS, SIZE
from .solver import has_unique_solution


def _units(grid: List[List[int]]):
    """Yield (name, values) for every row, column and box."""
    for r in range(SIZE):
        yield f"Row {r}", list(grid[r])
    for c in range(SIZE):
        yield f"Column {c}", [grid[r][c] for r in range(SIZE)]
    for box_r in range(0, SIZE, BOX):
        for box_c in range(0, SIZE, BOX):
            yield (
                f"Box ({box_r // BOX},{box_c // BOX})",
                [
                    grid[r][c]
                    for r in range(box_r, box_r + BOX)
                    for c in range(box_c, box_c + BOX)
                ],
            )


def _check_shape(grid: List[List[int]]) -> Tuple[bool, str]:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return False, "Grid is not 9x9"
    return True, ""


class StrongVerifier:
    """Deterministic Sudoku verifier — checks validity AND correctness."""

    @staticmethod
    def verify_cell_correctness(
        true_solution: List[List[int]], row: int, col: int, value: int
    ) -> Tuple[bool, str]:
        """Check if a proposed value matches the ground truth."""
        true_value = true_solution[row][col]
        if value == true_value:
            return True, f"Correct! {value} matches ground truth"
        return False, f"Incorrect: placed {value} but should be {true_value}"

    @staticmethod
    def verify_complete_solution(
        puzzle: List[List[int]], solution: List[List[int]]
    ) -> Tuple[bool, str]:
        """Verify a complete solution obeys the rules and keeps every clue."""
        ok, msg = _check_shape(solution)
        if not ok:
            return ok, msg

        for r in range(SIZE):
            for c in range(SIZE):
                if solution[r][c] not in DIGITS:
                    return False, f"Invalid value at ({r},{c}): {solution[r][c]}"

        for r in range(SIZE):
            for c in range(SIZE):
                if puzzle[r][c] != 0 and puzzle[r][c] != solution[r][c]:
                    return (
                        False,
                        f"Doesn't match clue at ({r},{c}): "
                        f"expected {puzzle[r][c]}, got {solution[r][c]}",
                    )

        for name, values in _units(solution):
            if sorted(values) != DIGITS:
                return False, f"{name} invalid: {values}"

        return True, "Solution is correct!"

    @staticmethod
    def verify_partial_solution(
        puzzle: List[List[int]], current_grid: List[List[int]]
    ) -> Tuple[bool, str]:
        """Verify a partial solution has no conflicts."""
        ok, msg = _check_shape(current_grid)
        if not ok:
            return ok, msg

        for r in range(SIZE):
            for c in range(SIZE):
                if current_grid[r][c] not in [0] + DIGITS:
                    return False, f"Invalid value at ({r},{c}): {current_grid[r][c]}"

        for r in range(SIZE):
            for c in range(SIZE):
                if puzzle[r][c] != 0 and current_grid[r][c] != puzzle[r][c]:
                    return False, f"Conflicts with clue at ({r},{c})"

        for name, values in _units(current_grid):
            filled = [v for v in values if v != 0]
            if len(filled) != len(set(filled)):
                return False, f"Duplicate in {name.lower()}"

        return True, "Partial solution is valid"

    @staticmethod
    def verify_unique_solution(puzzle: List[List[int]]) -> Tuple[bool, str]:
        """Check the puzzle is conflict-free and has exactly one completion."""
        ok, msg = StrongVerifier.verify_partial_solution(puzzle, puzzle)
        if not ok:
            return ok, msg
        if has_unique_solution(puzzle):
            return True, "Puzzle has a unique solution"
        return False, "Puzzle has no solution or more than one"

    @staticmethod
    def verify_symmetry(puzzle: List[List[int]]) -> Tuple[bool, str]:
        """Check empty cells come in 180-degree rotational pairs."""
        for r in range(SIZE):
            for c in range(SIZE):
                sr, sc = symmetric_partner(r, c)
                if (puzzle[r][c] == 0) != (puzzle[sr][sc] == 0):
                    return False, f"Asymmetric clue at ({r},{c}) / ({sr},{sc})"
        return True, "Clues are symmetric"

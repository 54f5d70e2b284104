"""
Plain 9x9 integer boards: construction, copying and simple queries.

A board is a list of 9 rows of 9 ints, 0 meaning empty. The algorithms
in ``solver`` and ``remover`` mutate boards in place, so anything handed
to them that the caller still needs must be copied first.
"""

from typing import List, Set, Tuple

from .constants import BOX, SIZE

Board = List[List[int]]
Coord = Tuple[int, int]


def empty_board() -> Board:
    return [[0] * SIZE for _ in range(SIZE)]


def copy_board(board: Board) -> Board:
    return [row[:] for row in board]


def flatten(board: Board) -> List[int]:
    return [cell for row in board for cell in row]


def count_givens(board: Board) -> int:
    """Number of non-zero cells."""
    return sum(1 for row in board for cell in row if cell != 0)


def all_coords() -> List[Coord]:
    return [(r, c) for r in range(SIZE) for c in range(SIZE)]


def symmetric_partner(row: int, col: int) -> Coord:
    """180-degree rotational counterpart of (row, col)."""
    return SIZE - 1 - row, SIZE - 1 - col


def box_origin(row: int, col: int) -> Coord:
    return row - row % BOX, col - col % BOX


def peers(row: int, col: int) -> Set[Coord]:
    """All coordinates sharing a row, column or box with (row, col)."""
    result = {(row, c) for c in range(SIZE)} | {(r, col) for r in range(SIZE)}
    br, bc = box_origin(row, col)
    result |= {(r, c) for r in range(br, br + BOX) for c in range(bc, bc + BOX)}
    result.discard((row, col))
    return result


def find_conflicts(board: Board) -> Set[Coord]:
    """Coordinates of filled cells whose value repeats in a shared unit."""
    conflicts = set()
    for r in range(SIZE):
        for c in range(SIZE):
            value = board[r][c]
            if value == 0:
                continue
            if any(board[pr][pc] == value for pr, pc in peers(r, c)):
                conflicts.add((r, c))
    return conflicts


def validate_shape(board: Board) -> None:
    """Raise ValueError unless ``board`` is 9x9 with values in 0..9."""
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("Board must be 9x9")
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if not isinstance(value, int) or not 0 <= value <= SIZE:
                raise ValueError(f"Invalid value at ({r},{c}): {value!r}")

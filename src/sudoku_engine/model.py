"""
Labelled Sudoku data model.

The algorithms work on bare 9x9 int boards. This module wraps a board in
the domain-facing structure: nine 3x3 grids numbered 1-9 (row-major),
each holding nine cells addressed by a column letter A-I and a row
number 1-9 ("A1" is the top-left cell).
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .board import Board, empty_board, find_conflicts, validate_shape
from .constants import BOX, COLUMN_LABELS, DIGITS, ROW_LABELS, Difficulty
from .errors import (
    DuplicateGridPosition,
    InvalidCellCount,
    InvalidCellValue,
    InvalidColumnIdentifier,
    InvalidGridCount,
    InvalidGridPosition,
    InvalidRowIdentifier,
)


def column_label(col: int) -> str:
    return COLUMN_LABELS[col]


def row_label(row: int) -> str:
    return ROW_LABELS[row]


def label_to_coord(column: str, row: str):
    """Inverse of (column_label, row_label): ("C", "2") -> (1, 2)."""
    return ROW_LABELS.index(row), COLUMN_LABELS.index(column)


# ============================================================================
# Cell / Grid / Sudoku
# ============================================================================

@dataclass
class Cell:
    column: str
    row: str
    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) \
                or not 0 <= self.value <= 9:
            raise InvalidCellValue(self.value)
        if len(self.column) != 1 or self.column not in COLUMN_LABELS:
            raise InvalidColumnIdentifier(self.column)
        if len(self.row) != 1 or self.row not in ROW_LABELS:
            raise InvalidRowIdentifier(self.row)

    @property
    def id(self) -> str:
        return self.column + self.row

    def __str__(self) -> str:
        return f"{self.column}{self.row}:{self.value}"


@dataclass
class SudokuGrid:
    """One 3x3 box. Position 1 is top-left, 9 is bottom-right."""

    position: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self):
        if not 1 <= self.position <= 9:
            raise InvalidGridPosition(self.position)
        if self.cells and len(self.cells) != 9:
            raise InvalidCellCount(len(self.cells))

    @classmethod
    def create_empty(cls, position: int) -> "SudokuGrid":
        if not 1 <= position <= 9:
            raise InvalidGridPosition(position)
        grid_row, grid_col = divmod(position - 1, BOX)
        cells = [
            Cell(
                column=column_label(grid_col * BOX + local_col),
                row=row_label(grid_row * BOX + local_row),
            )
            for local_row in range(BOX)
            for local_col in range(BOX)
        ]
        return cls(position=position, cells=cells)

    def __str__(self) -> str:
        return f"Grid {self.position}: " + " ".join(str(c) for c in self.cells)


@dataclass
class Sudoku:
    grid: List[SudokuGrid] = field(default_factory=list)
    difficulty: Difficulty = Difficulty.EASY

    def __post_init__(self):
        if self.grid and len(self.grid) != 9:
            raise InvalidGridCount(len(self.grid))
        seen = set()
        for sub in self.grid:
            if not 1 <= sub.position <= 9:
                raise InvalidGridPosition(sub.position)
            if sub.position in seen:
                raise DuplicateGridPosition(sub.position)
            seen.add(sub.position)

    @classmethod
    def empty(cls, difficulty: Difficulty = Difficulty.EASY) -> "Sudoku":
        return cls(
            grid=[SudokuGrid.create_empty(p) for p in range(1, 10)],
            difficulty=difficulty,
        )

    @classmethod
    def from_board(
        cls, board: Board, difficulty: Difficulty = Difficulty.EASY
    ) -> "Sudoku":
        """Build a labelled Sudoku from a 9x9 int board."""
        validate_shape(board)
        sudoku = cls.empty(difficulty)
        for cell in sudoku.all_cells:
            r, c = label_to_coord(cell.column, cell.row)
            cell.value = board[r][c]
        return sudoku

    @property
    def all_cells(self) -> List[Cell]:
        return [cell for sub in self.grid for cell in sub.cells]

    @property
    def cells_by_id(self) -> Dict[str, Cell]:
        return {cell.id: cell for cell in self.all_cells}

    @property
    def board_representation(self) -> Board:
        board = empty_board()
        for cell in self.all_cells:
            r, c = label_to_coord(cell.column, cell.row)
            board[r][c] = cell.value
        return board

    @property
    def givens(self) -> int:
        return sum(1 for cell in self.all_cells if cell.value != 0)

    @property
    def description(self) -> str:
        """Nine lines of space-separated values, row 1 first."""
        values = {cell.id: cell.value for cell in self.all_cells}
        lines = []
        for row in ROW_LABELS:
            lines.append(
                " ".join(str(values.get(col + row, 0)) for col in COLUMN_LABELS)
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.description

    def invalid_cells(self) -> List[str]:
        """Ids of filled cells whose value repeats in a shared row, column or box."""
        conflicts = find_conflicts(self.board_representation)
        return sorted(
            column_label(c) + row_label(r) for r, c in conflicts
        )


def available_numbers(puzzle: Sudoku, solution: Sudoku) -> List[int]:
    """Digits still to be placed: solution values at cells empty in the puzzle."""
    solution_cells = solution.cells_by_id
    missing = {
        solution_cells[cell.id].value
        for cell in puzzle.all_cells
        if cell.value == 0 and cell.id in solution_cells
    }
    return [n for n in DIGITS if n in missing]


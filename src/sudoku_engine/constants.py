"""
Sudoku constants, difficulty table, and display utilities.
"""

from enum import Enum
from types import MappingProxyType
from typing import List


# ============================================================================
# Board geometry
# ============================================================================

SIZE = 9
BOX = 3
DIGITS = list(range(1, SIZE + 1))
CELL_COUNT = SIZE * SIZE

COLUMN_LABELS = "ABCDEFGHI"
ROW_LABELS = "123456789"


# ============================================================================
# Difficulty
# ============================================================================

class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def removal_count(self) -> int:
        """Target number of cells to clear from a solved board."""
        return REMOVAL_COUNTS[self]

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept a Difficulty, its value ("easy") or its name ("EASY")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(
                f"Unknown difficulty {value!r}; "
                f"expected one of {[d.value for d in cls]}"
            ) from None


# fewer cells removed -> more givens
REMOVAL_COUNTS = MappingProxyType({
    Difficulty.EASY: 30,
    Difficulty.MEDIUM: 40,
    Difficulty.HARD: 50,
})


# ============================================================================
# Reference solved grid (used by tests and docs)
# ============================================================================

EXAMPLE_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


# ============================================================================
# Display Utility
# ============================================================================


def format_grid(grid: List[List[int]], show_zeros: bool = True) -> str:
    """
    Format a 9x9 grid for display.

    Args:
        grid: 9x9 list of ints (0 = empty)
        show_zeros: If True, show 0s as '.'; if False, show raw numbers.

    Returns:
        Formatted multi-line string with box separators.
    """
    lines = []
    for i, row in enumerate(grid):
        cells = [
            "." if (cell == 0 and show_zeros) else str(cell) for cell in row
        ]
        chunks = [" ".join(cells[j:j + BOX]) for j in range(0, SIZE, BOX)]
        lines.append(" | ".join(chunks))
        if i in (2, 5):
            lines.append("------+-------+------")
    return "\n".join(lines)

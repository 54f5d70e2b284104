"""Exceptions raised by the Sudoku engine and its data layer."""


class SudokuError(Exception):
    """Base class for all engine errors."""


class GenerationFailure(SudokuError):
    def __init__(self, message: str = "Failed to generate a valid Sudoku puzzle"):
        super().__init__(message)


class GenerationCancelled(SudokuError):
    def __init__(self, message: str = "Sudoku generation was cancelled"):
        super().__init__(message)


# ============================================================================
# Construction / validation errors
# ============================================================================

class InvalidSudokuError(SudokuError, ValueError):
    """A cell, grid or puzzle was built with out-of-range data."""


class InvalidCellValue(InvalidSudokuError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Cell value must be between 0-9, got {value}")


class InvalidGridPosition(InvalidSudokuError):
    def __init__(self, position):
        self.position = position
        super().__init__(f"Grid position must be between 1-9, got {position}")


class InvalidCellCount(InvalidSudokuError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Each grid must contain exactly 9 cells, got {count}")


class InvalidGridCount(InvalidSudokuError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"A Sudoku puzzle must contain exactly 9 grids, got {count}"
        )


class DuplicateGridPosition(InvalidSudokuError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Duplicate grid position: {position}")


class InvalidColumnIdentifier(InvalidSudokuError):
    def __init__(self, column):
        self.column = column
        super().__init__(f"Column identifier must be A-I, got '{column}'")


class InvalidRowIdentifier(InvalidSudokuError):
    def __init__(self, row):
        self.row = row
        super().__init__(f"Row identifier must be 1-9, got '{row}'")

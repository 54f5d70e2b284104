from .board import Board, copy_board, count_givens, empty_board, symmetric_partner
from .config import GeneratorConfig, load_config, make_generator_config
from .constants import Difficulty, REMOVAL_COUNTS, EXAMPLE_SOLUTION, format_grid
from .errors import SudokuError, GenerationFailure, GenerationCancelled
from .generator import GeneratedPuzzle, SudokuGenerator
from .model import Cell, SudokuGrid, Sudoku, available_numbers
from .remover import reduce
from .solver import is_valid, solve_random, count_solutions, has_unique_solution
from .verifier import StrongVerifier
from .pregeneration import (
    PuzzleRecord, generate_puzzle_dataset,
    load_puzzle_data, analyze_puzzle_data,
)

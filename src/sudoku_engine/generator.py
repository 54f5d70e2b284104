"""
Sudoku puzzle generator.

Produces a solved grid by randomized backtracking, then strips symmetric
clue pairs while the puzzle keeps a unique solution. Each generator owns
its random source, so separate instances can run in separate threads.
"""

import threading
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from .board import Board, count_givens
from .config import GeneratorConfig
from .constants import CELL_COUNT, Difficulty, format_grid
from .model import Sudoku
from .remover import reduce
from .solver import solve_random


@dataclass
class GeneratedPuzzle:
    puzzle: Board
    solution: Board
    difficulty: Optional[Difficulty]
    removal_target: int
    generation_time_seconds: float = 0.0

    @property
    def givens(self) -> int:
        return count_givens(self.puzzle)

    @property
    def removed(self) -> int:
        return CELL_COUNT - self.givens

    def to_dict(self) -> Dict:
        return {
            "puzzle": self.puzzle,
            "solution": self.solution,
            "difficulty": self.difficulty.value if self.difficulty else None,
            "removal_target": self.removal_target,
            "givens": self.givens,
            "generation_time_seconds": self.generation_time_seconds,
        }


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class SudokuGenerator:
    """
    Random unique-solution Sudoku generator.

    - One RandomState per instance (seeded from config.seed when given).
    - ``generate`` returns raw boards; ``generate_sudoku`` returns the
      labelled (puzzle, solved) pair.
    - ``cancel_event`` is checked throughout the search.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.RandomState] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.config = config or GeneratorConfig()
        self.rng = rng if rng is not None else np.random.RandomState(self.config.seed)
        self.cancel_event = cancel_event
        self.call_count = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate_solved(self) -> Board:
        """Fully solved random grid. Raises GenerationFailure if none exists."""
        solved = solve_random(rng=self.rng, cancel_event=self.cancel_event)
        if self.config.verbose:
            print("Solved Sudoku:")
            print(format_grid(solved))
        return solved

    def reduce(self, solved: Board, removal_target: int) -> Board:
        """Clue-removal step with this generator's RNG and limits."""
        return reduce(
            solved,
            removal_target,
            rng=self.rng,
            limit=self.config.solution_limit,
            max_attempts=self.config.max_removal_attempts,
            cancel_event=self.cancel_event,
        )

    def generate_with_target(
        self, removal_target: int, difficulty: Optional[Difficulty] = None
    ) -> GeneratedPuzzle:
        """Generate a solved grid and reduce it by ``removal_target`` cells."""
        self.call_count += 1
        start_time = time.time()

        solution = self.generate_solved()
        puzzle = self.reduce(solution, removal_target)

        result = GeneratedPuzzle(
            puzzle=puzzle,
            solution=solution,
            difficulty=difficulty,
            removal_target=removal_target,
            generation_time_seconds=time.time() - start_time,
        )
        if self.config.verbose:
            print(
                f"✓ Puzzle #{self.call_count}: {result.givens} givens "
                f"(target removal {removal_target}), "
                f"{result.generation_time_seconds:.2f}s"
            )
        return result

    def generate(self, difficulty) -> GeneratedPuzzle:
        """Generate a puzzle at ``difficulty`` (Difficulty or its name)."""
        difficulty = Difficulty.parse(difficulty)
        return self.generate_with_target(difficulty.removal_count, difficulty)

    def generate_sudoku(self, difficulty) -> Tuple[Sudoku, Sudoku]:
        """Labelled (puzzle, solved) pair; the puzzle carries ``difficulty``."""
        result = self.generate(difficulty)
        puzzle = Sudoku.from_board(result.puzzle, result.difficulty)
        solved = Sudoku.from_board(result.solution, result.difficulty)
        return puzzle, solved

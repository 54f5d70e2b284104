import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from sudoku_engine.board import copy_board
from sudoku_engine.constants import EXAMPLE_SOLUTION


@pytest.fixture(autouse=True)
def _no_env_seed(monkeypatch):
    monkeypatch.delenv("SUDOKU_SEED", raising=False)


@pytest.fixture
def solved_board():
    return copy_board(EXAMPLE_SOLUTION)


@pytest.fixture
def rng():
    return np.random.RandomState(42)

"""
Sudoku generator configuration.

Settings can come from defaults, a YAML file, keyword overrides, or
(for the seed) the SUDOKU_SEED environment variable.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from .constants import Difficulty


@dataclass
class GeneratorConfig:
    """Configuration for puzzle generation."""

    # Random seed; None means read SUDOKU_SEED, else unseeded
    seed: Optional[int] = None

    # Uniqueness oracle bound (2 is enough to tell unique from ambiguous)
    solution_limit: int = 2

    # Optional cap on coordinate draws per clue-removal run
    max_removal_attempts: Optional[int] = None

    verbose: bool = False

    # Batch generation settings
    puzzles_per_difficulty: int = 10
    difficulties: List[str] = field(
        default_factory=lambda: [d.value for d in Difficulty]
    )
    parallelism: int = 4
    checkpoint_every: int = 10

    def __post_init__(self):
        if self.seed is None:
            env_seed = os.getenv("SUDOKU_SEED", "")
            if env_seed:
                self.seed = int(env_seed)
        if self.solution_limit < 2:
            raise ValueError(
                f"solution_limit must be >= 2 to detect ambiguity, got {self.solution_limit}"
            )
        if self.max_removal_attempts is not None and self.max_removal_attempts < 1:
            raise ValueError("max_removal_attempts must be positive or None")
        if self.parallelism < 1:
            raise ValueError("parallelism must be >= 1")
        if self.checkpoint_every < 1:
            raise ValueError("checkpoint_every must be >= 1")
        # Fail early on unknown names
        self.difficulties = [Difficulty.parse(d).value for d in self.difficulties]

    @property
    def difficulty_levels(self) -> List[Difficulty]:
        return [Difficulty(d) for d in self.difficulties]


def load_config(yaml_path: str) -> dict:
    """Load generator settings from a YAML file."""
    with open(yaml_path, "r") as f:
        return yaml.safe_load(f) or {}


def make_generator_config(yaml_path: str = None, **overrides) -> GeneratorConfig:
    """
    Create a GeneratorConfig from an optional YAML file plus overrides.

    Unknown keys are ignored. Keyword overrides win over file values.
    """
    values = load_config(yaml_path) if yaml_path else {}
    values.update(overrides)
    known = GeneratorConfig.__dataclass_fields__
    return GeneratorConfig(**{k: v for k, v in values.items() if k in known})

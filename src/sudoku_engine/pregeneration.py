"""
Batch pre-generation of Sudoku puzzles.

Generates a dataset of puzzles for several difficulties in a thread pool:
- Each task owns its generator and RandomState (seed derived from the
  base seed and the task index), so results are reproducible.
- Every puzzle is re-verified (solution validity, uniqueness, symmetry).

Supports checkpointing, resume, and appending additional puzzles.
"""

import json
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from .config import GeneratorConfig
from .constants import Difficulty
from .generator import SudokuGenerator
from .verifier import StrongVerifier


# ============================================================================
# Thread-safe counter
# ============================================================================

class AtomicCounter:
    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


# ============================================================================
# Data classes
# ============================================================================

@dataclass
class PuzzleRecord:
    puzzle_id: str
    difficulty: str
    removal_target: int
    puzzle: List[List[int]]
    solution: List[List[int]]
    givens: int
    is_unique: bool
    is_symmetric: bool
    seed: Optional[int] = None
    generation_time_seconds: float = 0.0

    def to_dict(self) -> Dict:
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "removal_target": self.removal_target,
            "puzzle": self.puzzle,
            "solution": self.solution,
            "givens": self.givens,
            "is_unique": self.is_unique,
            "is_symmetric": self.is_symmetric,
            "seed": self.seed,
            "generation_time_seconds": self.generation_time_seconds,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "PuzzleRecord":
        return cls(
            puzzle_id=data["puzzle_id"], difficulty=data["difficulty"],
            removal_target=data["removal_target"], puzzle=data["puzzle"],
            solution=data["solution"], givens=data["givens"],
            is_unique=data["is_unique"], is_symmetric=data["is_symmetric"],
            seed=data.get("seed"),
            generation_time_seconds=data.get("generation_time_seconds", 0.0),
        )


# ============================================================================
# Single-puzzle generation (thread worker)
# ============================================================================

def task_seed(base_seed: Optional[int], index: int) -> Optional[int]:
    """
    Seed for the ``index``-th task, or None when the batch is unseeded.

    Mixes (base_seed, index) through a SeedSequence so different base seeds
    never share task seeds by construction.
    """
    if base_seed is None:
        return None
    return int(np.random.SeedSequence([base_seed, index]).generate_state(1)[0])


def generate_single_puzzle(
    puzzle_id: str,
    difficulty: Difficulty,
    seed: Optional[int],
    config: GeneratorConfig,
) -> PuzzleRecord:
    """Generate and verify one puzzle (called inside thread pool)."""
    generator = SudokuGenerator(config, rng=np.random.RandomState(seed))
    result = generator.generate(difficulty)

    solved_ok, msg = StrongVerifier.verify_complete_solution(
        result.puzzle, result.solution
    )
    if not solved_ok:
        raise RuntimeError(f"Generated solution failed verification: {msg}")
    is_unique, _ = StrongVerifier.verify_unique_solution(result.puzzle)
    is_symmetric, _ = StrongVerifier.verify_symmetry(result.puzzle)

    return PuzzleRecord(
        puzzle_id=puzzle_id,
        difficulty=difficulty.value,
        removal_target=result.removal_target,
        puzzle=result.puzzle,
        solution=result.solution,
        givens=result.givens,
        is_unique=is_unique,
        is_symmetric=is_symmetric,
        seed=seed,
        generation_time_seconds=result.generation_time_seconds,
    )


# ============================================================================
# Checkpointing helpers
# ============================================================================

def _get_checkpoint_path(save_path: str) -> str:
    base, ext = os.path.splitext(save_path)
    return f"{base}_checkpoint{ext}"


def _save_checkpoint(records, metadata, checkpoint_path):
    data = {
        "metadata": metadata,
        "completed_puzzle_ids": [r.puzzle_id for r in records],
        "puzzles": [r.to_dict() for r in records],
        "checkpoint_time": time.strftime("%Y-%m-%d %H:%M:%S"),
    }
    temp_path = checkpoint_path + ".tmp"
    with open(temp_path, "w") as f:
        json.dump(data, f)
    os.replace(temp_path, checkpoint_path)
    print(f"💾 Checkpoint: {len(records)} puzzles saved")


def _load_records_from_json(data: dict) -> List[PuzzleRecord]:
    return [PuzzleRecord.from_dict(d) for d in data.get("puzzles", [])]


def _load_existing_data(path: str) -> Tuple[List[PuzzleRecord], Set[str]]:
    if not os.path.exists(path):
        return [], set()
    with open(path, "r") as f:
        data = json.load(f)
    records = _load_records_from_json(data)
    return records, {r.puzzle_id for r in records}


# ============================================================================
# Main generation function
# ============================================================================

def _plan_tasks(
    difficulties: List[Difficulty],
    target_per_difficulty: Dict[Difficulty, int],
    completed_ids: Set[str],
    base_seed: Optional[int],
) -> List[Tuple[str, Difficulty, Optional[int]]]:
    """(puzzle_id, difficulty, seed) for every puzzle not generated yet."""
    tasks = []
    for d_idx, difficulty in enumerate(difficulties):
        for i in range(target_per_difficulty[difficulty]):
            puzzle_id = f"{difficulty.value}_{i}"
            if puzzle_id in completed_ids:
                continue
            index = d_idx * 100000 + i
            tasks.append((puzzle_id, difficulty, task_seed(base_seed, index)))
    return tasks


def generate_puzzle_dataset(
    config: Optional[GeneratorConfig] = None,
    num_per_difficulty: int = None,
    num_additional: int = None,
    save_path: Optional[str] = None,
    resume_from_checkpoint: bool = True,
    show_progress: bool = True,
) -> List[PuzzleRecord]:
    """
    Generate puzzles for every configured difficulty in parallel.

    Args:
        config: GeneratorConfig (difficulties, seed, parallelism, ...).
        num_per_difficulty: Total puzzles wanted per difficulty. Defaults to
            config.puzzles_per_difficulty.
        num_additional: Add this many NEW puzzles per difficulty on top of
            what save_path already holds (use this OR num_per_difficulty).
        save_path: Path to save JSON results.
        resume_from_checkpoint: Whether to resume from a checkpoint file.
        show_progress: Show a tqdm progress bar.

    Returns:
        List of PuzzleRecord objects, sorted by puzzle id.
    """
    config = config or GeneratorConfig()
    if num_per_difficulty is not None and num_additional is not None:
        raise ValueError("Specify only one of num_per_difficulty or num_additional")
    difficulties = config.difficulty_levels

    # Load existing data
    existing: List[PuzzleRecord] = []
    completed_ids: Set[str] = set()

    if save_path and os.path.exists(save_path):
        print(f"📂 Loading existing data from {save_path}...")
        existing, completed_ids = _load_existing_data(save_path)
        print(f"   Found {len(existing)} existing puzzles")

    checkpoint_path = _get_checkpoint_path(save_path) if save_path else None
    if resume_from_checkpoint and checkpoint_path and os.path.exists(checkpoint_path):
        print("📂 Found checkpoint, loading...")
        cp_records, _ = _load_existing_data(checkpoint_path)
        for record in cp_records:
            if record.puzzle_id not in completed_ids:
                existing.append(record)
                completed_ids.add(record.puzzle_id)
        print(f"   After merging: {len(existing)} puzzles")

    target: Dict[Difficulty, int] = {}
    for difficulty in difficulties:
        have = sum(1 for r in existing if r.difficulty == difficulty.value)
        if num_additional is not None:
            target[difficulty] = have + num_additional
        elif num_per_difficulty is not None:
            target[difficulty] = num_per_difficulty
        else:
            target[difficulty] = config.puzzles_per_difficulty

    tasks = _plan_tasks(difficulties, target, completed_ids, config.seed)

    print(f"\n{'=' * 70}")
    print("PUZZLE GENERATION")
    print(f"{'=' * 70}")
    print(f"  Existing: {len(existing)} puzzles")
    print(f"  Difficulties: {[d.value for d in difficulties]}")
    print(f"  To generate: {len(tasks)} puzzles")
    print(f"  Parallelism: {config.parallelism} threads")
    print(f"{'=' * 70}\n")

    metadata = {
        "difficulties": [d.value for d in difficulties],
        "removal_targets": {d.value: d.removal_count for d in difficulties},
        "base_seed": config.seed,
        "solution_limit": config.solution_limit,
        "max_removal_attempts": config.max_removal_attempts,
    }

    if not tasks:
        print("✅ Already have enough puzzles!")
        return sorted(existing, key=lambda r: r.puzzle_id)

    start_time = time.time()
    results = list(existing)
    progress = AtomicCounter(len(existing))
    failures = 0

    with ThreadPoolExecutor(max_workers=config.parallelism) as executor:
        futures = {
            executor.submit(generate_single_puzzle, pid, diff, seed, config): pid
            for pid, diff, seed in tasks
        }
        for future in tqdm(
            as_completed(futures), total=len(futures),
            desc="Generating", disable=not show_progress,
        ):
            puzzle_id = futures[future]
            try:
                results.append(future.result())
                count = progress.increment()
            except Exception as e:
                failures += 1
                print(f"  ❌ Puzzle {puzzle_id} failed: {e}")
                continue
            if save_path and count % config.checkpoint_every == 0:
                _save_checkpoint(results, metadata, checkpoint_path)

    total_time = time.time() - start_time
    results.sort(key=lambda r: r.puzzle_id)

    print(f"\n{'=' * 70}")
    print("✅ COMPLETE")
    print(f"{'=' * 70}")
    print(f"  Previously had: {len(existing)}")
    print(f"  Newly generated: {len(results) - len(existing)}")
    print(f"  Failed: {failures}")
    print(f"  Total now: {len(results)}")
    print(f"  Time: {total_time:.1f}s")

    if save_path:
        metadata["total_time_seconds"] = total_time
        with open(save_path, "w") as f:
            json.dump(
                {"metadata": metadata, "puzzles": [r.to_dict() for r in results]},
                f,
                indent=2,
            )
        print(f"\n✓ Saved {len(results)} puzzles to {save_path}")
        if os.path.exists(checkpoint_path):
            os.remove(checkpoint_path)

    return results


# ============================================================================
# Load and analyse
# ============================================================================

def load_puzzle_data(path: str):
    """Load puzzle data from JSON. Returns (records, metadata)."""
    with open(path, "r") as f:
        data = json.load(f)
    return _load_records_from_json(data), data.get("metadata", {})


def records_to_frame(records: List[PuzzleRecord]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "puzzle_id": r.puzzle_id,
            "difficulty": r.difficulty,
            "removal_target": r.removal_target,
            "givens": r.givens,
            "is_unique": r.is_unique,
            "is_symmetric": r.is_symmetric,
            "generation_time_seconds": r.generation_time_seconds,
        }
        for r in records
    ])


def analyze_puzzle_data(records: List[PuzzleRecord]) -> Dict:
    """Print and return summary statistics per difficulty."""
    df = records_to_frame(records)

    print(f"\n{'=' * 70}")
    print("ANALYSIS")
    print(f"{'=' * 70}")
    print(f"Puzzles: {len(df)}")
    if df.empty:
        return {"total_puzzles": 0, "by_difficulty": {}}

    print(f"Unique: {df['is_unique'].mean():.2%}")
    print(f"Symmetric: {df['is_symmetric'].mean():.2%}")
    print("\nBy Difficulty:")

    by_difficulty = {}
    order = [d.value for d in Difficulty if d.value in set(df["difficulty"])]
    for name in order:
        sub = df[df["difficulty"] == name]
        stats = {
            "count": int(len(sub)),
            "removal_target": int(sub["removal_target"].iloc[0]),
            "mean_givens": float(sub["givens"].mean()),
            "min_givens": int(sub["givens"].min()),
            "max_givens": int(sub["givens"].max()),
            "unique_rate": float(sub["is_unique"].mean()),
            "mean_time_seconds": float(sub["generation_time_seconds"].mean()),
        }
        by_difficulty[name] = stats
        print(
            f"  {name}: givens={stats['mean_givens']:.1f} "
            f"[{stats['min_givens']}-{stats['max_givens']}], "
            f"unique={stats['unique_rate']:.0%}, "
            f"time={stats['mean_time_seconds']:.2f}s"
        )

    return {
        "total_puzzles": int(len(df)),
        "unique_rate": float(df["is_unique"].mean()),
        "by_difficulty": by_difficulty,
    }

import json
import os

import pytest

from sudoku_engine.config import GeneratorConfig
from sudoku_engine.constants import Difficulty
from sudoku_engine import pregeneration
from sudoku_engine.pregeneration import (
    AtomicCounter,
    PuzzleRecord,
    analyze_puzzle_data,
    generate_puzzle_dataset,
    generate_single_puzzle,
    load_puzzle_data,
    task_seed,
)
from tests.helpers import assert_solved, assert_symmetric


def _config(**overrides):
    values = dict(seed=7, difficulties=["easy"], puzzles_per_difficulty=2, parallelism=2)
    values.update(overrides)
    return GeneratorConfig(**values)


def test_atomic_counter():
    counter = AtomicCounter(3)
    assert counter.increment() == 4
    assert counter.value == 4


def test_task_seed():
    assert task_seed(None, 5) is None
    assert task_seed(2, 5) == task_seed(2, 5)
    assert 0 <= task_seed(2, 5) < 2 ** 32


def test_task_seeds_do_not_collide_across_base_seeds():
    # Second difficulty of base 7 against first difficulty of base 107.
    assert task_seed(7, 100000) != task_seed(107, 0)
    seeds = {task_seed(base, index) for base in range(20) for index in (0, 1, 100000, 100001)}
    assert len(seeds) == 80


def test_generate_single_puzzle_is_verified():
    record = generate_single_puzzle("easy_0", Difficulty.EASY, 3, GeneratorConfig())
    assert record.is_unique
    assert record.is_symmetric
    assert record.removal_target == 30
    assert record.seed == 3
    assert_solved(record.solution)
    assert_symmetric(record.puzzle)
    assert PuzzleRecord.from_dict(record.to_dict()) == record


def test_dataset_saved_and_reloaded(tmp_path):
    save_path = str(tmp_path / "puzzles.json")

    records = generate_puzzle_dataset(_config(), save_path=save_path, show_progress=False)

    assert [r.puzzle_id for r in records] == ["easy_0", "easy_1"]
    assert all(r.is_unique and r.is_symmetric for r in records)
    assert os.path.exists(save_path)
    assert not os.path.exists(str(tmp_path / "puzzles_checkpoint.json"))

    loaded, metadata = load_puzzle_data(save_path)
    assert loaded == records
    assert metadata["base_seed"] == 7
    assert metadata["removal_targets"] == {"easy": 30}


def test_dataset_is_reproducible():
    first = generate_puzzle_dataset(_config(), show_progress=False)
    second = generate_puzzle_dataset(_config(parallelism=1), show_progress=False)
    assert [r.puzzle for r in first] == [r.puzzle for r in second]


def test_append_mode_only_generates_new_puzzles(tmp_path):
    save_path = str(tmp_path / "puzzles.json")
    first = generate_puzzle_dataset(_config(), save_path=save_path, show_progress=False)

    more = generate_puzzle_dataset(
        _config(), num_additional=1, save_path=save_path, show_progress=False
    )

    assert [r.puzzle_id for r in more] == ["easy_0", "easy_1", "easy_2"]
    assert more[:2] == first


def test_existing_data_short_circuits(tmp_path, capsys):
    save_path = str(tmp_path / "puzzles.json")
    generate_puzzle_dataset(_config(), save_path=save_path, show_progress=False)

    again = generate_puzzle_dataset(_config(), save_path=save_path, show_progress=False)

    assert len(again) == 2
    assert "Already have enough puzzles" in capsys.readouterr().out


def test_resume_merges_checkpoint(tmp_path):
    save_path = str(tmp_path / "puzzles.json")
    record = generate_single_puzzle("easy_1", Difficulty.EASY, 11, GeneratorConfig())
    with open(str(tmp_path / "puzzles_checkpoint.json"), "w") as f:
        json.dump({"metadata": {}, "puzzles": [record.to_dict()]}, f)

    records = generate_puzzle_dataset(_config(), save_path=save_path, show_progress=False)

    assert [r.puzzle_id for r in records] == ["easy_0", "easy_1"]
    assert records[1] == record


def test_failed_task_is_reported_and_skipped(monkeypatch, capsys):
    real = pregeneration.generate_single_puzzle

    def flaky(puzzle_id, difficulty, seed, config):
        if puzzle_id == "easy_1":
            raise RuntimeError("boom")
        return real(puzzle_id, difficulty, seed, config)

    monkeypatch.setattr(pregeneration, "generate_single_puzzle", flaky)

    records = generate_puzzle_dataset(_config(), show_progress=False)

    assert [r.puzzle_id for r in records] == ["easy_0"]
    assert "Puzzle easy_1 failed: boom" in capsys.readouterr().out


def test_rejects_both_counts():
    with pytest.raises(ValueError):
        generate_puzzle_dataset(_config(), num_per_difficulty=1, num_additional=1)


def test_analyze_puzzle_data():
    records = generate_puzzle_dataset(
        _config(difficulties=["easy", "medium"], puzzles_per_difficulty=1),
        show_progress=False,
    )

    summary = analyze_puzzle_data(records)

    assert summary["total_puzzles"] == 2
    assert summary["unique_rate"] == 1.0
    assert list(summary["by_difficulty"]) == ["easy", "medium"]
    assert summary["by_difficulty"]["easy"]["removal_target"] == 30
    assert summary["by_difficulty"]["easy"]["mean_givens"] > \
        summary["by_difficulty"]["medium"]["mean_givens"]


def test_analyze_empty():
    assert analyze_puzzle_data([])["total_puzzles"] == 0

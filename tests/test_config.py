import pytest

from sudoku_engine.config import GeneratorConfig, load_config, make_generator_config
from sudoku_engine.constants import Difficulty


def test_defaults():
    cfg = GeneratorConfig()
    assert cfg.seed is None
    assert cfg.solution_limit == 2
    assert cfg.max_removal_attempts is None
    assert cfg.difficulty_levels == [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD]


def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv("SUDOKU_SEED", "321")
    assert GeneratorConfig().seed == 321
    assert GeneratorConfig(seed=5).seed == 5


def test_difficulty_names_are_normalised():
    cfg = GeneratorConfig(difficulties=["HARD", "easy"])
    assert cfg.difficulties == ["hard", "easy"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"solution_limit": 1},
        {"max_removal_attempts": 0},
        {"parallelism": 0},
        {"checkpoint_every": 0},
        {"difficulties": ["expert"]},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(ValueError):
        GeneratorConfig(**overrides)


def test_yaml_config_with_overrides(tmp_path):
    path = tmp_path / "generator.yaml"
    path.write_text(
        "seed: 17\n"
        "parallelism: 2\n"
        "difficulties: [easy, hard]\n"
        "unknown_key: ignored\n"
    )
    assert load_config(str(path))["seed"] == 17

    cfg = make_generator_config(str(path), parallelism=3)
    assert cfg.seed == 17
    assert cfg.parallelism == 3
    assert cfg.difficulties == ["easy", "hard"]


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert make_generator_config(str(path)) == GeneratorConfig()

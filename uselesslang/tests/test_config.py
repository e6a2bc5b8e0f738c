import dataclasses

import pytest

from uselesslang.config import DEFAULT_URLS, ChaosConfig, load_config


def test_defaults():
    config = ChaosConfig()
    assert config.teapot == 0.1
    assert config.print_browser == 0.5
    assert config.exit_max_iterations == 100
    assert config.promise_max_delay_ms == 100
    assert config.seed is None
    assert len(config.urls) == 10


def test_tame_zeroes_every_probability():
    config = ChaosConfig.tame()
    probabilities = [f.name for f in dataclasses.fields(ChaosConfig) if f.type is float]
    assert probabilities
    assert all(getattr(config, name) == 0.0 for name in probabilities)
    assert config.exit_max_iterations == 100
    assert config.urls == DEFAULT_URLS


def test_tame_accepts_overrides():
    config = ChaosConfig.tame(teapot=1.0, exit_max_iterations=3)
    assert config.teapot == 1.0
    assert config.perfectly_wrong == 0.0
    assert config.exit_max_iterations == 3


def test_config_is_immutable():
    config = ChaosConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.teapot = 0.0
    assert config.with_overrides(teapot=0.0).teapot == 0.0
    assert config.teapot == 0.1


def test_load_config_from_environment():
    config = load_config({
        "UPL_SEED": "42",
        "UPL_EXIT_MAX_ITERATIONS": "5",
        "UPL_PROMISE_MAX_DELAY_MS": " ",
    })
    assert config.seed == 42
    assert config.exit_max_iterations == 5
    assert config.promise_max_delay_ms == 100


def test_load_config_rejects_non_integers():
    with pytest.raises(ValueError) as exc_info:
        load_config({"UPL_EXIT_MAX_ITERATIONS": "lots"})
    assert "UPL_EXIT_MAX_ITERATIONS" in str(exc_info.value)


@pytest.mark.parametrize("name", ["UPL_EXIT_MAX_ITERATIONS", "UPL_PROMISE_MAX_DELAY_MS"])
def test_load_config_rejects_negative_limits(name):
    with pytest.raises(ValueError) as exc_info:
        load_config({name: "-5"})
    assert f"{name} must not be negative" in str(exc_info.value)


def test_negative_seed_is_allowed():
    assert load_config({"UPL_SEED": "-5"}).seed == -5

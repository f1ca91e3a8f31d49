"""Unit tests for /src/core/config.py"""

import pytest

from src.core.config import SimulatorSettings
from src.core.exceptions import ConfigurationError
from src.core.shared_types import GameMode


def test_defaults() -> None:
    settings = SimulatorSettings()
    assert settings.mode == GameMode.STRATEGIC
    assert settings.queue_capacity == 5
    assert settings.stack_capacity == 3
    assert settings.batch_size == 3
    assert settings.seed is None
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize("field", ["queue_capacity", "stack_capacity", "batch_size"])
def test_sizes_must_be_positive(field: str) -> None:
    with pytest.raises(ConfigurationError):
        _ = SimulatorSettings(**{field: 0})


def test_batch_must_fit_the_stack() -> None:
    with pytest.raises(ConfigurationError):
        _ = SimulatorSettings(stack_capacity=2)


def test_batch_must_fit_the_queue() -> None:
    with pytest.raises(ConfigurationError):
        _ = SimulatorSettings(queue_capacity=2, batch_size=3)


def test_batch_size_ignored_without_swaps() -> None:
    """Only the strategic variant exchanges batches"""
    settings = SimulatorSettings(mode=GameMode.RESERVE, stack_capacity=2)
    assert settings.stack_capacity == 2


def test_log_level_is_normalized() -> None:
    assert SimulatorSettings(log_level="debug").log_level == "DEBUG"


def test_unknown_log_level() -> None:
    with pytest.raises(ConfigurationError):
        _ = SimulatorSettings(log_level="chatty")


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TETRIS_MODE", "reserve")
    monkeypatch.setenv("TETRIS_QUEUE_SIZE", "7")
    monkeypatch.setenv("TETRIS_STACK_SIZE", "4")
    monkeypatch.setenv("TETRIS_SEED", "11")
    monkeypatch.setenv("TETRIS_LOG_LEVEL", "info")
    settings = SimulatorSettings.from_env()
    assert settings.mode == GameMode.RESERVE
    assert settings.queue_capacity == 7
    assert settings.stack_capacity == 4
    assert settings.batch_size == 3
    assert settings.seed == 11
    assert settings.log_level == "INFO"


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in ["TETRIS_MODE", "TETRIS_QUEUE_SIZE", "TETRIS_STACK_SIZE", "TETRIS_BATCH_SIZE", "TETRIS_SEED", "TETRIS_LOG_LEVEL"]:
        monkeypatch.delenv(variable, raising=False)
    assert SimulatorSettings.from_env() == SimulatorSettings()

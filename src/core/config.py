"""
Settings of the simulator.

Defaults can be overridden with TETRIS_* environment variables (or on the command line, see src/cli/menu.py).
"""

import os
from typing import Optional, Self

from loguru import logger
from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import ConfigurationError
from src.core.shared_types import GameMode
from src.tetris.exchange import BATCH_SIZE
from src.tetris.piece_queue import QUEUE_CAPACITY
from src.tetris.reserve_stack import STACK_CAPACITY

# environment variable -> setting
ENV_VARIABLES: dict[str, str] = {
    "TETRIS_MODE": "mode",
    "TETRIS_QUEUE_SIZE": "queue_capacity",
    "TETRIS_STACK_SIZE": "stack_capacity",
    "TETRIS_BATCH_SIZE": "batch_size",
    "TETRIS_SEED": "seed",
    "TETRIS_LOG_LEVEL": "log_level",
}


class SimulatorSettings(BaseModel):
    mode: GameMode = GameMode.STRATEGIC
    queue_capacity: int = QUEUE_CAPACITY
    stack_capacity: int = STACK_CAPACITY
    batch_size: int = BATCH_SIZE
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @field_validator("queue_capacity", "stack_capacity", "batch_size")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ConfigurationError(f"Sizes must be at least 1, got {value}.")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        try:
            logger.level(level)
        except ValueError as e:
            raise ConfigurationError(f"Unknown log level: {value!r}") from e
        return level

    @model_validator(mode="after")
    def validate_batch_fits(self) -> Self:
        """The batch exchange can never happen if one of the containers is too small to hold a full batch."""
        if self.mode == GameMode.STRATEGIC and self.batch_size > min(
            self.queue_capacity, self.stack_capacity
        ):
            raise ConfigurationError(
                f"Batch size {self.batch_size} does not fit queue ({self.queue_capacity}) and stack ({self.stack_capacity})."
            )
        return self

    @classmethod
    def from_env(cls) -> Self:
        """Read the overrides that are present in the environment; anything missing keeps its default."""
        overrides = {
            name: os.environ[variable]
            for variable, name in ENV_VARIABLES.items()
            if variable in os.environ
        }
        return cls.model_validate(overrides)

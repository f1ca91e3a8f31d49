"""Defines the pieces waiting in the queue / held in reserve"""

from dataclasses import dataclass
from enum import Enum


class PieceType(Enum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    L = "L"


# The symbols a new piece is drawn from
PIECE_TYPES: tuple[PieceType, ...] = tuple(PieceType)


@dataclass(frozen=True)
class Piece:
    type: PieceType
    id: int

    def __post_init__(self):
        if self.id < 0:
            raise ValueError(f"Piece id must be non-negative, got {self.id}")

    def to_display(self) -> str:
        return f"[{self.type.value} {self.id}]"

"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidActionError
from src.core.shared_types import MENUS, Action, FailureReason, GameMode
from src.tetris.pieces import Piece, PieceType


# --- REQUEST MODELS ---
class ActionRequest(BaseModel):
    action: Action

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: object) -> object:
        if isinstance(value, str) and value not in {a.value for a in Action}:
            raise InvalidActionError(
                f"Unknown action: {value!r}. Pick one from {', '.join(a.value for a in Action)}."
            )
        return value

    @classmethod
    def from_menu_code(cls, code: int, mode: GameMode) -> Self:
        """The player types a number; what it means depends on the menu of the game mode."""
        menu = MENUS[mode]
        if code not in menu:
            raise InvalidActionError(f"Invalid option {code} in {mode} mode.")
        return cls(action=menu[code])


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    type: str
    id: int

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(type=piece.type.value, id=piece.id)

    def to_piece(self) -> Piece:
        return Piece(PieceType(self.type), self.id)


class StateResponse(BaseModel):
    mode: GameMode
    queue: list[PieceView]  # front to back
    reserve: list[PieceView]  # top to base
    queue_capacity: int
    stack_capacity: int


class ActionResponse(BaseModel):
    action: Action
    success: bool
    failure: Optional[FailureReason] = None
    pieces: list[PieceView] = []
    message: str
    state: StateResponse
    exit_requested: bool = False

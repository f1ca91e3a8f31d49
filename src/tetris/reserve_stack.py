"""The reserve: pieces put aside by the player, last in first out."""

from typing import Iterator, Optional

from src.core.exceptions import ConfigurationError, PieceIndexError
from src.tetris.pieces import Piece

STACK_CAPACITY = 3


class BoundedStack:
    """
    Stack of pieces stored base-up in a fixed number of slots.
    `top` is -1 for an empty stack, capacity - 1 for a full one.
    """

    def __init__(self, capacity: int = STACK_CAPACITY) -> None:
        if capacity < 1:
            raise ConfigurationError(f"Stack capacity must be at least 1, got {capacity}")
        self._slots: list[Optional[Piece]] = [None] * capacity
        self._top = -1

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def top(self) -> int:
        return self._top

    @property
    def count(self) -> int:
        return self._top + 1

    def is_empty(self) -> bool:
        return self._top == -1

    def is_full(self) -> bool:
        return self._top == self.capacity - 1

    def push(self, piece: Piece) -> bool:
        if self.is_full():
            return False
        self._top += 1
        self._slots[self._top] = piece
        return True

    def pop(self) -> Optional[Piece]:
        if self.is_empty():
            return None
        piece = self._slots[self._top]
        self._slots[self._top] = None
        self._top -= 1
        return piece

    def peek(self) -> Piece:
        """The piece that would be popped next"""
        return self.peek_at(self._top)

    def peek_at(self, index: int) -> Piece:
        """Piece at `index`, counted from the base (0 = oldest piece)"""
        self._check_index(index)
        piece = self._slots[index]
        assert piece is not None
        return piece

    def replace_at(self, index: int, piece: Piece) -> Piece:
        """Overwrite an occupied slot (counted from the base) and return the previous piece"""
        self._check_index(index)
        previous = self._slots[index]
        assert previous is not None
        self._slots[index] = piece
        return previous

    def snapshot(self) -> list[Piece]:
        """Copy of the pieces, top to base"""
        return list(self)

    def _check_index(self, index: int) -> None:
        """Slots 0..top always hold a piece, so an index that passes this check is never an empty slot"""
        if not 0 <= index <= self._top:
            raise PieceIndexError(
                f"No piece at stack index {index} (stack holds {self.count})."
            )

    def __iter__(self) -> Iterator[Piece]:
        for index in range(self._top, -1, -1):
            yield self.peek_at(index)

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        pieces = " ".join(piece.to_display() for piece in self)
        return f"BoundedStack({self.count}/{self.capacity}: {pieces})"

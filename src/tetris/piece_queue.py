"""
The queue of future pieces: a fixed size ring buffer.

Logical position i (0 = front, next piece to be played) lives in slot (front + i) % capacity.
The next free slot (`back`) is never stored, it always follows from front and count.
"""

from typing import Iterator, Optional

from src.core.exceptions import ConfigurationError, PieceIndexError
from src.tetris.pieces import Piece

QUEUE_CAPACITY = 5


class CircularQueue:
    """FIFO of pieces with a fixed number of slots."""

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ConfigurationError(f"Queue capacity must be at least 1, got {capacity}")
        self._slots: list[Optional[Piece]] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def front(self) -> int:
        """Slot index of the piece that will be dequeued next"""
        return self._front

    @property
    def count(self) -> int:
        return self._count

    @property
    def back(self) -> int:
        """Slot index where the next enqueued piece goes"""
        return (self._front + self._count) % self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def enqueue(self, piece: Piece) -> bool:
        """Add a piece at the back. Returns False (and leaves the queue alone) when there is no room."""
        if self.is_full():
            return False
        self._slots[self.back] = piece
        self._count += 1
        return True

    def dequeue(self) -> Optional[Piece]:
        """Remove the piece at the front. Returns None (and leaves the queue alone) when there is nothing to remove."""
        if self.is_empty():
            return None
        piece = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return piece

    def peek_front(self) -> Piece:
        return self.peek_at(0)

    def peek_at(self, position: int) -> Piece:
        """Piece at logical position (0 = front)"""
        piece = self._slots[self._slot(position)]
        assert piece is not None
        return piece

    def replace_at(self, position: int, piece: Piece) -> Piece:
        """Put a piece at an occupied logical position and hand back the one that was there.

        Used by the exchange operations: occupancy does not change.
        """
        slot = self._slot(position)
        previous = self._slots[slot]
        assert previous is not None
        self._slots[slot] = piece
        return previous

    def snapshot(self) -> list[Piece]:
        """Copy of the pieces, front to back"""
        return list(self)

    def _slot(self, position: int) -> int:
        """Translate a logical position into a slot index.

        Only positions 0..count-1 are accepted, and those slots always hold a piece.
        """
        if not 0 <= position < self._count:
            raise PieceIndexError(
                f"No piece at queue position {position} (queue holds {self._count})."
            )
        return (self._front + position) % self.capacity

    def __iter__(self) -> Iterator[Piece]:
        for position in range(self._count):
            yield self.peek_at(position)

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        pieces = " ".join(piece.to_display() for piece in self)
        return f"CircularQueue({self._count}/{self.capacity}: {pieces})"

"""Where new pieces come from"""

import random
from typing import Optional, Protocol, Sequence

from src.tetris.pieces import PIECE_TYPES, Piece, PieceType


class PieceSource(Protocol):
    """Anything that can hand out fresh pieces (a random generator, or a fixed list in tests)"""

    def generate(self) -> Piece:
        """Create a new piece. Every call gives a piece with an id never handed out before."""
        ...


class IdCounter:
    """Hands out 0, 1, 2, ... Ids are never reused, unless explicitly reset."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def next_id(self) -> int:
        current = self._next
        self._next += 1
        return current

    def reset(self, start: int = 0) -> None:
        self._next = start


class PieceGenerator:
    """Draw the piece type uniformly from the alphabet, and number the pieces in order of creation."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        counter: Optional[IdCounter] = None,
        alphabet: Sequence[PieceType] = PIECE_TYPES,
    ) -> None:
        self.rng = rng or random.Random()
        self.counter = counter or IdCounter()
        self.alphabet = tuple(alphabet)

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "PieceGenerator":
        return cls(rng=random.Random(seed))

    def generate(self) -> Piece:
        piece_type = self.rng.choice(self.alphabet)
        return Piece(piece_type, self.counter.next_id())

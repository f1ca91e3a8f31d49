"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Iterable, Iterator

import pytest

from src.tetris.generator import IdCounter
from src.tetris.piece_queue import CircularQueue
from src.tetris.pieces import Piece, PieceType
from src.tetris.reserve_stack import BoundedStack


class FixedPieceSource:
    """Mock the PieceSource: cycles through the given piece types, ids count up from `start`."""

    def __init__(self, types: Iterable[PieceType] = tuple(PieceType), start: int = 0) -> None:
        self._types = list(types)
        self.counter = IdCounter(start)
        self.generated: list[Piece] = []

    def generate(self) -> Piece:
        piece_id = self.counter.next_id()
        piece = Piece(self._types[piece_id % len(self._types)], piece_id)
        self.generated.append(piece)
        return piece


def pieces(text: str) -> list[Piece]:
    """Short notation for lists of pieces: 'I0 O1 T2' -> [Piece(I, 0), Piece(O, 1), Piece(T, 2)]"""
    return [Piece(PieceType(token[0]), int(token[1:])) for token in text.split()]


@pytest.fixture
def as_pieces() -> Callable[[str], list[Piece]]:
    return pieces


@pytest.fixture
def fixed_source() -> FixedPieceSource:
    return FixedPieceSource()


@pytest.fixture
def make_queue() -> Callable[..., CircularQueue]:
    """Call the inner function with the pieces (front first) the queue should hold"""

    def _create_queue(text: str, capacity: int = 5) -> CircularQueue:
        queue = CircularQueue(capacity)
        for piece in pieces(text):
            assert queue.enqueue(piece)
        return queue

    return _create_queue


@pytest.fixture
def make_stack() -> Callable[..., BoundedStack]:
    """Call the inner function with the pieces (base first) the stack should hold"""

    def _create_stack(text: str, capacity: int = 3) -> BoundedStack:
        stack = BoundedStack(capacity)
        for piece in pieces(text):
            assert stack.push(piece)
        return stack

    return _create_stack


@pytest.fixture
def wrapped_queue(make_queue: Callable[..., CircularQueue]) -> Iterator[CircularQueue]:
    """Queue that has been dequeued from / enqueued to, so that the front is no longer at slot 0"""
    queue = make_queue("I90 O91 T92 L93 I94")
    for _ in range(3):
        queue.dequeue()
    for piece in pieces("O95 T96 L97"):
        queue.enqueue(piece)
    yield queue

"""Unit tests for /src/tetris/rendering.py"""

from typing import Callable

from src.tetris.pieces import Piece
from src.tetris.rendering import render_queue, render_stack

AsPieces = Callable[[str], list[Piece]]


def test_render_queue(as_pieces: AsPieces) -> None:
    assert render_queue(as_pieces("I0 O1 T2")) == "Piece queue: [I 0] [O 1] [T 2]"


def test_render_empty_queue() -> None:
    assert render_queue([]) == "Piece queue: [ EMPTY ]"


def test_render_stack(as_pieces: AsPieces) -> None:
    assert render_stack(as_pieces("L12 T10")) == "Reserve stack (top -> base): [L 12] [T 10]"


def test_render_empty_stack() -> None:
    assert render_stack([]) == "Reserve stack: [ EMPTY ]"

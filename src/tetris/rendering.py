"""Text views of the containers for the console. Reads snapshots only, never mutates."""

from typing import Iterable

from src.tetris.pieces import Piece

EMPTY_MARKER = "[ EMPTY ]"


def pieces_to_text(pieces: Iterable[Piece]) -> str:
    return " ".join(piece.to_display() for piece in pieces)


def render_queue(pieces: list[Piece]) -> str:
    """pieces in front-to-back order"""
    if not pieces:
        return f"Piece queue: {EMPTY_MARKER}"
    return f"Piece queue: {pieces_to_text(pieces)}"


def render_stack(pieces: list[Piece]) -> str:
    """pieces in top-to-base order"""
    if not pieces:
        return f"Reserve stack: {EMPTY_MARKER}"
    return f"Reserve stack (top -> base): {pieces_to_text(pieces)}"

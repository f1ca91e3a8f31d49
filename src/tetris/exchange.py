"""
Strategic exchanges between the queue of future pieces and the reserve stack.

Both operations only swap piece values: neither container gains or loses a piece.
Preconditions are checked before anything is touched, so an exchange either happens completely or not at all.
"""

from typing import Protocol

from src.core.exceptions import ConfigurationError
from src.tetris.pieces import Piece

BATCH_SIZE = 3


class PieceQueue(Protocol):
    """Just the parts of the queue the exchanges need"""

    @property
    def count(self) -> int: ...
    def peek_at(self, position: int) -> Piece: ...
    def replace_at(self, position: int, piece: Piece) -> Piece: ...


class PieceStack(Protocol):
    """Just the parts of the stack the exchanges need"""

    @property
    def count(self) -> int: ...
    @property
    def top(self) -> int: ...
    def peek_at(self, index: int) -> Piece: ...
    def replace_at(self, index: int, piece: Piece) -> Piece: ...


def can_swap_front_top(queue: PieceQueue, stack: PieceStack) -> bool:
    return queue.count > 0 and stack.count > 0


def swap_front_top(queue: PieceQueue, stack: PieceStack) -> bool:
    """Exchange the piece at the front of the queue with the piece on top of the stack.

    Applying it twice in a row restores both containers.
    """
    if not can_swap_front_top(queue, stack):
        return False
    queue_front = queue.peek_at(0)
    stack_top = stack.peek_at(stack.top)
    queue.replace_at(0, stack_top)
    stack.replace_at(stack.top, queue_front)
    return True


def can_swap_batch(queue: PieceQueue, stack: PieceStack, k: int = BATCH_SIZE) -> bool:
    if k < 1:
        raise ConfigurationError(f"Batch size must be at least 1, got {k}")
    return queue.count >= k and stack.count >= k


def swap_batch(queue: PieceQueue, stack: PieceStack, k: int = BATCH_SIZE) -> bool:
    """
    Exchange the first k pieces of the queue with the k lowest pieces of the stack.
    ---

    Pairing goes base-to-front: stack index i (0 = base) is exchanged with queue position i (0 = front).
    So with a stack holding exactly k pieces, the top of the stack ends up at queue position k-1.

    All pieces are read before the first write.
    """
    if not can_swap_batch(queue, stack, k):
        return False
    from_queue = [queue.peek_at(i) for i in range(k)]
    from_stack = [stack.peek_at(i) for i in range(k)]
    for i in range(k):
        queue.replace_at(i, from_stack[i])
        stack.replace_at(i, from_queue[i])
    return True

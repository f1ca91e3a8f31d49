"""Orchestration between the console driver and the piece containers (queue, reserve stack, exchanges)."""

from typing import Callable, Optional

from loguru import logger

from src.api.models import ActionRequest, ActionResponse, PieceView, StateResponse
from src.core.config import SimulatorSettings
from src.core.exceptions import InvalidActionError
from src.core.shared_types import MENUS, Action, FailureReason, GameMode
from src.tetris.exchange import can_swap_batch, swap_batch, swap_front_top
from src.tetris.generator import PieceGenerator, PieceSource
from src.tetris.piece_queue import CircularQueue
from src.tetris.pieces import Piece
from src.tetris.rendering import pieces_to_text
from src.tetris.reserve_stack import BoundedStack

# Result of a single action: the failure (if any), the pieces involved and a message for the player
Outcome = tuple[Optional[FailureReason], list[Piece], str]


class TetrisStackService:
    """Owns the queue of future pieces, the reserve stack, and the source of new pieces."""

    def __init__(
        self,
        settings: Optional[SimulatorSettings] = None,
        source: Optional[PieceSource] = None,
    ) -> None:
        self.settings = settings or SimulatorSettings()
        self.source = source or PieceGenerator.seeded(self.settings.seed)
        self.queue = CircularQueue(self.settings.queue_capacity)
        self.stack = BoundedStack(self.settings.stack_capacity)
        self._handlers: dict[Action, Callable[[], Outcome]] = {
            Action.PLAY: self._play,
            Action.INSERT: self._insert,
            Action.RESERVE: self._reserve,
            Action.USE_RESERVED: self._use_reserved,
            Action.SWAP_ONE: self._swap_one,
            Action.SWAP_BATCH: self._swap_batch,
            Action.EXIT: self._exit,
        }
        self.initialize()

    @property
    def mode(self) -> GameMode:
        return self.settings.mode

    @property
    def refills(self) -> bool:
        """The queue-only variant leaves refilling to the player (INSERT). Other variants keep the queue full."""
        return self.mode != GameMode.QUEUE_ONLY

    def initialize(self) -> None:
        """Start of the game: fill the queue of future pieces."""
        while not self.queue.is_full():
            self.queue.enqueue(self.source.generate())
        logger.debug("Queue initialized: {}", pieces_to_text(self.queue))

    def available_actions(self) -> dict[int, Action]:
        return MENUS[self.mode]

    def execute(self, request: ActionRequest) -> ActionResponse:
        """Perform the requested action and report what happened."""
        action = request.action
        if action not in self.available_actions().values():
            raise InvalidActionError(f"Action {action!r} is not available in {self.mode} mode.")

        failure, pieces, message = self._handlers[action]()
        if failure is None:
            logger.debug("{}: {}", action, message)
        else:
            logger.info("{} failed: {}", action, failure)

        return ActionResponse(
            action=action,
            success=failure is None,
            failure=failure,
            pieces=[PieceView.from_piece(piece) for piece in pieces],
            message=message,
            state=self.state(),
            exit_requested=action == Action.EXIT,
        )

    def state(self) -> StateResponse:
        return StateResponse(
            mode=self.mode,
            queue=[PieceView.from_piece(piece) for piece in self.queue.snapshot()],
            reserve=[PieceView.from_piece(piece) for piece in self.stack.snapshot()],
            queue_capacity=self.queue.capacity,
            stack_capacity=self.stack.capacity,
        )

    # -- Action handlers --
    def _play(self) -> Outcome:
        played = self.queue.dequeue()
        if played is None:
            return FailureReason.QUEUE_EMPTY, [], "Queue is empty! No piece to play."
        self._refill()
        return None, [played], f"Piece played: {played.to_display()}"

    def _insert(self) -> Outcome:
        # check first, so a failed insert does not use up an id
        if self.queue.is_full():
            return (
                FailureReason.QUEUE_FULL,
                [],
                "Queue is full! Play a piece before adding a new one.",
            )
        new_piece = self.source.generate()
        self.queue.enqueue(new_piece)
        return None, [new_piece], f"New piece inserted: {new_piece.to_display()}"

    def _reserve(self) -> Outcome:
        # check the stack first, otherwise the dequeued piece would have nowhere to go
        if self.stack.is_full():
            return (
                FailureReason.STACK_FULL,
                [],
                "Reserve stack is full! Use a reserved piece first.",
            )
        reserved = self.queue.dequeue()
        if reserved is None:
            return FailureReason.QUEUE_EMPTY, [], "Queue is empty! No piece to reserve."
        self.stack.push(reserved)
        self._refill()
        return None, [reserved], f"Piece reserved: {reserved.to_display()}"

    def _use_reserved(self) -> Outcome:
        used = self.stack.pop()
        if used is None:
            return FailureReason.STACK_EMPTY, [], "Reserve stack is empty! No piece to use."
        return None, [used], f"Reserved piece used: {used.to_display()}"

    def _swap_one(self) -> Outcome:
        if not swap_front_top(self.queue, self.stack):
            return (
                FailureReason.INSUFFICIENT_PIECES,
                [],
                "Need a piece in the queue and one in the reserve stack to swap.",
            )
        swapped = [self.queue.peek_front(), self.stack.peek()]
        return (
            None,
            swapped,
            f"Swapped queue front and stack top: {pieces_to_text(swapped)}",
        )

    def _swap_batch(self) -> Outcome:
        k = self.settings.batch_size
        if not can_swap_batch(self.queue, self.stack, k):
            return (
                FailureReason.INSUFFICIENT_PIECES,
                [],
                f"Need at least {k} pieces in the queue and {k} in the reserve stack to swap.",
            )
        swap_batch(self.queue, self.stack, k)
        swapped = [self.queue.peek_at(i) for i in range(k)]
        return (
            None,
            swapped,
            f"Swapped the first {k} pieces of the queue with the reserve stack.",
        )

    def _exit(self) -> Outcome:
        return None, [], "Leaving Tetris Stack..."

    def _refill(self) -> None:
        """Keep the queue full after a piece left it."""
        if not self.refills:
            return
        new_piece = self.source.generate()
        self.queue.enqueue(new_piece)
        logger.debug("Queue refilled with {}", new_piece.to_display())

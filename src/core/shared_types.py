"""
Type definitions used across layers
"""

from enum import StrEnum


class GameMode(StrEnum):
    """The three menu variants of the simulator."""

    QUEUE_ONLY = "queue"
    RESERVE = "reserve"
    STRATEGIC = "strategic"


class Action(StrEnum):
    EXIT = "exit"
    PLAY = "play"
    INSERT = "insert"
    RESERVE = "reserve"
    USE_RESERVED = "use reserved"
    SWAP_ONE = "swap one"
    SWAP_BATCH = "swap batch"


class FailureReason(StrEnum):
    QUEUE_FULL = "queue is full"
    QUEUE_EMPTY = "queue is empty"
    STACK_FULL = "reserve stack is full"
    STACK_EMPTY = "reserve stack is empty"
    INSUFFICIENT_PIECES = "not enough pieces to exchange"


# Menu code typed by the player -> action, per game mode.
# NOTE code 2 means INSERT in the queue-only variant, but RESERVE once there is a reserve stack.
MENUS: dict[GameMode, dict[int, Action]] = {
    GameMode.QUEUE_ONLY: {
        1: Action.PLAY,
        2: Action.INSERT,
        0: Action.EXIT,
    },
    GameMode.RESERVE: {
        1: Action.PLAY,
        2: Action.RESERVE,
        3: Action.USE_RESERVED,
        0: Action.EXIT,
    },
    GameMode.STRATEGIC: {
        1: Action.PLAY,
        2: Action.RESERVE,
        3: Action.USE_RESERVED,
        4: Action.SWAP_ONE,
        5: Action.SWAP_BATCH,
        0: Action.EXIT,
    },
}

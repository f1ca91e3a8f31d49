"""
Console front end of Tetris Stack.

Shows the queue (and reserve stack), offers the menu of the chosen game mode, and passes the player's choice on to the service.
"""

import argparse
import sys
from typing import Callable, Optional

from loguru import logger
from pydantic import ValidationError

from src.api.models import ActionRequest, ActionResponse, StateResponse
from src.core.config import SimulatorSettings
from src.core.exceptions import TetrisStackError
from src.core.shared_types import MENUS, Action, GameMode
from src.services.stack_service import TetrisStackService
from src.tetris.rendering import render_queue, render_stack

MENU_LABELS: dict[Action, str] = {
    Action.PLAY: "Play piece",
    Action.INSERT: "Insert new piece",
    Action.RESERVE: "Reserve piece",
    Action.USE_RESERVED: "Use reserved piece",
    Action.SWAP_ONE: "Swap queue front with stack top",
    Action.SWAP_BATCH: "Swap the first pieces of the queue with the stack",
    Action.EXIT: "Exit",
}

SEPARATOR = "-" * 37

InputFn = Callable[[str], str]


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments. Defaults come from the TETRIS_* environment variables."""
    defaults = SimulatorSettings.from_env()
    parser = argparse.ArgumentParser(
        description="Tetris Stack: manage the queue of future pieces and the reserve stack",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in GameMode],
        default=defaults.mode.value,
        help="Menu variant: queue only, queue + reserve, or with strategic swaps",
    )
    parser.add_argument(
        "--queue-size",
        type=int,
        default=defaults.queue_capacity,
        help="Number of future pieces kept in the queue",
    )
    parser.add_argument(
        "--stack-size",
        type=int,
        default=defaults.stack_capacity,
        help="Number of pieces the reserve stack can hold",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=defaults.batch_size,
        help="Number of pieces exchanged by the batch swap",
    )
    parser.add_argument(
        "--seed", type=int, default=defaults.seed, help="Random seed for piece generation"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        help="Logging level (messages go to stderr)",
    )
    return parser.parse_args(argv)


def settings_from_arguments(args: argparse.Namespace) -> SimulatorSettings:
    return SimulatorSettings(
        mode=GameMode(args.mode),
        queue_capacity=args.queue_size,
        stack_capacity=args.stack_size,
        batch_size=args.batch_size,
        seed=args.seed,
        log_level=args.log_level,
    )


def setup_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def render_state(state: StateResponse) -> str:
    lines = [render_queue([view.to_piece() for view in state.queue])]
    if state.mode != GameMode.QUEUE_ONLY:
        lines.append(render_stack([view.to_piece() for view in state.reserve]))
    return "\n".join(lines)


def render_menu(mode: GameMode) -> str:
    lines = ["Action options:", "Code  Action"]
    # exit option (0) goes last
    for code, action in sorted(MENUS[mode].items(), key=lambda item: item[0] == 0):
        lines.append(f"  {code}   {MENU_LABELS[action]}")
    return "\n".join(lines)


def choose_action(mode: GameMode, read: InputFn = input) -> Optional[ActionRequest]:
    """Ask the player for a menu code. None means the input did not name an action (re-prompt)."""
    raw = read("Choose your action: ").strip()
    try:
        code = int(raw)
    except ValueError:
        print("\nInvalid option! Try again.")
        return None
    try:
        return ActionRequest.from_menu_code(code, mode)
    except TetrisStackError as e:
        logger.debug("Rejected menu input {!r}: {}", raw, e)
        print("\nInvalid option! Try again.")
        return None


def report(response: ActionResponse) -> None:
    print(f"\n-> Action: {response.message}")


def run(service: TetrisStackService, read: InputFn = input) -> int:
    """Menu loop. Returns the exit status."""
    print(f"Initializing the queue with {service.queue.capacity} pieces...")
    while True:
        print(f"\n{SEPARATOR}")
        print("Here is your current state:\n")
        print(render_state(service.state()))
        print()
        print(render_menu(service.mode))

        try:
            request = choose_action(service.mode, read)
        except EOFError:
            print("\nLeaving Tetris Stack...")
            return 0
        if request is None:
            continue

        try:
            response = service.execute(request)
        except TetrisStackError as e:
            print(f"\n{e}")
            continue

        report(response)
        if response.exit_requested:
            return 0


def main(argv: Optional[list[str]] = None) -> int:
    try:
        settings = settings_from_arguments(parse_arguments(argv))
    except (TetrisStackError, ValidationError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2
    setup_logging(settings.log_level)
    logger.info("Starting Tetris Stack in {} mode", settings.mode)
    return run(TetrisStackService(settings))


if __name__ == "__main__":
    sys.exit(main())

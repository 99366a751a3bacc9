"""
Terminal front-end for Minesweepers.

Reads one command per line, maps it to a board action and redraws the
board. Usage:
    minesweepers [--size N] [--mines N] [--seed N]
"""
import argparse
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .board import (
    Board,
    BoardConfig,
    DEFAULT_MINES,
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    mines_for_size,
)
from .render import render_board, render_status


logger = logging.getLogger(__name__)


HELP_TEXT = """Commands:
  open X Y   (o)  open the cell in column X, row Y; on an opened number, chord
  flag X Y   (f)  toggle a flag
  size N     (s)  start a new board of size N ({min}-{max})
  restart    (r)  start a new board
  help       (h)  show this text
  quit       (q)  leave the game""".format(min=MIN_SIZE, max=MAX_SIZE)

ALIASES = {
    "o": "open",
    "f": "flag",
    "s": "size",
    "r": "restart",
    "h": "help",
    "q": "quit",
}

ARITY = {
    "open": 2,
    "flag": 2,
    "size": 1,
    "restart": 0,
    "help": 0,
    "quit": 0,
}


# ============================================================================
# Command Parsing
# ============================================================================

class CommandError(ValueError):
    """Raised for input lines that are not valid commands."""


@dataclass
class Command:
    """A parsed player command."""

    action: str
    args: List[int]


def parse_command(line: str) -> Command:
    """
    Parse one input line.

    Args:
        line: Raw text typed by the player.

    Returns:
        Parsed command with its integer arguments.

    Raises:
        CommandError: If the line is empty, unknown, or has bad arguments.
    """
    words = line.split()
    if not words:
        raise CommandError("Empty command")

    action = ALIASES.get(words[0].lower(), words[0].lower())
    if action not in ARITY:
        raise CommandError(f"Unknown command: {words[0]}")

    expected = ARITY[action]
    if len(words) - 1 != expected:
        raise CommandError(f"'{action}' takes {expected} argument(s)")

    try:
        args = [int(word) for word in words[1:]]
    except ValueError:
        raise CommandError(f"Arguments to '{action}' must be integers")

    return Command(action, args)


def clamp_size(size: int) -> int:
    """Keep a requested board size inside the supported range."""
    return max(MIN_SIZE, min(MAX_SIZE, size))


# ============================================================================
# Game Loop
# ============================================================================

def apply_command(board: Board, command: Command) -> Optional[str]:
    """
    Apply a parsed command to the board.

    Returns:
        A message for the player, or None.
    """
    if command.action == "open":
        x, y = command.args
        if not board.open_cell(x, y):
            return f"Cannot open ({x}, {y})"
    elif command.action == "flag":
        x, y = command.args
        if not board.toggle_flag(x, y):
            return f"Cannot flag ({x}, {y})"
    elif command.action == "size":
        size = clamp_size(command.args[0])
        board.resize_and_reset(size)
        return f"New {size}x{size} board with {board.config.num_mines} mines"
    elif command.action == "restart":
        board.reset()
    elif command.action == "help":
        return HELP_TEXT
    return None


def run(
    board: Board,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Play until the player quits or input runs out.

    Args:
        board: Board to play on.
        read: Prompt-and-read function.
        write: Output function.
    """
    while True:
        board.update_timer()
        write(render_board(board))
        write(render_status(board))

        try:
            line = read("> ")
        except EOFError:
            break

        try:
            command = parse_command(line)
        except CommandError as error:
            write(str(error))
            continue

        if command.action == "quit":
            break

        message = apply_command(board, command)
        if message:
            write(message)


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and start the game."""
    parser = argparse.ArgumentParser(description="Minesweepers in the terminal")
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Board size ({MIN_SIZE}-{MAX_SIZE})",
    )
    parser.add_argument(
        "--mines",
        type=int,
        default=None,
        help="Number of mines (default: size*size/6)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the first board"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    size = clamp_size(args.size)
    if args.mines is not None:
        mines = args.mines
    elif size == DEFAULT_SIZE:
        mines = DEFAULT_MINES
    else:
        mines = mines_for_size(size)

    try:
        config = BoardConfig(size, mines)
    except ValueError as error:
        parser.error(str(error))

    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    board = Board(config, rng=rng)
    logger.debug("Starting %dx%d board with %d mines", size, size, mines)

    print(HELP_TEXT)
    run(board, read=input, write=print)


if __name__ == "__main__":
    main()

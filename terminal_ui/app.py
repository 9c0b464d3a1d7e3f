"""Main entry point for the terminal blackjack game."""

import sys
from random import Random
from typing import TextIO

from blackjack.cards import Deck
from blackjack.game.engine import BlackjackGame, Outcome
from blackjack.logging_utils import get_logger, setup_logging
from config import config
from terminal_ui.console import ConsolePrinter

logger = get_logger(__name__)


def read_choice(stdin: TextIO) -> str:
    """
    Read one line of player input.

    Raises:
        SystemExit: if the line cannot be read (stream error or end of input)
    """
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read line: %s", exc)
        raise SystemExit(f"Failed to read line: {exc}") from exc
    if not line:
        logger.error("Failed to read line: end of input")
        raise SystemExit("Failed to read line: end of input")
    return line


def run_game(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: Random | None = None,
    deck: Deck | None = None,
) -> Outcome | None:
    """
    Play one round on the given streams.

    Args:
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)
        rng: Random number generator for the shuffle
        deck: Pre-arranged deck; skips the shuffle

    Returns:
        How the round ended
    """
    stdin = stdin or sys.stdin
    printer = ConsolePrinter(stdout)

    game = BlackjackGame(deck=deck, rng=rng, config=config.game)
    game.subscribe(printer)
    game.start()

    while game.can_stay:
        printer.prompt()
        game.choose(read_choice(stdin))

    return game.outcome


def main() -> None:
    """Run the game on the process's standard streams."""
    setup_logging("DEBUG" if config.debug else None)
    run_game()


if __name__ == "__main__":
    main()

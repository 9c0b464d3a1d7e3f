"""Terminal front end for the blackjack engine."""

from terminal_ui.console import ConsolePrinter, print_status
from terminal_ui.app import main, run_game

__all__ = [
    "ConsolePrinter",
    "print_status",
    "main",
    "run_game",
]

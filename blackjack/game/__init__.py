"""Game engine and state management."""

from blackjack.game.events import GameEvent, EventType
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackGame, Outcome

__all__ = [
    "GameEvent",
    "EventType",
    "GameState",
    "BlackjackGame",
    "Outcome",
]

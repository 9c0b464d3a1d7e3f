"""Core blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank
from blackjack.hand import Hand, calculate_score, draw_card, evaluate_hands

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Hand",
    "calculate_score",
    "draw_card",
    "evaluate_hands",
]

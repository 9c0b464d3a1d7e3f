"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck
from blackjack.hand import Hand
from blackjack.game import BlackjackGame
from config import GameConfig


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def game_config():
    """Game settings independent of the environment."""
    return GameConfig(seed=None)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_deck():
    """A deck with every card already dealt."""
    return Deck.from_labels([])


@pytest.fixture
def make_hand():
    """Factory building a hand from card labels."""

    def _make(*labels: str) -> Hand:
        hand = Hand()
        for label in labels:
            hand.add_card(Card.from_string(label))
        return hand

    return _make


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def bust_hand(make_hand):
    """A busted hand."""
    return make_hand("10", "6", "K")


@pytest.fixture
def rigged_deck():
    """Factory for a deck that deals the given labels in order."""

    def _make(*draw_order: str) -> Deck:
        return Deck.from_labels(reversed(draw_order))

    return _make


@pytest.fixture
def game(rng, game_config):
    """A new game on a seeded, shuffled deck."""
    return BlackjackGame(rng=rng, config=game_config)


@pytest.fixture
def make_game(rigged_deck, game_config):
    """Factory for games dealt from a fixed card order.

    Cards are dealt dealer first, then two to the player, then in turn
    order for hits and the dealer's draws.
    """

    def _make(*draw_order: str) -> BlackjackGame:
        return BlackjackGame(deck=rigged_deck(*draw_order), config=game_config)

    return _make

"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from blackjack.cards import Card, Deck
from blackjack.logging_utils import get_logger

logger = get_logger(__name__)

BUST_LIMIT = 21


def calculate_score(hand: Iterable[Card | str]) -> int:
    """
    Calculate the point total of a hand.

    Aces count as 1, and a single ace is promoted to 11 when the total is
    below 12. Only one ace is ever promoted.

    Args:
        hand: Cards or card labels ('2'..'10', 'J', 'Q', 'K', 'A')

    Returns:
        The hand total (0 for an empty hand)
    """
    total = 0
    has_ace = False

    for card in hand:
        if not isinstance(card, Card):
            card = Card.from_string(card)
        if card.is_ace:
            has_ace = True
        total += card.value

    if has_ace and total < 12:
        total += 10

    return total


@dataclass
class Hand:
    """A blackjack hand; cards are kept in the order they were drawn."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """Return the hand total."""
        return calculate_score(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BUST_LIMIT

    @property
    def labels(self) -> list[str]:
        """Return the card labels in draw order."""
        return [card.label for card in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(self.labels)
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def draw_card(hand: Hand, deck: Deck) -> Card | None:
    """
    Move the top card of the deck into the hand.

    Returns:
        The card drawn, or None if the deck was empty (nothing is changed)
    """
    try:
        card = deck.draw()
    except IndexError:
        logger.info("Deck is out of cards!")
        return None
    hand.add_card(card)
    return card


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Compare player and dealer hands.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if tie
    """
    # Player busts always loses
    if player_hand.is_busted:
        return -1

    # Dealer busts, player wins
    if dealer_hand.is_busted:
        return 1

    player_value = player_hand.value
    dealer_value = dealer_hand.value
    if player_value > dealer_value:
        return 1
    if dealer_value > player_value:
        return -1
    return 0

"""Card and Deck classes - immutable, suitless card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator


class Rank(Enum):
    """Card ranks, valued by their label."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return self.value

    @property
    def points(self) -> int:
        """Return the point value (Ace = 1, face cards = 10)."""
        if self == Rank.ACE:
            return 1
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Suits play no part in scoring, so none is kept."""

    rank: Rank

    def __str__(self) -> str:
        return str(self.rank)

    def __repr__(self) -> str:
        return f"Card({self.rank.name})"

    @property
    def label(self) -> str:
        """Return the card label, e.g. '10' or 'K'."""
        return self.rank.value

    @property
    def value(self) -> int:
        """Return the point value with the ace counted as 1."""
        return self.rank.points

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a label like '7', '10', 'T', 'q'."""
        label = s.strip().upper()
        if label == "T":
            label = "10"
        try:
            return cls(Rank(label))
        except ValueError:
            raise ValueError(f"Invalid card label: {s!r}") from None


class Deck:
    """A 13-card deck holding one card of each rank."""

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in rank order."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def from_labels(cls, labels: Iterable[str], rng: Random | None = None) -> "Deck":
        """
        Build a deck with an explicit card order.

        The last label is the top of the deck and is drawn first.
        """
        deck = cls(rng=rng)
        deck._cards = [Card.from_string(label) for label in labels]
        return deck

    def reset(self) -> None:
        """Reset deck to all 13 cards in rank order."""
        self._cards = [Card(rank) for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def labels(self) -> list[str]:
        """Return the labels of the remaining cards, bottom to top."""
        return [card.label for card in self._cards]

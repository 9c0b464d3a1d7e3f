"""Console rendering of engine events."""

import sys
from typing import Iterable, TextIO

from blackjack.cards import Card
from blackjack.game.events import EventType, GameEvent
from blackjack.hand import calculate_score

# Fixed one-line messages, keyed by event type
MESSAGES: dict[EventType, str] = {
    EventType.DEALER_FIRST_CARD: "Dealer draws first card.",
    EventType.DECK_EMPTY: "Deck is out of cards!",
    EventType.INVALID_ACTION: "Not a valid choice",
    EventType.PLAYER_BUSTS: "You busted! You lose!",
    EventType.DEALER_BUSTS: "The dealer busts! You Win!",
    EventType.PLAYER_LOSES: "Dealer wins!",
    EventType.PLAYER_WINS: "You win!",
    EventType.PUSH: "It's a tie!",
}

NUMBER_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five"}

PROMPT = "Do you want to (H)it, (S)tay, or (Q)uit? "


def initial_deal_message(count: int) -> str:
    """Announce the player's opening cards, e.g. 'Player receives two cards.'"""
    noun = "card" if count == 1 else "cards"
    return f"Player receives {NUMBER_WORDS.get(count, str(count))} {noun}."


def _format_cards(cards: Iterable[Card | str]) -> str:
    return " ".join(str(card) for card in cards)


def print_status(
    player_hand: Iterable[Card | str],
    dealer_hand: Iterable[Card | str],
    out: TextIO | None = None,
) -> None:
    """
    Print both totals, each followed by its cards.

    Args:
        player_hand: Player's Hand, cards or labels
        dealer_hand: Dealer's Hand, cards or labels
        out: Stream to write to (defaults to stdout)
    """
    out = out or sys.stdout
    player_cards = list(player_hand)
    dealer_cards = list(dealer_hand)
    print(f"Player's total is {calculate_score(player_cards)}", file=out)
    print(_format_cards(player_cards), file=out)
    print(f"Dealer's total is {calculate_score(dealer_cards)}", file=out)
    print(_format_cards(dealer_cards), file=out)


class ConsolePrinter:
    """
    Engine event subscriber that writes the game to a text stream.

    Subscribe an instance to a BlackjackGame for all events; events with no
    console text (card deals, quitting, ...) are ignored.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    def __call__(self, event: GameEvent) -> None:
        self.handle_event(event)

    def handle_event(self, event: GameEvent) -> None:
        """Handle events from the core engine."""
        etype = event.event_type
        data = event.data

        if etype == EventType.STATUS:
            print_status(data["player_cards"], data["dealer_cards"], out=self.out)
        elif etype == EventType.PLAYER_INITIAL_DEAL:
            print(initial_deal_message(data.get("count", 2)), file=self.out)
        elif etype in MESSAGES:
            print(MESSAGES[etype], file=self.out)

    def prompt(self) -> None:
        """Ask the player for their next move."""
        print(PROMPT, file=self.out)
        self.out.flush()

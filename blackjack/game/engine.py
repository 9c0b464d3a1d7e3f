"""Blackjack game engine with state machine."""

from enum import Enum, auto
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, draw_card, evaluate_hands
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.logging_utils import get_logger
from config import GameConfig, config as app_config

logger = get_logger(__name__)


class Outcome(Enum):
    """How a round ended."""

    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    DEALER_WIN = auto()
    PLAYER_WIN = auto()
    TIE = auto()
    QUIT = auto()


class BlackjackGame:
    """
    Single-round blackjack game engine using a state machine.

    The engine never does I/O. Everything a front end needs to show is
    published as events; actions report success through their return value.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_dealer", "source": "init", "dest": "dealer_first_card"},
        {"trigger": "deal_player", "source": "dealer_first_card", "dest": "player_initial_deal"},
        {"trigger": "begin_player_turn", "source": "player_initial_deal", "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_auto_play"},
        {"trigger": "dealer_plays", "source": "dealer_auto_play", "dest": "resolution"},
        {"trigger": "end_game", "source": "*", "dest": "terminal"},
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rng: Random | None = None,
        config: GameConfig | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            deck: Deck to play from, used in its given order. When omitted a
                fresh 13-card deck is built and shuffled.
            rng: Random number generator for the shuffle
            config: Game settings (defaults to the global configuration)
        """
        self.config = config or app_config.game
        if rng is None and self.config.seed is not None:
            rng = Random(self.config.seed)

        if deck is None:
            deck = Deck(rng=rng)
            deck.shuffle()
            logger.debug("Deck shuffled: %s", deck.labels)
        self.deck = deck

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.outcome: Outcome | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="init",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def total_cards(self) -> int:
        """Cards across deck and both hands; constant for a game."""
        return len(self.deck) + len(self.player_hand) + len(self.dealer_hand)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start(self) -> bool:
        """
        Deal the opening cards: one to the dealer, then the player's opening cards.

        Returns:
            True if the game was started, False if it already had been
        """
        if self.state != GameState.INIT:
            return False

        self.events.emit_new(EventType.GAME_STARTED, cards_remaining=self.deck.cards_remaining)

        self.deal_dealer()
        self.events.emit_new(EventType.DEALER_FIRST_CARD)
        self._deal_card_to_hand(self.dealer_hand)

        self.deal_player()
        self.events.emit_new(
            EventType.PLAYER_INITIAL_DEAL,
            count=self.config.initial_player_cards,
        )
        for _ in range(self.config.initial_player_cards):
            self._deal_card_to_hand(self.player_hand)
        self._emit_status()

        self.begin_player_turn()
        return True

    def choose(self, line: str) -> bool:
        """
        Apply a menu choice typed by the player.

        'H' hits, 'S' stays and 'Q' quits; case and surrounding whitespace
        are ignored. Anything else is reported as INVALID_ACTION and the
        player keeps the turn.

        Returns:
            True if the choice was a valid action
        """
        if self.state != GameState.PLAYER_TURN:
            return False

        choice = line.strip().upper()
        actions = {"H": self.hit, "S": self.stay, "Q": self.quit}
        action = actions.get(choice)
        if action is None:
            logger.info("Not a valid choice: %r", choice)
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Not a valid choice",
                choice=choice,
            )
            return False
        return action()

    def hit(self) -> bool:
        """Player hits (takes another card). Busting ends the game."""
        if self.state != GameState.PLAYER_TURN:
            return False

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)
        self._emit_status()

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            return self._finish(Outcome.PLAYER_BUST)

        self.player_action()  # Stay in player turn
        return True

    def stay(self) -> bool:
        """Player stays; the dealer plays out and the round is resolved."""
        if self.state != GameState.PLAYER_TURN:
            return False

        self.events.emit_new(EventType.PLAYER_STAY, hand_value=self.player_hand.value)
        self.player_done()
        return self._play_dealer()

    def quit(self) -> bool:
        """Player quits. No outcome is declared."""
        if self.state != GameState.PLAYER_TURN:
            return False

        self.events.emit_new(EventType.PLAYER_QUIT)
        return self._finish(Outcome.QUIT)

    @property
    def can_stay(self) -> bool:
        """Check if staying is allowed."""
        return self.state == GameState.PLAYER_TURN

    def _deal_card_to_hand(self, hand: Hand) -> Card | None:
        """Deal a card to a hand, reporting an empty deck as DECK_EMPTY."""
        who = "dealer" if hand is self.dealer_hand else "player"
        card = draw_card(hand, self.deck)
        if card is None:
            self.events.emit_new(EventType.DECK_EMPTY, hand=who)
            return None

        logger.debug("Dealt %s to %s (total %d)", card, who, hand.value)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card.label,
            hand=who,
            hand_value=hand.value,
        )
        return card

    def _emit_status(self) -> None:
        self.events.emit_new(
            EventType.STATUS,
            player_cards=self.player_hand.labels,
            player_value=self.player_hand.value,
            dealer_cards=self.dealer_hand.labels,
            dealer_value=self.dealer_hand.value,
        )

    def _play_dealer(self) -> bool:
        """Dealer draws until reaching the stand total, or the deck runs out."""
        while self.dealer_hand.value < self.config.dealer_stands_on:
            if self._deal_card_to_hand(self.dealer_hand) is None:
                break
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if not self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)
        self._emit_status()

        self.dealer_plays()
        return self._resolve_round()

    def _resolve_round(self) -> bool:
        """Compare the final hands and declare the outcome."""
        player_value = self.player_hand.value
        dealer_value = self.dealer_hand.value

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=dealer_value)
            return self._finish(Outcome.DEALER_BUST)

        result = evaluate_hands(self.player_hand, self.dealer_hand)
        if result == 1:
            event_type, outcome = EventType.PLAYER_WINS, Outcome.PLAYER_WIN
        elif result == -1:
            event_type, outcome = EventType.PLAYER_LOSES, Outcome.DEALER_WIN
        else:
            event_type, outcome = EventType.PUSH, Outcome.TIE

        self.events.emit_new(
            event_type,
            player_value=player_value,
            dealer_value=dealer_value,
        )
        return self._finish(outcome)

    def _finish(self, outcome: Outcome) -> bool:
        self.outcome = outcome
        logger.info(
            "Game over: %s (player %d, dealer %d)",
            outcome.name,
            self.player_hand.value,
            self.dealer_hand.value,
        )
        self.events.emit_new(EventType.GAME_ENDED, outcome=outcome)
        self.end_game()
        return True

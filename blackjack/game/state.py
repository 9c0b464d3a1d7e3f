"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: INIT → DEALER_FIRST_CARD → PLAYER_INITIAL_DEAL → PLAYER_TURN
          → DEALER_AUTO_PLAY → RESOLUTION → TERMINAL
    """

    # Deck built and shuffled, nothing dealt
    INIT = auto()

    # Dealer takes one card
    DEALER_FIRST_CARD = auto()

    # Player takes two cards
    PLAYER_INITIAL_DEAL = auto()

    # Player hits, stays or quits
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_AUTO_PLAY = auto()

    # Comparing totals
    RESOLUTION = auto()

    # Round over (outcome declared, player busted or player quit)
    TERMINAL = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.INIT: [GameState.DEALER_FIRST_CARD, GameState.TERMINAL],
    GameState.DEALER_FIRST_CARD: [GameState.PLAYER_INITIAL_DEAL, GameState.TERMINAL],
    GameState.PLAYER_INITIAL_DEAL: [GameState.PLAYER_TURN, GameState.TERMINAL],
    # TERMINAL directly on bust or quit
    GameState.PLAYER_TURN: [GameState.PLAYER_TURN, GameState.DEALER_AUTO_PLAY, GameState.TERMINAL],
    GameState.DEALER_AUTO_PLAY: [GameState.RESOLUTION, GameState.TERMINAL],
    GameState.RESOLUTION: [GameState.TERMINAL],
    GameState.TERMINAL: [],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])

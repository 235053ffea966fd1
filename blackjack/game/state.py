"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: INITIAL_DEAL → PLAYER_TURN → DEALER_TURN → SETTLEMENT → DONE
    """

    # Two cards each, player first
    INITIAL_DEAL = auto()

    # Player hits until they stand or bust
    PLAYER_TURN = auto()

    # Dealer draws to 17 or more
    DEALER_TURN = auto()

    # Hands revealed and compared
    SETTLEMENT = auto()

    # Game over, or aborted
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.INITIAL_DEAL: [GameState.PLAYER_TURN, GameState.DONE],
    GameState.PLAYER_TURN: [GameState.DEALER_TURN, GameState.DONE],
    GameState.DEALER_TURN: [GameState.SETTLEMENT, GameState.DONE],
    GameState.SETTLEMENT: [GameState.DONE],
    GameState.DONE: [],  # Terminal state
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

"""Round state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: BET_PENDING → INITIAL_DEAL → PLAYER_TURN → DEALER_TURN → RESOLUTION → SETTLED

    SETTLED loops back to BET_PENDING while the player has chips. GAME_OVER is
    terminal and is also entered when the deck runs out mid-round.
    """

    # Waiting for an accepted bet
    BET_PENDING = auto()

    # Two cards each being dealt
    INITIAL_DEAL = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Determining the winner
    RESOLUTION = auto()

    # Bet paid out and result recorded
    SETTLED = auto()

    # Player has no chips left, or the deck ran out mid-round
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


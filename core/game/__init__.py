"""Round engine and state management."""

from core.game.events import GameEvent, EventType
from core.game.state import GameState
from core.game.engine import BlackjackGame, Outcome, RoundResult

__all__ = [
    "GameEvent",
    "EventType",
    "GameState",
    "BlackjackGame",
    "Outcome",
    "RoundResult",
]

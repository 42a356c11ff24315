"""Console front end for the blackjack engine."""

from console.loop import play_round, run_game
from console.table import ConsoleTable

__all__ = [
    "ConsoleTable",
    "play_round",
    "run_game",
]

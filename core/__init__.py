"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, EmptyDeckError, Rank, Suit
from core.hand import Hand, has_blackjack, score
from core.participant import Dealer, Participant, Player
from core.results import ResultLog

__all__ = [
    "Card",
    "Deck",
    "EmptyDeckError",
    "Rank",
    "Suit",
    "Hand",
    "has_blackjack",
    "score",
    "Participant",
    "Player",
    "Dealer",
    "ResultLog",
]

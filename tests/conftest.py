"""Pytest fixtures for console blackjack tests."""

from random import Random

import pytest

from config import GameConfig
from core.cards import Card, Deck, Rank, Suit
from core.game import BlackjackGame
from core.hand import Hand
from core.participant import Dealer, Player
from core.results import ResultLog


def cards_from(spec: str) -> list[Card]:
    """Parse a space separated card list like 'AS KH 9D'."""
    return [Card.from_string(s) for s in spec.split()]


def hand_of(spec: str) -> Hand:
    """Build a hand from a space separated card list."""
    return Hand(cards_from(spec))


@pytest.fixture
def cards():
    """Card list parser: cards('AS KH 9D')."""
    return cards_from


@pytest.fixture(name="hand_of")
def hand_of_fixture():
    """Hand builder: hand_of('AS KH')."""
    return hand_of


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def player():
    """A player with the default 100 chips."""
    return Player(100)


@pytest.fixture
def dealer():
    """A dealer with an empty hand."""
    return Dealer()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand_of("AS KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return hand_of("AS 6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return hand_of("10S 6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return hand_of("10S 6H KC")


@pytest.fixture
def rules():
    """Explicit rules so tests do not depend on the environment."""
    return GameConfig(initial_chips=100, dealer_stands_on=17, deck_policy="reshuffle", seed=None)


@pytest.fixture
def fail_rules():
    """Rules that stop the game when the deck runs out."""
    return GameConfig(initial_chips=100, dealer_stands_on=17, deck_policy="fail", seed=None)


@pytest.fixture
def results_path(tmp_path):
    """Path of a result log inside the test's temp directory."""
    return tmp_path / "game_results.txt"


@pytest.fixture
def result_log(results_path):
    """A result log writing to a temp file."""
    return ResultLog(results_path)


@pytest.fixture
def stacked_game(rules, result_log):
    """
    Factory for games with a stacked deck.

    Cards are dealt in the given order: player, player, dealer, dealer, then
    hits and dealer draws.
    """

    def _make(spec: str, chips: int = 100, game_rules: GameConfig | None = None) -> BlackjackGame:
        return BlackjackGame(
            rules=game_rules or rules,
            initial_chips=chips,
            deck=Deck.from_cards(cards_from(spec), rng=Random(7)),
            result_log=result_log,
        )

    return _make


@pytest.fixture
def game(rules, rng):
    """A new game instance with a seeded shuffle and no result log."""
    return BlackjackGame(rules=rules, rng=rng)

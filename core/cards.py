"""Card and Deck classes - immutable card values and a single shuffled deck."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class EmptyDeckError(IndexError):
    """Raised when drawing from a deck with no cards left."""


class Suit(Enum):
    """Card suits."""

    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.title()


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.name.title()

    @property
    def points(self) -> int:
        """Return the nominal point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def label(self) -> str:
        """Return the short rank label ('2'..'10', 'J', 'Q', 'K', 'A')."""
        if self.value <= 10:
            return str(self.value)
        return self.name[0]


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def value(self) -> int:
        """Return the nominal blackjack point value."""
        return self.rank.points

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10h' or 'TD'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.label: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {suit.name[0]: suit for suit in Suit}

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], rank_map[rank_str])


def full_deck() -> list[Card]:
    """Return the 52 distinct cards in suit-major order."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


class Deck:
    """
    A standard 52-card deck, shuffled once on construction.

    Cards are drawn from the front of the list. The random source is
    injectable so games can be replayed from a seed.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize and shuffle a new deck."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()
        self.shuffle()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """Build a deck holding exactly these cards in this order (first drawn first)."""
        deck = cls(rng=rng)
        ordered = list(cards)
        if len(set(ordered)) != len(ordered):
            raise ValueError("Deck cannot contain duplicate cards")
        deck._cards = ordered
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = full_deck()

    def shuffle(self) -> None:
        """Shuffle the deck in place (Fisher-Yates)."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise EmptyDeckError("Cannot draw from empty deck")
        return self._cards.pop(0)

    def restock(self, cards: Iterable[Card]) -> None:
        """Return discarded cards to the deck and reshuffle."""
        returned = list(cards)
        overlap = set(returned) & set(self._cards)
        if overlap or len(set(returned)) != len(returned):
            raise ValueError("Restocked cards must not duplicate cards in the deck")
        self._cards.extend(returned)
        self.shuffle()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card

BLACKJACK = 21


def score(cards: Iterable[Card]) -> int:
    """
    Calculate the best blackjack score for a sequence of cards.

    Aces count 11 until the total would bust, then drop to 1 one at a time.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    # Reduce aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


def has_blackjack(cards: Iterable[Card]) -> bool:
    """
    Check for a score of exactly 21.

    Any number of cards counts: a three-card 21 reached by hitting is treated
    the same as a natural.
    """
    return score(cards) == BLACKJACK


@dataclass
class Hand:
    """An ordered hand of cards owned by one participant."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> list[Card]:
        """Empty the hand and return the cards it held."""
        discards = self.cards
        self.cards = []
        return discards

    @property
    def value(self) -> int:
        """Return the best score for the hand."""
        return score(self.cards)

    @property
    def has_blackjack(self) -> bool:
        """Check if the hand scores exactly 21."""
        return has_blackjack(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"

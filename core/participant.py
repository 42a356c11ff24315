"""Player and dealer participants."""

from abc import ABC, abstractmethod

from core.cards import Card, Deck
from core.hand import Hand


class Participant(ABC):
    """
    Abstract base class for anyone holding a hand at the table.

    Player and dealer share drawing, scoring and hand display. Only the
    player variant carries a chip balance.
    """

    def __init__(self) -> None:
        """Initialize with an empty hand."""
        self.hand = Hand()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of the participant."""
        ...

    def draw(self, deck: Deck) -> Card:
        """Draw the top card of the deck into this hand."""
        card = deck.draw()
        self.hand.add_card(card)
        return card

    def score(self) -> int:
        """Return the best score of the current hand."""
        return self.hand.value

    def has_blackjack(self) -> bool:
        """Check if the current hand scores exactly 21."""
        return self.hand.has_blackjack

    def is_busted(self) -> bool:
        """Check if the current hand scores over 21."""
        return self.hand.is_busted

    def show_hand(self) -> list[str]:
        """Return one line per card followed by the score line."""
        lines = [str(card) for card in self.hand]
        lines.append(f"Score: {self.score()}")
        return lines

    def clear_hand(self) -> list[Card]:
        """Empty the hand, returning the discarded cards."""
        return self.hand.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(hand={self.hand!r})"


class Player(Participant):
    """The betting participant with a chip balance."""

    def __init__(self, initial_chips: int) -> None:
        """
        Initialize the player.

        Args:
            initial_chips: Starting chip balance (must not be negative)
        """
        if initial_chips < 0:
            raise ValueError("initial_chips cannot be negative")
        super().__init__()
        self.chips = initial_chips

    @property
    def name(self) -> str:
        return "Player"

    def place_bet(self, amount: int) -> bool:
        """
        Debit a bet from the balance.

        Returns:
            False without touching the balance if the bet exceeds it,
            True once the amount has been debited.
        """
        if amount > self.chips:
            return False
        self.chips -= amount
        return True

    def win_bet(self, amount: int) -> None:
        """Credit the returned stake plus winnings (2x the bet)."""
        self.chips += amount * 2

    def lose_bet(self) -> None:
        """Settle a lost bet (the stake was already debited at bet time)."""

    def refund_bet(self, amount: int) -> None:
        """Return the stake of a round that never settled."""
        self.chips += amount


class Dealer(Participant):
    """The house participant. Holds no bankroll."""

    @property
    def name(self) -> str:
        return "Dealer"

    def first_card(self) -> Card:
        """Return the exposed first card."""
        if not self.hand.cards:
            raise IndexError("Dealer has no cards")
        return self.hand[0]

    def show_first_card(self) -> str:
        """Return the display line for the exposed first card."""
        return str(self.first_card())

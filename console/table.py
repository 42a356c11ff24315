"""Text-mode table: prompts for input and renders engine events."""

from typing import Callable

from core.game.events import EventType, GameEvent

HIT = "h"
STAND = "s"


class ConsoleTable:
    """
    Console adapter for the round engine.

    Reads bets and hit/stand choices through ``input_fn`` and writes every
    line through ``output_fn``, so tests can drive it with plain lists.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._input = input_fn or input
        self._output = output_fn or print
        self._renderers: dict[EventType, Callable[[GameEvent], None]] = {
            EventType.ROUND_STARTED: self._on_round_started,
            EventType.PLAYER_HIT: self._on_player_hit,
            EventType.PLAYER_BUSTS: self._on_player_busts,
            EventType.DEALER_REVEALS: self._on_dealer_reveals,
            EventType.DEALER_HITS: self._on_dealer_hits,
            EventType.PLAYER_WINS: self._on_player_wins,
            EventType.DEALER_WINS: self._on_dealer_wins,
            EventType.INSUFFICIENT_FUNDS: self._on_insufficient_funds,
            EventType.DECK_RESHUFFLED: self._on_deck_reshuffled,
        }

    def say(self, *lines: str) -> None:
        for line in lines:
            self._output(line)

    # Prompts

    def ask_bet(self, chips: int) -> int | None:
        """
        Ask for a bet amount.

        Returns:
            The entered integer, or None if the input was not an integer
        """
        self.say(f"\nYou have {chips} chips.")
        raw = self._input("Enter your bet amount: ").strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def ask_action(self) -> str:
        """Ask hit or stand until one of them is chosen."""
        while True:
            choice = self._input("Do you want to (h)it or (s)tand? ").strip().lower()
            if choice in (HIT, STAND):
                return choice

    def invalid_bet(self) -> None:
        self.say("Invalid bet. Please enter a valid bet amount.")

    def game_over(self) -> None:
        self.say("You have run out of chips. Game over.")

    # Event rendering

    def render(self, event: GameEvent) -> None:
        """Print the lines for an engine event, ignoring ones with no text."""
        renderer = self._renderers.get(event.event_type)
        if renderer is not None:
            renderer(event)

    def _on_round_started(self, event: GameEvent) -> None:
        self.say("Player's Hand:", *event.data["player_hand"])
        self.say("\nDealer's Hand:", event.data["dealer_card"])

    def _on_player_hit(self, event: GameEvent) -> None:
        self.say("\nPlayer's Hand:", *event.data["player_hand"])

    def _on_player_busts(self, event: GameEvent) -> None:
        self.say("Player busts! Dealer wins.")

    def _on_dealer_reveals(self, event: GameEvent) -> None:
        self.say("\nDealer's Hand:", *event.data["dealer_hand"])

    def _on_dealer_hits(self, event: GameEvent) -> None:
        self.say("\nDealer draws a card.", *event.data["dealer_hand"])

    def _on_player_wins(self, event: GameEvent) -> None:
        self.say("Player wins.")

    def _on_dealer_wins(self, event: GameEvent) -> None:
        # A bust already printed its own message
        if not event.data.get("player_busted"):
            self.say("Dealer wins.")

    def _on_insufficient_funds(self, event: GameEvent) -> None:
        self.say("You don't have enough chips to place that bet.")

    def _on_deck_reshuffled(self, event: GameEvent) -> None:
        self.say("The deck ran out. Shuffling the discards back in.")

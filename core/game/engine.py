"""Blackjack round engine with state machine."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Callable

from transitions import Machine

from config import GameConfig, config
from core.cards import Card, Deck, EmptyDeckError
from core.participant import Dealer, Participant, Player
from core.results import ResultLog
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState
from logging_utils import get_logger

logger = get_logger(__name__)


class Outcome(Enum):
    """Who took the round."""

    PLAYER = "player"
    DEALER = "dealer"

    def __str__(self) -> str:
        return f"{self.value.title()} wins."


@dataclass(frozen=True)
class RoundResult:
    """Settled outcome of one round."""

    bet: int
    player_score: int
    dealer_score: int
    chips: int
    outcome: Outcome
    player_busted: bool
    dealer_played: bool
    player_cards: tuple[Card, ...] = ()
    dealer_cards: tuple[Card, ...] = ()

    @property
    def player_won(self) -> bool:
        return self.outcome is Outcome.PLAYER


class BlackjackGame:
    """
    Blackjack round engine using a state machine.

    The engine never reads input or prints. Bets and hit/stand decisions come
    in through method calls and everything worth showing goes out as events.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "place_bet", "source": "bet_pending", "dest": "initial_deal"},
        {"trigger": "deal_cards", "source": "initial_deal", "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "resolution"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolution"},
        {"trigger": "resolve", "source": "resolution", "dest": "settled"},
        {"trigger": "new_round", "source": "settled", "dest": "bet_pending"},
        {"trigger": "end_game", "source": ["bet_pending", "settled"], "dest": "game_over"},
        {"trigger": "abort_round", "source": ["initial_deal", "player_turn", "dealer_turn"], "dest": "game_over"},
    ]

    def __init__(
        self,
        rules: GameConfig | None = None,
        initial_chips: int | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
        result_log: ResultLog | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            rules: Game configuration (uses the global config if not provided)
            initial_chips: Starting balance, overrides rules.initial_chips
            rng: Random number generator for reproducible games
            deck: Pre-built deck, mainly for stacked-deck tests
            result_log: Sink that receives one record per settled round
        """
        self.rules = rules or config.game
        if rng is None and self.rules.seed is not None:
            rng = Random(self.rules.seed)
        self.deck = deck or Deck(rng=rng)
        self.result_log = result_log

        chips = self.rules.initial_chips if initial_chips is None else initial_chips
        self.player = Player(chips)
        self.dealer = Dealer()
        self.events = EventEmitter()

        self.last_result: RoundResult | None = None
        self._bet = 0
        self._discards: list[Card] = []

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="bet_pending",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        if self.player.chips <= 0:
            self._finish_game()

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def bet(self, amount: int) -> bool:
        """
        Place a bet and deal the round.

        Args:
            amount: Bet amount, a positive number of chips within the balance

        Returns:
            True if the bet was accepted and the cards dealt
        """
        if self.state != GameState.BET_PENDING:
            return self._reject_action("Cannot bet in current state")

        if amount <= 0:
            self.events.emit_new(
                EventType.INVALID_BET,
                amount=amount,
                message="Bet must be a positive number of chips",
            )
            return False

        if not self.player.place_bet(amount):
            self.events.emit_new(
                EventType.INSUFFICIENT_FUNDS,
                required=amount,
                available=self.player.chips,
            )
            return False

        self._bet = amount
        logger.debug("Bet of %d accepted, %d chips left", amount, self.player.chips)
        self.events.emit_new(EventType.BET_PLACED, amount=amount, chips=self.player.chips)
        self.place_bet()  # Trigger state transition

        return self._deal_initial_cards()

    def _deal_initial_cards(self) -> bool:
        """Deal two cards each: player, player, dealer, dealer (face down)."""
        self._deal_card(self.player)
        self._deal_card(self.player)
        self._deal_card(self.dealer)
        self._deal_card(self.dealer, face_up=False)

        logger.debug(
            "Dealt player %s, dealer shows %s",
            self.player.hand,
            self.dealer.first_card(),
        )
        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_hand=self.player.show_hand(),
            dealer_card=self.dealer.show_first_card(),
            player_blackjack=self.player.has_blackjack(),
        )
        self.deal_cards()  # Move to player turn
        return True

    def _deal_card(self, participant: Participant, face_up: bool = True) -> Card:
        """Deal a card to a participant, applying the deck policy if empty."""
        try:
            card = participant.draw(self.deck)
        except EmptyDeckError:
            if self.rules.deck_policy != "reshuffle" or not self._discards:
                logger.error("Deck exhausted with policy %r", self.rules.deck_policy)
                self._abandon_round()
                raise
            self._reshuffle()
            card = participant.draw(self.deck)

        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=participant.name.lower(),
            hand_value=participant.score() if face_up else None,
        )
        return card

    def _reshuffle(self) -> None:
        """Return the discard pile to the deck and shuffle it."""
        count = len(self._discards)
        self.deck.restock(self._discards)
        self._discards = []
        logger.info("Deck exhausted, reshuffled %d discarded cards", count)
        self.events.emit_new(EventType.DECK_RESHUFFLED, cards_remaining=len(self.deck))

    def _abandon_round(self) -> None:
        """Refund the open bet and end the game when the round cannot be finished."""
        refund = self._bet
        self.player.refund_bet(refund)
        self._bet = 0
        self._discards.extend(self.player.clear_hand())
        self._discards.extend(self.dealer.clear_hand())
        self.events.emit_new(
            EventType.GAME_ENDED,
            reason="deck_exhausted",
            refunded=refund,
            chips=self.player.chips,
        )
        self.abort_round()

    def _reject_action(self, message: str) -> bool:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )
        return False

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != GameState.PLAYER_TURN:
            return self._reject_action("Cannot hit in current state")

        card = self._deal_card(self.player)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            card=str(card),
            player_hand=self.player.show_hand(),
            hand_value=self.player.score(),
        )

        if self.player.is_busted():
            logger.debug("Player busts with %d", self.player.score())
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player.score())
            self.player_busts()  # Dealer turn is skipped
            return self._resolve_round()

        self.player_action()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        if self.state != GameState.PLAYER_TURN:
            return self._reject_action("Cannot stand in current state")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.score())
        self.player_done()
        return self._play_dealer()

    def _play_dealer(self) -> bool:
        """Dealer reveals, then draws until reaching the stand threshold."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            dealer_hand=self.dealer.show_hand(),
            hand_value=self.dealer.score(),
        )

        while self._dealer_should_hit():
            card = self._deal_card(self.dealer)
            self.events.emit_new(
                EventType.DEALER_HITS,
                card=str(card),
                dealer_hand=self.dealer.show_hand(),
                hand_value=self.dealer.score(),
            )

        if self.dealer.is_busted():
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer.score())
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.score())

        self.dealer_done()
        return self._resolve_round()

    def _dealer_should_hit(self) -> bool:
        """Dealer hits below the threshold; soft and hard 17 both stand."""
        return self.dealer.score() < self.rules.dealer_stands_on

    def _resolve_round(self) -> bool:
        """Decide the winner and pay out the bet."""
        player_score = self.player.score()
        dealer_score = self.dealer.score()
        player_busted = self.player.is_busted()

        if player_busted:
            outcome = Outcome.DEALER
        elif self.dealer.is_busted() or player_score > dealer_score:
            outcome = Outcome.PLAYER
        else:
            # Ties go to the dealer
            outcome = Outcome.DEALER

        if outcome is Outcome.PLAYER:
            self.player.win_bet(self._bet)
            self.events.emit_new(
                EventType.PLAYER_WINS,
                amount=self._bet * 2,
                player_score=player_score,
                dealer_score=dealer_score,
            )
        else:
            self.player.lose_bet()
            self.events.emit_new(
                EventType.DEALER_WINS,
                amount=self._bet,
                player_score=player_score,
                dealer_score=dealer_score,
                player_busted=player_busted,
            )

        logger.debug(
            "Round resolved: %s (player %d, dealer %d), %d chips",
            outcome,
            player_score,
            dealer_score,
            self.player.chips,
        )
        self.resolve()
        return self._settle(outcome, player_busted)

    def _settle(self, outcome: Outcome, player_busted: bool) -> bool:
        """Record the round, clear both hands and move on."""
        result = RoundResult(
            bet=self._bet,
            player_score=self.player.score(),
            dealer_score=self.dealer.score(),
            chips=self.player.chips,
            outcome=outcome,
            player_busted=player_busted,
            dealer_played=not player_busted,
            player_cards=tuple(self.player.hand),
            dealer_cards=tuple(self.dealer.hand),
        )
        self.last_result = result

        if self.result_log is not None:
            self.result_log.record(result.player_score, result.dealer_score, result.chips)

        self._discards.extend(self.player.clear_hand())
        self._discards.extend(self.dealer.clear_hand())
        self._bet = 0

        self.events.emit_new(EventType.ROUND_ENDED, result=result, chips=self.player.chips)

        if self.player.chips > 0:
            self.new_round()
        else:
            self._finish_game()
        return True

    def _finish_game(self) -> None:
        logger.info("Player is out of chips")
        self.events.emit_new(EventType.GAME_ENDED, reason="out_of_chips", chips=self.player.chips)
        self.end_game()

    @property
    def bet_amount(self) -> int:
        """Return the bet riding on the current round (0 between rounds)."""
        return self._bet

    @property
    def discards(self) -> list[Card]:
        """Return the cards cleared from previous rounds."""
        return self._discards.copy()

    @property
    def can_bet(self) -> bool:
        """Check if a bet can be placed."""
        return self.state == GameState.BET_PENDING

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN and not self.player.is_busted()

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def is_game_over(self) -> bool:
        """Check if the game has ended (out of chips or out of cards)."""
        return self.state == GameState.GAME_OVER

"""Game loop gluing the round engine to the console table."""

from console.table import HIT, ConsoleTable
from core.game import BlackjackGame, RoundResult
from logging_utils import get_logger

logger = get_logger(__name__)


def play_round(game: BlackjackGame, table: ConsoleTable) -> RoundResult | None:
    """Play one round: bet until accepted, then hit or stand until it settles."""
    while True:
        amount = table.ask_bet(game.player.chips)
        if amount is not None and game.bet(amount):
            break
        table.invalid_bet()

    while game.can_hit:
        if table.ask_action() == HIT:
            game.hit()
        else:
            game.stand()

    return game.last_result


def run_game(game: BlackjackGame, table: ConsoleTable) -> RoundResult | None:
    """
    Play rounds until the player runs out of chips.

    Returns:
        The result of the last round played, or None if no round was played
    """
    game.subscribe(table.render)

    rounds = 0
    while not game.is_game_over:
        play_round(game, table)
        rounds += 1

    logger.info("Game over after %d rounds", rounds)
    table.game_over()
    return game.last_result

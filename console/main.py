"""Main entry point for console blackjack."""

import argparse
import sys
from dataclasses import replace

from config import DECK_POLICIES, config
from console.loop import run_game
from console.table import ConsoleTable
from core.cards import EmptyDeckError
from core.game import BlackjackGame
from core.results import ResultLog
from logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blackjack against the dealer")
    parser.add_argument("--chips", type=int, default=config.game.initial_chips, help="Starting chip balance")
    parser.add_argument("--seed", type=int, default=config.game.seed, help="Seed for a reproducible shuffle")
    parser.add_argument(
        "--deck-policy",
        choices=DECK_POLICIES,
        default=config.game.deck_policy,
        help="Reshuffle the discards or stop the game when the deck runs out",
    )
    parser.add_argument("--results", default=config.log.results_path, help="File that round results are appended to")
    parser.add_argument("--log-level", default=config.log.level, help="Diagnostic log level")
    args = parser.parse_args(argv)
    if args.chips < 0:
        parser.error("--chips cannot be negative")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    rules = replace(
        config.game,
        initial_chips=args.chips,
        deck_policy=args.deck_policy,
        seed=args.seed,
    )
    game = BlackjackGame(
        rules=rules,
        result_log=ResultLog(args.results),
    )
    table = ConsoleTable()

    try:
        run_game(game, table)
    except OSError as exc:
        logger.error("Could not write round result: %s", exc)
        table.say(f"Could not write the result log ({exc}). Game stopped.")
        return 1
    except EmptyDeckError:
        table.say(f"The deck is out of cards. Your bet was returned, you finish with {game.player.chips} chips.")
        return 1
    except (KeyboardInterrupt, EOFError):
        table.say("\nGoodbye.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

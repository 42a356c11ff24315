"""Append-only text log of round results."""

import os

from logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_RESULTS_PATH = "game_results.txt"


def winner_line(player_score: int, dealer_score: int) -> str:
    """
    Return the winner line for a result block.

    Decided by raw score comparison only, so a busted player with a higher
    total than the dealer is logged as the winner.
    """
    return "Player wins." if player_score > dealer_score else "Dealer wins."


def format_result(player_score: int, dealer_score: int, player_chips: int) -> str:
    """Format one result block, including the trailing blank line."""
    return (
        f"Player Score: {player_score}, Dealer Score: {dealer_score}, "
        f"Player Chips: {player_chips}\n"
        f"{winner_line(player_score, dealer_score)}\n"
        "\n"
    )


class ResultLog:
    """
    Append-only sink for round results.

    Each record opens the file, appends one block and closes it again; no
    handle is kept between rounds. Write errors propagate as ``OSError``.
    """

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_RESULTS_PATH) -> None:
        self.path = os.fspath(path)

    def record(self, player_score: int, dealer_score: int, player_chips: int) -> None:
        """Append one round result."""
        block = format_result(player_score, dealer_score, player_chips)
        with open(self.path, mode="a", encoding="utf-8") as f:
            f.write(block)
        logger.debug("Appended round result to %s", self.path)

    def __repr__(self) -> str:
        return f"ResultLog({self.path!r})"

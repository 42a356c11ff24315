"""Tests for the console game loop."""

import pytest

from console.loop import play_round, run_game
from core.game import BlackjackGame, GameState, Outcome


class TestPlayRound:
    """Tests for a single round through the console."""

    def test_bad_bets_reprompt(self, stacked_game, scripted):
        """Test non-integer, non-positive and oversized bets are retried."""
        game = stacked_game("AS KH 10D 8C")
        console, table = scripted("abc", "0", "500", "10", "x", "s")
        game.subscribe(table.render)

        result = play_round(game, table)

        assert console.lines.count("Invalid bet. Please enter a valid bet amount.") == 3
        assert "You don't have enough chips to place that bet." in console.lines
        assert result.outcome is Outcome.PLAYER
        assert game.player.chips == 110
        assert game.state == GameState.BET_PENDING

    def test_hit_then_stand(self, stacked_game, scripted):
        game = stacked_game("2S 3S 10D 8C 4H")
        console, table = scripted("10", "h", "s")
        game.subscribe(table.render)

        result = play_round(game, table)

        assert result.player_score == 9
        assert result.outcome is Outcome.DEALER
        assert "Four of Hearts" in console.lines
        assert console.lines[-1] == "Dealer wins."

    def test_bust_ends_turn(self, stacked_game, scripted):
        """Test no hit/stand prompt follows a bust."""
        game = stacked_game("10S 6H 10D 9C 7D")
        console, table = scripted("10", "h")
        game.subscribe(table.render)

        result = play_round(game, table)

        assert result.player_busted
        assert "Player busts! Dealer wins." in console.lines
        assert "Dealer wins." not in console.lines
        assert "\nDealer's Hand:" in console.lines  # first card only, before the hit
        assert console.prompts.count("Do you want to (h)it or (s)tand? ") == 1


class TestRunGame:
    """Tests for the loop across rounds."""

    def test_runs_until_out_of_chips(self, stacked_game, scripted, results_path):
        game = stacked_game("10S 6H 10D 9C", chips=10)
        console, table = scripted("10", "s")

        result = run_game(game, table)

        assert result.outcome is Outcome.DEALER
        assert game.is_game_over
        assert console.lines[-1] == "You have run out of chips. Game over."
        assert results_path.read_text(encoding="utf-8").count("Player Score:") == 1

    def test_plays_several_rounds(self, stacked_game, scripted):
        game = stacked_game("10S 9H 10D 8C 10H 6S 9D 8S", chips=10)
        console, table = scripted("10", "s", "20", "s")

        result = run_game(game, table)

        assert result.chips == 0
        assert console.lines.count("Player wins.") == 1
        assert console.lines.count("Dealer wins.") == 1

    def test_no_chips_no_rounds(self, rules, scripted):
        game = BlackjackGame(rules=rules, initial_chips=0)
        console, table = scripted()

        assert run_game(game, table) is None
        assert console.lines == ["You have run out of chips. Game over."]

    def test_input_closed_propagates(self, stacked_game, scripted):
        game = stacked_game("10S 9H 10D 8C")
        _, table = scripted()
        with pytest.raises(EOFError):
            run_game(game, table)

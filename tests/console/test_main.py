"""Tests for the command line entry point."""

import os
from unittest.mock import patch

import pytest

from config import AppConfig
from console.main import main, parse_args


@pytest.fixture
def fake_input(monkeypatch):
    """Replace input() with canned answers, raising EOFError when they run out."""

    def _install(*answers: str) -> list[str]:
        remaining = list(answers)
        printed: list[str] = []

        def _input(prompt: str = "") -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", _input)
        monkeypatch.setattr("builtins.print", lambda *args, **kwargs: printed.append(" ".join(map(str, args))))
        return printed

    return _install


class TestParseArgs:
    """Tests for option parsing."""

    def test_overrides(self):
        args = parse_args(["--chips", "50", "--seed", "4", "--results", "out.txt", "--deck-policy", "fail"])
        assert args.chips == 50
        assert args.seed == 4
        assert args.results == "out.txt"
        assert args.deck_policy == "fail"

    def test_negative_chips_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--chips", "-1"])

    def test_unknown_deck_policy_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--deck-policy", "ignore"])

    def test_log_level_defaults_to_warning(self, monkeypatch):
        """Test routine diagnostics stay off the console unless asked for."""
        with patch.dict(os.environ, {}, clear=True):
            monkeypatch.setattr("console.main.config", AppConfig())
            assert parse_args([]).log_level == "WARNING"

    def test_log_level_override(self):
        assert parse_args(["--log-level", "debug"]).log_level == "debug"


class TestMain:
    """Tests for running a game from the command line."""

    def test_one_round_then_quit(self, fake_input, tmp_path):
        """Test a round is logged whether the game ends or input runs out."""
        results = tmp_path / "results.txt"
        printed = fake_input("10", "s")

        code = main(["--chips", "10", "--seed", "3", "--results", str(results)])

        assert code in (0, 130)
        lines = results.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("Player Score: ")
        assert lines[1] in ("Player wins.", "Dealer wins.")
        assert lines[2] == ""
        if code == 0:
            assert printed[-1] == "You have run out of chips. Game over."

    def test_unwritable_results_exit_code(self, fake_input, tmp_path):
        printed = fake_input("10", "s")

        code = main(["--chips", "10", "--seed", "3", "--results", str(tmp_path / "missing" / "r.txt")])

        assert code == 1
        assert printed[-1].startswith("Could not write the result log")

    def test_zero_chips_exits_cleanly(self, fake_input, tmp_path):
        printed = fake_input()

        code = main(["--chips", "0", "--results", str(tmp_path / "r.txt")])

        assert code == 0
        assert printed == ["You have run out of chips. Game over."]
        assert not (tmp_path / "r.txt").exists()

    def test_deck_exhaustion_under_fail_policy(self, fake_input, tmp_path):
        """Test the game stops with the open bet returned once the deck runs dry."""
        printed = fake_input(*["1", "s"] * 40)

        code = main(["--chips", "100", "--seed", "5", "--deck-policy", "fail", "--results", str(tmp_path / "r.txt")])

        assert code == 1
        assert printed[-1].startswith("The deck is out of cards. Your bet was returned")

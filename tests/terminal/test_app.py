"""End-to-end tests for the terminal game loop."""

import io
import sys
from random import Random
from unittest.mock import Mock

import pytest

from blackjack.game import Outcome
from config import AppConfig, GameConfig
from terminal_ui import app
from terminal_ui.app import read_choice, run_game
from terminal_ui.console import PROMPT


def play(rigged_deck, draw_order, typed):
    out = io.StringIO()
    outcome = run_game(stdin=io.StringIO(typed), stdout=out, deck=rigged_deck(*draw_order))
    return outcome, out.getvalue().splitlines()


class TestRunGame:
    """Tests for run_game."""

    def test_stay_and_win(self, rigged_deck):
        outcome, lines = play(rigged_deck, ("10", "K", "Q", "7"), "s\n")
        assert outcome == Outcome.PLAYER_WIN
        assert lines == [
            "Dealer draws first card.",
            "Player receives two cards.",
            "Player's total is 20",
            "K Q",
            "Dealer's total is 10",
            "10",
            PROMPT,
            "Player's total is 20",
            "K Q",
            "Dealer's total is 17",
            "10 7",
            "You win!",
        ]

    def test_hit_and_bust(self, rigged_deck):
        outcome, lines = play(rigged_deck, ("5", "K", "9", "8"), "H\nS\n")
        assert outcome == Outcome.PLAYER_BUST
        assert lines[-5:] == [
            "Player's total is 27",
            "K 9 8",
            "Dealer's total is 5",
            "5",
            "You busted! You lose!",
        ]
        # No second prompt once the player busts
        assert lines.count(PROMPT) == 1

    def test_invalid_choice_reprompts(self, rigged_deck):
        outcome, lines = play(rigged_deck, ("10", "9", "7", "8"), "x\n\n  s  \n")
        assert outcome == Outcome.DEALER_WIN
        assert lines.count("Not a valid choice") == 2
        assert lines.count(PROMPT) == 3
        assert lines[-1] == "Dealer wins!"

    def test_dealer_busts(self, rigged_deck):
        _, lines = play(rigged_deck, ("6", "K", "9", "7", "Q"), "s\n")
        assert lines[-3:] == ["Dealer's total is 23", "6 7 Q", "The dealer busts! You Win!"]

    def test_tie(self, rigged_deck):
        _, lines = play(rigged_deck, ("J", "10", "7", "5", "2"), "S\n")
        assert lines[-1] == "It's a tie!"

    def test_quit_prints_no_outcome(self, rigged_deck):
        outcome, lines = play(rigged_deck, ("5", "K", "9"), "q\n")
        assert outcome == Outcome.QUIT
        assert lines[-1] == PROMPT

    def test_configured_opening_deal_is_announced(self, rigged_deck, monkeypatch):
        monkeypatch.setattr(app, "config", AppConfig(game=GameConfig(initial_player_cards=3, seed=None)))
        out = io.StringIO()
        run_game(stdin=io.StringIO("q\n"), stdout=out, deck=rigged_deck("5", "2", "3", "4"))
        lines = out.getvalue().splitlines()
        assert lines[1] == "Player receives three cards."
        assert lines[3] == "2 3 4"

    def test_shuffled_game_runs(self):
        out = io.StringIO()
        outcome = run_game(stdin=io.StringIO("s\n"), stdout=out, rng=Random(7))
        assert outcome in (
            Outcome.DEALER_BUST,
            Outcome.DEALER_WIN,
            Outcome.PLAYER_WIN,
            Outcome.TIE,
        )
        assert out.getvalue().startswith("Dealer draws first card.\n")


class TestReadChoice:
    """Tests for input-read failures."""

    def test_returns_line(self):
        assert read_choice(io.StringIO("h\n")) == "h\n"

    def test_end_of_input_is_fatal(self):
        with pytest.raises(SystemExit, match="Failed to read line"):
            read_choice(io.StringIO(""))

    def test_stream_error_is_fatal(self, caplog):
        stdin = Mock()
        stdin.readline.side_effect = OSError("stream closed")
        with pytest.raises(SystemExit, match="stream closed"):
            read_choice(stdin)
        assert "Failed to read line" in caplog.text

    def test_game_aborts_when_input_ends(self, rigged_deck):
        out = io.StringIO()
        with pytest.raises(SystemExit):
            run_game(stdin=io.StringIO("x\n"), stdout=out, deck=rigged_deck("5", "K", "9"))
        assert "Not a valid choice" in out.getvalue()


class TestMain:
    """Tests for the console entry point."""

    def test_main_uses_standard_streams(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("q\n"))
        monkeypatch.setattr(app, "setup_logging", lambda level=None: None)
        app.main()
        out = capsys.readouterr().out
        assert out.startswith("Dealer draws first card.\nPlayer receives two cards.\n")
        assert out.endswith(PROMPT + "\n")

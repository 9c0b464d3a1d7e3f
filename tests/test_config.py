"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from config import AppConfig, GameConfig, LoggingConfig


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

            assert config.dealer_stands_on == 17
            assert config.initial_player_cards == 2
            assert config.seed is None

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "1234"}):
            assert GameConfig().seed == 1234

    def test_blank_seed_ignored(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "  "}):
            assert GameConfig().seed is None

    def test_invalid_seed_rejected(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "abc"}):
            with pytest.raises(ValueError, match="Invalid BLACKJACK_SEED"):
                GameConfig()


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_debug_default_false(self):
        with patch.dict(os.environ, {}, clear=True):
            assert AppConfig().debug is False

    def test_debug_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "TRUE"}):
            assert AppConfig().debug is True

    def test_nested_configs(self):
        config = AppConfig()
        assert isinstance(config.game, GameConfig)
        assert isinstance(config.logging, LoggingConfig)

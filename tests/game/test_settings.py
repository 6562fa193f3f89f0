"""Tests for GameSettings."""

import dataclasses

import pytest

from kingside.core.enums import Color
from kingside.game.interfaces import PlayerControl
from kingside.game.player import AIPlayer, HumanPlayer
from kingside.game.settings import GameSettings


class TestGameSettings:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.control(Color.WHITE) == PlayerControl.HUMAN
        assert settings.control(Color.BLACK) == PlayerControl.HUMAN
        assert settings.search_depth == 2
        assert settings.seed is None
        assert settings.max_plies is None

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameSettings().search_depth = 3  # type: ignore[misc]

    def test_make_players(self) -> None:
        white, black = GameSettings(white=PlayerControl.AI, search_depth=1).make_players()
        assert isinstance(white, AIPlayer)
        assert isinstance(black, HumanPlayer)
        assert white.color == Color.WHITE
        assert black.color == Color.BLACK
        assert white.limits.max_depth == 1

    def test_ai_sides_share_engine(self) -> None:
        white, black = GameSettings(PlayerControl.AI, PlayerControl.AI).make_players()
        assert isinstance(white, AIPlayer) and isinstance(black, AIPlayer)
        assert white._engine is black._engine

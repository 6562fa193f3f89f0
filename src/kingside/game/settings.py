"""Game configuration: who controls each side and how hard the AI searches."""

from __future__ import annotations

import random
from dataclasses import dataclass

from kingside.core.enums import Color
from kingside.engine.search import SearchLimits
from kingside.engine.shallow_search import ShallowSearchEngine
from kingside.game.interfaces import IPlayer, PlayerControl
from kingside.game.player import AIPlayer, HumanPlayer


@dataclass(slots=True, frozen=True)
class GameSettings:
    """Per-side control plus search configuration.

    ``seed`` makes AI play reproducible; ``max_plies`` caps the number of
    half-moves :meth:`GameController.run` will play.
    """

    white: PlayerControl = PlayerControl.HUMAN
    black: PlayerControl = PlayerControl.HUMAN
    search_depth: int = 2
    seed: int | None = None
    max_plies: int | None = None

    def control(self, color: Color) -> PlayerControl:
        return self.white if color == Color.WHITE else self.black

    def make_players(self) -> tuple[IPlayer, IPlayer]:
        """Build ``(white, black)`` players; AI sides share one engine."""
        engine = ShallowSearchEngine(random.Random(self.seed))
        limits = SearchLimits(max_depth=self.search_depth)

        def build(color: Color) -> IPlayer:
            if self.control(color) == PlayerControl.AI:
                return AIPlayer(color, engine, limits)
            return HumanPlayer(color)

        return build(Color.WHITE), build(Color.BLACK)

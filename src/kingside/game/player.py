"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.engine.search import SearchLimits
from kingside.game.interfaces import IPlayer

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.enums import Color
    from kingside.core.move import Move
    from kingside.engine.search import IEngine


class HumanPlayer(IPlayer):
    """A human participant — moves come from the front end."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Move | None:
        return None  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """An AI participant that asks an engine for its move.

    Args:
        color: Side the AI plays.
        engine: Search engine consulted on every turn.
        limits: Search limits passed to the engine.
        name: Display name.
    """

    __slots__ = ("_color", "_engine", "_limits", "_name")

    def __init__(
        self,
        color: Color,
        engine: IEngine,
        limits: SearchLimits | None = None,
        name: str = "",
    ) -> None:
        self._color = color
        self._engine = engine
        self._limits = limits if limits is not None else SearchLimits()
        self._name = name or f"Computer ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def choose_move(self, board: Board) -> Move | None:
        result = self._engine.search(board, self._color, self._limits)
        return result.best_move

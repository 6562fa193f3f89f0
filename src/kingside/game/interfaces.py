"""Abstract interfaces for the game layer.

The :class:`~kingside.game.controller.GameController` depends on these
ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.enums import Color
    from kingside.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


class PlayerControl(IntEnum):
    """Who decides the moves for one side."""

    HUMAN = auto()
    AI = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Move | None:
        """Pick a move on *board*.

        Humans return ``None``: their moves arrive through
        ``GameController.submit_move``.  AI players return the engine's
        choice, or ``None`` when they have no legal move.
        """

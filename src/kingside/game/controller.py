"""GameController — the central orchestrator of a chess game.

Coordinates: Players, Board, Outcome.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingside.core.board import Board
from kingside.core.enums import Color, GameResult
from kingside.core.move import Move
from kingside.core.outcome import Outcome
from kingside.game.interfaces import GamePhase, IPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Color, Board], None]  # move, mover, board after
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, switches turns, asks AI
    players for moves and notifies listeners.

    Everything runs synchronously on the caller's thread.  Human moves
    arrive through :meth:`submit_move`; AI turns are played by
    :meth:`step` / :meth:`run`.
    """

    __slots__ = (
        "_board",
        "_side_to_move",
        "_phase",
        "_result",
        "_ply_count",
        "_players",
        "events",
    )

    def __init__(self) -> None:
        self._board = Board.initial()
        self._side_to_move = Color.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._ply_count = 0
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return self._ply_count

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return self._board.legal_moves(self._side_to_move)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game, optionally from a prepared *board*."""
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._board = board if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._result = GameResult.IN_PROGRESS
        self._ply_count = 0
        _LOGGER.info("New game: %s vs %s", white.name, black.name)

        if self._check_game_over():
            return
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move. Returns True if legal and applied."""
        if self.is_game_over:
            return False
        if self._phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        mover = self._side_to_move
        piece = self._board[move.from_sq]
        if piece is None or piece.color != mover:
            _LOGGER.debug("Rejected %s: not %s's piece", move, mover)
            return False
        if not self._board.apply_move(move):
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        self._ply_count += 1
        self._side_to_move = mover.opposite
        self._emit_move(move, mover)

        if self._check_game_over():
            return True
        self._prompt_current_player()
        return True

    def step(self) -> bool:
        """Let the current AI player move. Returns True if a move was played."""
        cp = self.current_player
        if self.is_game_over or cp is None or cp.is_human:
            return False
        move = cp.choose_move(self._board)
        if move is None:
            return False
        return self.submit_move(move)

    def run(self, max_plies: int | None = None) -> GameResult:
        """Play AI turns until the game ends, a human is to move, or
        *max_plies* half-moves have been played in total."""
        while max_plies is None or self._ply_count < max_plies:
            if not self.step():
                break
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_game_over(self) -> bool:
        result = Outcome.game_result(self._board, self._side_to_move)
        if result == GameResult.IN_PROGRESS:
            return False
        self._result = result
        _LOGGER.info("Game over after %d plies: %s", self._ply_count, result.name)
        self._emit_game_over(result)
        return True

    def _prompt_current_player(self) -> None:
        cp = self.current_player
        if cp is None or cp.is_human:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._emit_phase(GamePhase.THINKING)

    def _emit_move(self, move: Move, mover: Color) -> None:
        for cb in self.events.on_move:
            cb(move, mover, self._board)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

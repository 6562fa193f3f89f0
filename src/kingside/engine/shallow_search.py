"""Shallow randomised material search."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from kingside.core.board import Board
from kingside.core.enums import Color
from kingside.core.move import Move
from kingside.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_FOLLOW_UP_DIVISOR = 5
_SLACK_PROBABILITY = 0.25
_SLACK_STEP = 2


@dataclass(slots=True)
class _ScoredMove:
    board: Board
    move: Move
    score: int


class ShallowSearchEngine(IEngine):
    """Material-only searcher that picks randomly among near-best moves.

    Each legal move is scored by the mover's material after it, lowered to
    the worst opponent reply (searched one ply shallower) and raised by a
    fifth of the best material the mover could reach with a second move.
    The acceptance bar is the best score, relaxed by a random number of
    small steps so play does not repeat.
    """

    __slots__ = ("_rng", "_nodes")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._nodes = 0

    def search(self, board: Board, color: Color, limits: SearchLimits) -> SearchResult:
        if limits.max_depth < 0:
            raise ValueError("Search depth must be >= 0")

        self._nodes = 0
        candidates = self._plan(board, color, limits.max_depth)
        if not candidates:
            _LOGGER.debug("No legal move for %s", color)
            return SearchResult(None, 0, limits.max_depth, self._nodes)

        chosen = candidates[self._rng.randrange(len(candidates))]
        _LOGGER.debug(
            "%s plays %s (score %d, %d candidates, %d nodes)",
            color,
            chosen.move,
            chosen.score,
            len(candidates),
            self._nodes,
        )
        return SearchResult(chosen.move, chosen.score, limits.max_depth, self._nodes)

    def _plan(self, board: Board, color: Color, depth: int) -> list[_ScoredMove]:
        scored: list[_ScoredMove] = []
        for move in board.legal_moves(color):
            self._nodes += 1
            after = board.copy()
            after.force_move(move)

            follow_up = 0
            score = after.score(color)
            if depth > 0:
                for follow in self._plan(after, color, 0):
                    follow_up = max(follow_up, follow.board.score(color))
                for reply in self._plan(after, color.opposite, depth - 1):
                    score = min(score, reply.board.score(color))

            scored.append(_ScoredMove(after, move, score + follow_up // _FOLLOW_UP_DIVISOR))

        if not scored:
            return scored

        bar = max(s.score for s in scored)
        while self._rng.random() < _SLACK_PROBABILITY:
            bar -= _SLACK_STEP
        return [s for s in scored if s.score >= bar]

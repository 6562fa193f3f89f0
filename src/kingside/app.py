"""Command-line entry point: play a game in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys

from kingside.core.enums import Color, GameResult
from kingside.core.notation import parse_move
from kingside.game.controller import GameController
from kingside.game.interfaces import PlayerControl
from kingside.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

_CONTROLS = {"human": PlayerControl.HUMAN, "ai": PlayerControl.AI}


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kingside",
        description="Play chess in the terminal. Both sides default to the AI.",
    )
    parser.add_argument("--white", choices=sorted(_CONTROLS), default="ai")
    parser.add_argument("--black", choices=sorted(_CONTROLS), default="ai")
    parser.add_argument("--depth", type=int, default=2, help="AI search depth")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--max-plies", type=int, default=None, help="stop after this many half-moves"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return GameSettings(
        white=_CONTROLS[args.white],
        black=_CONTROLS[args.black],
        search_depth=args.depth,
        seed=args.seed,
        max_plies=args.max_plies,
    )


def describe_result(ctrl: GameController) -> str:
    if ctrl.result == GameResult.DRAW:
        return "stalemate"
    if ctrl.result == GameResult.WHITE_WINS:
        return "checkmate, white won"
    if ctrl.result == GameResult.BLACK_WINS:
        return "checkmate, black won"
    return f"stopped after {ctrl.ply_count} plies"


def _read_human_move(ctrl: GameController) -> bool:
    """Prompt until a legal move is played. Returns False on end of input."""
    color = ctrl.side_to_move
    while True:
        try:
            text = input(f"{color} to move (e.g. e2 e4): ")
        except EOFError:
            return False
        try:
            move = parse_move(text)
        except ValueError as exc:
            print(exc)
            continue
        if ctrl.submit_move(move):
            return True
        print(f"Illegal move: {move}")


def play(settings: GameSettings) -> GameController:
    """Play a game to completion (or until ``settings.max_plies``)."""
    ctrl = GameController()
    ctrl.events.on_move.append(
        lambda move, mover, board: print(f"{mover}: {move}\n{board!r}\n")
    )
    ctrl.new_game(*settings.make_players())
    print(f"{ctrl.board!r}\n")

    while not ctrl.is_game_over:
        if settings.max_plies is not None and ctrl.ply_count >= settings.max_plies:
            break
        cp = ctrl.current_player
        if cp is not None and cp.is_human:
            if not _read_human_move(ctrl):
                break
        elif not ctrl.step():
            break
    return ctrl


def main(argv: list[str] | None = None) -> int:
    """Launch a terminal game."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.depth < 0:
        print("--depth must be >= 0", file=sys.stderr)
        return 2

    settings = settings_from_args(args)
    _LOGGER.info(
        "Starting game: white=%s black=%s depth=%d seed=%s",
        args.white,
        args.black,
        settings.search_depth,
        settings.seed,
    )
    ctrl = play(settings)
    print(describe_result(ctrl))
    return 0


if __name__ == "__main__":
    sys.exit(main())

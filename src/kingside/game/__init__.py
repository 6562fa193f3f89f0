"""Game management layer — controller, players, settings.

Quick start::

    from kingside.game import GameController, GameSettings, PlayerControl

    settings = GameSettings(white=PlayerControl.AI, black=PlayerControl.AI, seed=1)
    ctrl = GameController()
    ctrl.new_game(*settings.make_players())
    ctrl.run(max_plies=40)
"""

from kingside.game.controller import GameController, GameEvents
from kingside.game.interfaces import GamePhase, IPlayer, PlayerControl
from kingside.game.player import AIPlayer, HumanPlayer
from kingside.game.settings import GameSettings

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    "PlayerControl",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameSettings",
    "HumanPlayer",
]

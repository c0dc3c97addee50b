"""Game management layer — owns the board, commits moves, notifies listeners.

Quick start::

    from chesslite.game import GameController

    ctrl = GameController()
    ctrl.events.on_move.append(lambda record, board: print(record))
    ctrl.submit_move((1, 4), (3, 4))
"""

from chesslite.game.controller import GameController, GameEvents
from chesslite.game.interfaces import IGameController, MoveRecord

__all__ = [
    # Interfaces
    "IGameController",
    "MoveRecord",
    # Concrete
    "GameController",
    "GameEvents",
]

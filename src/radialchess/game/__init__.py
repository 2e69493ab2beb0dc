"""Game management layer — controller, render metrics, events.

Quick start::

    from radialchess.game import GameController

    ctrl = GameController()
    ctrl.resize(800, 800)
    ctrl.tap(400, 400)
"""

from radialchess.game.controller import GameController, GameEvents
from radialchess.game.metrics import BoardMetrics

__all__ = [
    "BoardMetrics",
    "GameController",
    "GameEvents",
]

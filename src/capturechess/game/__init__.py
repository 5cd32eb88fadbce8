"""Game management layer — controller, state, phase machine.

Quick start::

    from capturechess.core import parse_square
    from capturechess.game import GameController, MoveOutcome

    ctrl = GameController()
    outcome = ctrl.attempt_move(parse_square("e2"), parse_square("e4"))
    assert outcome is MoveOutcome.ACCEPTED
"""

from capturechess.game.controller import GameController, GameEvents
from capturechess.game.interfaces import GamePhase, IGameController, MoveOutcome
from capturechess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveOutcome",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]

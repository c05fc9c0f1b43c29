"""Game management layer — controller, players, state machine.

Quick start::

    from ataxxie.core import PieceColor, parse_move, parse_square
    from ataxxie.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        red=HumanPlayer(PieceColor.RED, "Alice"),
        blue=HumanPlayer(PieceColor.BLUE, "Bob"),
        blocks=[parse_square("b2")],
    )
    ctrl.submit_move(parse_move("a7-b7"))
"""

from ataxxie.game.controller import GameController, GameEvents
from ataxxie.game.interfaces import GamePhase, IGameController, IPlayer
from ataxxie.game.player import AIPlayer, HumanPlayer
from ataxxie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]

"""Core domain layer — pure Ataxx rules with zero external dependencies.

Quick start::

    from ataxxie.core import Position, MoveGenerator, parse_move

    pos = Position()
    pos.make_move(parse_move("a7-b7"))
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move)
    pos.undo()
"""

from ataxxie.core.board import Board
from ataxxie.core.enums import GameResult, MoveKind, PieceColor
from ataxxie.core.errors import (
    AtaxxError,
    IllegalBlockPlacement,
    IllegalMove,
    UndoUnderflow,
)
from ataxxie.core.move import PASS, Move, parse_move
from ataxxie.core.move_generator import MoveGenerator
from ataxxie.core.notation import (
    STARTING_LAYOUT,
    position_from_layout,
    position_to_layout,
)
from ataxxie.core.position import Position, RuleSet
from ataxxie.core.rules import Rules
from ataxxie.core.types import (
    JUMP_LIMIT,
    Square,
    index,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "MoveKind",
    "PieceColor",
    # Types / helpers
    "JUMP_LIMIT",
    "Square",
    "index",
    "parse_square",
    "square_name",
    # Errors
    "AtaxxError",
    "IllegalBlockPlacement",
    "IllegalMove",
    "UndoUnderflow",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "PASS",
    "Position",
    "RuleSet",
    "Rules",
    "parse_move",
    # Notation
    "STARTING_LAYOUT",
    "position_from_layout",
    "position_to_layout",
]

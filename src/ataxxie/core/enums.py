"""Core enumerations for the Ataxx domain."""

from __future__ import annotations

from enum import IntEnum


class PieceColor(IntEnum):
    """Contents of a single square."""

    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    @property
    def opposite(self) -> PieceColor:
        """RED <-> BLUE; EMPTY and BLOCKED have no opponent and map to themselves."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @property
    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    def __str__(self) -> str:
        return self.name.lower()


class MoveKind(IntEnum):
    """Move classification."""

    PASS = 0
    EXTEND = 1
    JUMP = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLUE_WINS = 2
    DRAW = 3

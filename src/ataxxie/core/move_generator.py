"""Candidate and legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ataxxie.core.enums import MoveKind, PieceColor
from ataxxie.core.move import PASS, Move
from ataxxie.core.types import INTERIOR_SQUARES, Square, neighbor

if TYPE_CHECKING:
    from ataxxie.core.position import Position


# (offset, kind) for every square within distance 2, ordered by row delta
# then column delta.  Together with the column-major INTERIOR_SQUARES this
# fixes the enumeration order the search depends on for tie-breaking.
_TARGETS: tuple[tuple[int, MoveKind], ...] = tuple(
    (
        neighbor(0, dc, dr),
        MoveKind.EXTEND if max(abs(dc), abs(dr)) == 1 else MoveKind.JUMP,
    )
    for dr in range(-2, 3)
    for dc in range(-2, 3)
    if dc or dr
)


class MoveGenerator:
    """Enumerates moves for a :class:`Position`."""

    __slots__ = ("_position",)

    def __init__(self, position: Position) -> None:
        self._position = position

    def candidate_moves(self, color: PieceColor | None = None) -> list[Move]:
        """Every extend/jump shape from a *color* piece, legal or not.

        Order: source column a-g, source row 1-7, row delta -2..2,
        column delta -2..2.  Targets in the border are included; they are
        blocked and therefore fail the legality check.
        """
        if color is None:
            color = self._position.side_to_move
        cells = self._position.board._cells
        moves: list[Move] = []
        for from_sq in INTERIOR_SQUARES:
            if cells[from_sq] != color:
                continue
            for offset, kind in _TARGETS:
                moves.append(Move(kind, from_sq, from_sq + offset))
        return moves

    def generate_legal_moves(self) -> list[Move]:
        """Legal moves for the side to move, in candidate order.

        When the side to move has no extend or jump the only legal move is
        a pass.
        """
        position = self._position
        color = position.side_to_move
        cells = position.board._cells
        moves: list[Move] = []
        for from_sq in INTERIOR_SQUARES:
            if cells[from_sq] != color:
                continue
            for offset, kind in _TARGETS:
                to_sq: Square = from_sq + offset
                if cells[to_sq] == PieceColor.EMPTY:
                    moves.append(Move(kind, from_sq, to_sq))
        if not moves:
            return [PASS]
        return moves

    def has_legal_move(self, color: PieceColor) -> bool:
        """Whether *color* has any extend or jump."""
        return self._position.can_move(color)

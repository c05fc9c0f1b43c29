"""Domain error conditions raised by the rules core."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ataxxie.core.types import Square, is_interior, square_name

if TYPE_CHECKING:
    from ataxxie.core.move import Move


class AtaxxError(Exception):
    """Base class for rule violations reported to callers."""


class IllegalMove(AtaxxError, ValueError):
    """The move fails the legality check; the position was left unchanged."""

    def __init__(self, move: Move, reason: str = "") -> None:
        self.move = move
        message = f"Illegal move: {move}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class IllegalBlockPlacement(AtaxxError, ValueError):
    """A block target (or one of its reflections) is not empty."""

    def __init__(self, sq: Square) -> None:
        self.square = sq
        name = square_name(sq) if is_interior(sq) else repr(sq)
        super().__init__(f"Illegal block placement: {name}")


class UndoUnderflow(AtaxxError, RuntimeError):
    """``undo()`` was called with no recorded move to take back."""

    def __init__(self) -> None:
        super().__init__("Nothing to undo")

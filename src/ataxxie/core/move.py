"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from ataxxie.core.enums import MoveKind
from ataxxie.core.types import Square, distance, is_interior, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a pass, an extend or a jump.

    Use :meth:`pass_move` and :meth:`between` rather than the raw
    constructor; they enforce that a pass carries no squares and that
    extends/jumps join two distinct board squares at the right distance.
    """

    kind: MoveKind
    from_sq: Square | None = None
    to_sq: Square | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def pass_move(cls) -> Move:
        return cls(MoveKind.PASS)

    @classmethod
    def between(cls, from_sq: Square, to_sq: Square) -> Move:
        """Extend (distance 1) or jump (distance 2) from *from_sq* to *to_sq*."""
        if not (is_interior(from_sq) and is_interior(to_sq)):
            raise ValueError(f"Move squares must be on the board: {from_sq}, {to_sq}")
        dist = distance(from_sq, to_sq)
        if dist == 1:
            return cls(MoveKind.EXTEND, from_sq, to_sq)
        if dist == 2:
            return cls(MoveKind.JUMP, from_sq, to_sq)
        raise ValueError(
            f"Squares {square_name(from_sq)} and {square_name(to_sq)} "
            f"are at distance {dist}, not 1 or 2"
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_pass(self) -> bool:
        return self.kind == MoveKind.PASS

    @property
    def is_extend(self) -> bool:
        return self.kind == MoveKind.EXTEND

    @property
    def is_jump(self) -> bool:
        return self.kind == MoveKind.JUMP

    @property
    def distance(self) -> int:
        """Chebyshev distance travelled (0 for a pass)."""
        if self.from_sq is None or self.to_sq is None:
            return 0
        return distance(self.from_sq, self.to_sq)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.from_sq is None or self.to_sq is None:
            return "-"
        return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"


PASS = Move.pass_move()


def parse_move(text: str) -> Move:
    """Parse ``"a7-b7"`` (or ``"a7b7"``) into a move; ``"-"`` or ``"pass"`` is a pass."""
    token = text.strip().lower()
    if token in ("-", "pass"):
        return PASS
    token = token.replace("-", "")
    if len(token) != 4:
        raise ValueError(f"Invalid move: {text!r}")
    return Move.between(parse_square(token[:2]), parse_square(token[2:]))

"""Layout strings: a FEN-style text form of an Ataxx position.

``"<row 7>/<row 6>/.../<row 1> <side> [<jumps>]"`` where each row lists
columns a-g using ``r`` (red), ``b`` (blue), ``x`` (blocked) and digits for
runs of empty squares; ``<side>`` is ``r`` or ``b`` and the optional
``<jumps>`` is the non-extend counter.
"""

from __future__ import annotations

from ataxxie.core.board import Board
from ataxxie.core.enums import PieceColor
from ataxxie.core.position import Position, RuleSet
from ataxxie.core.types import SIDE, index

STARTING_LAYOUT = "r5b/7/7/7/7/7/b5r r 0"

_PIECE_CHARS: dict[str, PieceColor] = {
    "r": PieceColor.RED,
    "b": PieceColor.BLUE,
    "x": PieceColor.BLOCKED,
}
_CHAR_FOR: dict[PieceColor, str] = {v: k for k, v in _PIECE_CHARS.items()}
_SIDES: dict[str, PieceColor] = {"r": PieceColor.RED, "b": PieceColor.BLUE}


def position_from_layout(layout: str, rules: RuleSet | None = None) -> Position:
    """Parse a layout string into a :class:`Position`."""
    parts = layout.split()
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid layout (need 2-3 fields): {layout!r}")

    placement, side_part = parts[:2]

    # 1. Squares
    rows = placement.split("/")
    if len(rows) != SIDE:
        raise ValueError(f"Invalid layout (must contain {SIDE} rows): {layout!r}")
    board = Board()
    for row_idx, row_text in enumerate(rows):
        row = SIDE - 1 - row_idx
        col = 0
        for ch in row_text.lower():
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= SIDE):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                col += step
            else:
                color = _PIECE_CHARS.get(ch)
                if color is None:
                    raise ValueError(f"Invalid layout character {ch!r}: {layout!r}")
                if col >= SIDE:
                    raise ValueError(f"Invalid layout row width: {layout!r}")
                board[index(col, row)] = color
                col += 1
            if col > SIDE:
                raise ValueError(f"Invalid layout row width: {layout!r}")
        if col != SIDE:
            raise ValueError(f"Invalid layout row width: {layout!r}")

    # 2. Side to move
    side = _SIDES.get(side_part.lower())
    if side is None:
        raise ValueError(f"Invalid layout side-to-move field: {side_part!r}")

    # 3. Non-extend counter (optional)
    jumps = 0
    if len(parts) > 2:
        if not parts[2].isdigit():
            raise ValueError(f"Invalid layout jump counter: {parts[2]!r}")
        jumps = int(parts[2])

    return Position(board, side, jumps, rules)


def position_to_layout(pos: Position) -> str:
    """Serialise a :class:`Position` to a layout string."""
    rows: list[str] = []
    for row in range(SIDE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(SIDE):
            value = pos.board[index(col, row)]
            if value == PieceColor.EMPTY:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += _CHAR_FOR[value]
        if empty:
            text += str(empty)
        rows.append(text)
    side = "r" if pos.side_to_move == PieceColor.RED else "b"
    return f"{'/'.join(rows)} {side} {pos.jump_count}"

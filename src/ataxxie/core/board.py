"""Board - square contents on a border-padded 7x7 grid."""

from __future__ import annotations

from ataxxie.core.enums import PieceColor
from ataxxie.core.types import (
    BOARD_CELLS,
    INTERIOR_SQUARES,
    SIDE,
    Square,
    index,
    is_interior,
    parse_square,
)

_INTERIOR_MASK: tuple[bool, ...] = tuple(is_interior(sq) for sq in range(BOARD_CELLS))
_COLOR_COUNT = len(PieceColor)
_CHARS: dict[PieceColor, str] = {
    PieceColor.EMPTY: "-",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.BLOCKED: "X",
}


def _empty_cells() -> list[PieceColor]:
    return [
        PieceColor.EMPTY if inside else PieceColor.BLOCKED for inside in _INTERIOR_MASK
    ]


def _empty_counts() -> list[int]:
    counts = [0] * _COLOR_COUNT
    counts[PieceColor.EMPTY] = SIDE * SIDE
    return counts


class Board:
    """Mutable 121-cell grid with incremental per-colour square counts.

    Only the 49 interior cells can be written; the border is blocked at
    construction and stays that way.  Counts cover interior cells only, so
    they always sum to 49.
    """

    __slots__ = ("_cells", "_counts")

    def __init__(self) -> None:
        self._cells: list[PieceColor] = _empty_cells()
        # [PieceColor] -> number of interior cells holding it.
        self._counts: list[int] = _empty_counts()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PieceColor:
        return self._cells[sq]

    def __setitem__(self, sq: Square, value: PieceColor) -> None:
        if not _INTERIOR_MASK[sq]:
            raise ValueError(f"Cannot write border square {sq}")
        old_value = self._cells[sq]
        if old_value == value:
            return
        self._counts[old_value] -= 1
        self._counts[value] += 1
        self._cells[sq] = value

    def get(self, name: str) -> PieceColor:
        """Contents of the square named *name*, e.g. ``board.get("a7")``."""
        return self._cells[parse_square(name)]

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq] == PieceColor.EMPTY

    # -- Query helpers ------------------------------------------------------

    def count(self, color: PieceColor) -> int:
        """Number of interior squares holding *color*."""
        return self._counts[color]

    def pieces(self, color: PieceColor) -> list[Square]:
        """Interior squares holding *color*, in column-major order."""
        cells = self._cells
        return [sq for sq in INTERIOR_SQUARES if cells[sq] == color]

    def recount(self) -> dict[PieceColor, int]:
        """Counts rebuilt from a full scan of the interior."""
        counts = {color: 0 for color in PieceColor}
        for sq in INTERIOR_SQUARES:
            counts[self._cells[sq]] += 1
        return counts

    def border_intact(self) -> bool:
        """Whether every border cell still holds BLOCKED."""
        return all(
            inside or cell == PieceColor.BLOCKED
            for inside, cell in zip(_INTERIOR_MASK, self._cells)
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._cells = _empty_cells()
        self._counts = _empty_counts()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting layout: Red on a7 and g1, Blue on a1 and g7."""
        b = cls()
        b[index(0, SIDE - 1)] = PieceColor.RED
        b[index(SIDE - 1, 0)] = PieceColor.RED
        b[index(0, 0)] = PieceColor.BLUE
        b[index(SIDE - 1, SIDE - 1)] = PieceColor.BLUE
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(SIDE - 1, -1, -1):
            cells = (_CHARS[self._cells[index(col, row)]] for col in range(SIDE))
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g")
        return "\n".join(rows)

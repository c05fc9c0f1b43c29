"""Square type alias and coordinate helpers.

The 7x7 playing area sits inside a two-cell border of permanently blocked
cells, so every square within distance 2 of an interior square is a valid
list index and no neighbour scan needs a bounds check::

    index(col, row) = (row + 2) * 11 + (col + 2)

Columns a-g map to 0-6 and rows 1-7 map to 0-6.  Offsets in -2..8 address
the border.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0-120

SIDE = 7
BORDER = 2
EXTENDED_SIDE = SIDE + 2 * BORDER
BOARD_CELLS = EXTENDED_SIDE * EXTENDED_SIDE

# Consecutive non-extending moves that end the game.
JUMP_LIMIT = 25

_COLUMNS = "abcdefg"
_ROWS = "1234567"


def index(col: int, row: int) -> Square:
    """Linearized index of column *col* and row *row* (0-based, border allowed)."""
    return (row + BORDER) * EXTENDED_SIDE + (col + BORDER)


def col_of(sq: Square) -> int:
    """Column offset; 0-6 on the board, negative or > 6 in the border."""
    return sq % EXTENDED_SIDE - BORDER


def row_of(sq: Square) -> int:
    """Row offset; 0-6 on the board, negative or > 6 in the border."""
    return sq // EXTENDED_SIDE - BORDER


def neighbor(sq: Square, dc: int, dr: int) -> Square:
    """Square *dc* columns and *dr* rows away from *sq*."""
    return sq + dc + dr * EXTENDED_SIDE


def is_interior(sq: Square) -> bool:
    """Whether *sq* lies on the 7x7 playing area."""
    if not 0 <= sq < BOARD_CELLS:
        return False
    return 0 <= col_of(sq) < SIDE and 0 <= row_of(sq) < SIDE


def distance(a: Square, b: Square) -> int:
    """Chebyshev distance between two squares."""
    return max(abs(col_of(a) - col_of(b)), abs(row_of(a) - row_of(b)))


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. index(0, 6) -> 'a7'."""
    if not is_interior(sq):
        raise ValueError(f"Not a board square: {sq!r}")
    return _COLUMNS[col_of(sq)] + _ROWS[row_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'b2' -> index(1, 1)."""
    if len(name) != 2 or name[0] not in _COLUMNS or name[1] not in _ROWS:
        raise ValueError(f"Invalid square name: {name!r}")
    return index(_COLUMNS.index(name[0]), _ROWS.index(name[1]))


def reflections(sq: Square) -> tuple[Square, Square, Square, Square]:
    """*sq* and its mirror images across the middle column, row and both."""
    col = col_of(sq)
    row = row_of(sq)
    mirror_col = SIDE - 1 - col
    mirror_row = SIDE - 1 - row
    return (
        sq,
        index(col, mirror_row),
        index(mirror_col, row),
        index(mirror_col, mirror_row),
    )


# Column-major scan order (a1, a2, ..., a7, b1, ..., g7).
INTERIOR_SQUARES: tuple[Square, ...] = tuple(
    index(col, row) for col in range(SIDE) for row in range(SIDE)
)

# Offsets of the eight adjacent squares.
ADJACENT_OFFSETS: tuple[int, ...] = tuple(
    neighbor(0, dc, dr)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if dc or dr
)

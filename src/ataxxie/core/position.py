"""Position — complete game state (board + side to move + jump counter) with make/undo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from ataxxie.core.board import Board
from ataxxie.core.enums import MoveKind, PieceColor
from ataxxie.core.errors import IllegalBlockPlacement, IllegalMove, UndoUnderflow
from ataxxie.core.move import PASS, Move
from ataxxie.core.types import (
    ADJACENT_OFFSETS,
    BORDER,
    INTERIOR_SQUARES,
    JUMP_LIMIT,
    SIDE,
    Square,
    distance,
    index,
    is_interior,
    neighbor,
    reflections,
)

# Offsets of every square within distance 2 (the 5x5 block minus its centre).
_REACH_OFFSETS: tuple[int, ...] = tuple(
    neighbor(0, dc, dr)
    for dr in range(-2, 3)
    for dc in range(-2, 3)
    if dc or dr
)

_EXPECTED_DISTANCE: dict[MoveKind, int] = {
    MoveKind.EXTEND: 1,
    MoveKind.JUMP: 2,
}


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Tunable rule parameters.

    Args:
        jump_limit: Consecutive non-extending moves that end the game.
        capture_resets_jump_count: Also reset the counter after a jump that
            flips at least one piece.  Off by default: only extends reset it.
    """

    jump_limit: int = JUMP_LIMIT
    capture_resets_jump_count: bool = False


@dataclass(frozen=True, slots=True)
class _FrameStart:
    """Undo-log sentinel opening one move's changes."""

    side_to_move: PieceColor
    jump_count: int


_LogEntry: TypeAlias = "_FrameStart | tuple[Square, PieceColor]"


class Position:
    """Full Ataxx position: board + side to move + non-extend counter.

    Every square written by :meth:`make_move` is recorded in an undo log,
    one frame per move, so :meth:`undo` restores the exact prior state
    without copying the board.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "jump_count",
        "rules",
        "_log",
        "_frames",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: PieceColor = PieceColor.RED,
        jump_count: int = 0,
        rules: RuleSet | None = None,
    ) -> None:
        if not side_to_move.is_piece:
            raise ValueError(f"Side to move must be red or blue, not {side_to_move}")
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.jump_count = jump_count
        self.rules = rules if rules is not None else RuleSet()
        self._log: list[_LogEntry] = []
        self._frames = 0

    # ── Queries ──────────────────────────────────────────────────────────

    def get(self, col: str, row: str) -> PieceColor:
        """Contents of column *col* ('a'-'g') and row *row* ('1'-'7').

        Up to two characters beyond either edge address the blocked border.
        """
        c = ord(col) - ord("a")
        r = ord(row) - ord("1")
        if not (-BORDER <= c < SIDE + BORDER and -BORDER <= r < SIDE + BORDER):
            raise ValueError(f"Square {col}{row} is outside the padded grid")
        return self.board[index(c, r)]

    @property
    def red_count(self) -> int:
        return self.board.count(PieceColor.RED)

    @property
    def blue_count(self) -> int:
        return self.board.count(PieceColor.BLUE)

    def count(self, color: PieceColor) -> int:
        return self.board.count(color)

    @property
    def undo_depth(self) -> int:
        """Number of moves that :meth:`undo` can take back."""
        return self._frames

    def can_move(self, color: PieceColor) -> bool:
        """Whether *color* has an extend or jump, ignoring whose turn it is."""
        cells = self.board._cells
        for sq in INTERIOR_SQUARES:
            if cells[sq] != color:
                continue
            for offset in _REACH_OFFSETS:
                if cells[sq + offset] == PieceColor.EMPTY:
                    return True
        return False

    def is_legal(self, move: Move) -> bool:
        """Whether the side to move may play *move* now."""
        return not self._illegal_reason(move)

    def is_terminal(self) -> bool:
        """Game over: nobody can move, a side has no pieces, or the jump limit is hit."""
        if self.red_count == 0 or self.blue_count == 0:
            return True
        if self.jump_count >= self.rules.jump_limit:
            return True
        return not self.can_move(PieceColor.RED) and not self.can_move(PieceColor.BLUE)

    def game_over(self) -> bool:
        return self.is_terminal()

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> int:
        """Apply *move*, recording one undo frame.  Returns the number of flips.

        Raises:
            IllegalMove: *move* is not legal here; nothing was changed.
        """
        reason = self._illegal_reason(move)
        if reason:
            raise IllegalMove(move, reason)

        mover = self.side_to_move
        self._push_frame()
        if move.kind == MoveKind.PASS:
            self.side_to_move = mover.opposite
            return 0

        to_sq = move.to_sq
        assert move.from_sq is not None and to_sq is not None
        if move.kind == MoveKind.EXTEND:
            self._record_set(to_sq, mover)
            self.jump_count = 0
        else:
            self._record_set(move.from_sq, PieceColor.EMPTY)
            self._record_set(to_sq, mover)
            self.jump_count += 1

        # Single pass over direct neighbours; flipped pieces do not chain.
        opponent = mover.opposite
        cells = self.board._cells
        flipped = 0
        for offset in ADJACENT_OFFSETS:
            sq = to_sq + offset
            if cells[sq] == opponent:
                self._record_set(sq, mover)
                flipped += 1

        if (
            flipped
            and move.kind == MoveKind.JUMP
            and self.rules.capture_resets_jump_count
        ):
            self.jump_count = 0

        self.side_to_move = opponent
        return flipped

    def pass_turn(self) -> None:
        """Pass; legal only when the side to move has no extend or jump."""
        self.make_move(PASS)

    def undo(self) -> None:
        """Take back the most recent :meth:`make_move`.

        Raises:
            UndoUnderflow: no move has been recorded.
        """
        if not self._frames:
            raise UndoUnderflow()
        log = self._log
        board = self.board
        while True:
            entry = log.pop()
            if isinstance(entry, _FrameStart):
                break
            sq, prior = entry
            board[sq] = prior
        self.side_to_move = entry.side_to_move
        self.jump_count = entry.jump_count
        self._frames -= 1

    # ── Setup ────────────────────────────────────────────────────────────

    def legal_block(self, sq: Square) -> bool:
        """Whether a block may go on *sq*: it and its reflections are all empty."""
        if not is_interior(sq):
            return False
        return all(self.board.is_empty(target) for target in reflections(sq))

    def place_block(self, sq: Square) -> None:
        """Block *sq* and its three reflections.  Not recorded for undo.

        Raises:
            IllegalBlockPlacement: one of the four targets is not empty.
        """
        if not self.legal_block(sq):
            raise IllegalBlockPlacement(sq)
        for target in reflections(sq):
            self.board[target] = PieceColor.BLOCKED

    def reset(self) -> None:
        """Back to the four-corner starting layout, Red to move, no history."""
        self.board = Board.initial()
        self.side_to_move = PieceColor.RED
        self.jump_count = 0
        self._log = []
        self._frames = 0

    # ── Internals ────────────────────────────────────────────────────────

    def _illegal_reason(self, move: Move) -> str:
        if move.kind == MoveKind.PASS:
            if move.from_sq is not None or move.to_sq is not None:
                return "a pass names no squares"
            if self.can_move(self.side_to_move):
                return "passing is only allowed with no other move"
            return ""

        from_sq = move.from_sq
        to_sq = move.to_sq
        if from_sq is None or to_sq is None:
            return "missing square"
        if not (is_interior(from_sq) and is_interior(to_sq)):
            return "square off the board"
        if self.board[from_sq] != self.side_to_move:
            return f"no {self.side_to_move} piece on the source square"
        if self.board[to_sq] != PieceColor.EMPTY:
            return "destination is not empty"
        if distance(from_sq, to_sq) != _EXPECTED_DISTANCE.get(move.kind):
            return "distance does not match the move kind"
        return ""

    def _push_frame(self) -> None:
        self._log.append(_FrameStart(self.side_to_move, self.jump_count))
        self._frames += 1

    def _record_set(self, sq: Square, value: PieceColor) -> None:
        self._log.append((sq, self.board[sq]))
        self.board[sq] = value

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy without undo history."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            jump_count=self.jump_count,
            rules=self.rules,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.jump_count == other.jump_count
        )

    def __repr__(self) -> str:
        return (
            f"{self.board!r}\n"
            f"{self.side_to_move} to move, {self.red_count}-{self.blue_count}, "
            f"jumps {self.jump_count}"
        )

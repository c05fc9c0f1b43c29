"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ataxxie.core.enums import GameResult, PieceColor
from ataxxie.core.move_generator import MoveGenerator
from ataxxie.core.notation import (
    STARTING_LAYOUT,
    position_from_layout,
    position_to_layout,
)
from ataxxie.core.position import Position, RuleSet
from ataxxie.core.rules import Rules
from ataxxie.game.interfaces import GamePhase

if TYPE_CHECKING:
    from ataxxie.core.move import Move
    from ataxxie.core.types import Square


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: PieceColor
    flips: int
    layout_after: str


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history.

    This is a pure data/logic class — no threading, no UI.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.SETUP, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_layout: str = field(default=STARTING_LAYOUT, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        layout: str | None = None,
        blocks: Iterable[Square] = (),
        rules: RuleSet | None = None,
    ) -> None:
        """Initialise (or reset) the game and enter the setup phase."""
        self.position = position_from_layout(layout or STARTING_LAYOUT, rules)
        self.phase = GamePhase.SETUP
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        for sq in blocks:
            self.position.place_block(sq)
        self.start_layout = position_to_layout(self.position)

    def place_block(self, sq: Square) -> None:
        """Block *sq* and its reflections.  Only allowed during setup.

        Raises:
            RuntimeError: play has already started.
            IllegalBlockPlacement: a target square is not empty.
        """
        if self.phase != GamePhase.SETUP:
            raise RuntimeError("Blocks can only be placed during setup")
        self.position.place_block(sq)
        self.start_layout = position_to_layout(self.position)

    def start(self) -> None:
        """Leave setup; the game may already be over (e.g. everything blocked)."""
        self.phase = GamePhase.AWAITING_MOVE
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply *move* and return the history record.

        Raises:
            IllegalMove: the position rejected the move (state unchanged).
        """
        color = self.position.side_to_move
        flips = self.position.make_move(move)
        record = MoveRecord(
            move=move,
            color=color,
            flips=flips,
            layout_after=position_to_layout(self.position),
        )
        self.move_history.append(record)
        self._check_game_over()
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position.undo()

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> PieceColor:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of moves (passes included) played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER

"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ataxxie.core.enums import PieceColor
    from ataxxie.core.move import Move
    from ataxxie.core.position import Position, RuleSet
    from ataxxie.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for an Ataxx game."""

    SETUP = auto()  # blocks may be placed
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> PieceColor: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, position: Position) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (moves are entered elsewhere).
        For AI this kicks off a search.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        red: IPlayer,
        blue: IPlayer,
        layout: str | None = None,
        blocks: Iterable[Square] = (),
        start: bool = True,
        rules: RuleSet | None = None,
    ) -> None:
        """Set up a new game; with *start* False it stays in setup."""

    @abstractmethod
    def place_block(self, sq: Square) -> bool:
        """Place a block (and its reflections) during setup."""

    @abstractmethod
    def start(self) -> bool:
        """Leave setup and begin play."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""

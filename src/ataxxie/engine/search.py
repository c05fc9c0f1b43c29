"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ataxxie.core.move import Move
    from ataxxie.core.position import Position

CancelCheck = Callable[[], bool]

DEFAULT_DEPTH = 4


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = DEFAULT_DEPTH
    time_limit_ms: int | None = None


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``score`` is from Red's point of view (red count minus blue count at
    the leaves).  ``best_move`` is None only for a finished game.
    """

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for Ataxx engines used by the game layer."""

    def search(
        self,
        position: Position,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...

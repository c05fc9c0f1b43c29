"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ataxxie.core.enums import PieceColor
from ataxxie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from ataxxie.core.position import Position

MoveRequest = Callable[["Position", int], None]


class _SeatedPlayer(IPlayer):
    """Common storage for the colour and display name of a participant."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: PieceColor, name: str) -> None:
        if not color.is_piece:
            raise ValueError(f"A player must play red or blue, not {color}")
        self._color = color
        self._name = name

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name


class HumanPlayer(_SeatedPlayer):
    """A manually driven side; moves arrive via ``controller.submit_move()``."""

    __slots__ = ()

    def __init__(self, color: PieceColor, name: str = "") -> None:
        super().__init__(color, name or f"Player ({color})")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position) -> None:
        pass

    def cancel(self) -> None:
        pass


class AIPlayer(_SeatedPlayer):
    """An engine-driven side that hands each position to a callback.

    Every request is numbered.  *on_request_move* receives
    ``(position, request_id)``, the same signature as
    ``EngineWorker.request_move``, so a queued Qt signal can forward it
    directly.  When the answer comes back, :meth:`is_current` tells whether
    it still belongs to the outstanding request; answers to cancelled or
    superseded requests must be dropped.

    Args:
        color: Side the AI plays.
        name: Display name.
        on_request_move: Called when the controller asks the AI to think.
        on_cancel: ``() -> None`` called to abort a running search.
    """

    __slots__ = ("_on_request_move", "_on_cancel", "_request_id", "_pending")

    def __init__(
        self,
        color: PieceColor,
        name: str = "Engine",
        on_request_move: MoveRequest | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(color, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel
        self._request_id = 0
        self._pending = False

    @property
    def is_human(self) -> bool:
        return False

    @property
    def request_id(self) -> int:
        """Id of the most recent request (0 before the first one)."""
        return self._request_id

    @property
    def is_thinking(self) -> bool:
        return self._pending

    def is_current(self, request_id: int) -> bool:
        """Whether *request_id* is the outstanding, uncancelled request."""
        return self._pending and request_id == self._request_id

    def finish(self, request_id: int) -> bool:
        """Mark *request_id* as answered.  False for a stale id."""
        if not self.is_current(request_id):
            return False
        self._pending = False
        return True

    def request_move(self, position: Position) -> None:
        self._request_id += 1
        self._pending = True
        if self._on_request_move is not None:
            self._on_request_move(position, self._request_id)

    def cancel(self) -> None:
        self._pending = False
        if self._on_cancel is not None:
            self._on_cancel()

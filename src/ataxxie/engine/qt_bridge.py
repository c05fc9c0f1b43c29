"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from ataxxie.core.move import PASS
from ataxxie.core.position import Position
from ataxxie.engine.python_search import PythonSearchEngine
from ataxxie.engine.search import DEFAULT_DEPTH, IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


def _limits(max_depth: int, time_limit_ms: int | None) -> SearchLimits:
    if time_limit_ms is not None and time_limit_ms <= 0:
        time_limit_ms = None
    return SearchLimits(max_depth=max_depth, time_limit_ms=time_limit_ms)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and connect a queued signal to
    :meth:`request_move`.  Each request searches a private copy of the
    position, so the caller's board is never shared with the worker.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, int, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_DEPTH,
        time_limit_ms: int | None = None,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = engine or PythonSearchEngine()
        self._limits = _limits(max_depth, time_limit_ms)
        self._cancel_event = threading.Event()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search *position_obj* for the side to move and emit the outcome.

        A side with no extend or jump gets :data:`PASS` at once, without a
        search; a finished game yields ``search_no_move``.
        """
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        side = position_obj.side_to_move
        if not position_obj.is_terminal() and not position_obj.can_move(side):
            score = PythonSearchEngine.evaluate(position_obj)
            self.best_move_ready.emit(request_id, PASS, score, 0, 0)
            return

        try:
            result = self._engine.search(
                position_obj.copy(),
                self._limits,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.warning("Search request %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            _LOGGER.debug("Search request %d cancelled", request_id)
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int, int)
    def set_limits(self, max_depth: int, time_limit_ms: int) -> None:
        """Update search limits (takes effect on the next search)."""
        self._limits = _limits(max_depth, time_limit_ms)

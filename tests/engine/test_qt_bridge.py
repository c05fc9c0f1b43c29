"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from ataxxie.core.move import PASS, parse_move
from ataxxie.core.move_generator import MoveGenerator
from ataxxie.core.notation import STARTING_LAYOUT, position_from_layout
from ataxxie.core.position import Position
from ataxxie.engine.qt_bridge import EngineWorker
from ataxxie.engine.search import CancelCheck, SearchLimits, SearchResult


class _CancellingEngine:
    def __init__(self, worker: EngineWorker) -> None:
        self._worker = worker

    def search(
        self,
        position: Position,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        del is_cancelled
        legal = MoveGenerator(position).generate_legal_moves()
        self._worker.cancel()
        return SearchResult(best_move=legal[0], score=0, depth=1, nodes=1)


class _FailingEngine:
    def search(
        self,
        _position: Position,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        del is_cancelled
        raise RuntimeError("engine exploded")


class _RecordingEngine:
    def __init__(self) -> None:
        self.seen: list[Position] = []
        self.limits: list[SearchLimits] = []

    def search(
        self,
        position: Position,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        assert is_cancelled is not None and not is_cancelled()
        self.seen.append(position)
        self.limits.append(limits)
        move = MoveGenerator(position).generate_legal_moves()[0]
        return SearchResult(best_move=move, score=0, depth=limits.max_depth, nodes=1)


@pytest.mark.usefixtures("qapp")
class TestEngineWorker:
    def test_emits_best_move(self) -> None:
        position = position_from_layout(STARTING_LAYOUT)
        worker = EngineWorker(max_depth=1)

        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(position, 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        assert best_moves[0][1] == parse_move("a7-a6")
        assert best_moves[0][2] == 1
        assert best_moves[0][3] == 1
        assert len(errors) == 0

    def test_searches_a_private_copy(self) -> None:
        position = position_from_layout(STARTING_LAYOUT)
        engine = _RecordingEngine()
        worker = EngineWorker(max_depth=2, engine=engine)

        worker.request_move(position, 1)

        assert len(engine.seen) == 1
        assert engine.seen[0] is not position
        assert engine.seen[0] == position
        assert engine.limits[0] == SearchLimits(max_depth=2)

    def test_emits_cancelled_when_search_is_cancelled(self) -> None:
        position = position_from_layout(STARTING_LAYOUT)
        worker = EngineWorker()
        worker._engine = _CancellingEngine(worker)

        cancelled = QSignalSpy(worker.search_cancelled)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(position, 7)

        assert len(cancelled) == 1
        assert cancelled[0][0] == 7
        assert len(best_moves) == 0

    def test_cancel_flag_cleared_for_next_request(self) -> None:
        position = position_from_layout(STARTING_LAYOUT)
        engine = _RecordingEngine()
        worker = EngineWorker(engine=engine)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.cancel()
        worker.request_move(position, 8)

        assert len(best_moves) == 1

    def test_emits_no_move_for_finished_game(self) -> None:
        position = position_from_layout("7/7/7/7/7/7/r6 b")
        worker = EngineWorker(max_depth=2)

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(position, 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert no_move[0][1] == 1
        assert len(best_moves) == 0
        assert len(errors) == 0

    def test_emits_error_for_invalid_position(self) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a position", 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_emits_error_when_engine_raises(self) -> None:
        worker = EngineWorker(engine=_FailingEngine())
        errors = QSignalSpy(worker.search_error)

        worker.request_move(position_from_layout(STARTING_LAYOUT), 9)

        assert len(errors) == 1
        assert errors[0][0] == 9
        assert "exploded" in errors[0][1]

    def test_set_limits(self) -> None:
        worker = EngineWorker(max_depth=4, time_limit_ms=500)
        assert worker.limits == SearchLimits(max_depth=4, time_limit_ms=500)

        worker.set_limits(2, 0)

        assert worker.limits == SearchLimits(max_depth=2, time_limit_ms=None)

    def test_forced_pass_skips_search(self) -> None:
        position = position_from_layout("7/7/7/7/bbb4/bbb4/rbb4 r 0")
        engine = _RecordingEngine()
        worker = EngineWorker(engine=engine)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(position, 4)

        assert engine.seen == []
        assert len(best_moves) == 1
        assert best_moves[0][1] == PASS
        assert best_moves[0][3] == 0

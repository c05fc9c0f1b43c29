"""Pure-Python Ataxx engine search (minimax + alpha-beta)."""

from __future__ import annotations

import logging
from time import perf_counter, sleep

from ataxxie.core.enums import PieceColor
from ataxxie.core.move import PASS, Move
from ataxxie.core.move_generator import MoveGenerator
from ataxxie.core.position import Position
from ataxxie.engine.search import (
    DEFAULT_DEPTH,
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
_YIELD_EVERY_NODES = 4096


def _never_cancelled() -> bool:
    return False


class PythonSearchEngine(IEngine):
    """Fixed-depth minimax searcher with alpha-beta pruning.

    Red is the maximizing side (sign +1) and Blue the minimizing side
    (sign -1); scores are always from Red's point of view.  The search
    walks a private copy of the position with make_move/undo, so the
    caller's position is never touched.

    Moves are tried in :class:`MoveGenerator` order and a later move only
    replaces the current best on a strict improvement, which makes the
    result deterministic.
    """

    __slots__ = (
        "_cancel_check",
        "_deadline",
        "_nodes",
        "_last_yield_nodes",
        "_stopped",
    )

    def __init__(self) -> None:
        self._nodes = 0
        self._last_yield_nodes = 0
        self._deadline: float | None = None
        self._cancel_check: CancelCheck = _never_cancelled
        self._stopped = False

    @staticmethod
    def evaluate(position: Position) -> int:
        """Static score: red pieces minus blue pieces."""
        return position.red_count - position.blue_count

    def search(
        self,
        position: Position,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._last_yield_nodes = 0
        self._stopped = False
        self._cancel_check = is_cancelled or _never_cancelled
        self._deadline = None
        if limits.time_limit_ms is not None:
            ms = max(limits.time_limit_ms, 1)
            self._deadline = perf_counter() + (ms / 1000.0)

        work = position.copy()
        if work.is_terminal():
            return SearchResult(None, self.evaluate(work), 0, self._nodes)

        sign = 1 if work.side_to_move == PieceColor.RED else -1
        score, move = self._search_root(work, limits.max_depth, sign)
        depth = 0 if self._stopped else limits.max_depth

        _LOGGER.debug(
            "search %s depth=%d nodes=%d score=%d best=%s",
            "stopped" if self._stopped else "done",
            depth,
            self._nodes,
            score,
            move,
        )
        return SearchResult(move, score, depth, self._nodes)

    def _search_root(
        self,
        position: Position,
        depth: int,
        sign: int,
    ) -> tuple[int, Move]:
        root_moves = MoveGenerator(position).generate_legal_moves()
        alpha = -_INF_SCORE
        beta = _INF_SCORE
        best_score = -_INF_SCORE * sign
        best_move: Move | None = None
        self._nodes += 1

        for move in root_moves:
            if self._should_stop():
                break

            position.make_move(move)
            score = self._alphabeta(position, depth - 1, -sign, alpha, beta)
            position.undo()

            # A child cut short by cancellation has no trustworthy score.
            if self._stopped:
                break

            if sign > 0:
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, best_score)

        if best_move is None:
            return self.evaluate(position), root_moves[0]
        return best_score, best_move

    def _alphabeta(
        self,
        position: Position,
        depth: int,
        sign: int,
        alpha: int,
        beta: int,
    ) -> int:
        if self._should_stop():
            return self.evaluate(position)

        self._nodes += 1
        if depth <= 0 or position.is_terminal():
            return self.evaluate(position)

        # A side with no extend or jump gets a single PASS here.
        moves = MoveGenerator(position).generate_legal_moves()

        if sign > 0:
            best_score = -_INF_SCORE
            for move in moves:
                position.make_move(move)
                score = self._alphabeta(position, depth - 1, -sign, alpha, beta)
                position.undo()
                if score > best_score:
                    best_score = score
                alpha = max(alpha, best_score)
                if beta <= alpha:
                    break
            return best_score

        best_score = _INF_SCORE
        for move in moves:
            position.make_move(move)
            score = self._alphabeta(position, depth - 1, -sign, alpha, beta)
            position.undo()
            if score < best_score:
                best_score = score
            beta = min(beta, best_score)
            if beta <= alpha:
                break
        return best_score

    def _should_stop(self) -> bool:
        if self._stopped:
            return True
        if self._nodes - self._last_yield_nodes >= _YIELD_EVERY_NODES:
            self._last_yield_nodes = self._nodes
            sleep(0.001)
        if self._cancel_check() or (
            self._deadline is not None and perf_counter() >= self._deadline
        ):
            self._stopped = True
        return self._stopped


def choose_move(
    position: Position,
    color: PieceColor,
    depth: int = DEFAULT_DEPTH,
    engine: IEngine | None = None,
) -> Move:
    """Pick a move for *color* in *position* with a depth-limited search.

    Returns :data:`PASS` exactly when *color* has no extend or jump.  The
    position is searched as if *color* were to move; *position* itself is
    left untouched.
    """
    if not position.can_move(color):
        return PASS

    work = position.copy()
    work.side_to_move = color
    engine = engine or PythonSearchEngine()
    result = engine.search(work, SearchLimits(max_depth=depth))
    if result.best_move is None:
        # Terminal by the jump limit, yet moves remain: play the first one.
        return MoveGenerator(work).generate_legal_moves()[0]
    return result.best_move

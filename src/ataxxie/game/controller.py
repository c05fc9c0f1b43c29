"""GameController — the central orchestrator of an Ataxx game.

Coordinates: Players, GameState, Position.
Emits events via simple callbacks so an application or tests can subscribe.
Callbacks fire only after a move has been fully applied; the rules core
itself knows nothing about listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ataxxie.core.enums import GameResult, PieceColor
from ataxxie.core.errors import IllegalBlockPlacement, IllegalMove
from ataxxie.core.move import Move
from ataxxie.core.position import RuleSet
from ataxxie.core.types import Square
from ataxxie.game.interfaces import GamePhase, IGameController, IPlayer
from ataxxie.game.player import AIPlayer
from ataxxie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full Ataxx game: setup, move validation, turn
    switching and listener notification.

    Thread-safety: methods are designed to be called from a single thread.
    AI results should be delivered to :meth:`submit_move` on that thread
    (e.g. through a queued Qt signal from an ``EngineWorker``).
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[PieceColor, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: PieceColor) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        red: IPlayer,
        blue: IPlayer,
        layout: str | None = None,
        blocks: Iterable[Square] = (),
        start: bool = True,
        rules: RuleSet | None = None,
    ) -> None:
        self._players = {PieceColor.RED: red, PieceColor.BLUE: blue}
        self._state = GameState()
        self._state.setup(layout, blocks, rules)
        self._emit_phase(GamePhase.SETUP)
        if start:
            self.start()

    def place_block(self, sq: Square) -> bool:
        if self._state.phase != GamePhase.SETUP:
            _LOGGER.warning("Block placement outside setup rejected")
            return False
        try:
            self._state.place_block(sq)
        except IllegalBlockPlacement as exc:
            _LOGGER.warning("%s", exc)
            return False
        return True

    def start(self) -> bool:
        if self._state.phase != GamePhase.SETUP:
            return False
        self._state.start()
        red = self._players.get(PieceColor.RED)
        blue = self._players.get(PieceColor.BLUE)
        _LOGGER.info(
            "Game started: %s (red) vs %s (blue), layout %s",
            red.name if red else "?",
            blue.name if blue else "?",
            self._state.start_layout,
        )
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        try:
            record = self._state.apply_move(move)
        except IllegalMove as exc:
            _LOGGER.warning("%s", exc)
            return False

        # Notify listeners
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def submit_engine_move(self, request_id: int, move: Move) -> bool:
        """Submit an AI answer.

        Answers to a cancelled or superseded request, or arriving when the
        side to move is not an AI, are dropped and False is returned.
        Connect ``EngineWorker.best_move_ready`` here (ignoring the
        trailing score/depth/nodes arguments).
        """
        cp = self.current_player
        if not isinstance(cp, AIPlayer) or not cp.finish(request_id):
            _LOGGER.debug("Dropping stale engine move %s (request %d)", move, request_id)
            return False
        return self.submit_move(move)

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False

        # Cancel AI if it's thinking
        cp = self.current_player
        if cp and not cp.is_human:
            cp.cancel()

        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.position.copy())

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        position = self._state.position
        _LOGGER.info(
            "Game over after %d moves: %s (red %d, blue %d)",
            self._state.ply_count,
            result.name,
            position.red_count,
            position.blue_count,
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)


"""High-level rules: game end and result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ataxxie.core.enums import GameResult, PieceColor

if TYPE_CHECKING:
    from ataxxie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_game_over(position: Position) -> bool:
        return position.is_terminal()

    @staticmethod
    def is_jump_limit_reached(position: Position) -> bool:
        return position.jump_count >= position.rules.jump_limit

    @staticmethod
    def is_blocked_out(position: Position) -> bool:
        """Neither side has an extend or jump left."""
        return not position.can_move(PieceColor.RED) and not position.can_move(
            PieceColor.BLUE
        )

    @staticmethod
    def winner(position: Position) -> PieceColor | None:
        """Side with more pieces once the game is over; None for a draw or a live game."""
        result = Rules.game_result(position)
        if result == GameResult.RED_WINS:
            return PieceColor.RED
        if result == GameResult.BLUE_WINS:
            return PieceColor.BLUE
        return None

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if not position.is_terminal():
            return GameResult.IN_PROGRESS
        red = position.red_count
        blue = position.blue_count
        if red > blue:
            return GameResult.RED_WINS
        if blue > red:
            return GameResult.BLUE_WINS
        return GameResult.DRAW

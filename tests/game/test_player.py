"""Tests for Player implementations."""

import pytest

from ataxxie.core.enums import PieceColor
from ataxxie.core.notation import STARTING_LAYOUT, position_from_layout
from ataxxie.core.position import Position
from ataxxie.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(PieceColor.RED, "Alice")
        assert p.color == PieceColor.RED
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(PieceColor.BLUE)
        assert p.name == "Player (blue)"

    def test_request_and_cancel_are_noops(self) -> None:
        p = HumanPlayer(PieceColor.RED)
        p.request_move(position_from_layout(STARTING_LAYOUT))
        p.cancel()

    @pytest.mark.parametrize("color", [PieceColor.EMPTY, PieceColor.BLOCKED])
    def test_rejects_non_piece_colour(self, color: PieceColor) -> None:
        with pytest.raises(ValueError):
            HumanPlayer(color)


class TestAIPlayer:
    def test_properties(self) -> None:
        p = AIPlayer(PieceColor.BLUE, "Ataxx AI")
        assert p.color == PieceColor.BLUE
        assert p.name == "Ataxx AI"
        assert p.is_human is False
        assert p.request_id == 0
        assert not p.is_thinking

    def test_requests_are_numbered(self) -> None:
        calls: list[tuple[Position, int]] = []
        p = AIPlayer(
            PieceColor.BLUE,
            on_request_move=lambda pos, rid: calls.append((pos, rid)),
        )
        pos = position_from_layout(STARTING_LAYOUT)
        p.request_move(pos)
        p.request_move(pos)
        assert [rid for _, rid in calls] == [1, 2]
        assert calls[0][0] is pos
        assert p.is_thinking

    def test_only_latest_request_is_current(self) -> None:
        p = AIPlayer(PieceColor.BLUE)
        pos = position_from_layout(STARTING_LAYOUT)
        p.request_move(pos)
        p.request_move(pos)
        assert not p.is_current(1)
        assert p.is_current(2)
        assert not p.finish(1)
        assert p.finish(2)
        assert not p.is_thinking
        assert not p.finish(2)

    def test_cancel_invalidates_request(self) -> None:
        cancelled: list[bool] = []
        p = AIPlayer(PieceColor.BLUE, on_cancel=lambda: cancelled.append(True))
        p.request_move(position_from_layout(STARTING_LAYOUT))
        p.cancel()
        assert cancelled == [True]
        assert not p.is_current(1)

    def test_no_callback_no_error(self) -> None:
        p = AIPlayer(PieceColor.BLUE)
        p.request_move(position_from_layout(STARTING_LAYOUT))
        p.cancel()

"""Tests for game-end detection and results."""

from ataxxie.core.enums import GameResult, PieceColor
from ataxxie.core.move import parse_move
from ataxxie.core.notation import position_from_layout
from ataxxie.core.position import Position
from ataxxie.core.rules import Rules
from ataxxie.core.types import INTERIOR_SQUARES


class TestGameResult:
    def test_in_progress(self, start_position: Position) -> None:
        assert Rules.game_result(start_position) == GameResult.IN_PROGRESS
        assert not Rules.is_game_over(start_position)
        assert Rules.winner(start_position) is None

    def test_forced_pass_is_not_over(self, forced_pass_position: Position) -> None:
        assert Rules.game_result(forced_pass_position) == GameResult.IN_PROGRESS

    def test_wipeout(self) -> None:
        pos = position_from_layout("7/7/7/7/7/7/r6 b")
        assert Rules.game_result(pos) == GameResult.RED_WINS
        assert Rules.winner(pos) == PieceColor.RED

    def test_full_board_majority(self) -> None:
        pos = position_from_layout("/".join(["rrrbbbb"] * 7) + " r")
        assert Rules.is_blocked_out(pos)
        assert Rules.game_result(pos) == GameResult.BLUE_WINS
        assert Rules.winner(pos) == PieceColor.BLUE

    def test_blocked_out_draw(self, start_position: Position) -> None:
        for sq in INTERIOR_SQUARES:
            if start_position.legal_block(sq):
                start_position.place_block(sq)
        assert Rules.is_blocked_out(start_position)
        assert Rules.game_result(start_position) == GameResult.DRAW
        assert Rules.winner(start_position) is None

    def test_extend_clears_pending_limit(self) -> None:
        pos = position_from_layout("r5b/7/7/7/7/7/b5r r 24")
        pos.make_move(parse_move("a7-b7"))
        assert not Rules.is_jump_limit_reached(pos)
        pos.make_move(parse_move("a1-a3"))
        assert pos.jump_count == 1

    def test_jump_limit_with_more_red(self) -> None:
        pos = position_from_layout("rr4b/7/7/7/7/7/b5r r 24")
        pos.make_move(parse_move("g1-e3"))
        assert Rules.is_jump_limit_reached(pos)
        assert Rules.is_game_over(pos)
        assert Rules.game_result(pos) == GameResult.RED_WINS

"""Tests for move generation."""

from ataxxie.core.enums import MoveKind, PieceColor
from ataxxie.core.move import PASS, parse_move
from ataxxie.core.move_generator import MoveGenerator
from ataxxie.core.notation import position_from_layout
from ataxxie.core.position import Position

START_ORDER = [
    "a7-a5", "a7-b5", "a7-c5",
    "a7-a6", "a7-b6", "a7-c6",
    "a7-b7", "a7-c7",
    "g1-e1", "g1-f1",
    "g1-e2", "g1-f2", "g1-g2",
    "g1-e3", "g1-f3", "g1-g3",
]


class TestStartPosition:
    def test_legal_move_count(self, start_position: Position) -> None:
        assert len(MoveGenerator(start_position).generate_legal_moves()) == 16

    def test_enumeration_order(self, start_position: Position) -> None:
        moves = MoveGenerator(start_position).generate_legal_moves()
        assert [str(m) for m in moves] == START_ORDER

    def test_blue_mirror(self, start_position: Position) -> None:
        start_position.side_to_move = PieceColor.BLUE
        moves = MoveGenerator(start_position).generate_legal_moves()
        assert len(moves) == 16
        assert str(moves[0]) == "a1-b1"

    def test_candidates_include_blocked_targets(self, start_position: Position) -> None:
        candidates = MoveGenerator(start_position).candidate_moves()
        assert len(candidates) == 48
        legal = [m for m in candidates if start_position.is_legal(m)]
        assert [str(m) for m in legal] == START_ORDER

    def test_candidate_kinds(self, start_position: Position) -> None:
        candidates = MoveGenerator(start_position).candidate_moves(PieceColor.BLUE)
        kinds = [m.kind for m in candidates]
        assert kinds.count(MoveKind.EXTEND) == 16
        assert kinds.count(MoveKind.JUMP) == 32


class TestLegality:
    def test_every_generated_move_is_legal(self, start_position: Position) -> None:
        for text in ("a7-b6", "a1-b2", "g1-e3", "g7-f5"):
            start_position.make_move(parse_move(text))
            for move in MoveGenerator(start_position).generate_legal_moves():
                assert start_position.is_legal(move), str(move)

    def test_shared_target_yields_one_move_per_source(self) -> None:
        # Two red pieces reaching the same square yield two distinct moves.
        pos = position_from_layout("7/7/7/1r1r3/7/7/b6 r")
        targets = [
            str(m)
            for m in MoveGenerator(pos).generate_legal_moves()
            if str(m).endswith("c4")
        ]
        assert targets == ["b4-c4", "d4-c4"]

    def test_forced_pass(self, forced_pass_position: Position) -> None:
        gen = MoveGenerator(forced_pass_position)
        assert gen.generate_legal_moves() == [PASS]
        assert not gen.has_legal_move(PieceColor.RED)
        assert gen.has_legal_move(PieceColor.BLUE)

    def test_blocked_squares_are_not_targets(self) -> None:
        pos = position_from_layout("rx5/xx5/7/7/7/7/6b r")
        moves = MoveGenerator(pos).generate_legal_moves()
        assert [str(m) for m in moves] == ["a7-a5", "a7-b5", "a7-c5", "a7-c6", "a7-c7"]

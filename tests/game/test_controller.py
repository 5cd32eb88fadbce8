"""Tests for GameController — the orchestrator."""

import logging

import pytest

from capturechess.core.enums import Color, PieceType
from capturechess.core.notation import board_to_placement
from capturechess.core.piece import Piece
from capturechess.core.rules import bishop_rule, rook_rule
from capturechess.core.types import parse_square
from capturechess.game.controller import GameController
from capturechess.game.interfaces import GamePhase, MoveOutcome
from capturechess.game.state import GameState, MoveRecord


def _play(ctrl: GameController, from_name: str, to_name: str) -> MoveOutcome:
    return ctrl.attempt_move(parse_square(from_name), parse_square(to_name))


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = GameController()
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_white_moves_first(self) -> None:
        assert GameController().side_to_move == Color.WHITE

    def test_custom_placement(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/8/8/8/8/4K3", Color.BLACK)
        assert ctrl.side_to_move == Color.BLACK
        assert len(ctrl.state.board.squares()) == 2

    def test_new_game_after_quit(self) -> None:
        ctrl = GameController()
        ctrl.quit()
        ctrl.new_game()
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert _play(ctrl, "e2", "e4") is MoveOutcome.ACCEPTED

    def test_bad_placement_keeps_current_game(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2", "e4")
        before = board_to_placement(ctrl.state.board)
        with pytest.raises(ValueError):
            ctrl.new_game("not/a/placement")
        assert board_to_placement(ctrl.state.board) == before
        assert ctrl.side_to_move == Color.BLACK
        assert _play(ctrl, "e7", "e5") is MoveOutcome.ACCEPTED


class TestAttemptMove:
    def test_e2_e4_accepted(self) -> None:
        ctrl = GameController()
        assert _play(ctrl, "e2", "e4") is MoveOutcome.ACCEPTED
        assert ctrl.side_to_move == Color.BLACK
        assert ctrl.state.board[parse_square("e4")] is not None
        assert ctrl.state.board[parse_square("e2")] is None

    def test_internal_coordinates(self) -> None:
        ctrl = GameController()
        assert ctrl.attempt_move((6, 4), (4, 4)) is MoveOutcome.ACCEPTED
        assert ctrl.side_to_move == Color.BLACK

    def test_e2_e5_rejected_without_change(self) -> None:
        ctrl = GameController()
        before = board_to_placement(ctrl.state.board)
        assert _play(ctrl, "e2", "e5") is MoveOutcome.ILLEGAL_MOVE
        assert ctrl.side_to_move == Color.WHITE
        assert board_to_placement(ctrl.state.board) == before

    def test_empty_origin_is_invalid_selection(self) -> None:
        ctrl = GameController()
        assert _play(ctrl, "e4", "e5") is MoveOutcome.INVALID_SELECTION
        assert ctrl.side_to_move == Color.WHITE

    def test_opponent_piece_is_invalid_selection(self) -> None:
        ctrl = GameController()
        assert _play(ctrl, "e7", "e5") is MoveOutcome.INVALID_SELECTION
        assert ctrl.side_to_move == Color.WHITE

    def test_turns_alternate(self) -> None:
        ctrl = GameController()
        sides = []
        for from_name, to_name in (("e2", "e4"), ("e7", "e5"), ("g1", "f3")):
            assert _play(ctrl, from_name, to_name) is MoveOutcome.ACCEPTED
            sides.append(ctrl.side_to_move)
        assert sides == [Color.BLACK, Color.WHITE, Color.BLACK]

    def test_rejected_move_keeps_turn(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2", "e4")
        assert _play(ctrl, "e2", "e3") is MoveOutcome.INVALID_SELECTION
        assert _play(ctrl, "e7", "e4") is MoveOutcome.ILLEGAL_MOVE
        assert ctrl.side_to_move == Color.BLACK

    def test_queen_d1_h5_matches_rook_or_bishop(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2", "e4")
        _play(ctrl, "e7", "e5")
        board = ctrl.state.board
        d1, h5 = parse_square("d1"), parse_square("h5")
        queen = board[d1]
        assert queen is not None
        assert not rook_rule(board, queen, d1, h5)
        assert bishop_rule(board, queen, d1, h5)
        expected = rook_rule(board, queen, d1, h5) or bishop_rule(board, queen, d1, h5)
        assert (_play(ctrl, "d1", "h5") is MoveOutcome.ACCEPTED) == expected

    def test_king_may_step_onto_attacked_square(self) -> None:
        ctrl = GameController()
        ctrl.new_game("k3r3/8/8/8/8/8/8/4K3")
        assert _play(ctrl, "e1", "e2") is MoveOutcome.ACCEPTED


class TestCaptures:
    def test_capture_bookkeeping(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/3p4/4P3/8/8/4K3")
        victim = ctrl.state.board[parse_square("d5")]
        attacker = ctrl.state.board[parse_square("e4")]
        assert _play(ctrl, "e4", "d5") is MoveOutcome.ACCEPTED
        assert ctrl.state.captured(Color.WHITE) == [victim]
        assert ctrl.state.captured(Color.BLACK) == []
        assert ctrl.state.board[parse_square("d5")] is attacker
        assert all(p is not victim for _, p in ctrl.state.board.squares())

    def test_capture_order_preserved(self) -> None:
        # 1.e4 d5 2.exd5 Qxd5 3.Nc3 Qxa2 4.Rxa2
        ctrl = GameController()
        moves = [
            ("e2", "e4"), ("d7", "d5"), ("e4", "d5"), ("d8", "d5"),
            ("b1", "c3"), ("d5", "a2"), ("a1", "a2"),
        ]
        for from_name, to_name in moves:
            assert _play(ctrl, from_name, to_name) is MoveOutcome.ACCEPTED, (
                from_name,
                to_name,
            )
        assert ctrl.state.captured_symbols(Color.WHITE) == ["p", "q"]
        assert ctrl.state.captured_symbols(Color.BLACK) == ["P", "P"]

    def test_capture_event_fires(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/3p4/4P3/8/8/4K3")
        events: list[tuple[Color, Piece]] = []
        ctrl.events.on_capture.append(lambda color, piece: events.append((color, piece)))
        _play(ctrl, "e4", "d5")
        assert len(events) == 1
        color, piece = events[0]
        assert color == Color.WHITE
        assert piece.color == Color.BLACK and piece.piece_type == PieceType.PAWN

    def test_no_capture_event_for_quiet_move(self) -> None:
        ctrl = GameController()
        events: list[object] = []
        ctrl.events.on_capture.append(lambda color, piece: events.append(piece))
        _play(ctrl, "e2", "e4")
        assert events == []


class TestEvents:
    def test_move_event_fires(self) -> None:
        ctrl = GameController()
        records: list[MoveRecord] = []

        def on_move(record: MoveRecord, state: GameState) -> None:
            records.append(record)

        ctrl.events.on_move.append(on_move)
        _play(ctrl, "e2", "e4")
        _play(ctrl, "e2", "e4")  # rejected: no event
        assert len(records) == 1
        assert records[0].to_sq == parse_square("e4")

    def test_phase_event_on_quit(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.quit()
        ctrl.quit()
        assert phases == [GamePhase.TERMINATED]


class TestQuit:
    def test_moves_refused_after_quit(self) -> None:
        ctrl = GameController()
        ctrl.quit()
        assert ctrl.phase == GamePhase.TERMINATED
        assert _play(ctrl, "e2", "e4") is MoveOutcome.GAME_TERMINATED
        assert ctrl.side_to_move == Color.WHITE


class TestLogging:
    def test_illegal_move_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.DEBUG, logger="capturechess.game.controller"):
            _play(ctrl, "e2", "e5")
        assert "Illegal move e2e5" in caplog.text

    def test_quit_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.INFO, logger="capturechess.game.controller"):
            ctrl.quit()
        assert "Game terminated" in caplog.text

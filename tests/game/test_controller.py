"""Tests for GameController — the move-committing collaborator."""

import logging

from chesslite.core.board import BoardSnapshot
from chesslite.core.enums import Color, PieceType
from chesslite.core.types import Coordinate
from chesslite.game.controller import GameController
from chesslite.game.interfaces import MoveRecord


class TestNewGame:
    def test_starts_from_initial_placement(self) -> None:
        ctrl = GameController()
        assert ctrl.snapshot == BoardSnapshot.initial()
        assert ctrl.selected is None
        assert ctrl.last_move is None

    def test_custom_snapshot(self, board_of) -> None:
        board = board_of("K04", "k74")
        ctrl = GameController(board)
        assert ctrl.snapshot is board

    def test_new_game_resets(self) -> None:
        ctrl = GameController()
        ctrl.submit_move((1, 4), (3, 4))
        ctrl.select((0, 1))
        ctrl.new_game()
        assert ctrl.snapshot == BoardSnapshot.initial()
        assert ctrl.selected is None
        assert ctrl.last_move is None

    def test_reset_event_fires(self, board_of) -> None:
        ctrl = GameController()
        seen: list[BoardSnapshot] = []
        ctrl.events.on_reset.append(seen.append)
        board = board_of("K04")
        ctrl.new_game(board)
        assert seen == [board]


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move((1, 4), (3, 4))
        pawn = ctrl.snapshot.piece_at((3, 4))
        assert pawn is not None and pawn.piece_type == PieceType.PAWN
        assert ctrl.snapshot.is_empty((1, 4))

    def test_illegal_move_rejected(self) -> None:
        ctrl = GameController()
        before = ctrl.snapshot
        assert not ctrl.submit_move((1, 4), (4, 4))
        assert ctrl.snapshot is before
        assert ctrl.last_move is None

    def test_empty_origin_rejected(self) -> None:
        ctrl = GameController()
        assert not ctrl.submit_move((4, 4), (5, 4))

    def test_any_side_may_move(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move((6, 4), (4, 4))
        assert ctrl.submit_move((6, 3), (5, 3))
        assert ctrl.snapshot.color_of_square((5, 3)) == Color.BLACK

    def test_move_event_fires(self) -> None:
        ctrl = GameController()
        events: list[tuple[MoveRecord, BoardSnapshot]] = []
        ctrl.events.on_move.append(lambda record, board: events.append((record, board)))
        ctrl.submit_move((0, 1), (2, 2))
        assert len(events) == 1
        record, board = events[0]
        assert record.origin == Coordinate(0, 1)
        assert record.dest == Coordinate(2, 2)
        assert record.captured is None
        assert record.piece.piece_type == PieceType.KNIGHT
        assert board is ctrl.snapshot
        assert str(record) == "N01-22"

    def test_no_event_for_rejected_move(self) -> None:
        ctrl = GameController()
        events: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda record, board: events.append(record))
        ctrl.submit_move((0, 0), (3, 0))
        assert events == []

    def test_capture_removes_piece(self, board_of) -> None:
        ctrl = GameController(board_of("P14", "p25", "k74"))
        assert ctrl.submit_move((1, 4), (2, 5))
        record = ctrl.last_move
        assert record is not None
        assert record.captured is not None
        assert record.captured.color == Color.BLACK
        assert str(record) == "P14x25"
        assert len(ctrl.snapshot) == 2
        assert ctrl.snapshot.color_of_square((2, 5)) == Color.WHITE

    def test_moved_piece(self) -> None:
        ctrl = GameController()
        ctrl.submit_move((1, 0), (2, 0))
        record = ctrl.last_move
        assert record is not None
        assert record.moved_piece == ctrl.snapshot.piece_at((2, 0))

    def test_rejection_is_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="chesslite.game.controller")
        ctrl = GameController()
        ctrl.submit_move((0, 0), (5, 0))
        assert "Rejected move 00-50" in caplog.text

    def test_commit_is_logged(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger="chesslite.game.controller")
        ctrl = GameController()
        ctrl.submit_move((1, 4), (3, 4))
        assert "Committed P14-34" in caplog.text


class TestSelection:
    def test_select_piece(self) -> None:
        ctrl = GameController()
        assert ctrl.select((0, 1))
        assert ctrl.selected is not None
        assert ctrl.selected_destinations() == [(2, 0), (2, 2)]

    def test_select_empty_square_clears(self) -> None:
        ctrl = GameController()
        ctrl.select((0, 1))
        assert not ctrl.select((4, 4))
        assert ctrl.selected is None
        assert ctrl.selected_destinations() == []

    def test_selection_event(self) -> None:
        ctrl = GameController()
        seen: list[tuple[object, list[Coordinate]]] = []
        ctrl.events.on_selection_changed.append(lambda p, d: seen.append((p, d)))
        ctrl.select((6, 7))
        assert len(seen) == 1
        piece, dests = seen[0]
        assert piece == ctrl.snapshot.piece_at((6, 7))
        assert dests == [(4, 7), (5, 7)]

    def test_reselecting_same_piece_is_quiet(self) -> None:
        ctrl = GameController()
        seen: list[object] = []
        ctrl.events.on_selection_changed.append(lambda p, d: seen.append(p))
        ctrl.select((0, 1))
        ctrl.select((0, 1))
        assert len(seen) == 1


class TestClick:
    def test_click_selects_then_moves(self) -> None:
        ctrl = GameController()
        assert ctrl.click((0, 1)) is None
        assert ctrl.selected is not None
        record = ctrl.click((2, 2))
        assert record is not None
        assert record.dest == (2, 2)
        assert ctrl.selected is None
        assert ctrl.snapshot.piece_at((2, 2)) is not None

    def test_click_same_square_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click((1, 3))
        ctrl.click((1, 3))
        assert ctrl.selected is None

    def test_click_illegal_target_reselects(self) -> None:
        ctrl = GameController()
        ctrl.click((0, 1))
        assert ctrl.click((1, 0)) is None
        selected = ctrl.selected
        assert selected is not None
        assert selected.coord == (1, 0)
        assert selected.piece_type == PieceType.PAWN

    def test_click_empty_square_with_nothing_selected(self) -> None:
        ctrl = GameController()
        assert ctrl.click((4, 4)) is None
        assert ctrl.selected is None

    def test_move_clears_selection_with_event(self) -> None:
        ctrl = GameController()
        seen: list[object] = []
        ctrl.events.on_selection_changed.append(lambda p, d: seen.append(p))
        ctrl.click((1, 4))
        ctrl.click((3, 4))
        assert seen[-1] is None

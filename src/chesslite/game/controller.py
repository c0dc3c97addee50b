"""GameController — owns the board and commits legal moves.

The legality engine never mutates anything; this is the collaborator that
does. It keeps the current :class:`BoardSnapshot`, asks the engine for a
verdict, swaps in the next snapshot and notifies listeners via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.core.board import BoardSnapshot
from chesslite.core.piece import Piece
from chesslite.core.rules import legal_destinations
from chesslite.core.types import Coordinate
from chesslite.game.interfaces import IGameController, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, BoardSnapshot], None]  # record, new snapshot
ResetCallback = Callable[[BoardSnapshot], None]
SelectionCallback = Callable[[Piece | None, list[Coordinate]], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and commits moves, tracks the selected piece.

    Either color may move at any time; there is no turn order.

    Thread-safety: call from a single thread (the main/UI thread).
    """

    __slots__ = ("_snapshot", "_selected", "_last_move", "events")

    def __init__(self, snapshot: BoardSnapshot | None = None) -> None:
        self._snapshot = snapshot if snapshot is not None else BoardSnapshot.initial()
        self._selected: Piece | None = None
        self._last_move: MoveRecord | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def snapshot(self) -> BoardSnapshot:
        return self._snapshot

    @property
    def selected(self) -> Piece | None:
        return self._selected

    @property
    def last_move(self) -> MoveRecord | None:
        return self._last_move

    def selected_destinations(self) -> list[Coordinate]:
        """Legal destinations of the selected piece (empty if none)."""
        if self._selected is None:
            return []
        return legal_destinations(self._selected, self._snapshot)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, snapshot: BoardSnapshot | None = None) -> None:
        self._snapshot = snapshot if snapshot is not None else BoardSnapshot.initial()
        self._selected = None
        self._last_move = None
        _LOGGER.info("New game with %d pieces", len(self._snapshot))
        self._emit_reset()

    def select(self, coord: tuple[int, int]) -> bool:
        piece = self._snapshot.piece_at(coord)
        if piece == self._selected:
            return piece is not None
        self._selected = piece
        self._emit_selection()
        return piece is not None

    def clear_selection(self) -> None:
        if self._selected is None:
            return
        self._selected = None
        self._emit_selection()

    def submit_move(self, origin: tuple[int, int], dest: tuple[int, int]) -> bool:
        return self._commit(origin, dest) is not None

    def click(self, coord: tuple[int, int]) -> MoveRecord | None:
        selected = self._selected
        if selected is None:
            self.select(coord)
            return None
        if selected.coord == coord:
            self.clear_selection()
            return None

        record = self._commit(selected.coord, coord)
        if record is None:
            # Not a legal target: treat as a fresh selection
            self.select(coord)
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(
        self, origin: tuple[int, int], dest: tuple[int, int]
    ) -> MoveRecord | None:
        origin = Coordinate(*origin)
        dest = Coordinate(*dest)
        piece = self._snapshot.piece_at(origin)
        if piece is None:
            _LOGGER.debug("Rejected move %s-%s: origin is empty", origin, dest)
            return None
        if not piece.is_move_valid(dest, self._snapshot):
            _LOGGER.debug(
                "Rejected move %s-%s: illegal for %s %s",
                origin,
                dest,
                piece.color,
                piece.piece_type.name.lower(),
            )
            return None

        record = MoveRecord(piece, origin, dest, self._snapshot.piece_at(dest))
        self._snapshot = self._snapshot.with_piece_moved(origin, dest)
        self._last_move = record
        _LOGGER.info("Committed %s", record)

        had_selection = self._selected is not None
        self._selected = None
        self._emit_move(record)
        if had_selection:
            self._emit_selection()
        return record

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._snapshot)

    def _emit_reset(self) -> None:
        for cb in self.events.on_reset:
            cb(self._snapshot)
        self._emit_selection()

    def _emit_selection(self) -> None:
        destinations = self.selected_destinations()
        for cb in self.events.on_selection_changed:
            cb(self._selected, destinations)

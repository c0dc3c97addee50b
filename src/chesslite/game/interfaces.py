"""Abstract interfaces for the game layer.

The presentation layer depends on these, not on the concrete
:class:`~chesslite.game.controller.GameController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesslite.core.piece import Piece
from chesslite.core.types import Coordinate

if TYPE_CHECKING:
    from chesslite.core.board import BoardSnapshot


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A committed move, as broadcast to listeners."""

    piece: Piece  # the mover, still on its origin square
    origin: Coordinate
    dest: Coordinate
    captured: Piece | None = None

    @property
    def moved_piece(self) -> Piece:
        """The mover as it stands after the move."""
        return self.piece.moved_to(self.dest)

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        return f"{self.piece}{self.origin}{sep}{self.dest}"


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @property
    @abstractmethod
    def snapshot(self) -> BoardSnapshot:
        """Current board occupancy."""

    @abstractmethod
    def new_game(self, snapshot: BoardSnapshot | None = None) -> None:
        """Reset to the starting placement, or to *snapshot*."""

    @abstractmethod
    def submit_move(self, origin: tuple[int, int], dest: tuple[int, int]) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def select(self, coord: tuple[int, int]) -> bool:
        """Select the piece on *coord*. Returns True if one was selected."""

    @abstractmethod
    def click(self, coord: tuple[int, int]) -> MoveRecord | None:
        """Click-to-select / click-to-move. Returns the move if one was made."""

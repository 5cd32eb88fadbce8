"""Abstract interfaces and state enums for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from capturechess.core.enums import Color

if TYPE_CHECKING:
    from capturechess.core.types import Square


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    AWAITING_MOVE = auto()
    TERMINATED = auto()


class MoveOutcome(IntEnum):
    """Result of a move attempt."""

    ACCEPTED = auto()
    INVALID_SELECTION = auto()  # empty origin or opponent's piece
    ILLEGAL_MOVE = auto()
    GAME_TERMINATED = auto()


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Reset to the starting position (or *placement*)."""

    @abstractmethod
    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Validate and, if legal, apply a move for the side to move."""

    @abstractmethod
    def quit(self) -> None:
        """Terminate the game; later move attempts are refused."""

"""GameController — the orchestrator of a single game.

Coordinates: GameState (board, turn, capture lists) and the move rules.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from capturechess.core.enums import Color
from capturechess.core.piece import Piece
from capturechess.core.rules import is_valid_move
from capturechess.core.types import Square, square_name
from capturechess.game.interfaces import GamePhase, IGameController, MoveOutcome
from capturechess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CaptureCallback = Callable[[Color, Piece], None]  # capturing side, piece taken
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs one game: checks ownership, validates moves, banks captures,
    alternates turns, notifies listeners.

    Each instance owns its state exclusively; run one controller per game.
    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._state.setup()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        state = GameState()
        state.setup(placement, side_to_move)
        self._state = state
        _LOGGER.info("New game started")
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        from_sq, to_sq = Square(*from_sq), Square(*to_sq)
        state = self._state
        if state.is_terminated:
            return MoveOutcome.GAME_TERMINATED

        piece = state.board[from_sq]
        if piece is None or piece.color != state.side_to_move:
            _LOGGER.debug(
                "Invalid selection %s for %s", square_name(from_sq), state.side_to_move
            )
            return MoveOutcome.INVALID_SELECTION

        if not is_valid_move(state.board, piece, from_sq, to_sq):
            _LOGGER.debug(
                "Illegal move %s%s by %s",
                square_name(from_sq),
                square_name(to_sq),
                piece,
            )
            return MoveOutcome.ILLEGAL_MOVE

        record = state.apply_move(from_sq, to_sq)
        _LOGGER.debug(
            "%s played %s%s", piece.color, square_name(from_sq), square_name(to_sq)
        )

        if record.captured is not None:
            _LOGGER.debug("%s captured %s", piece.color, record.captured)
            self._emit_capture(piece.color, record.captured)
        self._emit_move(record)
        return MoveOutcome.ACCEPTED

    def quit(self) -> None:
        if self._state.is_terminated:
            return
        self._state.terminate()
        _LOGGER.info("Game terminated")
        self._emit_phase(GamePhase.TERMINATED)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_capture(self, color: Color, piece: Piece) -> None:
        for cb in self.events.on_capture:
            cb(color, piece)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

"""Game state — board, side to move, capture lists and phase."""

from __future__ import annotations

from dataclasses import dataclass, field

from capturechess.core.board import Board
from capturechess.core.enums import Color
from capturechess.core.notation import board_from_placement
from capturechess.core.piece import Piece
from capturechess.core.types import Square
from capturechess.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """An accepted move, with the piece it captured (if any)."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece | None = None


@dataclass
class GameState:
    """Everything that changes during a game.

    This is a pure data/logic class — no I/O, no UI.  Capture lists are
    append-only and ordered by capture time.
    """

    board: Board = field(default_factory=Board, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    captures: dict[Color, list[Piece]] = field(
        default_factory=lambda: {Color.WHITE: [], Color.BLACK: []}, init=False
    )

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, by default to the starting position."""
        self.board = (
            Board.initial() if placement is None else board_from_placement(placement)
        )
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.captures = {Color.WHITE: [], Color.BLACK: []}

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Move the piece, bank any capture, and pass the turn.

        Caller is responsible for the legality check.
        """
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        captured = self.board[to_sq]
        if captured is not None:
            self.captures[piece.color].append(captured)
        self.board[to_sq] = piece
        self.board[from_sq] = None
        self.side_to_move = self.side_to_move.opposite
        return MoveRecord(piece, from_sq, to_sq, captured)

    def terminate(self) -> None:
        self.phase = GamePhase.TERMINATED

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_terminated(self) -> bool:
        return self.phase == GamePhase.TERMINATED

    def captured(self, color: Color) -> list[Piece]:
        """Pieces taken by *color*, oldest first (a copy)."""
        return list(self.captures[color])

    def captured_symbols(self, color: Color) -> list[str]:
        return [str(p) for p in self.captures[color]]

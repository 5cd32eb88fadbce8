"""Interactive text front end.

Reads moves as pairs of square names (``e2 e4``) separated by any
whitespace, prints the board and both capture lists before every prompt.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from capturechess.core.enums import Color
from capturechess.core.piece import Piece
from capturechess.core.types import parse_square
from capturechess.game.controller import GameController
from capturechess.game.interfaces import MoveOutcome
from capturechess.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

MSG_INVALID_SELECTION = "Invalid move. Try again."
MSG_ILLEGAL_MOVE = "Illegal move. Try again."
MSG_GAME_OVER = "The game is over."


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def side_name(color: Color) -> str:
    return color.name.capitalize()


class ConsoleSession:
    """Drives a :class:`GameController` from a text stream."""

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._ctrl = controller or GameController()
        self._settings = settings or AppSettings()
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._ctrl.events.on_capture.append(self._on_capture)

    @property
    def controller(self) -> GameController:
        return self._ctrl

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _is_quit(self, token: str) -> bool:
        return token.lower() == self._settings.quit_word.lower()

    # ── Rendering ────────────────────────────────────────────────────────

    def print_board(self) -> None:
        self._print(self._ctrl.state.board.render())

    def print_score(self) -> None:
        for color in (Color.WHITE, Color.BLACK):
            taken = " ".join(self._ctrl.state.captured_symbols(color))
            self._print(f"{side_name(color)} captured: {taken}".rstrip())

    def _on_capture(self, color: Color, piece: Piece) -> None:
        self._print(f"{side_name(color)} captured {piece}")

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self) -> None:
        """Prompt for moves until the quit word or end of input."""
        tokens = _tokens(self._in)
        while True:
            self.print_board()
            self.print_score()
            self._print(f"{side_name(self._ctrl.side_to_move)} to move. Format: e2 e4")

            from_name = next(tokens, None)
            if from_name is None or self._is_quit(from_name):
                break
            to_name = next(tokens, None)
            if to_name is None or self._is_quit(to_name):
                break

            try:
                from_sq, to_sq = parse_square(from_name), parse_square(to_name)
            except ValueError as exc:
                _LOGGER.debug("Rejected input: %s", exc)
                self._print(MSG_INVALID_SELECTION)
                continue

            outcome = self._ctrl.attempt_move(from_sq, to_sq)
            if outcome is MoveOutcome.INVALID_SELECTION:
                self._print(MSG_INVALID_SELECTION)
            elif outcome is MoveOutcome.ILLEGAL_MOVE:
                self._print(MSG_ILLEGAL_MOVE)
            elif outcome is MoveOutcome.GAME_TERMINATED:
                self._print(MSG_GAME_OVER)
                break

        self._ctrl.quit()


def run_console(settings: AppSettings | None = None) -> int:
    ConsoleSession(settings=settings).run()
    return 0

"""MainWindow — top-level window assembling the board and capture panels."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from capturechess.console import MSG_ILLEGAL_MOVE, MSG_INVALID_SELECTION, side_name
from capturechess.core.enums import Color
from capturechess.core.piece import Piece
from capturechess.core.types import Square
from capturechess.game.controller import GameController
from capturechess.game.interfaces import GamePhase, MoveOutcome
from capturechess.settings import AppSettings
from capturechess.ui.board.board_view import BoardView
from capturechess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Capture Chess")
        self.setMinimumSize(640, 480)
        self.resize(900, 680)

        self._controller = GameController()
        self._settings = settings or AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)
        self._turn_label = QLabel()
        right.addWidget(self._turn_label)
        self._captured_labels: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            label = QLabel()
            label.setWordWrap(True)
            right.addWidget(label)
            self._captured_labels[color] = label
        right.addStretch()

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(220)
        root.addWidget(right_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._board_view.move_requested.connect(self._on_move_requested)

        events = self._controller.events
        events.on_capture.append(self._on_capture)
        events.on_phase_changed.append(self._on_phase_changed)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        theme = BoardTheme.by_name(s.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
            theme = BoardTheme.default()
        scene.set_theme(theme)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def status_text(self) -> str:
        return self._status_label.text()

    def captured_text(self, color: Color) -> str:
        return self._captured_labels[color].text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_requested(self, from_sq: Square, to_sq: Square) -> None:
        # Capture callbacks fire inside attempt_move and may replace this.
        self._status_label.setText("Ready")
        outcome = self._controller.attempt_move(from_sq, to_sq)
        if outcome is MoveOutcome.INVALID_SELECTION:
            self._status_label.setText(MSG_INVALID_SELECTION)
        elif outcome is MoveOutcome.ILLEGAL_MOVE:
            self._status_label.setText(MSG_ILLEGAL_MOVE)
        self._refresh()

    def _on_capture(self, color: Color, piece: Piece) -> None:
        self._status_label.setText(f"{side_name(color)} captured {piece}")

    def _on_phase_changed(self, phase: GamePhase) -> None:
        if phase == GamePhase.TERMINATED:
            self._board_view.board_scene.set_interactive(False)
            self._status_label.setText("Game over")

    def _on_new_game(self) -> None:
        self._controller.new_game()
        self._board_view.board_scene.set_interactive(True)
        self._status_label.setText("Ready")
        self._refresh()

    # ── Refresh ──────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        state = self._controller.state
        self._board_view.board_scene.set_board(state.board, state.side_to_move)
        self._turn_label.setText(f"{side_name(state.side_to_move)} to move")
        for color, label in self._captured_labels.items():
            glyphs = " ".join(p.glyph for p in state.captured(color))
            label.setText(f"{side_name(color)} captured: {glyphs}".rstrip())

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._controller.quit()
        super().closeEvent(event)

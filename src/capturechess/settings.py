"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Green")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Console
    quit_word: str = "exit"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"

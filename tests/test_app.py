"""Tests for the command-line entry point."""

import io

import pytest

from capturechess import app
from capturechess.settings import AppSettings


class TestArgs:
    def test_defaults(self) -> None:
        args = app.build_parser().parse_args([])
        assert not args.gui
        assert app.settings_from_args(args) == AppSettings()

    def test_overrides(self) -> None:
        args = app.build_parser().parse_args(
            ["--theme", "Blue", "--quit-word", "q", "--no-coordinates", "--log-level", "DEBUG"]
        )
        settings = app.settings_from_args(args)
        assert settings.board_theme == "Blue"
        assert settings.quit_word == "q"
        assert not settings.show_coordinates
        assert settings.show_legal_moves
        assert settings.log_level == "DEBUG"

    def test_unknown_theme_rejected(self) -> None:
        with pytest.raises(SystemExit):
            app.build_parser().parse_args(["--theme", "Neon"])


def test_main_runs_console(monkeypatch: pytest.MonkeyPatch) -> None:
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO("e2 e4\nexit\n"))
    monkeypatch.setattr("sys.stdout", out)
    assert app.main([]) == 0
    assert "Black to move" in out.getvalue()

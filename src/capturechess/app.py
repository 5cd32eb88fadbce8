"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from capturechess.settings import LOG_LEVELS, THEME_NAMES, AppSettings


def build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="capturechess",
        description="Two-player chess with capture tracking.",
    )
    parser.add_argument(
        "--gui", action="store_true", help="Open the graphical board instead of the console"
    )
    parser.add_argument("--theme", choices=THEME_NAMES, default=defaults.board_theme)
    parser.add_argument(
        "--quit-word",
        default=defaults.quit_word,
        help="Word that ends the console game (default: %(default)s)",
    )
    parser.add_argument(
        "--no-coordinates", action="store_true", help="Hide board coordinates"
    )
    parser.add_argument(
        "--no-legal-moves", action="store_true", help="Do not highlight move targets"
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=defaults.log_level)
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        quit_word=args.quit_word,
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
        show_legal_moves=not args.no_legal_moves,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch the console game, or the Qt window with ``--gui``."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.gui:
        from capturechess.ui.bootstrap import run_application

        return run_application(settings)

    from capturechess.console import run_console

    return run_console(settings)


if __name__ == "__main__":
    sys.exit(main())

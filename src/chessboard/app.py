"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from chessboard.core.board import Board
from chessboard.core.notation import STARTING_FEN
from chessboard.ui.settings import AppSettings
from chessboard.ui.styles.theme import THEMES

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _fen_argument(text: str) -> str:
    try:
        Board.from_fen(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessboard", description="Two-player chess board."
    )
    parser.add_argument(
        "--fen",
        type=_fen_argument,
        default=STARTING_FEN,
        help="starting position (FEN placement, optionally followed by w/b)",
    )
    parser.add_argument("--theme", choices=sorted(THEMES), default="Classic")
    parser.add_argument(
        "--flipped", action="store_true", help="show the board from Black's side"
    )
    parser.add_argument(
        "--no-coordinates",
        dest="show_coordinates",
        action="store_false",
        help="hide rank and file labels",
    )
    parser.add_argument(
        "--no-legal-moves",
        dest="show_legal_moves",
        action="store_false",
        help="do not mark legal destinations of the selected piece",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default="WARNING",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> AppSettings:
    """Turn command-line flags into :class:`AppSettings`."""
    args = build_parser().parse_args(argv)
    return AppSettings(
        start_fen=args.fen,
        board_theme=args.theme,
        show_coordinates=args.show_coordinates,
        show_legal_moves=args.show_legal_moves,
        flipped=args.flipped,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the chess board application."""
    from chessboard.ui.bootstrap import configure_logging, run_application

    settings = parse_args(argv)
    configure_logging(settings.log_level)
    sys.exit(run_application(settings, [sys.argv[0]]))


if __name__ == "__main__":
    main()

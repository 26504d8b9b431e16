"""Tests for command-line parsing and logging setup."""

from __future__ import annotations

import logging

import pytest

from chessboard.app import parse_args
from chessboard.core.notation import STARTING_FEN
from chessboard.ui.bootstrap import configure_logging


class TestParseArgs:
    def test_defaults(self) -> None:
        settings = parse_args([])
        assert settings.start_fen == STARTING_FEN
        assert settings.board_theme == "Classic"
        assert settings.show_coordinates
        assert settings.show_legal_moves
        assert not settings.flipped
        assert settings.log_level == "WARNING"

    def test_flags(self) -> None:
        settings = parse_args(
            [
                "--fen", "4k3/8/8/8/8/8/8/4K3 b",
                "--theme", "Blue",
                "--flipped",
                "--no-coordinates",
                "--no-legal-moves",
                "--log-level", "debug",
            ]
        )
        assert settings.start_fen == "4k3/8/8/8/8/8/8/4K3 b"
        assert settings.board_theme == "Blue"
        assert settings.flipped
        assert not settings.show_coordinates
        assert not settings.show_legal_moves
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "argv",
        [
            ["--fen", "8/8/8/8/8/8/8/8"],
            ["--fen", "4k3/8/8/8/8/8/8/4R2K"],
            ["--fen", "rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR"],
            ["--theme", "Purple"],
            ["--log-level", "verbose"],
        ],
    )
    def test_bad_values_exit(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestConfigureLogging:
    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("loud")

    def test_known_level_accepted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging("info")
        assert calls[0]["level"] == logging.INFO

"""Board colour presets and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlays drawn on top of the tiles; every preset shares them.
_SELECTED = (255, 255, 0, 100)
_TARGET = (0, 0, 0, 40)
_CHECK = (255, 0, 0, 120)
_LAST_MOVE = (155, 199, 0, 105)


@dataclass(frozen=True)
class BoardTheme:
    """Colours for tiles, overlays, coordinate labels and piece glyphs."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece
    highlight_to: QColor  # legal targets
    highlight_check: QColor
    last_move_from: QColor
    last_move_to: QColor
    coord_light: QColor  # labels drawn on dark tiles
    coord_dark: QColor  # labels drawn on light tiles
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def from_tiles(
        cls,
        light: tuple[int, int, int],
        dark: tuple[int, int, int],
        piece_black: tuple[int, int, int] = (20, 20, 20),
    ) -> BoardTheme:
        """Build a preset from its two tile colours.

        Coordinate labels take the opposite tile colour so they stay readable.
        """
        return cls(
            light_square=QColor(*light),
            dark_square=QColor(*dark),
            highlight_from=QColor(*_SELECTED),
            highlight_to=QColor(*_TARGET),
            highlight_check=QColor(*_CHECK),
            last_move_from=QColor(*_LAST_MOVE),
            last_move_to=QColor(*_LAST_MOVE),
            coord_light=QColor(*dark),
            coord_dark=QColor(*light),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(*piece_black),
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.from_tiles((240, 217, 181), (181, 136, 99))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls.from_tiles((253, 245, 245), (36, 78, 36), piece_black=(10, 10, 10))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls.from_tiles((222, 227, 230), (140, 162, 173))


THEMES = {
    "Classic": BoardTheme.default,
    "Green": BoardTheme.green,
    "Blue": BoardTheme.blue,
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a preset; unknown names fall back to Classic."""
    return THEMES.get(name, BoardTheme.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QStatusBar, QMenuBar, QMenu {
    background: #262421;
    color: #e8e6e3;
}
QStatusBar QLabel {
    padding: 2px 6px;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #4a4641;
}
"""

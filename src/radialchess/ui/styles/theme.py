"""Visual theme constants and QSS styles for the radial board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from radialchess.core.enums import Color


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board texture, pieces and markers."""

    cardinals: QColor  # strips on the four main axes
    diagonals: QColor  # strips halfway between the axes
    subdiagonals: QColor  # remaining outer-ring strips
    outline: QColor  # ring borders and white-piece outline
    marker: QColor  # legal destination crosses
    selection: QColor  # halo around the selected piece
    black_piece: QColor
    white_piece: QColor

    def piece_fill(self, color: Color) -> QColor:
        return self.black_piece if color == Color.BLACK else self.white_piece

    def piece_outline(self, color: Color) -> QColor:
        return self.white_piece if color == Color.BLACK else self.outline

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            cardinals=QColor(240, 217, 178),  # pale wood
            diagonals=QColor(178, 135, 97),  # mid wood
            subdiagonals=QColor(125, 77, 51),  # dark wood
            outline=QColor(26, 26, 26),
            marker=QColor(33, 209, 194),  # teal
            selection=QColor(255, 255, 0, 110),  # yellow transparent
            black_piece=QColor(0, 0, 0),
            white_piece=QColor(255, 255, 255),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            cardinals=QColor(224, 226, 231),
            diagonals=QColor(140, 162, 173),
            subdiagonals=QColor(101, 110, 122),
            outline=QColor(26, 26, 26),
            marker=QColor(255, 140, 0),
            selection=QColor(255, 255, 0, 110),
            black_piece=QColor(0, 0, 0),
            white_piece=QColor(255, 255, 255),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Slate": BoardTheme.slate(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}

QStatusBar {
    color: #e0e0e0;
}
"""

"""AppSettings — user-configurable display options."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from radialchess.ui.styles.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_legal_moves: bool = True

    def theme(self) -> BoardTheme:
        """Palette for :attr:`board_theme`, falling back to the default."""
        theme = THEMES.get(self.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using default", self.board_theme)
            return BoardTheme.default()
        return theme

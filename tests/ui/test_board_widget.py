"""Tests for BoardWidget texture baking, painting and press routing."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from radialchess.core.enums import TapResult
from radialchess.core.types import Coordinate
from radialchess.game.controller import GameController
from radialchess.ui.board_widget import BoardWidget
from radialchess.ui.styles.theme import BoardTheme


def _make_widget() -> tuple[BoardWidget, GameController]:
    ctrl = GameController()
    widget = BoardWidget(ctrl)
    widget.set_viewport(400, 400)
    return widget, ctrl


def test_set_viewport_rebuilds_metrics_and_texture() -> None:
    widget, ctrl = _make_widget()
    assert ctrl.metrics is not None
    assert ctrl.metrics.width == 400.0
    texture = widget.texture
    assert texture is not None
    assert texture.width() == 400 and texture.height() == 400


def test_set_viewport_ignores_empty_size() -> None:
    ctrl = GameController()
    widget = BoardWidget(ctrl)
    widget.set_viewport(0, 300)
    assert ctrl.metrics is None
    assert widget.texture is None


def test_strip_colors_follow_ring_resolution() -> None:
    widget, _ctrl = _make_widget()
    theme = BoardTheme.default()
    assert len(widget._strip_colors(6)) == 16
    assert widget._strip_colors(3) == [theme.cardinals, theme.diagonals] * 4
    assert widget._strip_colors(1) == [theme.cardinals] * 4


def test_press_routes_to_controller() -> None:
    widget, ctrl = _make_widget()
    results: list[int] = []
    widget.tapped.connect(results.append)

    assert ctrl.metrics is not None
    pixel = ctrl.metrics.to_pixel(Coordinate(4, 5))
    widget.handle_press(QPointF(pixel.x, pixel.y))
    widget.handle_press(QPointF(0.0, 0.0))

    assert results == [int(TapResult.SELECTED), int(TapResult.IGNORED)]
    assert ctrl.board.current_selection() is ctrl.board.get(Coordinate(4, 5))


def test_grab_paints_board_with_selection() -> None:
    widget, ctrl = _make_widget()
    widget.resize(400, 400)
    widget.set_viewport(400, 400)
    ctrl.tap_tile(Coordinate(4, 3))
    pixmap = widget.grab()
    assert not pixmap.isNull()


def test_theme_and_marker_toggles() -> None:
    widget, _ctrl = _make_widget()
    widget.set_theme(BoardTheme.slate())
    assert widget._theme == BoardTheme.slate()
    widget.set_show_legal_moves(False)
    assert widget._show_legal_moves is False

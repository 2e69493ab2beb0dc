"""BoardWidget — paints the radial board and routes presses to the controller."""

from __future__ import annotations

import math

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import (
    QBrush,
    QColor,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QPen,
    QPixmap,
    QPolygonF,
    QResizeEvent,
)
from PyQt6.QtWidgets import QSizePolicy, QWidget

from radialchess.core.enums import PieceKind
from radialchess.core.piece import Piece
from radialchess.core.topology import MAX_RING, all_coordinates, step_size
from radialchess.core.types import TURN
from radialchess.game.controller import GameController
from radialchess.game.metrics import BoardMetrics
from radialchess.ui.styles.theme import BoardTheme

# Rings whose outer edge closes a striped disk (rings 4-6, 2-3 and 1 share
# a strip pattern), drawn outermost first.
_STRIPED_RINGS: tuple[int, ...] = (MAX_RING, 3, 1)


class BoardWidget(QWidget):
    """Renders the board texture, pieces and legal-move markers.

    The texture is baked into a pixmap whenever the widget is resized; each
    paint only reads the board.

    Signals:
        tapped(int): Emitted with the ``TapResult`` of every press.
    """

    tapped = pyqtSignal(int)

    def __init__(self, controller: GameController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._show_legal_moves = True
        self._texture: QPixmap | None = None

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    # ── Public API ───────────────────────────────────────────────────────

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._bake_texture()
        self.update()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move crosses."""
        self._show_legal_moves = visible
        self.update()

    def set_viewport(self, width: int, height: int) -> None:
        """Rebuild metrics and texture for a *width* x *height* viewport."""
        if width <= 0 or height <= 0:
            return
        self._controller.resize(width, height)
        self._bake_texture()

    @property
    def texture(self) -> QPixmap | None:
        return self._texture

    # ── Qt events ────────────────────────────────────────────────────────

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.set_viewport(self.width(), self.height())

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.handle_press(event.position())

    def handle_press(self, pos: QPointF) -> None:
        result = self._controller.tap(pos.x(), pos.y())
        self.tapped.emit(int(result))
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        metrics = self._controller.metrics
        if metrics is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        if self._texture is not None:
            painter.drawPixmap(0, 0, self._texture)

        self._draw_pieces(painter, metrics)
        if self._show_legal_moves:
            self._draw_markers(painter, metrics)
        painter.end()

    # ── Texture ──────────────────────────────────────────────────────────

    def _bake_texture(self) -> None:
        metrics = self._controller.metrics
        if metrics is None:
            return

        pixmap = QPixmap(int(metrics.width), int(metrics.height))
        pixmap.fill(Qt.GlobalColor.transparent)

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        center = QPointF(metrics.center.x, metrics.center.y)

        for y in _STRIPED_RINGS:
            self._draw_striped_disk(
                painter, center, metrics.ring_boundary(y), self._strip_colors(y)
            )

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(self._theme.cardinals))
        painter.drawEllipse(center, metrics.radius_step, metrics.radius_step)

        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(QPen(self._theme.outline, 1))
        for y in range(MAX_RING + 1):
            radius = metrics.ring_boundary(y)
            painter.drawEllipse(center, radius, radius)

        painter.end()
        self._texture = pixmap

    def _strip_colors(self, y: int) -> list[QColor]:
        """One colour per tile of ring *y*, repeating every quarter turn."""
        quarter = (
            self._theme.cardinals,
            self._theme.subdiagonals,
            self._theme.diagonals,
            self._theme.subdiagonals,
        )
        pattern = list(quarter) * 4
        return pattern[:: step_size(y)]

    def _draw_striped_disk(
        self,
        painter: QPainter,
        center: QPointF,
        radius: float,
        colors: list[QColor],
    ) -> None:
        strips = len(colors)
        span = 360.0 / strips
        rect = QRectF(center.x() - radius, center.y() - radius, 2 * radius, 2 * radius)
        painter.setPen(QPen(self._theme.outline, 1))
        for i, color in enumerate(colors):
            # Strip i is centred on angle i * span, clockwise on screen.
            start = -(i * span - span / 2)
            painter.setBrush(QBrush(color))
            painter.drawPie(rect, int(start * 16), int(-span * 16))

    # ── Pieces / markers ─────────────────────────────────────────────────

    def _draw_pieces(self, painter: QPainter, metrics: BoardMetrics) -> None:
        board = self._controller.board
        selected = board.current_selection()
        for coord in all_coordinates():
            piece = board.get(coord)
            if piece is None:
                continue
            pixel = metrics.to_pixel(coord)
            center = QPointF(pixel.x, pixel.y)
            if piece is selected:
                painter.setPen(Qt.PenStyle.NoPen)
                painter.setBrush(QBrush(self._theme.selection))
                halo = 1.4 * metrics.piece_size
                painter.drawEllipse(center, halo, halo)
            angle = coord.x * 360.0 / TURN
            self._draw_piece(painter, piece, center, angle, metrics.piece_size)

    def _draw_piece(
        self,
        painter: QPainter,
        piece: Piece,
        center: QPointF,
        angle: float,
        size: float,
    ) -> None:
        painter.save()
        painter.translate(center)
        painter.rotate(angle)
        painter.setBrush(QBrush(self._theme.piece_fill(piece.color)))
        painter.setPen(QPen(self._theme.piece_outline(piece.color), 1))

        if piece.kind == PieceKind.PAWN:
            painter.drawEllipse(QPointF(0, 0), size, size)
        elif piece.kind == PieceKind.ROOK:
            half = size * math.pi / 4
            painter.drawRect(QRectF(-half, -half, 2 * half, 2 * half))
        else:
            side = size * math.pi / math.sqrt(3)
            height = math.sqrt(side**2 * 4 / 3)
            painter.drawPolygon(
                QPolygonF(
                    [
                        QPointF(-side / 2, 0),
                        QPointF(side / 2, -height / 2),
                        QPointF(side / 2, height / 2),
                    ]
                )
            )
        painter.restore()

    def _draw_markers(self, painter: QPainter, metrics: BoardMetrics) -> None:
        reach = metrics.piece_size / 2 * math.sqrt(2) / 2
        painter.setPen(QPen(self._theme.marker, 3))
        for coord in self._controller.legal_targets():
            pixel = metrics.to_pixel(coord)
            painter.drawLine(
                QPointF(pixel.x - reach, pixel.y - reach),
                QPointF(pixel.x + reach, pixel.y + reach),
            )
            painter.drawLine(
                QPointF(pixel.x - reach, pixel.y + reach),
                QPointF(pixel.x + reach, pixel.y - reach),
            )

from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QImage, QMouseEvent, QPainter, QPaintEvent, QPen, QPolygonF
from PySide6.QtWidgets import QSizePolicy, QWidget

from chaosgame import config
from chaosgame.model.engine import StepSequence
from chaosgame.model.geometry import Point, Triangle, triangle_corners
from chaosgame.model.render import (
    RenderCommand, RenderMode, Style, execute, render_active, render_background, render_prefix, render_settled,
)

logger = logging.getLogger(__name__)


class QPainterSurface:
    """`DrawingSurface` executing render commands with a QPainter."""

    def __init__(self, painter: QPainter, width: int, height: int) -> None:
        self.painter = painter
        self.width = width
        self.height = height

    @staticmethod
    def _pen(style: Style) -> QPen:
        pen = QPen(QColor(style.color))
        pen.setWidthF(style.width)
        return pen

    def clear(self) -> None:
        self.painter.fillRect(QRectF(0, 0, self.width, self.height), QColor(config.BACKGROUND_COLOR))

    def stroke_outline(self, corners: Triangle, style: Style) -> None:
        self.painter.setPen(self._pen(style))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPolygon(QPolygonF([QPointF(c.x, c.y) for c in corners]))

    def draw_marker(self, point: Point, radius: float, style: Style) -> None:
        color = QColor(style.color)
        if radius <= config.PIXEL_RADIUS:
            self.painter.fillRect(QRectF(point.x, point.y, 1, 1), color)
            return
        self.painter.setPen(Qt.PenStyle.NoPen if style.fill else self._pen(style))
        self.painter.setBrush(QBrush(color) if style.fill else Qt.BrushStyle.NoBrush)
        self.painter.drawEllipse(QPointF(point.x, point.y), radius, radius)

    def draw_line(self, start: Point, end: Point, style: Style) -> None:
        self.painter.setPen(self._pen(style))
        self.painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))


def paint_commands(image: QImage, commands: list[RenderCommand]) -> None:
    """Execute render commands onto an image, without antialiasing."""
    painter = QPainter(image)
    try:
        execute(commands, QPainterSurface(painter, image.width(), image.height()))
    finally:
        painter.end()


class ChaosCanvas(QWidget):
    """
    Fixed size drawing area for the chaos game.

    Settled markers are cached in an offscreen image. Moving forward on the same
    sequence only draws the new steps; anything else (rewind, new sequence,
    mode switch) redraws the full prefix. The highlight of the latest step is
    painted on top of the cache on every paint event.
    """
    point_clicked = Signal(float, float)

    def __init__(
        self,
        width: int = config.CANVAS_WIDTH,
        height: int = config.CANVAS_HEIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setFixedSize(width, height)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self._corners = triangle_corners(width, height)
        self._image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)

        self._sequence: StepSequence | None = None
        self._position: int = 0
        self._mode: RenderMode = RenderMode.HIGHLIGHTED_LATEST
        self._overlay: list[RenderCommand] = []

        self._draw_on_image(render_background(self._corners))

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def sequence(self) -> StepSequence | None:
        return self._sequence

    @property
    def position(self) -> int:
        return self._position

    @property
    def mode(self) -> RenderMode:
        return self._mode

    def current_commands(self) -> list[RenderCommand]:
        """Full command list of what is currently shown."""
        if self._sequence is None:
            return render_background(self._corners)
        return render_prefix(self._sequence, self._position, self._mode)

    def show_prefix(self, sequence: StepSequence, position: int, mode: RenderMode) -> None:
        """Display the first `position` steps of `sequence`."""
        incremental = (
            sequence is self._sequence
            and mode == self._mode
            and position >= self._position
        )
        if incremental:
            self._draw_on_image(render_settled(sequence, self._position, position, mode))
        else:
            self._draw_on_image(render_background(sequence.corners) + render_settled(sequence, 0, position, mode))

        self._sequence = sequence
        self._position = position
        self._mode = mode
        self._overlay = render_active(sequence, position, mode)
        self.update()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.drawImage(0, 0, self._image)
            if self._overlay:
                painter.setRenderHint(QPainter.RenderHint.Antialiasing)
                execute(self._overlay, QPainterSurface(painter, self.width(), self.height()))
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.point_clicked.emit(pos.x(), pos.y())
        super().mousePressEvent(event)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _draw_on_image(self, commands: list[RenderCommand]) -> None:
        paint_commands(self._image, commands)

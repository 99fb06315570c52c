"""QPainter implementation of the render surface contract."""
from __future__ import annotations

from typing import Callable, Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF

from .geometry import Vec
from .surface import PointState

SHAPE_FILL = QColor(99, 102, 241, 26)
INFLUENCE_FILL = QColor(99, 102, 241, 26)
INFLUENCE_BORDER = QColor(99, 102, 241, 77)


class QPainterSurface:
    """Adapter exposing the drawing primitives the controller expects.

    The surface wraps a painter that is only valid for one ``paintEvent``;
    ``rect_provider`` returns the widget rect used by :meth:`clear`.
    """

    def __init__(self, painter: QPainter, rect_provider: Callable[[], QRectF], background: QColor | None = None):
        self._painter = painter
        self._rect_provider = rect_provider
        self._rect = QRectF(rect_provider())
        self._background = background or QColor(15, 17, 26)

    def _color(self, value: str) -> QColor:
        color = QColor(value)
        return color if color.isValid() else QColor(99, 102, 241)

    def _pen(self, color: QColor, width: float, dash: Sequence[float] | None = None) -> QPen:
        pen = QPen(color)
        pen.setWidthF(float(width))
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        if dash:
            pen.setDashPattern([float(d) / max(float(width), 1.0) for d in dash])
        return pen

    def _polygon(self, points: Sequence[Vec]) -> QPolygonF:
        return QPolygonF([QPointF(float(x), float(y)) for x, y in points])

    def resize(self) -> None:
        self._rect = QRectF(self._rect_provider())

    def clear(self) -> None:
        self._painter.fillRect(self._rect, self._background)

    def draw_point(self, point: Vec, *, size: float, color: str, state: PointState = PointState.NORMAL) -> None:
        state = PointState(state)
        qcolor = self._color(color)
        center = QPointF(float(point[0]), float(point[1]))
        radius = float(size)
        self._painter.save()
        self._painter.setPen(Qt.NoPen)
        if state in (PointState.HOVER, PointState.ACTIVE):
            halo = QColor(qcolor)
            halo.setAlpha(70)
            self._painter.setBrush(halo)
            self._painter.drawEllipse(center, radius * 1.8, radius * 1.8)
        self._painter.setBrush(qcolor)
        self._painter.drawEllipse(center, radius, radius)
        inner = QColor(255, 255, 255) if state is PointState.ACTIVE else QColor(255, 255, 255, 77)
        self._painter.setBrush(inner)
        self._painter.drawEllipse(center, radius * 0.5, radius * 0.5)
        self._painter.setBrush(Qt.NoBrush)
        self._painter.setPen(self._pen(QColor(255, 255, 255, 128), 1.0))
        self._painter.drawEllipse(center, radius, radius)
        self._painter.restore()

    def draw_line(self, a: Vec, b: Vec, *, color: str, width: float, dashed: bool = False) -> None:
        self._painter.save()
        self._painter.setPen(self._pen(self._color(color), width, (5, 5) if dashed else None))
        self._painter.drawLine(QPointF(float(a[0]), float(a[1])), QPointF(float(b[0]), float(b[1])))
        self._painter.restore()

    def draw_curve(self, points: Sequence[Vec], *, color: str, width: float) -> None:
        if len(points) < 2:
            return
        self._painter.save()
        self._painter.setPen(self._pen(self._color(color), width))
        self._painter.drawPolyline(self._polygon(points))
        self._painter.restore()

    def draw_shape(self, points: Sequence[Vec], *, color: str, width: float, fill: bool = False) -> None:
        if len(points) < 2:
            return
        self._painter.save()
        self._painter.setPen(self._pen(self._color(color), width))
        self._painter.setBrush(QBrush(SHAPE_FILL) if fill else Qt.NoBrush)
        self._painter.drawPolygon(self._polygon(points))
        self._painter.restore()

    def draw_influence_radius(self, point: Vec, radius: float) -> None:
        self._painter.save()
        self._painter.setPen(self._pen(INFLUENCE_BORDER, 1.0, (3, 3)))
        self._painter.setBrush(INFLUENCE_FILL)
        self._painter.drawEllipse(QPointF(float(point[0]), float(point[1])), float(radius), float(radius))
        self._painter.restore()

    def draw_preview(self, a: Vec, b: Vec, *, color: str, width: float) -> None:
        self._painter.save()
        self._painter.setOpacity(0.5)
        self._painter.setPen(self._pen(self._color(color), width, (5, 5)))
        self._painter.drawLine(QPointF(float(a[0]), float(a[1])), QPointF(float(b[0]), float(b[1])))
        self._painter.restore()

"""
Drawing Surfaces
================
The minimal drawing API the renderer needs, and its QPainter implementation.
"""
from __future__ import annotations

from typing import Protocol, Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen


class DrawingSurface(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...

    def circle(
        self, x: float, y: float, radius: float, fill: str, stroke: str, line_width: float = 1.0
    ) -> None: ...

    def line(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        dash: Sequence[float] = (),
        line_width: float = 1.0,
    ) -> None: ...

    def text(self, x: float, y: float, label: str, color: str, font_px: int) -> None: ...


class QPainterSurface:
    """
    DrawingSurface backed by an active QPainter (widget, pixmap or image).
    """
    FONT_FAMILY = "Arial"

    def __init__(self, painter: QPainter, width: int, height: int, background: str = "white") -> None:
        self.painter = painter
        self.width = width
        self.height = height
        self.background = background
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

    def clear(self) -> None:
        self.painter.fillRect(QRectF(0, 0, self.width, self.height), QColor(self.background))

    def circle(
        self, x: float, y: float, radius: float, fill: str, stroke: str, line_width: float = 1.0
    ) -> None:
        self.painter.setPen(QPen(QColor(stroke), line_width))
        self.painter.setBrush(QBrush(QColor(fill)))
        self.painter.drawEllipse(QPointF(x, y), radius, radius)

    def line(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        dash: Sequence[float] = (),
        line_width: float = 1.0,
    ) -> None:
        """Stroke a polyline through ``points``. ``dash`` is in pixels, e.g. (5, 5)."""
        pen = QPen(QColor(color), line_width)
        if dash:
            pen.setStyle(Qt.PenStyle.CustomDashLine)
            # Qt dash patterns are in units of the pen width
            pen.setDashPattern([d / max(line_width, 1e-9) for d in dash])
        self.painter.setPen(pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        pts = [QPointF(px, py) for px, py in points]
        for a, b in zip(pts, pts[1:]):
            self.painter.drawLine(a, b)

    def text(self, x: float, y: float, label: str, color: str, font_px: int) -> None:
        font = QFont(self.FONT_FAMILY)
        font.setPixelSize(font_px)
        self.painter.setFont(font)
        self.painter.setPen(QColor(color))

        metrics = self.painter.fontMetrics()
        w = metrics.horizontalAdvance(label)
        h = metrics.height()
        rect = QRectF(x - w / 2.0, y - h / 2.0, w, h)
        self.painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, label)

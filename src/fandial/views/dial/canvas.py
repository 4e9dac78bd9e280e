"""
QPainter implementation of the DialCanvas drawing primitives.
"""

from typing import Any

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen

from fandial.core.interfaces import LabelFont


def to_qcolor(color: Any) -> QColor:
    """Converts a hex string, integer RGB value or QColor to a QColor."""
    if isinstance(color, QColor):
        return QColor(color)
    if isinstance(color, str) and len(color) == 9 and color.startswith("#"):
        # #AARRGGBB keeps its alpha channel.
        return QColor.fromRgba(int(color[1:], 16))
    return QColor(color)


def to_qfont(font: LabelFont) -> QFont:
    qfont = QFont(font.family)
    qfont.setPixelSize(font.pixel_size)
    qfont.setWeight(QFont.Weight(font.weight))
    return qfont


class QPainterCanvas:
    """Draws dial primitives onto an active QPainter."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter

    def draw_filled_circle(self, x: float, y: float, radius: float, color: Any) -> None:
        if radius <= 0:
            return
        self.painter.save()
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(to_qcolor(color)))
        self.painter.drawEllipse(QPointF(x, y), radius, radius)
        self.painter.restore()

    def draw_centered_text(self, x: float, y: float, text: str, color: Any, font: LabelFont) -> None:
        """Draws text horizontally centered on x with its baseline at y."""
        qfont = to_qfont(font)
        text_width = QFontMetricsF(qfont).horizontalAdvance(text)
        self.painter.save()
        self.painter.setFont(qfont)
        self.painter.setPen(QPen(to_qcolor(color)))
        self.painter.drawText(QPointF(x - text_width / 2, y), text)
        self.painter.restore()

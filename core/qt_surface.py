from PyQt6.QtGui import QPen, QColor, QFont
from PyQt6.QtCore import Qt, QRect

from core.surface import DrawingSurface


class QPainterSurface(DrawingSurface):
    def __init__(self, painter, font_family="Arial"):
        self.painter = painter
        self.font_family = font_family

    def draw_line(self, start, end, color, width=1):
        pen = QPen(QColor(color))
        pen.setWidth(width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        self.painter.setPen(pen)
        self.painter.drawLine(int(start[0]), int(start[1]), int(end[0]), int(end[1]))

    def draw_text(self, position, text, color, size):
        if not text:
            return
        font = QFont(self.font_family)
        font.setPixelSize(size)
        self.painter.setFont(font)
        self.painter.setPen(QColor(color))

        # Прямоугольник с запасом, текст прижат к верхнему левому углу
        metrics = self.painter.fontMetrics()
        rect = QRect(int(position[0]), int(position[1]),
                     metrics.horizontalAdvance(text) + size, metrics.height())
        self.painter.drawText(rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop, text)

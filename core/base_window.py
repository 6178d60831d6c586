from PyQt6.QtWidgets import QMainWindow, QApplication
from PyQt6.QtCore import Qt, QPoint, QRect

from core.surface import InputSource


class GameWindow(QMainWindow, InputSource):
    def __init__(self, overlay_mode=False):
        super().__init__()

        self._dragging = False
        self._start_pos = QPoint()
        self._start_frame = QRect()

        # Состояние мыши для опроса из игрового цикла
        self._left_down = False
        self._mouse_pos = (0, 0)
        # Нажатие, которое еще не видел игровой цикл (клик короче кадра)
        self._pending_press = False
        self._press_pos = (0, 0)

        self.overlay_mode = overlay_mode
        if overlay_mode:
            # Поверх окон, без рамок
            self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint)

        self.setMouseTracking(True)

    def is_left_mouse_button_down(self):
        pending = self._pending_press
        self._pending_press = False
        return self._left_down or pending

    def get_mouse_coordinates(self):
        if self._pending_press:
            return self._press_pos
        return self._mouse_pos

    def _remember_pos(self, event):
        pos = event.position().toPoint()
        self._mouse_pos = (pos.x(), pos.y())

    def mousePressEvent(self, event):
        if (self.overlay_mode and event.button() == Qt.MouseButton.LeftButton
                and QApplication.keyboardModifiers() == Qt.KeyboardModifier.ShiftModifier):
            # Shift + ЛКМ таскает окно без рамки, в игру клик не идет
            self._dragging = True
            self._start_pos = event.globalPosition().toPoint()
            self._start_frame = self.frameGeometry()
            event.accept()
            return

        self._remember_pos(event)
        if event.button() == Qt.MouseButton.LeftButton:
            self._left_down = True
            self._pending_press = True
            self._press_pos = self._mouse_pos
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._dragging:
            delta = event.globalPosition().toPoint() - self._start_pos
            self.move(self._start_frame.topLeft() + delta)
            return

        self._remember_pos(event)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._dragging:
            self._dragging = False
            return

        self._remember_pos(event)
        if event.button() == Qt.MouseButton.LeftButton:
            self._left_down = False
        super().mouseReleaseEvent(event)

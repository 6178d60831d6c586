import logging

from PyQt6.QtWidgets import QPushButton
from PyQt6.QtGui import QPainter, QColor
from PyQt6.QtCore import Qt, QTimer

from core.base_window import GameWindow
from core.notifications import NotificationManager
from core.qt_surface import QPainterSurface
from core.settings import SettingsManager
from games.tic_tac_toe.controller import TicTacToeController
from games.tic_tac_toe.geometry import (BoardGeometry, WINDOW_X, WINDOW_Y, WINDOW_WIDTH, WINDOW_HEIGHT)
from games.tic_tac_toe.logic import TicTacToeLogic
from games.tic_tac_toe.results import ResultLog

log = logging.getLogger(__name__)

BUTTON_STYLE = """
    QPushButton { background-color: #ecf0f1; color: black; border: 1px solid #7f8c8d; border-radius: 4px; }
    QPushButton:hover { background-color: #d5dbdb; }
"""


class TicTacToeGame(GameWindow):
    def __init__(self, settings=None):
        settings = settings or SettingsManager()
        super().__init__(overlay_mode=settings.get("overlay_mode"))
        self.settings = settings

        self.setWindowTitle("Tic Tac Toe")
        self.setGeometry(WINDOW_X, WINDOW_Y, WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setWindowOpacity(self.settings.get("window_opacity"))

        self.notifications = NotificationManager(self)

        geometry = BoardGeometry()
        self.result_log = ResultLog(self.settings.get("results_file"))
        log.info("%d results already in %s", len(self.result_log.read_results()), self.result_log.path)

        logic = TicTacToeLogic(geometry, result_log=self.result_log, notify=self.on_result_error)
        self.controller = TicTacToeController(geometry, logic, on_quit=self.close)

        self.reset_button = self._make_button("Reset", self.controller.reset_rect, self.controller.press_reset)
        self.quit_button = self._make_button("Quit", self.controller.quit_rect, self.controller.press_quit)

        # Игровой цикл: опрос мыши и перерисовка каждый кадр
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.next_frame)
        self.timer.start(self.settings.get("frame_interval_ms"))

    def _make_button(self, text, rect, callback):
        btn = QPushButton(text, self)
        btn.setGeometry(*rect.as_tuple())
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setStyleSheet(BUTTON_STYLE)
        btn.clicked.connect(callback)
        return btn

    def next_frame(self):
        self.controller.poll(self)
        self.update()

    def on_result_error(self, message):
        return self.notifications.show("Error", message, "error")

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor("white"))
        self.controller.draw(QPainterSurface(painter))
        painter.end()

    def resizeEvent(self, event):
        self.notifications.reposition_toasts()
        super().resizeEvent(event)

    def closeEvent(self, event):
        self.timer.stop()
        self.notifications.clear()
        super().closeEvent(event)

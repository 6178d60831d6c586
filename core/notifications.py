from PyQt6 import sip
from PyQt6.QtWidgets import QWidget, QLabel, QVBoxLayout, QGraphicsOpacityEffect, QStyleOption, QStyle
from PyQt6.QtCore import Qt, QTimer, QPropertyAnimation, QEasingCurve
from PyQt6.QtGui import QFont, QPainter

ACCENT_COLORS = {
    "success": "#2ecc71",
    "error": "#e74c3c",
    "warning": "#f39c12",
    "info": "#3498db"
}

TOAST_LIFETIME_MS = 4000


class Toast(QWidget):
    """Всплывающее сообщение, не блокирует игру и закрывается само"""

    def __init__(self, parent, title, message, level="info"):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.level = level

        accent = ACCENT_COLORS.get(level, ACCENT_COLORS["info"])
        self.setObjectName("Toast")
        self.setStyleSheet(f"""
            #Toast {{
                background-color: #2c3e50;
                border-left: 5px solid {accent};
                border-radius: 5px;
            }}
            QLabel {{ color: white; }}
        """)
        self.setFixedSize(300, 70)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(15, 10, 10, 10)
        layout.setSpacing(2)

        self.lbl_title = QLabel(title)
        self.lbl_title.setFont(QFont("Arial", 10, QFont.Weight.Bold))
        layout.addWidget(self.lbl_title)

        self.lbl_message = QLabel(message)
        self.lbl_message.setFont(QFont("Arial", 9))
        self.lbl_message.setWordWrap(True)
        self.lbl_message.setStyleSheet("color: #bdc3c7;")
        layout.addWidget(self.lbl_message)

        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self.fade_out)
        self.timer.start(TOAST_LIFETIME_MS)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.anim = self._fade(0, 1)
        self.anim.start()

    def _fade(self, start, end):
        anim = QPropertyAnimation(self.opacity_effect, b"opacity")
        anim.setDuration(300)
        anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        return anim

    def fade_out(self):
        self.anim = self._fade(1, 0)
        self.anim.finished.connect(self.close)
        self.anim.start()

    def paintEvent(self, event):
        # Без этого stylesheet не рисует фон у простого QWidget
        opt = QStyleOption()
        opt.initFrom(self)
        p = QPainter(self)
        self.style().drawPrimitive(QStyle.PrimitiveElement.PE_Widget, opt, p, self)


class NotificationManager:
    def __init__(self, parent_widget):
        self.parent = parent_widget
        self.active_toasts = []

    def show(self, title, message, level="info"):
        toast = Toast(self.parent, title, message, level)
        toast.show()

        self.active_toasts.append(toast)
        self.reposition_toasts()

        toast.destroyed.connect(lambda: self.remove_toast(toast))
        return toast

    def remove_toast(self, toast):
        if toast in self.active_toasts:
            self.active_toasts.remove(toast)
            # Окно может удаляться вместе с тостами
            if not sip.isdeleted(self.parent):
                self.reposition_toasts()

    def clear(self):
        toasts, self.active_toasts = self.active_toasts, []
        for toast in toasts:
            if sip.isdeleted(toast):
                continue
            toast.destroyed.disconnect()
            toast.close()

    def reposition_toasts(self):
        # Стопкой от нижнего правого угла
        margin = 20
        spacing = 10

        y = self.parent.height() - margin
        for toast in self.active_toasts:
            y -= toast.height()
            toast.move(self.parent.width() - toast.width() - margin, y)
            y -= spacing

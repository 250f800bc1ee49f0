# -*- coding: utf-8 -*-
"""
Toast notification component.

One transient message pinned to the bottom of its parent widget. Each
parent owns a single toast, so a new message replaces the visible one
and restarts its timer.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from app.config import Config

TOAST_OBJECT_NAME = "toast-notification"


class Toast(QLabel):
    """Snackbar-style message label."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    # background, text
    PALETTE = {
        SUCCESS: ("#28a745", "white"),
        ERROR: ("#dc3545", "white"),
        WARNING: ("#ffc107", "#333"),
        INFO: ("#17a2b8", "white"),
    }

    BOTTOM_MARGIN = 50

    def __init__(self, parent: QWidget):
        super().__init__(parent)
        self.setObjectName(TOAST_OBJECT_NAME)
        self.toast_type = self.INFO
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(500)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0)
        self.setGraphicsEffect(self._opacity)

        self._fade = QPropertyAnimation(self._opacity, b"opacity", self)
        self._fade.finished.connect(self._on_fade_finished)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(lambda: self._animate(0.0, 300))

        self.hide()

    def show_message(self, message: str, toast_type: str = INFO, duration: int = None):
        self.toast_type = toast_type
        self.setProperty("type", toast_type)
        self.setText(message)

        background, text_color = self.PALETTE.get(toast_type, ("#333", "white"))
        self.setStyleSheet(
            f"QLabel#{TOAST_OBJECT_NAME} {{ background-color: {background}; color: {text_color};"
            f" padding: 12px 24px; border-radius: 6px; font-size: 11pt; }}"
        )

        self.adjustSize()
        area = self.parentWidget().rect()
        self.move((area.width() - self.width()) // 2,
                  area.height() - self.height() - self.BOTTOM_MARGIN)

        self.show()
        self.raise_()
        self._animate(1.0, 200)
        self._hide_timer.start(duration or Config.TOAST_DURATION_MS)

    def _animate(self, end: float, duration_ms: int):
        self._fade.stop()
        self._fade.setDuration(duration_ms)
        self._fade.setStartValue(self._opacity.opacity())
        self._fade.setEndValue(end)
        self._fade.start()

    def _on_fade_finished(self):
        if self._fade.endValue() == 0.0:
            self.hide()

    @classmethod
    def show_toast(cls, parent: QWidget, message: str, toast_type: str = INFO,
                   duration: int = None) -> "Toast":
        """Show `message` on `parent`, reusing the toast it already has."""
        toast = parent.findChild(Toast, TOAST_OBJECT_NAME)
        if toast is None:
            toast = cls(parent)
        toast.show_message(message, toast_type, duration)
        return toast

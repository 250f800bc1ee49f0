# -*- coding: utf-8 -*-
"""
Error Boundary - keeps a crashing page from taking the window down.

The main window builds and refreshes every page through its boundary.
The first exception is logged with its traceback and trips the
boundary; from then on the page is replaced by a fallback label reading
"Error rendering page: <message>".
"""

from typing import Optional, Callable
from functools import wraps

from PyQt5.QtWidgets import QLabel, QWidget
from PyQt5.QtCore import Qt, pyqtSignal, QObject

from app.config import Config
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """Guards the UI callables of one page."""

    error_occurred = pyqtSignal(str, str)  # exception class name, message

    def __init__(self, page_name: str, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.page_name = page_name
        self.error_count = 0
        self.last_error: Optional[Exception] = None

    @property
    def has_error(self) -> bool:
        return self.last_error is not None

    def protect(self, func: Callable, operation_name: str = "operation") -> Callable:
        """
        Wrap `func` so any exception it raises trips the boundary.

        The wrapper returns None instead of raising.
        """
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                self._trip(e, operation_name)
                return None

        return wrapper

    def render(self, factory: Callable[[], QWidget]) -> QWidget:
        """Build a page with `factory`, or the fallback widget if it raises."""
        widget = self.protect(factory, "render")()
        return widget if widget is not None else self.fallback_widget()

    def fallback_widget(self) -> QWidget:
        message = str(self.last_error) if self.last_error else tr("error.unknown")
        label = QLabel(tr("error.render", message=message))
        label.setObjectName("error_boundary_fallback")
        label.setAlignment(Qt.AlignCenter)
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 12pt; padding: 24px;")
        return label

    def _trip(self, error: Exception, operation: str):
        self.error_count += 1
        self.last_error = error
        logger.error(f"{self.page_name}: {operation} raised {type(error).__name__}: {error}", exc_info=True)
        self.error_occurred.emit(type(error).__name__, str(error))

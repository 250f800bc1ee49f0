# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from typing import Callable, Optional

from PyQt5.QtCore import QTimer
from PyQt5.QtWidgets import QMessageBox, QWidget

from app.config import Config
from services.error_mapper import map_exception
from services.translation_manager import tr
from ui.components.toast import Toast
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps exceptions and controller results to toasts and dialogs."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_toast: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show a toast.

        Args:
            error: The exception to handle
            parent: Widget the toast is shown on
            context: Where the error happened, for the log
            show_toast: Whether to show the message to the user

        Returns:
            User-friendly error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message = map_exception(error).message

        if show_toast and parent:
            Toast.show_toast(parent, message, Toast.ERROR)

        return message

    @staticmethod
    def show_result(parent: QWidget, result, on_login_required: Optional[Callable] = None,
                    success_type: str = Toast.SUCCESS):
        """
        Show an OperationResult as a toast.

        A 401 result additionally schedules `on_login_required` after
        Config.REDIRECT_DELAY_MS.
        """
        if result.success:
            if result.message:
                Toast.show_toast(parent, result.message, success_type)
            return

        Toast.show_toast(parent, result.message or tr("error.unknown"), Toast.ERROR)
        if result.requires_login and on_login_required is not None:
            logger.info(f"Unauthorized; redirecting to login in {Config.REDIRECT_DELAY_MS} ms")
            QTimer.singleShot(Config.REDIRECT_DELAY_MS, on_login_required)

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        """Show error dialog with translated title."""
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = None):
        """Show warning dialog with translated title."""
        QMessageBox.warning(parent, title or tr("dialog.warning"), message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = None) -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent, title or tr("dialog.confirm"), message,
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        return reply == QMessageBox.Yes

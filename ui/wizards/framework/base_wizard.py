# -*- coding: utf-8 -*-
"""
Base Wizard - header, step stack and Back/Skip/Next footer.

Concrete wizards supply their context and steps and decide what the
Finish button on the last step does. While a step submits, the footer
is disabled and the Next button shows the step's busy label. A step
that hits a 401 sends the wizard to the login route after
Config.REDIRECT_DELAY_MS.
"""

from typing import Any, Dict, List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal, QTimer
from PyQt5.QtGui import QFont

from .base_step import ABCQWidgetMeta, BaseStep, StepValidationResult
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from app.config import Config, Routes
from ui.components.action_button import ActionButton
from ui.components.toast import Toast
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

PANEL_STYLE = "QWidget { background-color: #f8f9fa; }"


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """Multi-step form driven by a StepNavigator."""

    wizard_completed = pyqtSignal(dict)  # completion summary
    navigation_requested = pyqtSignal(str)  # route

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self.context = self.create_context()
        self.steps = self.create_steps()
        self._busy = False

        self.navigator = StepNavigator(self.context, self.steps)
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.validation_failed.connect(self._on_validation_failed)

        for step in self.steps:
            step.message_requested.connect(self.show_message)
            step.login_required.connect(self._on_login_required)

        self._setup_ui()
        self.navigator.reset()

    # ==================== To implement ====================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        pass

    @abstractmethod
    def create_context(self) -> WizardContext:
        pass

    @abstractmethod
    def on_submit(self) -> bool:
        """Handle Finish on the last step; True when the wizard is done."""
        pass

    def get_wizard_title(self) -> str:
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        return tr("button.finish")

    # ==================== UI ====================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("background-color: #ddd;")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet(PANEL_STYLE)

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.step_title_label = QLabel()
        layout.addWidget(self.step_title_label)

        progress_row = QHBoxLayout()
        progress_row.setSpacing(8)
        self.progress_label = QLabel()
        progress_row.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet("""
            QProgressBar { border: none; background-color: #e9ecef; border-radius: 3px; }
            QProgressBar::chunk { background-color: #0d6efd; border-radius: 3px; }
        """)
        progress_row.addWidget(self.progress_bar, 1)
        layout.addLayout(progress_row)
        return header

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setStyleSheet(PANEL_STYLE)

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_previous = ActionButton(tr("button.back"), variant="secondary")
        self.btn_previous.clicked.connect(self.navigator.previous_step)
        layout.addWidget(self.btn_previous)
        layout.addStretch()

        self.btn_skip = ActionButton(tr("button.skip"), variant="secondary")
        self.btn_skip.clicked.connect(self.navigator.skip_step)
        layout.addWidget(self.btn_skip)

        self.btn_next = ActionButton(tr("button.finish"), variant="primary", width=180)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)
        return footer

    # ==================== Navigation ====================

    def _handle_next(self):
        if self._busy:
            return
        if self.navigator.is_last_step:
            self._handle_submit()
            return

        step = self.navigator.get_current_step()
        self.set_busy(True, step.get_busy_text())
        try:
            self.navigator.next_step()
        finally:
            self.set_busy(False)

    def _handle_submit(self):
        if not self.on_submit():
            return
        self.context.status = "completed"
        summary: Dict[str, Any] = self.context.to_dict()
        for step in self.steps:
            summary.update(step.collect_data())
        self.wizard_completed.emit(summary)

    def set_busy(self, busy: bool, text: Optional[str] = None):
        """Disable the footer while a step talks to the backend."""
        self._busy = busy
        if busy:
            if text:
                self.btn_next.setText(text)
            for button in (self.btn_previous, self.btn_skip, self.btn_next):
                button.setEnabled(False)
        else:
            self._update_navigation_buttons()

    def show_message(self, message: str, toast_type: str = Toast.INFO):
        logger.debug(f"Wizard message ({toast_type}): {message}")
        Toast.show_toast(self, message, toast_type)

    def _on_login_required(self):
        logger.info(f"Unauthorized; redirecting to login in {Config.REDIRECT_DELAY_MS} ms")
        QTimer.singleShot(Config.REDIRECT_DELAY_MS, lambda: self.navigation_requested.emit(Routes.LOGIN))

    # ==================== Navigator events ====================

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        step = self.steps[new_index]
        self.step_title_label.setText(step.get_step_title())
        self.progress_label.setText(tr("wizard.progress", current=new_index + 1, total=len(self.steps)))
        self.progress_bar.setValue(int(self.navigator.get_progress_percentage()))
        self._update_navigation_buttons()

    def _update_navigation_buttons(self):
        if self._busy:
            return
        self.btn_previous.setEnabled(self.navigator.can_go_previous())
        self.btn_skip.setVisible(self.navigator.can_skip())
        self.btn_skip.setEnabled(True)
        self.btn_next.setEnabled(True)

        if self.navigator.is_last_step:
            self.btn_next.setText(self.get_submit_button_text())
        else:
            step = self.navigator.get_current_step()
            self.btn_next.setText(step.get_next_button_text() or tr("button.finish"))

    def _on_validation_failed(self, result: StepValidationResult):
        step = self.navigator.get_current_step()
        step.set_field_errors(result.field_errors)
        if not result.field_errors:
            errors = "\n".join(f"• {error}" for error in result.errors)
            self.show_message(errors or tr("validation.check_data"), Toast.ERROR)

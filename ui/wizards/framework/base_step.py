# -*- coding: utf-8 -*-
"""
Base Step - one page of a wizard.

Subclasses build their widgets in setup_ui(), check their draft in
validate() and, when the step talks to the backend, persist it in
submit(). collect_data() returns the step's part of the completion
summary.
"""

from typing import List, Dict, Any, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from app.config import Config


@dataclass
class StepValidationResult:
    """Outcome of validate(): overall errors plus per-field messages."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    field_errors: Dict[str, str] = field(default_factory=dict)

    def add_error(self, message: str, field_key: str = None):
        self.errors.append(message)
        if field_key:
            self.field_errors[field_key] = message
        self.is_valid = False

    def add_field_errors(self, errors: Dict[str, str]):
        """Merge a `{field_key: message}` map returned by a validator."""
        for key, message in errors.items():
            self.add_error(message, key)


class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Lets QWidget subclasses declare abstract methods."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Common lifecycle for wizard steps.

    The UI is built lazily on first show; every show calls
    populate_data() so the widgets reflect the shared context. Toasts
    and the login redirect are requested from the wizard through
    signals rather than shown by the step itself.
    """

    message_requested = pyqtSignal(str, str)  # message, toast type
    login_required = pyqtSignal()

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.context = context
        self._is_initialized = False
        self._error_labels: Dict[str, QLabel] = {}

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def on_show(self):
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True
        self.populate_data()

    # ==================== Required ====================

    @abstractmethod
    def setup_ui(self):
        """Create the step's widgets (called once)."""

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """Check the draft without contacting the backend."""

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """The step's contribution to the wizard's completion summary."""

    # ==================== Optional ====================

    def submit(self) -> bool:
        """
        Persist the step after validate() passed.

        Returns:
            True to advance to the next step, False to stay
        """
        return True

    def populate_data(self):
        """Refresh widgets from the context when the step is shown again."""

    def get_step_title(self) -> str:
        return self.__class__.__name__

    def get_next_button_text(self) -> Optional[str]:
        """Label of the Next button on this step; None keeps the wizard default."""
        return None

    def get_busy_text(self) -> Optional[str]:
        """Label of the Next button while submit() runs."""
        return None

    def can_skip(self) -> bool:
        return False

    def on_skip(self):
        """Called when the user skips the step, before the wizard advances."""

    # ==================== Helpers ====================

    def notify(self, message: str, toast_type: str = "info"):
        self.message_requested.emit(message, toast_type)

    def report_result(self, result, success_type: str = "success") -> bool:
        """
        Show a controller OperationResult and return its success flag.

        Failures also refresh the inline field errors; a 401 asks the
        wizard for the login redirect.
        """
        if result.success:
            if result.message:
                self.notify(result.message, success_type)
            return True

        self.set_field_errors(result.errors)
        self.notify(result.message, "error")
        if result.requires_login:
            self.login_required.emit()
        return False

    def create_validation_result(self) -> StepValidationResult:
        return StepValidationResult()

    def create_error_label(self, field_key: str) -> QLabel:
        """Inline error label for one field, hidden until set_field_errors()."""
        label = QLabel()
        label.setObjectName(f"error_{field_key}")
        label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 9pt;")
        label.setWordWrap(True)
        label.hide()
        self._error_labels[field_key] = label
        return label

    def set_field_errors(self, errors: Dict[str, str]):
        """Show `errors` next to their fields and clear every other error label."""
        for key, label in self._error_labels.items():
            message = errors.get(key, "")
            label.setText(message)
            label.setVisible(bool(message))

    def field_error(self, field_key: str) -> str:
        label = self._error_labels.get(field_key)
        return label.text() if label is not None else ""

    def drop_error_labels(self, prefix: str):
        """Forget error labels whose key starts with `prefix` (rows being rebuilt)."""
        for key in [k for k in self._error_labels if k.startswith(prefix)]:
            del self._error_labels[key]

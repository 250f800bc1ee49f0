# -*- coding: utf-8 -*-
"""
Utility Readings Step - Step 3 of the onboarding wizard.

Initial water/gas readings. Blank rows are ignored on submit; the rest
are posted one by one to their utility endpoint.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QComboBox, QGridLayout, QHBoxLayout, QLabel, QLineEdit, QWidget

from app.config import Vocabularies
from controllers.onboarding_controller import OnboardingController
from services.translation_manager import tr
from services.validation_service import validate_utility_readings
from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.onboarding.onboarding_context import OnboardingContext
from utils.logger import get_logger

logger = get_logger(__name__)


class UtilityReadingsStep(BaseStep):
    """Step 3: utility readings."""

    def __init__(self, context: OnboardingContext, controller: OnboardingController, parent=None):
        super().__init__(context, parent)
        self.controller = controller
        self.row_widgets = []

    def setup_ui(self):
        layout = self.main_layout

        hint = QLabel(tr("wizard.utility.hint"))
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #6c757d;")
        layout.addWidget(hint)

        self.rows_container = QWidget()
        self.rows_layout = QGridLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setHorizontalSpacing(8)
        self.rows_layout.setVerticalSpacing(4)
        layout.addWidget(self.rows_container)

        buttons = QHBoxLayout()
        self.btn_add_reading = ActionButton(tr("wizard.utility.add_reading"), variant="outline")
        self.btn_add_reading.clicked.connect(self._add_reading)
        buttons.addWidget(self.btn_add_reading)
        buttons.addStretch()
        layout.addLayout(buttons)
        layout.addStretch()

        self._rebuild_rows()

    # ==================== Rows ====================

    def _rebuild_rows(self):
        while self.rows_layout.count():
            widget = self.rows_layout.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()
        self.drop_error_labels("reading")
        self.row_widgets = []

        headers = [tr("wizard.utility.column.type"), tr("wizard.utility.column.reading"),
                   tr("wizard.utility.column.actions")]
        for column, text in enumerate(headers):
            header = QLabel(text)
            header.setStyleSheet("font-weight: bold;")
            self.rows_layout.addWidget(header, 0, column)

        readings = self.context.reading_draft.readings
        for index, reading in enumerate(readings):
            grid_row = 1 + index * 2

            type_combo = QComboBox()
            type_combo.setObjectName(f"reading{index}_type")
            for value, label, _ in Vocabularies.UTILITY_TYPES:
                type_combo.addItem(label, value)
            type_combo.setCurrentIndex(max(type_combo.findData(reading.type), 0))
            type_combo.currentIndexChanged.connect(
                lambda _, i=index, combo=type_combo: self._on_reading_changed(i, "type", combo.currentData())
            )
            self.rows_layout.addWidget(type_combo, grid_row, 0)

            value_edit = QLineEdit(reading.reading)
            value_edit.setObjectName(f"reading{index}_reading")
            value_edit.textChanged.connect(lambda text, i=index: self._on_reading_changed(i, "reading", text))
            self.rows_layout.addWidget(value_edit, grid_row, 1)
            self.rows_layout.addWidget(self.create_error_label(f"reading{index}_reading"), grid_row + 1, 1)

            btn_remove = ActionButton(tr("button.remove"), variant="danger", width=90, height=32)
            btn_remove.setObjectName(f"reading{index}_remove")
            btn_remove.setEnabled(len(readings) > 1)
            btn_remove.clicked.connect(lambda checked=False, i=index: self._remove_reading(i))
            self.rows_layout.addWidget(btn_remove, grid_row, 2)

            self.row_widgets.append({"type": type_combo, "reading": value_edit, "remove": btn_remove})

    def _on_reading_changed(self, index: int, name: str, value: str):
        self.context.reading_draft.update_reading(index, name, value)

    def _add_reading(self):
        self.context.reading_draft.add_reading()
        self._rebuild_rows()

    def _remove_reading(self, index: int):
        if len(self.context.reading_draft.readings) <= 1:
            return
        self.context.reading_draft.remove_reading(index)
        self._rebuild_rows()

    # ==================== BaseStep ====================

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        result.add_field_errors(validate_utility_readings(self.context.reading_draft.readings))
        return result

    def submit(self) -> bool:
        self.set_field_errors({})
        result = self.controller.save_utility_readings(self.context.customer_id, self.context.reading_draft)
        success_type = "success" if result.data else "info"
        return self.report_result(result, success_type)

    def collect_data(self) -> Dict[str, Any]:
        return {
            "utility_readings": [
                {"type": reading.type, "reading": reading.reading}
                for reading in self.context.reading_draft.readings
            ]
        }

    def populate_data(self):
        if len(self.row_widgets) != len(self.context.reading_draft.readings):
            self._rebuild_rows()

    def can_skip(self) -> bool:
        return True

    def on_skip(self):
        self.set_field_errors({})
        self.notify(tr("message.readings_skipped"), "info")

    def get_step_title(self) -> str:
        return tr("wizard.step.utility")

    def get_next_button_text(self) -> str:
        return tr("wizard.button.next_confirmation")

    def get_busy_text(self) -> str:
        return tr("wizard.button.saving")

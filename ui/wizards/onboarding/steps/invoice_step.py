# -*- coding: utf-8 -*-
"""
Invoice Step - Step 2 of the onboarding wizard.

Editable invoice rows (description, amount, quantity) with a live row
total. The step can be skipped; an empty list advances without a request.
"""

from typing import Any, Dict

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QGridLayout, QHBoxLayout, QLabel, QLineEdit, QWidget

from app.config import Config
from controllers.onboarding_controller import OnboardingController
from services.translation_manager import tr
from services.validation_service import validate_invoice_items
from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.onboarding.onboarding_context import OnboardingContext
from utils.logger import get_logger

logger = get_logger(__name__)


def format_total(total) -> str:
    if total is None:
        return tr("invoice.total_na")
    return f"{Config.CURRENCY} {total:.2f}"


class InvoiceStep(BaseStep):
    """Step 2: onboarding invoice items."""

    ITEM_FIELDS = ("description", "amount", "quantity")

    def __init__(self, context: OnboardingContext, controller: OnboardingController, parent=None):
        super().__init__(context, parent)
        self.controller = controller
        self.row_widgets = []

    def setup_ui(self):
        layout = self.main_layout

        hint = QLabel(tr("wizard.invoice.hint"))
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
        self.btn_add_item = ActionButton(tr("wizard.invoice.add_item"), variant="outline")
        self.btn_add_item.clicked.connect(self._add_item)
        buttons.addWidget(self.btn_add_item)
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
        self.drop_error_labels("item")
        self.row_widgets = []

        headers = [tr("invoice.field.description"), tr("invoice.field.amount"),
                   tr("invoice.field.quantity"), tr("invoice.column.total"), ""]
        for column, text in enumerate(headers):
            header = QLabel(text)
            header.setStyleSheet("font-weight: bold;")
            self.rows_layout.addWidget(header, 0, column)

        items = self.context.invoice_draft.items
        for index, item in enumerate(items):
            grid_row = 1 + index * 2
            inputs = {}
            for column, name in enumerate(self.ITEM_FIELDS):
                line_edit = QLineEdit(getattr(item, name))
                line_edit.setObjectName(f"item{index}_{name}")
                line_edit.textChanged.connect(
                    lambda text, i=index, key=name: self._on_item_changed(i, key, text)
                )
                self.rows_layout.addWidget(line_edit, grid_row, column)
                self.rows_layout.addWidget(self.create_error_label(f"item{index}_{name}"), grid_row + 1, column)
                inputs[name] = line_edit

            total_label = QLabel(format_total(item.total))
            total_label.setObjectName(f"item{index}_total")
            total_label.setAlignment(Qt.AlignVCenter | Qt.AlignRight)
            self.rows_layout.addWidget(total_label, grid_row, 3)

            btn_remove = ActionButton(tr("button.remove"), variant="danger", width=90, height=32)
            btn_remove.setObjectName(f"item{index}_remove")
            btn_remove.setEnabled(len(items) > 1)
            btn_remove.clicked.connect(lambda checked=False, i=index: self._remove_item(i))
            self.rows_layout.addWidget(btn_remove, grid_row, 4)

            self.row_widgets.append({"inputs": inputs, "total": total_label, "remove": btn_remove})

    def _on_item_changed(self, index: int, name: str, value: str):
        draft = self.context.invoice_draft
        draft.update_item(index, name, value)
        if index < len(self.row_widgets):
            self.row_widgets[index]["total"].setText(format_total(draft.items[index].total))

    def _add_item(self):
        self.context.invoice_draft.add_item()
        self._rebuild_rows()

    def _remove_item(self, index: int):
        if len(self.context.invoice_draft.items) <= 1:
            return
        self.context.invoice_draft.remove_item(index)
        self._rebuild_rows()

    # ==================== BaseStep ====================

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        result.add_field_errors(validate_invoice_items(self.context.invoice_draft.items))
        return result

    def submit(self) -> bool:
        self.set_field_errors({})
        result = self.controller.create_invoice(self.context.customer_id, self.context.invoice_draft)
        # An empty draft is reported as information, not as a saved invoice
        success_type = "info" if self.context.invoice_draft.is_empty else "success"
        return self.report_result(result, success_type)

    def collect_data(self) -> Dict[str, Any]:
        return {"invoice_items": [item.to_payload() for item in self.context.invoice_draft.items]}

    def populate_data(self):
        if len(self.row_widgets) != len(self.context.invoice_draft.items):
            self._rebuild_rows()

    def can_skip(self) -> bool:
        return True

    def on_skip(self):
        self.set_field_errors({})
        self.notify(tr("message.invoice_skipped"), "info")

    def get_step_title(self) -> str:
        return tr("wizard.step.invoice")

    def get_next_button_text(self) -> str:
        return tr("wizard.button.next_utility")

    def get_busy_text(self) -> str:
        return tr("wizard.button.creating")

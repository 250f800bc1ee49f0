# -*- coding: utf-8 -*-
"""
Customer Details Step - Step 1 of the onboarding wizard.

Allows user to:
- Assign the customer to a building unit (occupied units are disabled)
- Enter contact details

Submitting creates the customer; the wizard only advances once the
backend returned the new customer id.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QFormLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from controllers.building_controller import BuildingController
from controllers.onboarding_controller import OnboardingController
from services.translation_manager import tr
from services.validation_service import validate_customer_form
from ui.components.building_unit_selector import BuildingUnitSelector
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.onboarding.onboarding_context import OnboardingContext
from utils.logger import get_logger

logger = get_logger(__name__)


# (form field, label key)
FORM_FIELDS = [
    ("first_name", "customer.field.first_name"),
    ("last_name", "customer.field.last_name"),
    ("email", "customer.field.email"),
    ("phone_number", "customer.field.phone"),
    ("secondary_phone_number", "customer.field.secondary_phone"),
    ("national_id", "customer.field.national_id"),
]


class CustomerDetailsStep(BaseStep):
    """Step 1: building/unit assignment and customer contact details."""

    def __init__(self, context: OnboardingContext, controller: OnboardingController,
                 building_controller: BuildingController, parent=None):
        super().__init__(context, parent)
        self.controller = controller
        self.building_controller = building_controller
        self.inputs: Dict[str, QLineEdit] = {}

    def setup_ui(self):
        layout = self.main_layout

        self.selector = BuildingUnitSelector(self.building_controller)
        self.selector.building_changed.connect(lambda value: self._on_field_changed("building_id", value))
        self.selector.unit_changed.connect(lambda value: self._on_field_changed("unit_id", value))
        self.selector.load_failed.connect(self.report_result)
        layout.addWidget(self.selector)
        layout.addWidget(self.create_error_label("unit_id"))

        form_widget = QWidget()
        form = QFormLayout(form_widget)
        form.setContentsMargins(0, 0, 0, 0)
        form.setSpacing(8)

        for name, label_key in FORM_FIELDS:
            line_edit = QLineEdit()
            line_edit.setObjectName(name)
            line_edit.textChanged.connect(lambda text, key=name: self._on_field_changed(key, text))
            self.inputs[name] = line_edit

            cell = QWidget()
            cell_layout = QVBoxLayout(cell)
            cell_layout.setContentsMargins(0, 0, 0, 0)
            cell_layout.setSpacing(2)
            cell_layout.addWidget(line_edit)
            cell_layout.addWidget(self.create_error_label(name))
            form.addRow(QLabel(tr(label_key)), cell)

        layout.addWidget(form_widget)
        layout.addStretch()

        self.selector.load_buildings()

    def _on_field_changed(self, name: str, value: str):
        self.context.customer_form.update(name, value)

    # ==================== BaseStep ====================

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        result.add_field_errors(
            validate_customer_form(self.context.customer_form, self.selector.selected_unit())
        )
        return result

    def submit(self) -> bool:
        self.set_field_errors({})
        result = self.controller.create_customer(
            self.context.customer_form, self.selector.selected_unit()
        )
        if not self.report_result(result):
            return False
        self.context.customer_id = result.data
        return True

    def collect_data(self) -> Dict[str, Any]:
        form = self.context.customer_form
        return {
            "unit_id": form.unit_id or None,
            "first_name": form.first_name,
            "last_name": form.last_name,
            "phone_number": form.phone_number,
        }

    def populate_data(self):
        form = self.context.customer_form
        for name, line_edit in self.inputs.items():
            value = getattr(form, name)
            if line_edit.text() != value:
                line_edit.setText(value)

    def get_step_title(self) -> str:
        return tr("wizard.step.details")

    def get_next_button_text(self) -> str:
        return tr("wizard.button.next_invoice")

    def get_busy_text(self) -> str:
        return tr("wizard.button.creating")

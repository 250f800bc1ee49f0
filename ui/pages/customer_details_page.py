# -*- coding: utf-8 -*-
"""
Customer Details Page - read-only summary of one customer.

Target of the onboarding wizard's Finish button.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFormLayout
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config, Routes
from controllers.base_controller import OperationResult
from controllers.customer_controller import CustomerController
from models.customer import Customer
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerDetailsPage(QWidget):
    """Customer summary."""

    navigation_requested = pyqtSignal(str)

    def __init__(self, controller: CustomerController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.customer: Optional[Customer] = None
        self.value_labels = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        self.name_label = QLabel(tr("customer.details.title"))
        self.name_label.setObjectName("customer_name")
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.name_label.setFont(title_font)
        layout.addWidget(self.name_label)

        form = QFormLayout()
        form.setSpacing(8)
        for key in ("email", "phone", "secondary_phone", "national_id",
                    "unit", "building", "closing_balance", "status"):
            value = QLabel("")
            value.setObjectName(f"customer_{key}")
            self.value_labels[key] = value
            form.addRow(QLabel(f"{tr('customer.details.' + key)}:"), value)
        layout.addLayout(form)

        buttons = QHBoxLayout()
        self.btn_add_another = ActionButton(tr("customer.details.add_another"), variant="outline", width=200)
        self.btn_add_another.clicked.connect(lambda: self.navigation_requested.emit(Routes.ONBOARDING))
        buttons.addWidget(self.btn_add_another)
        buttons.addStretch()
        layout.addLayout(buttons)
        layout.addStretch()

    def load(self, customer_id: str) -> OperationResult:
        result = self.controller.load_details(customer_id)
        if result.success:
            self._show_customer(result.data)
        else:
            ErrorHandler.show_result(
                self, result,
                on_login_required=lambda: self.navigation_requested.emit(Routes.LOGIN)
            )
        return result

    def _show_customer(self, customer: Customer):
        self.customer = customer
        na = tr("customer.details.na")
        balance = customer.closing_balance
        values = {
            "email": customer.email or na,
            "phone": customer.phone_number,
            "secondary_phone": customer.secondary_phone_number or na,
            "national_id": customer.national_id or na,
            "unit": customer.unit_name or tr("customer.details.not_assigned"),
            "building": customer.building_name or na,
            "closing_balance": f"{Config.CURRENCY} {balance:.2f}" if balance is not None else na,
            "status": customer.status or na,
        }
        self.name_label.setText(customer.full_name or tr("customer.details.title"))
        for key, text in values.items():
            self.value_labels[key].setText(text)

    def refresh(self, data=None):
        """Load the customer whose id is passed as `data`."""
        if data:
            self.load(str(data))

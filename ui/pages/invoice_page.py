# -*- coding: utf-8 -*-
"""
Invoice Page - create an invoice for one customer.

The customer is found by phone number (all digits, searched after a short
pause in typing) or by name (searched on Enter). Items are added one at a
time from the item form and listed in a table.
"""

from typing import List, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QListWidget,
    QListWidgetItem, QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
)
from PyQt5.QtCore import Qt, QTimer, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config, Routes
from controllers.base_controller import OperationResult
from controllers.invoice_controller import InvoiceController, is_phone_query
from models.customer import Customer
from models.invoice import InvoiceItem
from services.translation_manager import tr
from services.validation_service import validate_new_invoice_item
from ui.components.action_button import ActionButton
from ui.components.toast import Toast
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class InvoicePage(QWidget):
    """Standalone invoice creation."""

    navigation_requested = pyqtSignal(str)
    invoice_created = pyqtSignal(str)  # invoice_id

    def __init__(self, controller: InvoiceController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.customers: List[Customer] = []
        self.selected_customer: Optional[Customer] = None
        self.items: List[InvoiceItem] = []

        self._search_timer = QTimer(self)
        self._search_timer.setSingleShot(True)
        self._search_timer.setInterval(Config.SEARCH_DEBOUNCE_MS)
        self._search_timer.timeout.connect(self.run_search)

        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        header = QHBoxLayout()
        title = QLabel(tr("invoice.title"))
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)
        header.addWidget(title)
        header.addStretch()
        self.btn_generate_all = ActionButton(tr("invoice.generate_all"), variant="outline", width=220)
        self.btn_generate_all.clicked.connect(self._on_generate_all)
        header.addWidget(self.btn_generate_all)
        layout.addLayout(header)

        # Customer search
        self.search_input = QLineEdit()
        self.search_input.setObjectName("customer_search")
        self.search_input.setPlaceholderText(tr("invoice.search_placeholder"))
        self.search_input.textChanged.connect(self._on_search_text_changed)
        self.search_input.returnPressed.connect(self.run_search)
        layout.addWidget(self.search_input)

        self.results_list = QListWidget()
        self.results_list.setObjectName("customer_results")
        self.results_list.setMaximumHeight(140)
        self.results_list.itemClicked.connect(self._on_result_clicked)
        self.results_list.hide()
        layout.addWidget(self.results_list)

        self.selected_label = QLabel(tr("invoice.none_selected"))
        self.selected_label.setObjectName("selected_customer")
        self.selected_label.setStyleSheet("color: #495057;")
        layout.addWidget(self.selected_label)

        # New item form
        form = QHBoxLayout()
        form.setSpacing(8)
        self.description_input = QLineEdit()
        self.description_input.setPlaceholderText(tr("invoice.field.description"))
        self.amount_input = QLineEdit()
        self.amount_input.setPlaceholderText(tr("invoice.field.amount"))
        self.quantity_input = QLineEdit("1")
        self.quantity_input.setPlaceholderText(tr("invoice.field.quantity"))
        form.addWidget(self.description_input, 3)
        form.addWidget(self.amount_input, 1)
        form.addWidget(self.quantity_input, 1)
        self.btn_add_item = ActionButton(tr("invoice.add_item"), variant="secondary")
        self.btn_add_item.clicked.connect(self._on_add_item)
        form.addWidget(self.btn_add_item)
        layout.addLayout(form)

        # Items table
        self.items_table = QTableWidget(0, 5)
        self.items_table.setObjectName("invoice_items")
        self.items_table.setHorizontalHeaderLabels([
            tr("invoice.field.description"), tr("invoice.field.amount"),
            tr("invoice.field.quantity"), tr("invoice.column.total"), tr("invoice.column.actions")
        ])
        self.items_table.verticalHeader().setVisible(False)
        self.items_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.items_table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        layout.addWidget(self.items_table, 1)

        footer = QHBoxLayout()
        footer.addStretch()
        self.btn_create = ActionButton(tr("invoice.create"), variant="primary", width=160)
        self.btn_create.clicked.connect(self._on_create)
        footer.addWidget(self.btn_create)
        layout.addLayout(footer)

    # ==================== Search ====================

    def _on_search_text_changed(self, text: str):
        self._search_timer.stop()
        query = text.strip()
        if is_phone_query(query):
            self._search_timer.start()
        elif not query:
            self._show_results([])

    def run_search(self):
        self._search_timer.stop()
        result = self.controller.search_customers(self.search_input.text())
        if not result.success:
            self._show_results([])
            self._show_result(result)
            return

        self._show_results(result.data or [])
        if result.message:
            Toast.show_toast(self, result.message, Toast.INFO)

    def _show_results(self, customers: List[Customer]):
        self.customers = customers
        self.results_list.clear()
        for customer in customers:
            item = QListWidgetItem(customer.display_label)
            item.setData(Qt.UserRole, customer.id)
            self.results_list.addItem(item)
        self.results_list.setVisible(bool(customers))

    def _on_result_clicked(self, item: QListWidgetItem):
        self.select_customer(self.results_list.row(item))

    def select_customer(self, index: int):
        if not 0 <= index < len(self.customers):
            return
        self.selected_customer = self.customers[index]
        self.selected_label.setText(tr("invoice.selected", name=self.selected_customer.display_label))
        self.search_input.blockSignals(True)
        self.search_input.setText(self.selected_customer.display_label)
        self.search_input.blockSignals(False)
        self.results_list.hide()
        logger.debug(f"Selected customer {self.selected_customer.id}")

    # ==================== Items ====================

    def _on_add_item(self):
        description = self.description_input.text()
        amount = self.amount_input.text()
        quantity = self.quantity_input.text()

        error = validate_new_invoice_item(description, amount, quantity)
        if error:
            Toast.show_toast(self, error, Toast.ERROR)
            return

        self.items.append(InvoiceItem(description=description.strip(), amount=amount.strip(),
                                      quantity=quantity.strip()))
        self.description_input.clear()
        self.amount_input.clear()
        self.quantity_input.setText("1")
        self._refresh_items_table()
        Toast.show_toast(self, tr("invoice.item_added"), Toast.SUCCESS)

    def remove_item(self, index: int):
        if 0 <= index < len(self.items):
            del self.items[index]
            self._refresh_items_table()
            Toast.show_toast(self, tr("invoice.item_removed"), Toast.SUCCESS)

    def _refresh_items_table(self):
        self.items_table.setRowCount(0)
        for row, item in enumerate(self.items):
            self.items_table.insertRow(row)
            self.items_table.setItem(row, 0, QTableWidgetItem(item.description))
            self.items_table.setItem(row, 1, QTableWidgetItem(item.amount))
            self.items_table.setItem(row, 2, QTableWidgetItem(item.quantity))
            total = item.total
            total_text = f"{Config.CURRENCY} {total:.2f}" if total is not None else tr("invoice.total_na")
            self.items_table.setItem(row, 3, QTableWidgetItem(total_text))

            btn_remove = ActionButton(tr("button.remove"), variant="danger", width=90, height=28)
            btn_remove.clicked.connect(lambda checked=False, i=row: self.remove_item(i))
            self.items_table.setCellWidget(row, 4, btn_remove)

    # ==================== Submit ====================

    def _on_create(self):
        self.btn_create.setEnabled(False)
        try:
            result = self.controller.create_invoice(self.selected_customer, self.items)
        finally:
            self.btn_create.setEnabled(True)

        self._show_result(result)
        if result.success:
            self.invoice_created.emit(result.data)
            self.reset()

    def _on_generate_all(self):
        if not ErrorHandler.confirm(self, tr("invoice.generate_confirm")):
            return
        self.btn_generate_all.setEnabled(False)
        try:
            result = self.controller.generate_for_all()
        finally:
            self.btn_generate_all.setEnabled(True)
        self._show_result(result)

    def _show_result(self, result: OperationResult):
        ErrorHandler.show_result(
            self, result,
            on_login_required=lambda: self.navigation_requested.emit(Routes.LOGIN)
        )

    def reset(self):
        """Clear the customer and the item list."""
        self._search_timer.stop()
        self.selected_customer = None
        self.items = []
        self.search_input.blockSignals(True)
        self.search_input.clear()
        self.search_input.blockSignals(False)
        self._show_results([])
        self.selected_label.setText(tr("invoice.none_selected"))
        self._refresh_items_table()

    def refresh(self, data=None):
        """Refresh the page"""
        self.reset()

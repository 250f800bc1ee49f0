# -*- coding: utf-8 -*-
"""
Invoice Controller
==================
Standalone invoice creation outside the onboarding wizard.

Handles:
- Customer search by phone number or by name
- Creating an invoice for one customer
- Generating invoices for all active customers
"""

import re
from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult, response_data
from models.customer import Customer
from models.invoice import InvoiceItem
from services.api_client import PropertyApiClient
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

_PARENTHESISED = re.compile(r"\s*\([^)]+\)")
MIN_PHONE_SEARCH_DIGITS = 10


def is_phone_query(query: str) -> bool:
    return bool(query) and query.isdigit()


def clean_name_query(query: str) -> str:
    """'Jane Doe (0700000000)' -> 'Jane Doe'"""
    return _PARENTHESISED.sub("", query or "").strip()


class InvoiceController(BaseController):
    """Controller for the standalone invoice page."""

    # Signals
    invoice_created = pyqtSignal(str)  # invoice_id
    invoices_generated = pyqtSignal()

    def __init__(self, api: PropertyApiClient, parent=None):
        super().__init__(parent)
        self.api = api

    # ==================== Search ====================

    def search_customers(self, query: str) -> OperationResult[List[Customer]]:
        """
        Search customers.

        All-digit queries are phone lookups and need at least ten digits;
        shorter ones return no results without a request. A successful
        search with no match carries an informational message.
        """
        query = (query or "").strip()
        if not query:
            return OperationResult.ok(data=[])

        by_phone = is_phone_query(query)
        if by_phone and len(query) < MIN_PHONE_SEARCH_DIGITS:
            return OperationResult.ok(data=[])

        not_found = tr("invoice.no_customer_phone") if by_phone else tr("invoice.no_customer_name")

        self._emit_started("search_customers")
        try:
            if by_phone:
                found = self.api.search_customer_by_phone(query)
                raw = [found] if isinstance(found, dict) and found else []
            else:
                raw = self.api.search_customer_by_name(clean_name_query(query))
        except (ApiException, NetworkException) as e:
            if isinstance(e, ApiException) and e.status_code == 404:
                self._emit_completed("search_customers", True)
                return OperationResult.ok(data=[], message=not_found)
            mapped = map_exception(e)
            if mapped.requires_login:
                return self._fail_from_exception("search_customers", e)
            detail = (e.server_message if isinstance(e, ApiException) else "") or e.message
            message = tr("invoice.search_error", message=detail)
            self._emit_error("search_customers", message)
            return OperationResult.fail(message, failure=mapped)

        customers = [Customer.from_dict(c) for c in raw if isinstance(c, dict)]
        self._emit_completed("search_customers", True)
        if not customers:
            return OperationResult.ok(data=[], message=not_found)
        return OperationResult.ok(data=customers)

    # ==================== Create ====================

    def create_invoice(self, customer: Optional[Customer], items: List[InvoiceItem]) -> OperationResult[str]:
        """POST /create-invoice; the result data is the new invoice id."""
        if customer is None:
            return OperationResult.fail(tr("invoice.select_customer"))

        if not items and not customer.unit_id:
            return OperationResult.fail(tr("invoice.items_required"))

        payload = {
            "customerId": customer.id,
            "isSystemGenerated": False,
            "invoiceItems": [item.to_payload() for item in items],
        }

        self._log_operation("create_invoice", customer_id=customer.id, items=len(items))
        self._emit_started("create_invoice")
        try:
            response = self.api.create_invoice(payload)
        except (ApiException, NetworkException) as e:
            return self._fail_with_server_message("create_invoice", e, tr("invoice.create_failed"))

        invoice_id = str(response_data(response).get("id", ""))
        logger.info(f"Invoice created: {invoice_id} for customer {customer.id}")
        self._emit_completed("create_invoice", True)
        self.invoice_created.emit(invoice_id)
        return OperationResult.ok(data=invoice_id, message=tr("invoice.created"))

    def generate_for_all(self) -> OperationResult:
        """POST /generate-invoices-for-all"""
        self._emit_started("generate_for_all")
        try:
            self.api.generate_invoices_for_all()
        except (ApiException, NetworkException) as e:
            return self._fail_with_server_message("generate_for_all", e, tr("invoice.generate_failed"))

        self._emit_completed("generate_for_all", True)
        self.invoices_generated.emit()
        return OperationResult.ok(message=tr("invoice.generated"))


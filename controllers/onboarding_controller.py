# -*- coding: utf-8 -*-
"""
Onboarding Controller
=====================
Backend calls behind the customer onboarding wizard.

Handles:
- Customer creation (step 1)
- Onboarding invoice (step 2)
- Initial water/gas readings (step 3)
"""

from typing import Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import (
    BaseController, OperationResult, response_data, response_message
)
from models.customer import CustomerForm
from models.invoice import InvoiceDraft
from models.unit import Unit
from models.utility_reading import UtilityReadingDraft
from services.api_client import PropertyApiClient
from services.exceptions import ApiException, NetworkException, ValidationException
from services.session_service import SessionService
from services.translation_manager import tr
from services.validation_service import (
    valid_readings, validate_customer_form, validate_invoice_items, validate_utility_readings
)
from utils.logger import get_logger

logger = get_logger(__name__)


class OnboardingController(BaseController):
    """
    Controller for the four-step onboarding flow.

    Every submit method validates first and sends nothing when the input
    is invalid; backend failures come back as a failed OperationResult.
    """

    # Signals
    customer_created = pyqtSignal(str)  # customer_id
    invoice_created = pyqtSignal(str)  # customer_id
    readings_saved = pyqtSignal(str, int)  # customer_id, number posted

    def __init__(self, api: PropertyApiClient, session: SessionService, parent=None):
        super().__init__(parent)
        self.api = api
        self.session = session

    # ==================== Step 1 ====================

    def create_customer(self, form: CustomerForm,
                        selected_unit: Optional[Unit] = None) -> OperationResult[str]:
        """POST /customers; the result data is the new customer id."""
        errors = validate_customer_form(form, selected_unit)
        if errors:
            return OperationResult.fail(tr("validation.check_data"), errors=errors)

        tenant_id = self.session.tenant_id
        if not tenant_id:
            logger.warning("Customer creation refused: no tenant id in session")
            return OperationResult.fail(tr("message.tenant_missing"))

        self._log_operation("create_customer", unit_id=form.unit_id or None)
        self._emit_started("create_customer")
        try:
            response = self.api.create_customer(form.to_payload(tenant_id))
        except (ApiException, NetworkException) as e:
            return self._fail_from_exception("create_customer", e, tr("error.customer.invalid"))

        customer_id = response_data(response).get("id")
        if customer_id is None:
            error = ValidationException(tr("error.generic"), field="id")
            logger.error(f"Customer created but response carried no id: {response}")
            return self._fail_from_exception("create_customer", error)

        customer_id = str(customer_id)
        logger.info(f"Customer created: {customer_id}")
        self._emit_completed("create_customer", True)
        self.customer_created.emit(customer_id)
        return OperationResult.ok(
            data=customer_id,
            message=response_message(response, tr("message.customer_created"))
        )

    # ==================== Step 2 ====================

    def create_invoice(self, customer_id: Optional[str], draft: InvoiceDraft) -> OperationResult:
        """
        POST /customer-onboarding-invoice.

        An empty draft succeeds without a request.
        """
        if not customer_id:
            return OperationResult.fail(tr("message.customer_missing"))

        errors = validate_invoice_items(draft.items)
        if errors:
            return OperationResult.fail(tr("validation.check_data"), errors=errors)

        if draft.is_empty:
            logger.info("No invoice items; skipping invoice creation")
            return OperationResult.ok(message=tr("message.no_invoice_items"))

        self._log_operation("create_invoice", customer_id=customer_id, items=len(draft.items))
        self._emit_started("create_invoice")
        try:
            response = self.api.create_onboarding_invoice(draft.to_payload(customer_id))
        except (ApiException, NetworkException) as e:
            return self._fail_from_exception("create_invoice", e, tr("error.invoice.invalid"))

        self._emit_completed("create_invoice", True)
        self.invoice_created.emit(customer_id)
        return OperationResult.ok(
            data=response_data(response),
            message=response_message(response, tr("message.invoice_created"))
        )

    # ==================== Step 3 ====================

    def save_utility_readings(self, customer_id: Optional[str],
                              draft: UtilityReadingDraft) -> OperationResult[int]:
        """
        POST each non-blank reading to its utility endpoint, in order.

        The first failure stops the loop; readings already posted stay posted.
        The result data is the number of readings posted.
        """
        if not customer_id:
            return OperationResult.fail(tr("message.customer_missing"))

        errors = validate_utility_readings(draft.readings)
        if errors:
            return OperationResult.fail(tr("validation.check_data"), errors=errors)

        to_post = valid_readings(draft.readings)
        if not to_post:
            return OperationResult.ok(data=0, message=tr("message.no_valid_readings"))

        self._emit_started("save_utility_readings")
        posted = 0
        for reading in to_post:
            try:
                self.api.create_utility_reading(reading.endpoint, reading.to_payload(customer_id))
            except (ApiException, NetworkException) as e:
                logger.warning(f"Reading {posted + 1}/{len(to_post)} ({reading.type}) failed; stopping")
                return self._fail_from_exception("save_utility_readings", e, tr("error.reading.invalid"))
            posted += 1

        logger.info(f"Saved {posted} utility readings for customer {customer_id}")
        self._emit_completed("save_utility_readings", True)
        self.readings_saved.emit(customer_id, posted)
        return OperationResult.ok(data=posted, message=tr("message.readings_saved"))

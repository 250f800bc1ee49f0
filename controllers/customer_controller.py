# -*- coding: utf-8 -*-
"""
Customer Controller
===================
Loads the customer summary shown after onboarding.
"""

from controllers.base_controller import BaseController, OperationResult, response_data
from models.customer import Customer
from services.api_client import PropertyApiClient
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerController(BaseController):
    """Controller for the customer details page."""

    def __init__(self, api: PropertyApiClient, parent=None):
        super().__init__(parent)
        self.api = api

    def load_details(self, customer_id: str) -> OperationResult[Customer]:
        """GET /customer-details/{id}"""
        if not customer_id:
            return OperationResult.fail(tr("message.customer_missing"))

        self._emit_started("load_details")
        try:
            response = self.api.get_customer_details(customer_id)
        except (ApiException, NetworkException) as e:
            return self._fail_with_server_message("load_details", e, tr("customer.details.load_failed"))

        customer = Customer.from_dict(response_data(response))
        if not customer.id:
            customer.id = str(customer_id)
        self._emit_completed("load_details", True)
        return OperationResult.ok(data=customer)

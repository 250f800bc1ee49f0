# -*- coding: utf-8 -*-
"""
PropDesk Controllers
====================
Controller layer between the pages and the REST backend.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Client-side validation before any request

Usage:
    from controllers import OnboardingController

    controller = OnboardingController(api, session)
    result = controller.create_customer(form)
    if result.success:
        print(f"Created: {result.data}")
    else:
        print(f"Error: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Domain controllers
from controllers.auth_controller import AuthController
from controllers.building_controller import BuildingController
from controllers.bulk_import_controller import BulkImportController
from controllers.customer_controller import CustomerController
from controllers.invoice_controller import InvoiceController
from controllers.meter_reading_controller import MeterReadingController
from controllers.onboarding_controller import OnboardingController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Domain
    "AuthController",
    "BuildingController",
    "BulkImportController",
    "CustomerController",
    "InvoiceController",
    "MeterReadingController",
    "OnboardingController",
]

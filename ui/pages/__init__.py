# -*- coding: utf-8 -*-
"""
PropDesk UI Pages
"""

from .login_page import LoginPage
from .bulk_import_page import BulkImportPage
from .invoice_page import InvoicePage
from .meter_reading_page import MeterReadingPage
from .customer_details_page import CustomerDetailsPage

__all__ = [
    "LoginPage",
    "BulkImportPage",
    "InvoicePage",
    "MeterReadingPage",
    "CustomerDetailsPage",
]

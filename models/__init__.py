# -*- coding: utf-8 -*-
"""
PropDesk Data Models
"""

from .unit import Unit
from .building import Building
from .customer import CustomerForm, Customer
from .invoice import InvoiceItem, InvoiceDraft
from .utility_reading import UtilityReading, UtilityReadingDraft
from .bulk_upload import BulkUploadState, RowError
from .meter_reading import MeterReading, AnomalyDetails
from .user import CurrentUser

__all__ = [
    "Unit",
    "Building",
    "CustomerForm",
    "Customer",
    "InvoiceItem",
    "InvoiceDraft",
    "UtilityReading",
    "UtilityReadingDraft",
    "BulkUploadState",
    "RowError",
    "MeterReading",
    "AnomalyDetails",
    "CurrentUser",
]

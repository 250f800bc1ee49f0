# -*- coding: utf-8 -*-
"""Onboarding wizard steps."""

from .customer_details_step import CustomerDetailsStep
from .invoice_step import InvoiceStep
from .utility_readings_step import UtilityReadingsStep
from .confirmation_step import ConfirmationStep

__all__ = [
    'CustomerDetailsStep',
    'InvoiceStep',
    'UtilityReadingsStep',
    'ConfirmationStep',
]

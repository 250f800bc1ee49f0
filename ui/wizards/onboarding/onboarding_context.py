# -*- coding: utf-8 -*-
"""
Onboarding Context - state shared by the four onboarding steps.

Holds the three drafts and the id of the customer created in step 1.
A new wizard (and context) is created for every onboarding; the
customer id is never reset on an existing one.
"""

from enum import IntEnum
from typing import Any, Dict, Optional

from models.customer import CustomerForm
from models.invoice import InvoiceDraft
from models.utility_reading import UtilityReadingDraft
from ui.wizards.framework import WizardContext


class OnboardingStep(IntEnum):
    DETAILS = 0
    INVOICE = 1
    UTILITY_READINGS = 2
    CONFIRMATION = 3


class OnboardingContext(WizardContext):
    """Context for the customer onboarding wizard."""

    def __init__(self):
        super().__init__()
        self.customer_form = CustomerForm()
        self.invoice_draft = InvoiceDraft()
        self.reading_draft = UtilityReadingDraft()
        self.customer_id: Optional[str] = None

    @property
    def active_step(self) -> OnboardingStep:
        return OnboardingStep(self.current_step_index)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "active_step": int(self.active_step),
            "customer_id": self.customer_id,
            "unit_id": self.customer_form.unit_id or None,
            "invoice_items": len(self.invoice_draft.items),
            "utility_readings": len(self.reading_draft.readings),
        })
        return data

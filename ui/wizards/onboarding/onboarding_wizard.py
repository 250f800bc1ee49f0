# -*- coding: utf-8 -*-
"""
Customer Onboarding Wizard.

Steps:
1. Customer Details - building/unit assignment and contact details (mandatory)
2. Create Invoice - onboarding invoice items (skippable)
3. Utility Readings - initial water/gas readings (skippable)
4. Confirmation - redirect to the new customer's details
"""

from typing import List

from PyQt5.QtCore import QTimer

from app.config import Config, Routes
from controllers.building_controller import BuildingController
from controllers.onboarding_controller import OnboardingController
from services.translation_manager import tr
from ui.components.toast import Toast
from ui.wizards.framework import BaseStep, BaseWizard
from ui.wizards.onboarding.onboarding_context import OnboardingContext, OnboardingStep
from ui.wizards.onboarding.steps import (
    ConfirmationStep,
    CustomerDetailsStep,
    InvoiceStep,
    UtilityReadingsStep,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class OnboardingWizard(BaseWizard):
    """
    Four-step customer onboarding.

    Backend failures keep the wizard on the current step; a 401 shows
    the unauthorized message and navigates to the login route after
    Config.REDIRECT_DELAY_MS.
    """

    def __init__(self, onboarding_controller: OnboardingController,
                 building_controller: BuildingController, parent=None):
        self.onboarding_controller = onboarding_controller
        self.building_controller = building_controller
        self._finished = False
        super().__init__(parent)

    def create_context(self) -> OnboardingContext:
        return OnboardingContext()

    def create_steps(self) -> List[BaseStep]:
        return [
            CustomerDetailsStep(self.context, self.onboarding_controller, self.building_controller, self),
            InvoiceStep(self.context, self.onboarding_controller, self),
            UtilityReadingsStep(self.context, self.onboarding_controller, self),
            ConfirmationStep(self.context, self),
        ]

    @property
    def active_step(self) -> OnboardingStep:
        return self.context.active_step

    def on_submit(self) -> bool:
        """Finish: announce completion, then open the customer's details."""
        if self._finished:
            return False
        customer_id = self.context.customer_id
        if not customer_id:
            self.show_message(tr("message.customer_missing"), Toast.ERROR)
            return False

        self._finished = True
        self.btn_next.setEnabled(False)
        self.btn_previous.setEnabled(False)
        self.show_message(tr("message.onboarding_completed"), Toast.SUCCESS)
        route = Routes.customer_details(customer_id)
        logger.info(f"Onboarding completed for {customer_id}; opening {route}")
        QTimer.singleShot(Config.REDIRECT_DELAY_MS, lambda: self.navigation_requested.emit(route))
        return True

    def _update_navigation_buttons(self):
        super()._update_navigation_buttons()
        if self._finished:
            self.btn_next.setEnabled(False)
            self.btn_previous.setEnabled(False)

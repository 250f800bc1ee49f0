# -*- coding: utf-8 -*-
"""
Confirmation Step - Step 4 of the onboarding wizard.
"""

from typing import Any, Dict

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QLabel

from services.translation_manager import tr
from ui.wizards.framework import BaseStep, StepValidationResult


class ConfirmationStep(BaseStep):
    """Step 4: summary text; Finish is handled by the wizard."""

    def setup_ui(self):
        layout = self.main_layout
        layout.addStretch()

        self.title_label = QLabel(tr("wizard.confirmation.title"))
        self.title_label.setObjectName("confirmation_title")
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.body_label = QLabel(tr("wizard.confirmation.body"))
        self.body_label.setWordWrap(True)
        self.body_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.body_label)

        self.hint_label = QLabel(tr("wizard.confirmation.hint"))
        self.hint_label.setWordWrap(True)
        self.hint_label.setAlignment(Qt.AlignCenter)
        self.hint_label.setStyleSheet("color: #6c757d;")
        layout.addWidget(self.hint_label)

        layout.addStretch()

    def validate(self) -> StepValidationResult:
        return self.create_validation_result()

    def collect_data(self) -> Dict[str, Any]:
        return {"customer_id": self.context.customer_id}

    def get_step_title(self) -> str:
        return tr("wizard.step.confirmation")

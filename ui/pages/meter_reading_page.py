# -*- coding: utf-8 -*-
"""
Meter Reading Page - review a single water/gas reading.

Abnormal readings carry a warning banner with the consumption factor;
values can be corrected and the anomaly review recorded.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QTextEdit,
    QCheckBox, QFormLayout, QGroupBox, QFrame
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Routes
from controllers.base_controller import OperationResult
from controllers.meter_reading_controller import MeterReadingController
from models.meter_reading import AnomalyDetails, MeterReading
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return ""
    return f"{value:g}"


class MeterReadingPage(QWidget):
    """Meter reading details, value correction and anomaly review."""

    navigation_requested = pyqtSignal(str)

    def __init__(self, controller: MeterReadingController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._setup_ui()
        self._show_reading(None)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(tr("meter.title"))
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        # Lookup row
        lookup = QHBoxLayout()
        lookup.addWidget(QLabel(tr("meter.reading_id")))
        self.id_input = QLineEdit()
        self.id_input.setObjectName("reading_id_input")
        self.id_input.returnPressed.connect(self._on_load_clicked)
        lookup.addWidget(self.id_input, 1)
        self.btn_load = ActionButton(tr("button.load"), variant="secondary")
        self.btn_load.clicked.connect(self._on_load_clicked)
        lookup.addWidget(self.btn_load)
        layout.addLayout(lookup)

        self.empty_label = QLabel(tr("meter.not_found"))
        self.empty_label.setStyleSheet("color: #6c757d;")
        layout.addWidget(self.empty_label)

        # Abnormal banner
        self.banner = QFrame()
        self.banner.setObjectName("abnormal_banner")
        self.banner.setStyleSheet("""
            QFrame#abnormal_banner {
                background-color: #fff3cd;
                border: 1px solid #ffc107;
                border-radius: 6px;
            }
        """)
        banner_layout = QVBoxLayout(self.banner)
        banner_text = QLabel(tr("meter.abnormal_banner"))
        banner_text.setWordWrap(True)
        banner_layout.addWidget(banner_text)
        self.factor_label = QLabel("")
        self.factor_label.setObjectName("consumption_factor")
        self.factor_label.setStyleSheet("font-weight: bold;")
        banner_layout.addWidget(self.factor_label)
        layout.addWidget(self.banner)

        self.details_container = QWidget()
        details_layout = QVBoxLayout(self.details_container)
        details_layout.setContentsMargins(0, 0, 0, 0)

        summary = QFormLayout()
        self.customer_label = QLabel()
        self.average_label = QLabel()
        summary.addRow(tr("meter.field.customer"), self.customer_label)
        summary.addRow(tr("meter.field.average"), self.average_label)
        details_layout.addLayout(summary)

        # Values
        values_box = QGroupBox(tr("meter.update_values"))
        values_form = QFormLayout(values_box)
        self.reading_input = QLineEdit()
        self.reading_input.setObjectName("reading_input")
        self.consumption_input = QLineEdit()
        self.consumption_input.setObjectName("consumption_input")
        self.photo_url_input = QLineEdit()
        self.photo_url_input.setObjectName("photo_url_input")
        values_form.addRow(tr("meter.field.reading"), self.reading_input)
        values_form.addRow(tr("meter.field.consumption"), self.consumption_input)
        values_form.addRow(tr("meter.field.photo_url"), self.photo_url_input)
        self.btn_update_values = ActionButton(tr("meter.update_values"), variant="primary", width=160)
        self.btn_update_values.clicked.connect(self._on_update_values)
        values_form.addRow("", self.btn_update_values)
        details_layout.addWidget(values_box)

        # Anomaly review
        self.review_box = QGroupBox(tr("meter.update_anomaly"))
        review_form = QFormLayout(self.review_box)
        self.reviewed_check = QCheckBox(tr("meter.field.reviewed"))
        self.resolved_check = QCheckBox(tr("meter.field.resolved"))
        self.review_notes_input = QTextEdit()
        self.review_notes_input.setFixedHeight(80)
        review_form.addRow("", self.reviewed_check)
        review_form.addRow(tr("meter.field.review_notes"), self.review_notes_input)
        review_form.addRow("", self.resolved_check)
        self.btn_update_review = ActionButton(tr("meter.update_anomaly"), variant="primary", width=200)
        self.btn_update_review.clicked.connect(self._on_update_review)
        review_form.addRow("", self.btn_update_review)
        details_layout.addWidget(self.review_box)

        layout.addWidget(self.details_container)
        layout.addStretch()

    # ==================== Loading ====================

    def _on_load_clicked(self):
        reading_id = self.id_input.text().strip()
        if reading_id:
            self.load(reading_id)

    def load(self, reading_id: str) -> OperationResult:
        self.id_input.setText(reading_id)
        result = self.controller.load(reading_id)
        if result.success:
            self._show_reading(result.data)
        else:
            self._show_reading(None)
            self._show_result(result)
        return result

    def _show_reading(self, reading: Optional[MeterReading]):
        self.empty_label.setVisible(reading is None)
        self.details_container.setVisible(reading is not None)
        self.banner.setVisible(bool(reading and reading.is_abnormal))
        if reading is None:
            return

        factor = reading.consumption_factor
        self.factor_label.setText(tr("meter.factor", factor=factor) if factor else "")
        self.factor_label.setVisible(bool(factor))

        self.customer_label.setText(reading.customer_name)
        self.average_label.setText(_format_value(reading.average_consumption))
        self.reading_input.setText(_format_value(reading.reading))
        self.consumption_input.setText(_format_value(reading.consumption))
        self.photo_url_input.setText(reading.meter_photo_url or "")

        details = reading.anomaly_details
        self.reviewed_check.setChecked(details.reviewed)
        self.resolved_check.setChecked(details.resolved)
        self.review_notes_input.setPlainText(details.review_notes)
        self.review_box.setVisible(reading.is_abnormal)

    # ==================== Updates ====================

    def _on_update_values(self):
        result = self.controller.update_values(
            self.reading_input.text(),
            self.consumption_input.text(),
            self.photo_url_input.text()
        )
        self._show_result(result)
        if result.success:
            self._show_reading(result.data)

    def _on_update_review(self):
        details = AnomalyDetails(
            reviewed=self.reviewed_check.isChecked(),
            review_notes=self.review_notes_input.toPlainText().strip(),
            resolved=self.resolved_check.isChecked(),
        )
        result = self.controller.update_review(details)
        self._show_result(result)

    def _show_result(self, result: OperationResult):
        ErrorHandler.show_result(
            self, result,
            on_login_required=lambda: self.navigation_requested.emit(Routes.LOGIN)
        )

    def refresh(self, data=None):
        """Load the reading whose id is passed as `data`."""
        if data:
            self.load(str(data))

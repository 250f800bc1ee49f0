# -*- coding: utf-8 -*-
"""
Meter Reading Controller
========================
Review of a single water/gas meter reading.

Handles:
- Loading the reading (scoped to the signed-in tenant)
- Correcting reading values
- Recording the anomaly review of an abnormal reading
"""

from typing import Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult, response_data
from models.invoice import parse_number
from models.meter_reading import AnomalyDetails, MeterReading
from services.api_client import PropertyApiClient
from services.exceptions import ApiException, NetworkException
from services.session_service import SessionService
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class MeterReadingController(BaseController):
    """Controller for the meter reading review page."""

    # Signals
    reading_loaded = pyqtSignal(object)  # MeterReading

    def __init__(self, api: PropertyApiClient, session: SessionService, parent=None):
        super().__init__(parent)
        self.api = api
        self.session = session
        self._current: Optional[MeterReading] = None

    @property
    def current_reading(self) -> Optional[MeterReading]:
        return self._current

    def load(self, reading_id: str) -> OperationResult[MeterReading]:
        """GET /meter-reading/{id}?tenantId=..."""
        self._emit_started("load")
        try:
            response = self.api.get_meter_reading(reading_id, self.session.tenant_id)
        except (ApiException, NetworkException) as e:
            self._current = None
            return self._fail_with_server_message("load", e, tr("meter.load_failed"))

        self._current = MeterReading.from_dict(response_data(response))
        logger.info(f"Loaded meter reading {self._current.id} (abnormal={self._current.is_abnormal})")
        self._emit_completed("load", True)
        self.reading_loaded.emit(self._current)
        return OperationResult.ok(data=self._current)

    def update_values(self, reading: str, consumption: str, photo_url: str = "") -> OperationResult[MeterReading]:
        """PUT /meter-reading/{id}/values; an empty photo URL is sent as null."""
        if self._current is None:
            return OperationResult.fail(tr("meter.not_found"))

        reading_value = parse_number(reading)
        consumption_value = parse_number(consumption)
        if reading_value is None or consumption_value is None:
            return OperationResult.fail(tr("meter.values_invalid"))

        payload = {
            "reading": reading_value,
            "consumption": consumption_value,
            "meterPhotoUrl": (photo_url or "").strip() or None,
        }

        self._emit_started("update_values")
        try:
            self.api.update_meter_reading_values(self._current.id, payload)
        except (ApiException, NetworkException) as e:
            return self._fail_with_server_message("update_values", e, tr("meter.values_failed"))

        self._current.reading = reading_value
        self._current.consumption = consumption_value
        self._current.meter_photo_url = payload["meterPhotoUrl"]
        self._emit_completed("update_values", True)
        self.reading_loaded.emit(self._current)
        return OperationResult.ok(data=self._current, message=tr("meter.values_updated"))

    def update_review(self, details: AnomalyDetails) -> OperationResult[MeterReading]:
        """PUT /meter-reading/{id} with the review flags."""
        if self._current is None:
            return OperationResult.fail(tr("meter.not_found"))

        self._emit_started("update_review")
        try:
            self.api.update_meter_reading_review(self._current.id, details.to_payload())
        except (ApiException, NetworkException) as e:
            return self._fail_with_server_message("update_review", e, tr("meter.anomaly_failed"))

        current = self._current.anomaly_details
        current.reviewed = details.reviewed
        current.review_notes = details.review_notes
        current.resolved = details.resolved
        self._emit_completed("update_review", True)
        self.reading_loaded.emit(self._current)
        return OperationResult.ok(data=self._current, message=tr("meter.anomaly_updated"))

# -*- coding: utf-8 -*-
"""
Meter reading review models.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class AnomalyDetails:
    reviewed: bool = False
    review_notes: str = ""
    resolved: bool = False
    anomaly_reason: str = ""
    action: str = ""

    def to_payload(self) -> Dict[str, Any]:
        """`PUT /meter-reading/{id}` body."""
        return {
            "reviewed": self.reviewed,
            "reviewNotes": self.review_notes,
            "resolved": self.resolved,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "AnomalyDetails":
        data = data or {}
        return cls(
            reviewed=bool(data.get("reviewed", False)),
            review_notes=data.get("reviewNotes") or "",
            resolved=bool(data.get("resolved", False)),
            anomaly_reason=data.get("anomalyReason") or "",
            action=data.get("action") or "",
        )


@dataclass
class MeterReading:
    """A single water/gas meter reading as returned by `GET /meter-reading/{id}`."""

    id: str = ""
    type: str = ""
    customer_name: str = ""
    reading: Optional[float] = None
    consumption: Optional[float] = None
    average_consumption: Optional[float] = None
    meter_photo_url: Optional[str] = None
    is_abnormal: bool = False
    anomaly_details: AnomalyDetails = field(default_factory=AnomalyDetails)

    @property
    def consumption_factor(self) -> Optional[str]:
        """consumption / average, two decimals, only for abnormal readings."""
        if not self.is_abnormal or self.consumption is None:
            return None
        if not self.average_consumption or self.average_consumption <= 0:
            return None
        return f"{self.consumption / self.average_consumption:.2f}"

    @classmethod
    def from_dict(cls, data: dict) -> "MeterReading":
        return cls(
            id=str(data.get("id", "")),
            type=data.get("type") or "",
            customer_name=data.get("customerName") or "",
            reading=_to_float(data.get("reading")),
            consumption=_to_float(data.get("consumption")),
            average_consumption=_to_float(data.get("averageConsumption")),
            meter_photo_url=data.get("meterPhotoUrl") or None,
            is_abnormal=bool(data.get("isAbnormal", False)),
            anomaly_details=AnomalyDetails.from_dict(data.get("anomalyDetails")),
        )


def _to_float(value) -> Optional[float]:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None

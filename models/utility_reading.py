# -*- coding: utf-8 -*-
"""
Utility reading draft models (step 3 of onboarding).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from app.config import Vocabularies
from models.invoice import parse_number


@dataclass
class UtilityReading:
    type: str = "water"
    reading: str = ""

    @property
    def is_blank(self) -> bool:
        return not str(self.reading or "").strip()

    @property
    def endpoint(self) -> str:
        return Vocabularies.utility_endpoint(self.type)

    def to_payload(self, customer_id: str) -> Dict[str, Any]:
        return {"customerId": customer_id, "reading": parse_number(self.reading)}


@dataclass
class UtilityReadingDraft:
    """Ordered reading rows; starts with one water row."""

    readings: List[UtilityReading] = field(default_factory=lambda: [UtilityReading()])

    def add_reading(self, utility_type: str = "water") -> UtilityReading:
        reading = UtilityReading(type=utility_type)
        self.readings.append(reading)
        return reading

    def remove_reading(self, index: int):
        if 0 <= index < len(self.readings):
            del self.readings[index]

    def update_reading(self, index: int, name: str, value: str):
        if 0 <= index < len(self.readings) and name in ("type", "reading"):
            setattr(self.readings[index], name, value)

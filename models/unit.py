# -*- coding: utf-8 -*-
"""
Unit entity model.
"""

from dataclasses import dataclass

from app.config import Vocabularies


@dataclass
class Unit:
    """A rentable unit within a building."""

    id: str = ""
    unit_number: str = ""
    status: str = "VACANT"

    @property
    def is_occupied(self) -> bool:
        """True when a customer cannot be assigned to this unit."""
        return (self.status or "").upper() in Vocabularies.OCCUPIED_UNIT_STATUSES

    @property
    def status_display(self) -> str:
        for code, name in Vocabularies.UNIT_STATUS:
            if code == (self.status or "").upper():
                return name
        return self.status or "-"

    @classmethod
    def from_dict(cls, data: dict) -> "Unit":
        return cls(
            id=str(data.get("id", "")),
            unit_number=str(data.get("unitNumber") or ""),
            status=data.get("status") or "VACANT",
        )

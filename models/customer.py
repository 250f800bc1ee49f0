# -*- coding: utf-8 -*-
"""
Customer models: the onboarding form and the search result summary.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from models.invoice import parse_number


@dataclass
class CustomerForm:
    """Step-1 form state of the onboarding wizard."""

    building_id: str = ""
    unit_id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    secondary_phone_number: str = ""
    national_id: str = ""

    def update(self, name: str, value: str):
        """Field-level change handler; unknown field names are ignored."""
        if name in {f.name for f in fields(self)}:
            setattr(self, name, value)

    def to_payload(self, tenant_id: Any) -> Dict[str, Any]:
        """
        Build the `POST /customers` body.

        The building id is only used to pick the unit and is not sent.
        An empty unit id is sent as null.
        """
        return {
            "unitId": self.unit_id or None,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "secondaryPhoneNumber": self.secondary_phone_number,
            "nationalId": self.national_id,
            "tenantId": tenant_id,
        }


@dataclass
class Customer:
    """Customer as returned by the search and customer-details endpoints."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    email: str = ""
    unit_id: Optional[str] = None
    status: str = ""
    secondary_phone_number: str = ""
    national_id: str = ""
    unit_name: str = ""
    building_name: str = ""
    closing_balance: Optional[float] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_label(self) -> str:
        return f"{self.full_name} ({self.phone_number})"

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        return cls(
            id=str(data.get("id", "")),
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            phone_number=data.get("phoneNumber") or "",
            email=data.get("email") or "",
            unit_id=data.get("unitId") or None,
            status=data.get("status") or "",
            secondary_phone_number=data.get("secondaryPhoneNumber") or "",
            national_id=data.get("nationalId") or "",
            unit_name=data.get("unitName") or "",
            building_name=data.get("buildingName") or "",
            closing_balance=parse_number(data.get("closingBalance")),
        )

# -*- coding: utf-8 -*-
"""
Signed-in user model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CurrentUser:
    """
    User returned by the sign-in endpoint.

    The tenant id scopes every customer and meter-reading call.
    """

    id: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    tenant_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email

    @classmethod
    def from_dict(cls, data: dict) -> "CurrentUser":
        tenant_id = data.get("tenantId")
        if tenant_id is None and isinstance(data.get("tenant"), dict):
            tenant_id = data["tenant"].get("id")
        return cls(
            id=str(data.get("id", "")),
            email=data.get("email") or "",
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            tenant_id=str(tenant_id) if tenant_id not in (None, "") else None,
        )

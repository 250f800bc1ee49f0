# -*- coding: utf-8 -*-
"""
Building entity model.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.unit import Unit


@dataclass
class Building:
    """
    Building as returned by the buildings API.

    The selector list (`GET /buildings?minimal=true`) carries only the id,
    name and landlord; the detail call (`GET /buildings/{id}`) adds `units`.
    """

    id: str = ""
    building_name: str = ""
    landlord_name: Optional[str] = None
    address: str = ""
    units: List[Unit] = field(default_factory=list)

    @property
    def occupied_unit_count(self) -> int:
        return sum(1 for unit in self.units if unit.is_occupied)

    @classmethod
    def from_dict(cls, data: dict) -> "Building":
        """
        Create Building from an API payload.

        Maps the camelCase API fields (and the nested landlord object) to the
        dataclass fields.
        """
        landlord = data.get("landlord")
        landlord_name = landlord.get("name") if isinstance(landlord, dict) else landlord

        units = data.get("units")
        return cls(
            id=str(data.get("id", "")),
            building_name=data.get("buildingName") or data.get("name") or "",
            landlord_name=landlord_name or None,
            address=data.get("address") or "",
            units=[Unit.from_dict(u) for u in units] if isinstance(units, list) else [],
        )

# -*- coding: utf-8 -*-
"""
Bulk customer upload state.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RowError:
    """One rejected row reported by the upload endpoint."""
    row: int = 0
    reason: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "RowError":
        row = data.get("row", 0)
        try:
            row = int(row)
        except (TypeError, ValueError):
            row = 0
        return cls(row=row, reason=str(data.get("reason") or ""))


@dataclass
class BulkUploadState:
    building_id: str = ""
    file_path: Optional[str] = None
    errors: List[RowError] = field(default_factory=list)

    def replace_errors(self, raw_errors) -> List[RowError]:
        """Replace the error list with the server's latest report."""
        if isinstance(raw_errors, list):
            self.errors = [RowError.from_dict(e) for e in raw_errors if isinstance(e, dict)]
        else:
            self.errors = []
        return self.errors

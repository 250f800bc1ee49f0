# -*- coding: utf-8 -*-
"""
Wizard Context - state a wizard shares between its steps.

Concrete wizards subclass it with their drafts; the navigator keeps
`current_step_index` and `completed_steps` up to date.
"""

from typing import Any, Dict, Set
from datetime import datetime
import uuid


class WizardContext:
    """Step position plus whatever drafts the concrete wizard adds."""

    def __init__(self):
        self.wizard_id: str = uuid.uuid4().hex[:8]
        self.status: str = "in_progress"
        self.started_at: datetime = datetime.now()
        self.current_step_index: int = 0
        # Steps whose submit() went through at least once
        self.completed_steps: Set[int] = set()

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    def to_dict(self) -> Dict[str, Any]:
        """Summary for the completion log line; subclasses extend it."""
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "started_at": self.started_at.isoformat(timespec="seconds"),
            "step": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
        }

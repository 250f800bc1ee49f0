# -*- coding: utf-8 -*-
"""
Step Navigator - moves a wizard between its steps.

Going forward runs the current step's validate() and then submit();
either one failing keeps the wizard on the step. Back and Skip never
touch the backend.
"""

from typing import List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import BaseStep, StepValidationResult
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """Owns the current step index and the show/hide calls on steps."""

    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(StepValidationResult)

    def __init__(self, context: WizardContext, steps: List[BaseStep]):
        super().__init__()
        self.context = context
        self.steps = steps
        self.current_index = 0

    @property
    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def get_current_step(self) -> Optional[BaseStep]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def can_go_next(self) -> bool:
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def can_skip(self) -> bool:
        step = self.get_current_step()
        return self.can_go_next() and step is not None and step.can_skip()

    def next_step(self) -> bool:
        """Validate and submit the current step, then advance. Returns True if moved."""
        if not self.can_go_next():
            return False

        step = self.get_current_step()
        result = step.validate()
        if not result.is_valid:
            logger.warning(f"Step {self.current_index} invalid: {result.field_errors or result.errors}")
            self.validation_failed.emit(result)
            return False

        if not step.submit():
            logger.info(f"Step {self.current_index} not submitted, staying")
            return False

        self.context.mark_step_completed(self.current_index)
        return self._navigate_to(self.current_index + 1)

    def skip_step(self) -> bool:
        if not self.can_skip():
            return False
        self.get_current_step().on_skip()
        logger.info(f"Step {self.current_index} skipped")
        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        if not self.can_go_previous():
            return False
        return self._navigate_to(self.current_index - 1)

    def reset(self):
        self._navigate_to(0)

    def _navigate_to(self, new_index: int) -> bool:
        if not 0 <= new_index < len(self.steps):
            logger.error(f"Step index out of range: {new_index}")
            return False

        old_index = self.current_index
        self.current_index = new_index
        self.context.current_step_index = new_index

        step = self.steps[new_index]
        logger.debug(f"Step {old_index} -> {new_index} ({step.get_step_title()})")
        step.on_show()

        self.step_changed.emit(old_index, new_index)
        return True

    def get_progress_percentage(self) -> float:
        if len(self.steps) <= 1:
            return 100.0
        return self.current_index * 100.0 / (len(self.steps) - 1)

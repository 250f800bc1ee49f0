# -*- coding: utf-8 -*-
"""
PropDesk UI Components
"""

from .toast import Toast
from .action_button import ActionButton
from .building_unit_selector import BuildingUnitSelector
from .row_error_table import RowErrorTable
from .sidebar import Sidebar

__all__ = [
    "Toast",
    "ActionButton",
    "BuildingUnitSelector",
    "RowErrorTable",
    "Sidebar",
]

# -*- coding: utf-8 -*-
"""
Building Controller
===================
Loads buildings and their units for the building/unit selectors.

Handles:
- The minimal building list (id, name, landlord)
- Units of one building, with occupancy status
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.building import Building
from models.unit import Unit
from services.api_client import PropertyApiClient
from services.error_mapper import map_exception, server_message_or
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class BuildingController(BaseController):
    """
    Controller for building and unit lookups.

    Caches the last loaded lists so the selectors can re-render without
    another round trip.
    """

    # Signals
    buildings_loaded = pyqtSignal(list)  # List[Building]
    units_loaded = pyqtSignal(str, list)  # building_id, List[Unit]

    def __init__(self, api: PropertyApiClient, parent=None):
        super().__init__(parent)
        self.api = api
        self._buildings_cache: List[Building] = []
        self._units_cache: List[Unit] = []

    # ==================== Properties ====================

    @property
    def buildings(self) -> List[Building]:
        return self._buildings_cache

    @property
    def units(self) -> List[Unit]:
        return self._units_cache

    def find_unit(self, unit_id: str) -> Optional[Unit]:
        for unit in self._units_cache:
            if unit.id == unit_id:
                return unit
        return None

    # ==================== Loading ====================

    def load_buildings(self) -> OperationResult[List[Building]]:
        """GET /buildings?minimal=true"""
        self._emit_started("load_buildings")
        try:
            raw = self.api.get_buildings()
        except (ApiException, NetworkException) as e:
            self._buildings_cache = []
            return self._fail_lookup("load_buildings", e, tr("error.buildings.load_failed"))

        self._buildings_cache = [Building.from_dict(b) for b in raw if isinstance(b, dict)]
        logger.info(f"Loaded {len(self._buildings_cache)} buildings")
        self._emit_completed("load_buildings", True)
        self.buildings_loaded.emit(self._buildings_cache)
        return OperationResult.ok(data=self._buildings_cache)

    def load_units(self, building_id: str) -> OperationResult[List[Unit]]:
        """GET /buildings/{id}; an empty building id clears the unit list."""
        self._units_cache = []
        if not building_id:
            self.units_loaded.emit("", [])
            return OperationResult.ok(data=[])

        self._emit_started("load_units")
        try:
            data = self.api.get_building(building_id)
        except (ApiException, NetworkException) as e:
            return self._fail_lookup("load_units", e, server_message_or(e, tr("error.units.load_failed")))

        building = Building.from_dict(data if isinstance(data, dict) else {})
        self._units_cache = building.units
        occupied = building.occupied_unit_count
        logger.info(f"Loaded {len(self._units_cache)} units for building {building_id} ({occupied} occupied)")
        self._emit_completed("load_units", True)
        self.units_loaded.emit(building_id, self._units_cache)
        return OperationResult.ok(data=self._units_cache)

    def _fail_lookup(self, operation: str, error: Exception, message: str) -> OperationResult:
        """Lookups show their own message except on 401, which keeps the login redirect."""
        mapped = map_exception(error)
        if mapped.requires_login:
            return self._fail_from_exception(operation, error)
        self._emit_error(operation, message)
        return OperationResult.fail(message=message, failure=mapped)

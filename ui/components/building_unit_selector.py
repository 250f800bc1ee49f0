# -*- coding: utf-8 -*-
"""
Building/Unit cascading selectors.

Picking a building loads its units and clears the unit choice. Occupied
units are listed but cannot be chosen.
"""

from typing import List, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QComboBox, QFormLayout, QWidget

from controllers.base_controller import OperationResult
from controllers.building_controller import BuildingController
from models.building import Building
from models.unit import Unit
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class BuildingUnitSelector(QWidget):
    """
    Two combo boxes: building, then unit.

    Signals:
        building_changed(str): building id ("" when cleared)
        unit_changed(str): unit id ("" when cleared)
        load_failed(object): failed OperationResult from a lookup
    """

    building_changed = pyqtSignal(str)
    unit_changed = pyqtSignal(str)
    load_failed = pyqtSignal(object)

    def __init__(self, controller: BuildingController, show_units: bool = True, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.show_units = show_units
        self._building_id = ""
        self._unit_id = ""
        self._setup_ui()

    def _setup_ui(self):
        layout = QFormLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.building_combo = QComboBox()
        self.building_combo.setObjectName("building_combo")
        self.building_combo.currentIndexChanged.connect(self._on_building_index_changed)
        layout.addRow(tr("customer.field.building"), self.building_combo)

        self.unit_combo = QComboBox()
        self.unit_combo.setObjectName("unit_combo")
        self.unit_combo.currentIndexChanged.connect(self._on_unit_index_changed)
        if self.show_units:
            layout.addRow(tr("customer.field.unit"), self.unit_combo)
        else:
            self.unit_combo.hide()

        self._fill_units([])

    # ==================== Public API ====================

    @property
    def building_id(self) -> str:
        return self._building_id

    @property
    def unit_id(self) -> str:
        return self._unit_id

    def selected_unit(self) -> Optional[Unit]:
        return self.controller.find_unit(self._unit_id) if self._unit_id else None

    def load_buildings(self) -> OperationResult:
        """Fetch the building list and reset both selections."""
        self.building_combo.blockSignals(True)
        self.building_combo.clear()
        self.building_combo.addItem(tr("selector.loading"), "")
        self.building_combo.blockSignals(False)

        result = self.controller.load_buildings()
        self._fill_buildings(result.data or [])
        if not result.success:
            self.load_failed.emit(result)
        return result

    def set_building(self, building_id: str):
        """Select a building by id ("" clears it)."""
        index = self.building_combo.findData(building_id or "")
        self.building_combo.setCurrentIndex(max(index, 0))

    def set_unit(self, unit_id: str):
        """Select a unit by id. Occupied or unknown units leave the selection empty."""
        unit = self.controller.find_unit(unit_id) if unit_id else None
        if unit is None or unit.is_occupied:
            if unit is not None:
                logger.info(f"Refused selection of occupied unit {unit.unit_number} ({unit.status})")
            self.unit_combo.setCurrentIndex(0)
            self._set_unit_id("")
            return
        self.unit_combo.setCurrentIndex(self.unit_combo.findData(unit_id))

    # ==================== Internals ====================

    def _fill_buildings(self, buildings: List[Building]):
        self.building_combo.blockSignals(True)
        self.building_combo.clear()
        self.building_combo.addItem(tr("selector.select_building"), "")
        for building in buildings:
            label = tr(
                "selector.building_label",
                name=building.building_name,
                landlord=building.landlord_name or tr("selector.unknown_landlord")
            )
            self.building_combo.addItem(label, building.id)
        self.building_combo.blockSignals(False)
        self._building_id = ""
        self._fill_units([])

    def _fill_units(self, units: List[Unit]):
        self.unit_combo.blockSignals(True)
        self.unit_combo.clear()
        placeholder = tr("selector.select_unit") if units else tr("selector.no_units")
        self.unit_combo.addItem(placeholder, "")
        model = self.unit_combo.model()
        for unit in units:
            if unit.is_occupied:
                self.unit_combo.addItem(tr("selector.unit_occupied", unit=unit.unit_number), unit.id)
                item = model.item(self.unit_combo.count() - 1)
                item.setFlags(item.flags() & ~(Qt.ItemIsEnabled | Qt.ItemIsSelectable))
            else:
                self.unit_combo.addItem(unit.unit_number, unit.id)
        self.unit_combo.setEnabled(bool(units))
        self.unit_combo.blockSignals(False)
        self._set_unit_id("")

    def _on_building_index_changed(self, index: int):
        building_id = self.building_combo.itemData(index) or ""
        self._building_id = building_id
        self.building_changed.emit(building_id)

        if not self.show_units:
            return

        self._fill_units([])
        if not building_id:
            return

        result = self.controller.load_units(building_id)
        # The user may have picked another building while units were loading
        if building_id != self._building_id:
            return
        self._fill_units(result.data or [])
        if not result.success:
            self.load_failed.emit(result)

    def _on_unit_index_changed(self, index: int):
        unit_id = self.unit_combo.itemData(index) or ""
        unit = self.controller.find_unit(unit_id) if unit_id else None
        if unit is not None and unit.is_occupied:
            self.unit_combo.blockSignals(True)
            self.unit_combo.setCurrentIndex(0)
            self.unit_combo.blockSignals(False)
            unit_id = ""
        self._set_unit_id(unit_id)

    def _set_unit_id(self, unit_id: str):
        if unit_id != self._unit_id:
            self._unit_id = unit_id
            self.unit_changed.emit(unit_id)

# -*- coding: utf-8 -*-
"""
Tests for BuildingController.
"""

import pytest

from controllers.building_controller import BuildingController

from conftest import api_error, network_error


@pytest.fixture
def controller(qapp, api):
    return BuildingController(api)


class TestLoadBuildings:

    def test_maps_buildings(self, controller, api, buildings_payload):
        api.get_buildings.return_value = buildings_payload

        result = controller.load_buildings()

        assert result.success
        assert [b.building_name for b in result.data] == ["Sunrise Court", "Lakeview"]
        assert result.data[0].landlord_name == "Mary Wanjiku"
        assert result.data[1].landlord_name is None
        assert controller.buildings == result.data

    def test_failure_clears_cache(self, controller, api, buildings_payload):
        api.get_buildings.return_value = buildings_payload
        controller.load_buildings()
        api.get_buildings.side_effect = network_error()

        result = controller.load_buildings()

        assert not result.success
        assert result.message == "Failed to load buildings"
        assert controller.buildings == []

    def test_unauthorized(self, controller, api):
        api.get_buildings.side_effect = api_error(401)

        result = controller.load_buildings()

        assert result.requires_login
        assert result.message == "Unauthorized. Redirecting to login..."


class TestLoadUnits:

    def test_maps_units(self, controller, api, building_detail_payload):
        api.get_building.return_value = building_detail_payload

        result = controller.load_units("b1")

        assert [u.unit_number for u in result.data] == ["A1", "A2", "A3"]
        assert [u.is_occupied for u in result.data] == [False, True, True]
        assert controller.find_unit("u-a2").status == "OCCUPIED"
        api.get_building.assert_called_once_with("b1")

    def test_empty_building_clears_units(self, controller, api, building_detail_payload):
        api.get_building.return_value = building_detail_payload
        controller.load_units("b1")

        result = controller.load_units("")

        assert result.success
        assert controller.units == []
        assert controller.find_unit("u-a1") is None
        assert api.get_building.call_count == 1

    def test_server_message_is_shown(self, controller, api):
        api.get_building.side_effect = api_error(404, "Building not found")
        assert controller.load_units("b9").message == "Building not found"

    def test_fallback_message(self, controller, api):
        api.get_building.side_effect = api_error(500)
        assert controller.load_units("b9").message == "Failed to load units"

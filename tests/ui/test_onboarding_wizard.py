# -*- coding: utf-8 -*-
"""
Tests for the four-step onboarding wizard.

The backend is the MagicMock `api` fixture; widgets are driven through
their public attributes the way a user would drive them.
"""

import pytest

from app.config import Config
from controllers.building_controller import BuildingController
from controllers.onboarding_controller import OnboardingController
from ui.wizards.onboarding import OnboardingStep, OnboardingWizard

from conftest import api_error, toast_text


@pytest.fixture
def wizard(qtbot, api, session, buildings_payload, building_detail_payload, monkeypatch):
    monkeypatch.setattr(Config, "REDIRECT_DELAY_MS", 10)
    api.get_buildings.return_value = buildings_payload
    api.get_building.return_value = building_detail_payload
    api.create_customer.return_value = {"data": {"id": "c1"}, "message": "Customer created successfully"}

    widget = OnboardingWizard(OnboardingController(api, session), BuildingController(api))
    qtbot.addWidget(widget)
    widget.show()
    return widget


def fill_details(wizard, unit_id="u-a1"):
    step = wizard.steps[OnboardingStep.DETAILS]
    step.selector.set_building("b1")
    step.selector.set_unit(unit_id)
    step.inputs["first_name"].setText("Jane")
    step.inputs["last_name"].setText("Doe")
    step.inputs["email"].setText("jane@example.com")
    step.inputs["phone_number"].setText("+254700000000")
    return step


def complete_details(wizard):
    fill_details(wizard)
    wizard.btn_next.click()
    assert wizard.active_step == OnboardingStep.INVOICE


# ==================== Step 1 ====================

class TestCustomerDetails:

    def test_starts_on_details(self, wizard, api):
        assert wizard.active_step == OnboardingStep.DETAILS
        assert wizard.btn_next.text() == "Next: Create Invoice"
        assert not wizard.btn_previous.isEnabled()
        assert wizard.btn_skip.isHidden()
        api.get_buildings.assert_called_once_with()

    def test_success_advances(self, wizard, api):
        fill_details(wizard)

        wizard.btn_next.click()

        assert wizard.active_step == OnboardingStep.INVOICE
        assert wizard.context.customer_id == "c1"
        assert toast_text(wizard) == "Customer created successfully"
        payload = api.create_customer.call_args.args[0]
        assert payload["unitId"] == "u-a1"
        assert payload["tenantId"] == "t1"
        assert wizard.btn_next.text() == "Next: Utility Readings"

    def test_validation_keeps_step(self, wizard, api):
        step = wizard.steps[OnboardingStep.DETAILS]
        step.inputs["phone_number"].setText("12345")

        wizard.btn_next.click()

        assert wizard.active_step == OnboardingStep.DETAILS
        assert step.field_error("first_name") == "First name is required"
        assert step.field_error("phone_number") == "Invalid phone number format"
        api.create_customer.assert_not_called()

    def test_occupied_unit_cannot_be_selected(self, wizard):
        step = fill_details(wizard, unit_id="u-a2")

        assert step.selector.unit_id == ""
        assert wizard.context.customer_form.unit_id == ""

    def test_server_rejection_keeps_step(self, wizard, api):
        api.create_customer.side_effect = api_error(400, "Phone number already exists")
        fill_details(wizard)

        wizard.btn_next.click()

        assert wizard.active_step == OnboardingStep.DETAILS
        assert wizard.context.customer_id is None
        assert toast_text(wizard) == "Phone number already exists"
        assert wizard.btn_next.isEnabled()
        assert wizard.btn_next.text() == "Next: Create Invoice"

    def test_unauthorized_redirects_to_login(self, wizard, api, qtbot):
        api.create_customer.side_effect = api_error(401, "jwt expired")
        fill_details(wizard)

        with qtbot.waitSignal(wizard.navigation_requested, timeout=3000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == ["/login"]
        assert toast_text(wizard) == "Unauthorized. Redirecting to login..."
        assert wizard.active_step == OnboardingStep.DETAILS

    def test_unauthorized_building_load_redirects(self, qtbot, api, session, monkeypatch):
        monkeypatch.setattr(Config, "REDIRECT_DELAY_MS", 10)
        api.get_buildings.side_effect = api_error(401)

        widget = OnboardingWizard(OnboardingController(api, session), BuildingController(api))
        qtbot.addWidget(widget)

        with qtbot.waitSignal(widget.navigation_requested, timeout=3000) as blocker:
            widget.show()

        assert blocker.args == ["/login"]
        assert toast_text(widget) == "Unauthorized. Redirecting to login..."


# ==================== Step 2 ====================

class TestInvoice:

    def test_single_row_cannot_be_removed(self, wizard):
        complete_details(wizard)
        step = wizard.steps[OnboardingStep.INVOICE]

        assert not step.row_widgets[0]["remove"].isEnabled()

        step.btn_add_item.click()

        assert len(wizard.context.invoice_draft.items) == 2
        assert all(row["remove"].isEnabled() for row in step.row_widgets)

    def test_row_total(self, wizard):
        complete_details(wizard)
        row = wizard.steps[OnboardingStep.INVOICE].row_widgets[0]

        row["inputs"]["amount"].setText("1500")
        row["inputs"]["quantity"].setText("2")
        assert row["total"].text() == "KES 3000.00"

        row["inputs"]["amount"].setText("abc")
        assert row["total"].text() == "N/A"

    def test_posts_invoice(self, wizard, api):
        complete_details(wizard)
        row = wizard.steps[OnboardingStep.INVOICE].row_widgets[0]
        row["inputs"]["description"].setText("Rent")
        row["inputs"]["amount"].setText("12000")
        api.create_onboarding_invoice.return_value = {"message": "Invoice created successfully"}

        wizard.btn_next.click()

        assert wizard.active_step == OnboardingStep.UTILITY_READINGS
        payload = api.create_onboarding_invoice.call_args.args[0]
        assert payload["customerId"] == "c1"
        assert payload["invoiceItems"] == [{"description": "Rent", "amount": 12000.0, "quantity": 1}]

    def test_invalid_row_shows_inline_errors(self, wizard, api):
        complete_details(wizard)
        step = wizard.steps[OnboardingStep.INVOICE]

        wizard.btn_next.click()

        assert wizard.active_step == OnboardingStep.INVOICE
        assert step.field_error("item0_description") == "Description is required"
        assert step.field_error("item0_amount") == "Valid amount is required"
        api.create_onboarding_invoice.assert_not_called()

    def test_empty_invoice_advances_without_request(self, wizard, api):
        complete_details(wizard)
        wizard.context.invoice_draft.items = []

        wizard.btn_next.click()

        assert wizard.active_step == OnboardingStep.UTILITY_READINGS
        assert toast_text(wizard) == "No invoice items provided. Proceeding to utility readings."
        api.create_onboarding_invoice.assert_not_called()

    def test_skip(self, wizard, api):
        complete_details(wizard)

        wizard.btn_skip.click()

        assert wizard.active_step == OnboardingStep.UTILITY_READINGS
        assert toast_text(wizard) == "Invoice creation skipped"
        api.create_onboarding_invoice.assert_not_called()


# ==================== Step 3 and 4 ====================

class TestReadingsAndFinish:

    @pytest.fixture
    def on_readings(self, wizard):
        complete_details(wizard)
        wizard.btn_skip.click()
        assert wizard.active_step == OnboardingStep.UTILITY_READINGS
        return wizard

    def test_blank_readings_make_no_request(self, on_readings, api):
        on_readings.btn_next.click()

        assert on_readings.active_step == OnboardingStep.CONFIRMATION
        assert toast_text(on_readings) == "No valid readings provided"
        api.create_utility_reading.assert_not_called()

    def test_posts_readings(self, on_readings, api):
        step = on_readings.steps[OnboardingStep.UTILITY_READINGS]
        step.btn_add_reading.click()
        step.row_widgets[0]["reading"].setText("12")
        step.row_widgets[1]["type"].setCurrentIndex(step.row_widgets[1]["type"].findData("gas"))
        step.row_widgets[1]["reading"].setText("3.5")

        on_readings.btn_next.click()

        assert on_readings.active_step == OnboardingStep.CONFIRMATION
        assert [c.args[0] for c in api.create_utility_reading.call_args_list] == ["/water-reading", "/gas-reading"]
        assert toast_text(on_readings) == "Utility readings saved successfully"

    def test_single_reading_cannot_be_removed(self, on_readings):
        step = on_readings.steps[OnboardingStep.UTILITY_READINGS]
        assert not step.row_widgets[0]["remove"].isEnabled()

    def test_skip_readings(self, on_readings):
        on_readings.btn_skip.click()

        assert on_readings.active_step == OnboardingStep.CONFIRMATION
        assert toast_text(on_readings) == "Utility readings skipped"

    def test_back_keeps_customer(self, on_readings):
        on_readings.btn_previous.click()
        on_readings.btn_previous.click()

        assert on_readings.active_step == OnboardingStep.DETAILS
        assert on_readings.context.customer_id == "c1"
        step = on_readings.steps[OnboardingStep.DETAILS]
        assert step.inputs["first_name"].text() == "Jane"

    def test_finish_emits_summary(self, on_readings, qtbot):
        on_readings.btn_skip.click()

        with qtbot.waitSignal(on_readings.wizard_completed) as blocker:
            on_readings.btn_next.click()

        summary = blocker.args[0]
        assert summary["status"] == "completed"
        assert summary["customer_id"] == "c1"
        assert summary["completed_steps"] == [0]
        assert summary["first_name"] == "Jane"

    def test_finish_opens_customer_details(self, on_readings, qtbot):
        on_readings.btn_skip.click()
        assert on_readings.btn_next.text() == "Finish"
        assert on_readings.btn_skip.isHidden()

        with qtbot.waitSignal(on_readings.navigation_requested, timeout=3000) as blocker:
            on_readings.btn_next.click()

        assert blocker.args == ["/customer-details/c1"]
        assert toast_text(on_readings) == "Customer onboarding completed"
        assert not on_readings.btn_next.isEnabled()
        assert not on_readings.btn_previous.isEnabled()

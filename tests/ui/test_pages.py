# -*- coding: utf-8 -*-
"""
Tests for the standalone pages: bulk upload, invoice, meter reading and
customer details.
"""

import threading
from unittest.mock import patch

import pytest
from PyQt5.QtCore import Qt

from app.config import Config
from controllers.building_controller import BuildingController
from controllers.bulk_import_controller import BulkImportController
from controllers.customer_controller import CustomerController
from controllers.invoice_controller import InvoiceController
from controllers.meter_reading_controller import MeterReadingController
from ui.error_handler import ErrorHandler
from ui.pages import BulkImportPage, CustomerDetailsPage, InvoicePage, MeterReadingPage

from conftest import api_error, toast_text


# ==================== Bulk upload ====================

class TestBulkImportPage:

    @pytest.fixture
    def page(self, qtbot, api, buildings_payload):
        api.get_buildings.return_value = buildings_payload
        widget = BulkImportPage(BulkImportController(api), BuildingController(api))
        qtbot.addWidget(widget)
        widget.refresh()
        widget.selector.set_building("b1")
        return widget

    @pytest.fixture
    def csv_file(self, tmp_path):
        path = tmp_path / "customers.csv"
        path.write_text("firstName,lastName,phoneNumber\nJane,Doe,0712345678\n")
        return str(path)

    def test_wrong_type_is_rejected_inline(self, page, api, tmp_path):
        path = tmp_path / "customers.pdf"
        path.write_bytes(b"%PDF-1.4")

        page.set_file(str(path))
        page.btn_upload.click()

        assert not page.error_label.isHidden()
        assert "Only CSV (text/csv) or Excel (.xlsx)" in page.error_label.text()
        assert not page.is_uploading
        api.upload_customers.assert_not_called()

    def test_oversized_file_is_rejected_inline(self, page, api, tmp_path):
        path = tmp_path / "customers.csv"
        path.write_bytes(b"a" * (Config.MAX_UPLOAD_BYTES + 1))

        page.set_file(str(path))
        page.btn_upload.click()

        assert page.error_label.text().startswith("File is too large.")
        api.upload_customers.assert_not_called()

    def test_missing_building(self, page, api, csv_file):
        page.selector.set_building("")
        page.set_file(csv_file)

        page.btn_upload.click()

        assert page.error_label.text() == "Please select a building"
        api.upload_customers.assert_not_called()

    def test_upload_lists_row_errors(self, page, api, csv_file, qtbot):
        api.upload_customers.return_value = {
            "message": "1 customer uploaded",
            "errors": [{"row": 3, "reason": "Duplicate phone number"}],
        }
        page.set_file(csv_file)
        assert page.error_label.isHidden()

        with qtbot.waitSignal(page.upload_finished, timeout=5000) as blocker:
            page.btn_upload.click()
        qtbot.waitUntil(lambda: not page.is_uploading)

        assert blocker.args[0].success
        assert page.error_table.rowCount() == 1
        assert page.error_table.item(0, 1).text() == "Duplicate phone number"
        assert toast_text(page) == "1 customer uploaded"
        assert page.btn_upload.isEnabled()
        api.upload_customers.assert_called_once_with(csv_file, "b1")

    def test_unreadable_file_still_finishes(self, page, api, csv_file, qtbot):
        api.upload_customers.side_effect = PermissionError(13, "Permission denied")
        page.set_file(csv_file)

        with qtbot.waitSignal(page.upload_finished, timeout=5000) as blocker:
            page.btn_upload.click()

        assert not blocker.args[0].success
        assert toast_text(page) == "Failed to upload customers"
        assert not page.is_uploading
        assert page.btn_upload.isEnabled()
        assert page.btn_browse.isEnabled()

    def test_refresh_during_upload_keeps_result(self, page, api, csv_file, qtbot):
        release = threading.Event()

        def slow_upload(path, building_id):
            release.wait(5)
            return {"errors": [{"row": 3, "reason": "Duplicate phone number"}]}

        api.upload_customers.side_effect = slow_upload
        page.set_file(csv_file)
        page.btn_upload.click()
        assert page.is_uploading

        page.refresh()
        assert page.file_label.text() == "customers.csv"

        with qtbot.waitSignal(page.upload_finished, timeout=5000):
            release.set()

        assert page.error_table.rowCount() == 1
        assert page.error_table.item(0, 1).text() == "Duplicate phone number"
        assert page.state.errors[0].row == 3

    def test_download_template(self, page, api, tmp_path):
        api.download_customer_template.return_value = b"firstName\n"
        target = tmp_path / "customers.csv"

        result = page.download_template(str(target))

        assert result.success
        assert target.read_bytes() == b"firstName\n"
        assert toast_text(page) == f"Template saved to {target}"


# ==================== Invoice ====================

class TestInvoicePage:

    @pytest.fixture
    def page(self, qtbot, api):
        widget = InvoicePage(InvoiceController(api))
        qtbot.addWidget(widget)
        widget.show()
        return widget

    def add_item(self, page, description="Rent", amount="12000", quantity="1"):
        page.description_input.setText(description)
        page.amount_input.setText(amount)
        page.quantity_input.setText(quantity)
        page.btn_add_item.click()

    def test_phone_search_is_debounced(self, page, api, qtbot):
        api.search_customer_by_phone.return_value = {
            "id": "c1", "firstName": "Jane", "lastName": "Doe", "phoneNumber": "0712345678"
        }

        qtbot.keyClicks(page.search_input, "0712345678")
        qtbot.waitUntil(lambda: api.search_customer_by_phone.called, timeout=3000)
        qtbot.wait(Config.SEARCH_DEBOUNCE_MS + 100)

        api.search_customer_by_phone.assert_called_once_with("0712345678")
        assert page.results_list.count() == 1
        assert page.results_list.item(0).text() == "Jane Doe (0712345678)"

    def test_name_search_on_enter(self, page, api, qtbot):
        api.search_customer_by_name.return_value = [{"id": "c1", "firstName": "Jane", "lastName": "Doe"}]
        page.search_input.setText("Jane")

        qtbot.keyClick(page.search_input, Qt.Key_Return)

        api.search_customer_by_name.assert_called_once_with("Jane")
        assert page.results_list.count() == 1

    def test_no_match_message(self, page, api):
        api.search_customer_by_name.return_value = []
        page.search_input.setText("Nobody")

        page.run_search()

        assert toast_text(page) == "No customer found with that name"
        assert page.results_list.isHidden()

    def test_invalid_item_is_not_added(self, page):
        self.add_item(page, amount="abc")

        assert page.items == []
        assert toast_text(page) == "Amount must be a positive number"

    def test_fractional_quantity_is_not_added(self, page):
        self.add_item(page, quantity="1.5")

        assert page.items == []
        assert toast_text(page) == "Quantity must be a positive integer"

    def test_add_and_remove_items(self, page):
        self.add_item(page, amount="100", quantity="3")

        assert page.items_table.rowCount() == 1
        assert page.items_table.item(0, 3).text() == "KES 300.00"
        assert page.quantity_input.text() == "1"

        page.remove_item(0)

        assert page.items_table.rowCount() == 0
        assert toast_text(page) == "Item removed successfully"

    def test_create_invoice(self, page, api, qtbot):
        api.search_customer_by_name.return_value = [{"id": "c1", "firstName": "Jane", "lastName": "Doe"}]
        api.create_invoice.return_value = {"data": {"id": "inv1"}}
        page.search_input.setText("Jane")
        page.run_search()
        page.select_customer(0)
        self.add_item(page)

        with qtbot.waitSignal(page.invoice_created) as blocker:
            page.btn_create.click()

        assert blocker.args == ["inv1"]
        assert toast_text(page) == "Invoice created successfully!"
        assert page.items == []
        assert page.selected_customer is None

    def test_create_without_customer(self, page, api):
        page.btn_create.click()

        assert toast_text(page) == "Please select a customer"
        api.create_invoice.assert_not_called()

    def test_generate_all_requires_confirmation(self, page, api):
        with patch.object(ErrorHandler, "confirm", return_value=False):
            page.btn_generate_all.click()
        api.generate_invoices_for_all.assert_not_called()

        with patch.object(ErrorHandler, "confirm", return_value=True):
            page.btn_generate_all.click()
        api.generate_invoices_for_all.assert_called_once_with()
        assert toast_text(page) == "Invoices generated successfully for all active customers!"


# ==================== Meter reading ====================

class TestMeterReadingPage:

    @pytest.fixture
    def page(self, qtbot, api, session):
        widget = MeterReadingPage(MeterReadingController(api, session))
        qtbot.addWidget(widget)
        return widget

    def reading(self, abnormal=True):
        return {
            "data": {
                "id": "m1",
                "customerName": "Jane Doe",
                "reading": 120,
                "consumption": 30,
                "averageConsumption": 10,
                "isAbnormal": abnormal,
                "anomalyDetails": {"reviewed": True, "reviewNotes": "Checked", "resolved": False},
            }
        }

    def test_empty_state(self, page):
        assert not page.empty_label.isHidden()
        assert page.details_container.isHidden()
        assert page.banner.isHidden()

    def test_abnormal_reading(self, page, api):
        api.get_meter_reading.return_value = self.reading()

        page.refresh("m1")

        assert not page.banner.isHidden()
        assert page.factor_label.text() == "Consumption is 3.00x the average consumption"
        assert not page.review_box.isHidden()
        assert page.reviewed_check.isChecked()
        assert page.review_notes_input.toPlainText() == "Checked"
        assert page.reading_input.text() == "120"

    def test_normal_reading_hides_banner(self, page, api):
        api.get_meter_reading.return_value = self.reading(abnormal=False)

        page.load("m1")

        assert page.banner.isHidden()
        assert page.review_box.isHidden()
        assert not page.details_container.isHidden()

    def test_update_values(self, page, api):
        api.get_meter_reading.return_value = self.reading()
        page.load("m1")
        page.consumption_input.setText("12")

        page.btn_update_values.click()

        api.update_meter_reading_values.assert_called_once_with(
            "m1", {"reading": 120.0, "consumption": 12.0, "meterPhotoUrl": None}
        )
        assert page.factor_label.text() == "Consumption is 1.20x the average consumption"

    def test_update_review(self, page, api):
        api.get_meter_reading.return_value = self.reading()
        page.load("m1")
        page.resolved_check.setChecked(True)

        page.btn_update_review.click()

        api.update_meter_reading_review.assert_called_once_with(
            "m1", {"reviewed": True, "reviewNotes": "Checked", "resolved": True}
        )
        assert toast_text(page) == "Anomaly details updated successfully!"

    def test_load_failure(self, page, api):
        api.get_meter_reading.side_effect = api_error(404, "Meter reading not found")

        page.load("m9")

        assert toast_text(page) == "Meter reading not found"
        assert page.details_container.isHidden()


# ==================== Customer details ====================

class TestCustomerDetailsPage:

    @pytest.fixture
    def page(self, qtbot, api):
        widget = CustomerDetailsPage(CustomerController(api))
        qtbot.addWidget(widget)
        return widget

    def test_shows_customer(self, page, api):
        api.get_customer_details.return_value = {
            "id": "c1",
            "firstName": "Jane",
            "lastName": "Doe",
            "phoneNumber": "0712345678",
            "buildingName": "Sunrise Court",
            "closingBalance": 1500,
            "status": "ACTIVE",
        }

        page.refresh("c1")

        api.get_customer_details.assert_called_once_with("c1")
        assert page.name_label.text() == "Jane Doe"
        assert page.value_labels["unit"].text() == "Not Assigned"
        assert page.value_labels["building"].text() == "Sunrise Court"
        assert page.value_labels["closing_balance"].text() == "KES 1500.00"
        assert page.value_labels["email"].text() == "N/A"

    def test_add_another(self, page, qtbot):
        with qtbot.waitSignal(page.navigation_requested) as blocker:
            page.btn_add_another.click()
        assert blocker.args == ["/add-customer"]

    def test_unauthorized_redirects(self, page, api, qtbot, monkeypatch):
        monkeypatch.setattr(Config, "REDIRECT_DELAY_MS", 10)
        api.get_customer_details.side_effect = api_error(401)

        with qtbot.waitSignal(page.navigation_requested, timeout=3000) as blocker:
            page.refresh("c1")

        assert blocker.args == ["/login"]
        assert toast_text(page) == "Unauthorized. Redirecting to login..."

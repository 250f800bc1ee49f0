# -*- coding: utf-8 -*-
"""
Tests for the client-side validators.

Tests cover:
- Phone and email formats
- Customer form (step 1)
- Invoice rows and utility readings (steps 2 and 3)
- Bulk upload file checks
- Standalone invoice item form
"""

import pytest

from app.config import Config
from models.bulk_upload import BulkUploadState
from models.customer import CustomerForm
from models.invoice import InvoiceItem
from models.unit import Unit
from models.utility_reading import UtilityReading
from services.validation_service import (
    is_valid_email,
    is_valid_phone,
    valid_readings,
    validate_bulk_upload,
    validate_customer_form,
    validate_invoice_items,
    validate_new_invoice_item,
    validate_upload_file,
    validate_utility_readings,
)


def make_form(**overrides) -> CustomerForm:
    values = dict(first_name="Jane", last_name="Doe", phone_number="+254700000000")
    values.update(overrides)
    return CustomerForm(**values)


class TestFormats:
    """Phone and email patterns."""

    @pytest.mark.parametrize("phone", ["+254700000000", "0700000000", "123456789012345"])
    def test_valid_phones(self, phone):
        assert is_valid_phone(phone)

    @pytest.mark.parametrize("phone", ["12345", "abc1234567", "+2547000000001234", "", "0700 000 000"])
    def test_invalid_phones(self, phone):
        assert not is_valid_phone(phone)

    def test_email_is_optional(self):
        assert is_valid_email("")

    def test_email_format(self):
        assert is_valid_email("a@b.co")
        assert not is_valid_email("not-an-email")


class TestCustomerForm:
    """Step-1 validation."""

    def test_valid_form(self):
        assert validate_customer_form(make_form()) == {}

    def test_required_fields(self):
        errors = validate_customer_form(CustomerForm())

        assert errors["first_name"] == "First name is required"
        assert errors["last_name"] == "Last name is required"
        assert errors["phone_number"] == "Phone number is required"

    def test_whitespace_names_are_missing(self):
        errors = validate_customer_form(make_form(first_name="  "))
        assert "first_name" in errors

    def test_invalid_phone_formats(self):
        errors = validate_customer_form(make_form(phone_number="12345", secondary_phone_number="abc1234567"))

        assert errors["phone_number"] == "Invalid phone number format"
        assert errors["secondary_phone_number"] == "Invalid secondary phone number format"

    def test_invalid_email(self):
        errors = validate_customer_form(make_form(email="not-an-email"))
        assert errors == {"email": "Invalid email format"}

    def test_occupied_unit_rejected(self):
        unit = Unit(id="u1", unit_number="A1", status="OCCUPIED")
        errors = validate_customer_form(make_form(unit_id="u1"), unit)
        assert "unit_id" in errors

    def test_vacant_unit_accepted(self):
        unit = Unit(id="u1", unit_number="A1", status="VACANT")
        assert validate_customer_form(make_form(unit_id="u1"), unit) == {}


class TestInvoiceItems:
    """Step-2 row validation."""

    def test_valid_rows(self):
        items = [InvoiceItem("Deposit", "5000", "1"), InvoiceItem("Rent", "12000.50", "2")]
        assert validate_invoice_items(items) == {}

    def test_empty_list_is_valid(self):
        assert validate_invoice_items([]) == {}

    def test_errors_are_keyed_by_row(self):
        items = [InvoiceItem("Deposit", "5000", "1"), InvoiceItem("", "0", "-1")]
        errors = validate_invoice_items(items)

        assert set(errors) == {"item1_description", "item1_amount", "item1_quantity"}

    def test_non_numeric_amount(self):
        errors = validate_invoice_items([InvoiceItem("Rent", "abc", "1")])
        assert errors == {"item0_amount": "Valid amount is required"}


class TestUtilityReadings:
    """Step-3 validation."""

    def test_blank_readings_are_not_errors(self):
        readings = [UtilityReading("water", ""), UtilityReading("gas", "   ")]
        assert validate_utility_readings(readings) == {}
        assert valid_readings(readings) == []

    def test_negative_and_non_numeric(self):
        readings = [UtilityReading("water", "-1"), UtilityReading("gas", "x"), UtilityReading("water", "0")]
        errors = validate_utility_readings(readings)

        assert set(errors) == {"reading0_reading", "reading1_reading"}

    def test_valid_readings_keep_order(self):
        readings = [UtilityReading("gas", "12"), UtilityReading("water", ""), UtilityReading("water", "3.5")]
        assert [r.reading for r in valid_readings(readings)] == ["12", "3.5"]


class TestUploadFile:
    """Bulk upload file checks."""

    def test_missing_path(self):
        assert validate_upload_file(None) == "Please select a file to upload"

    def test_file_not_found(self, tmp_path):
        assert "File not found" in validate_upload_file(str(tmp_path / "missing.csv"))

    def test_csv_and_xlsx_accepted(self, tmp_path):
        for name in ("customers.csv", "customers.xlsx"):
            path = tmp_path / name
            path.write_bytes(b"firstName,lastName\n")
            assert validate_upload_file(str(path)) is None

    def test_wrong_type_names_constraint(self, tmp_path):
        path = tmp_path / "customers.pdf"
        path.write_bytes(b"%PDF")

        message = validate_upload_file(str(path))
        assert "text/csv" in message

    def test_oversized_file_names_limit(self, tmp_path):
        path = tmp_path / "big.csv"
        path.write_bytes(b"x" * (Config.MAX_UPLOAD_BYTES + 1))

        message = validate_upload_file(str(path))
        assert "Maximum size is 5 MB" in message

    def test_file_at_limit_accepted(self, tmp_path):
        path = tmp_path / "exact.csv"
        path.write_bytes(b"x" * Config.MAX_UPLOAD_BYTES)
        assert validate_upload_file(str(path)) is None

    def test_building_required(self, tmp_path):
        path = tmp_path / "customers.csv"
        path.write_bytes(b"a\n")

        errors = validate_bulk_upload(BulkUploadState(file_path=str(path)))
        assert errors == {"building_id": "Please select a building"}


class TestNewInvoiceItem:
    """Standalone invoice item form."""

    def test_all_fields_required(self):
        assert validate_new_invoice_item("", "10", "1") == "Please fill in all item fields"

    def test_amount_positive(self):
        assert validate_new_invoice_item("Rent", "-5", "1") == "Amount must be a positive number"

    def test_quantity_positive_integer(self):
        assert validate_new_invoice_item("Rent", "5", "1.5") == "Quantity must be a positive integer"
        assert validate_new_invoice_item("Rent", "5", "0") == "Quantity must be a positive integer"

    def test_valid_item(self):
        assert validate_new_invoice_item("Rent", "12000", "2") is None

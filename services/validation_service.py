# -*- coding: utf-8 -*-
"""
Client-side validation for the onboarding forms and the bulk upload panel.

Every validator is a pure function returning a dict of
``{field_key: message}``; an empty dict means the input is valid.
Row-level keys are ``item{index}_{field}`` for invoice rows and
``reading{index}_reading`` for utility readings.
"""

import mimetypes
import os
import re
from typing import Dict, List, Optional

from app.config import Config
from models.bulk_upload import BulkUploadState
from models.customer import CustomerForm
from models.invoice import InvoiceItem, parse_number
from models.unit import Unit
from models.utility_reading import UtilityReading
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


PHONE_PATTERN = re.compile(r"^\+?\d{10,15}$")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

# mimetypes does not know .xlsx on every platform
mimetypes.add_type("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", ".xlsx")
mimetypes.add_type("text/csv", ".csv")


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.match(value or ""))


def is_valid_email(value: str) -> bool:
    """Empty is valid; email is optional."""
    return not value or bool(EMAIL_PATTERN.search(value))


# ==================== Step 1: customer details ====================

def validate_customer_form(form: CustomerForm, selected_unit: Optional[Unit] = None) -> Dict[str, str]:
    """Validate the step-1 form."""
    errors = {}

    if not form.first_name.strip():
        errors["first_name"] = tr("validation.first_name_required")

    if not form.last_name.strip():
        errors["last_name"] = tr("validation.last_name_required")

    if not form.phone_number.strip():
        errors["phone_number"] = tr("validation.phone_required")
    elif not is_valid_phone(form.phone_number):
        errors["phone_number"] = tr("validation.phone_invalid")

    if form.secondary_phone_number and not is_valid_phone(form.secondary_phone_number):
        errors["secondary_phone_number"] = tr("validation.secondary_phone_invalid")

    if not is_valid_email(form.email):
        errors["email"] = tr("validation.email_invalid")

    if form.unit_id and selected_unit is not None and selected_unit.is_occupied:
        errors["unit_id"] = tr("validation.unit_occupied")

    return errors


# ==================== Step 2: invoice items ====================

def validate_invoice_items(items: List[InvoiceItem]) -> Dict[str, str]:
    errors = {}
    for index, item in enumerate(items):
        if not (item.description or "").strip():
            errors[f"item{index}_description"] = tr("validation.item_description_required")

        amount = parse_number(item.amount)
        if amount is None or amount <= 0:
            errors[f"item{index}_amount"] = tr("validation.item_amount_invalid")

        quantity = parse_number(item.quantity)
        if quantity is None or quantity <= 0:
            errors[f"item{index}_quantity"] = tr("validation.item_quantity_invalid")

    return errors


# ==================== Step 3: utility readings ====================

def validate_utility_readings(readings: List[UtilityReading]) -> Dict[str, str]:
    """Blank readings are not errors; they are dropped by valid_readings()."""
    errors = {}
    for index, reading in enumerate(readings):
        if reading.is_blank:
            continue
        value = parse_number(reading.reading)
        if value is None or value < 0:
            errors[f"reading{index}_reading"] = tr("validation.reading_invalid")
    return errors


def valid_readings(readings: List[UtilityReading]) -> List[UtilityReading]:
    """Non-blank readings in insertion order."""
    return [r for r in readings if not r.is_blank]


# ==================== Bulk upload ====================

def guess_mime_type(path: str) -> Optional[str]:
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type


def validate_upload_file(path: Optional[str]) -> Optional[str]:
    """
    Check a candidate upload file.

    Returns the message naming the violated constraint, or None when the
    file may be uploaded.
    """
    if not path:
        return tr("upload.error.file_required")

    if not os.path.isfile(path):
        return tr("upload.error.file_missing", path=path)

    mime_type = guess_mime_type(path)
    if mime_type not in Config.UPLOAD_MIME_TYPES:
        logger.info(f"Rejected upload file type: {mime_type} ({path})")
        return tr("upload.error.file_type")

    size = os.path.getsize(path)
    if size > Config.MAX_UPLOAD_BYTES:
        logger.info(f"Rejected upload file size: {size} bytes ({path})")
        return tr("upload.error.file_size", max_mb=Config.MAX_UPLOAD_BYTES // (1024 * 1024))

    return None


def validate_bulk_upload(state: BulkUploadState) -> Dict[str, str]:
    errors = {}
    file_error = validate_upload_file(state.file_path)
    if file_error:
        errors["file"] = file_error
    if not state.building_id:
        errors["building_id"] = tr("upload.error.building_required")
    return errors


# ==================== Standalone invoice ====================

def validate_new_invoice_item(description: str, amount: str, quantity: str) -> Optional[str]:
    """Check one item before it is appended to the standalone invoice list."""
    if not (description or "").strip() or not str(amount or "").strip() or not str(quantity or "").strip():
        return tr("invoice.item_fields_required")

    amount_value = parse_number(amount)
    if amount_value is None or amount_value <= 0:
        return tr("invoice.amount_invalid")

    quantity_value = parse_number(quantity)
    if quantity_value is None or quantity_value <= 0 or not quantity_value.is_integer():
        return tr("invoice.quantity_invalid")

    return None

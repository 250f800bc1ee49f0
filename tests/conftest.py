# -*- coding: utf-8 -*-
"""
Shared fixtures.

The HTTP layer is replaced by a MagicMock shaped like PropertyApiClient;
tests set return values / side effects per call.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Headless Qt for CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models.user import CurrentUser
from services.api_client import PropertyApiClient
from services.exceptions import ApiException, NetworkException
from services.session_service import SessionService
from ui.components.toast import Toast


def api_error(status_code: int, message: str = None, **body) -> ApiException:
    """ApiException as raised by PropertyApiClient for an error status."""
    if message is not None:
        body["message"] = message
    return ApiException(message=f"{status_code} Error", status_code=status_code, response_data=body)


def network_error() -> NetworkException:
    return NetworkException(message="Connection refused", original_error=ConnectionError("refused"))


def toast_text(widget) -> str:
    """Text of the toast currently shown on `widget` ("" when none)."""
    toast = widget.findChild(Toast, "toast-notification")
    return toast.text() if toast is not None else ""


@pytest.fixture
def api():
    """PropertyApiClient double; every endpoint is a MagicMock."""
    return MagicMock(spec=PropertyApiClient)


@pytest.fixture
def user():
    return CurrentUser(
        id="u1",
        email="admin@example.com",
        first_name="Ada",
        last_name="Admin",
        tenant_id="t1",
    )


@pytest.fixture
def session(qapp, api, user):
    """Signed-in session for tenant t1."""
    session = SessionService(api)
    session.set_user(user)
    return session


@pytest.fixture
def anonymous_session(qapp, api):
    return SessionService(api)


@pytest.fixture
def buildings_payload():
    return [
        {"id": "b1", "buildingName": "Sunrise Court", "landlord": {"name": "Mary Wanjiku"}},
        {"id": "b2", "buildingName": "Lakeview", "landlord": None},
    ]


@pytest.fixture
def building_detail_payload():
    return {
        "id": "b1",
        "buildingName": "Sunrise Court",
        "units": [
            {"id": "u-a1", "unitNumber": "A1", "status": "VACANT"},
            {"id": "u-a2", "unitNumber": "A2", "status": "OCCUPIED"},
            {"id": "u-a3", "unitNumber": "A3", "status": "OCCUPIED_PENDING_PAYMENT"},
        ],
    }

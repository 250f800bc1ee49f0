# -*- coding: utf-8 -*-
"""
Tests for the failure classification shared by every screen.
"""

from services.error_mapper import FailureKind, map_exception, server_message_or
from services.exceptions import ValidationException

from conftest import api_error, network_error


class TestMapException:

    def test_unauthorized(self):
        mapped = map_exception(api_error(401, "jwt expired"))

        assert mapped.kind == FailureKind.UNAUTHORIZED
        assert mapped.message == "Unauthorized. Redirecting to login..."
        assert mapped.requires_login

    def test_bad_request_uses_server_message(self):
        mapped = map_exception(api_error(400, "Phone number already exists"), "Invalid invoice data.")

        assert mapped.kind == FailureKind.BAD_REQUEST
        assert mapped.message == "Phone number already exists"
        assert not mapped.requires_login

    def test_bad_request_fallback(self):
        assert map_exception(api_error(400), "Invalid invoice data.").message == "Invalid invoice data."

    def test_bad_request_default_fallback(self):
        assert map_exception(api_error(400)).message == "Invalid input. Please check your details."

    def test_other_status_is_generic(self):
        for status in (403, 404, 500, 503):
            mapped = map_exception(api_error(status, "stack trace"))
            assert mapped.kind == FailureKind.SERVER
            assert mapped.message == "Something went wrong. Please try again later."

    def test_network(self):
        mapped = map_exception(network_error())

        assert mapped.kind == FailureKind.NETWORK
        assert mapped.message == "Network error. Please check your connection."

    def test_validation(self):
        mapped = map_exception(ValidationException("Bad input", errors={"a": "b"}))
        assert mapped.kind == FailureKind.VALIDATION
        assert mapped.message == "Bad input"


class TestServerMessageOr:

    def test_prefers_server_message(self):
        assert server_message_or(api_error(500, "Building not found"), "Failed") == "Building not found"

    def test_fallback(self):
        assert server_message_or(api_error(500), "Failed") == "Failed"
        assert server_message_or(network_error(), "Failed") == "Failed"

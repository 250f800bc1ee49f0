# -*- coding: utf-8 -*-
"""Centralized error message mapper.

Every network-origin failure is classified into one of four kinds so the
pages can react the same way everywhere:

- UNAUTHORIZED: HTTP 401, message plus a delayed redirect to the login page
- BAD_REQUEST: HTTP 400, the server's `message` is shown verbatim
- SERVER: any other HTTP status, generic retry message
- NETWORK: no response at all (connection refused, DNS, timeout)
"""

from dataclasses import dataclass
from enum import Enum

from services.translation_manager import tr
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


class FailureKind(Enum):
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"
    SERVER = "server"
    NETWORK = "network"
    VALIDATION = "validation"


@dataclass
class MappedError:
    """User-facing view of a failure."""
    kind: FailureKind
    message: str

    @property
    def requires_login(self) -> bool:
        return self.kind == FailureKind.UNAUTHORIZED


def map_api_error(error: ApiException, bad_request_fallback: str = None) -> MappedError:
    """Map an HTTP error status to a failure kind and message."""
    status = error.status_code

    if status == 401:
        logger.warning(f"API unauthorized (401): {error}")
        return MappedError(FailureKind.UNAUTHORIZED, tr("error.unauthorized"))

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
        message = error.server_message or bad_request_fallback or tr("error.customer.invalid")
        return MappedError(FailureKind.BAD_REQUEST, message)

    logger.warning(f"API error ({status}): {error}")
    return MappedError(FailureKind.SERVER, tr("error.generic"))


def map_network_error(error: NetworkException) -> MappedError:
    """Map a no-response failure."""
    logger.warning(f"Network error: {error.original_error or error}")
    return MappedError(FailureKind.NETWORK, tr("error.network"))


def map_exception(error: Exception, bad_request_fallback: str = None) -> MappedError:
    """Map any exception raised by a backend call to a user-facing failure."""
    if isinstance(error, ApiException):
        return map_api_error(error, bad_request_fallback)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return MappedError(FailureKind.VALIDATION, error.message)

    logger.warning(f"Unexpected error: {error}")
    return MappedError(FailureKind.SERVER, tr("error.generic"))


def server_message_or(error: Exception, fallback: str) -> str:
    """The backend's own message when the error carries one, else `fallback`.

    Used by the screens that surface any server message verbatim instead of
    classifying by status.
    """
    if isinstance(error, ApiException) and error.server_message:
        return error.server_message
    return fallback


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return response_data.get("message", "") or ""

# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for all controllers in PropDesk.

Controllers sit between the pages and the API client: they call the
backend, classify failures with the error mapper and hand the page an
OperationResult instead of an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import MappedError, map_exception, server_message_or
from services.exceptions import ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    failure: Optional[MappedError] = None

    @property
    def requires_login(self) -> bool:
        """True when the backend answered 401."""
        return self.failure is not None and self.failure.requires_login

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: Dict[str, str] = None,
             failure: MappedError = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or {}, failure=failure)


class BaseController(QObject):
    """
    Shared plumbing for the page controllers.

    Each backend operation is bracketed by operation_started and
    operation_completed, or operation_error when it fails; a 401 also
    emits unauthorized with the user-facing message.
    """

    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)
    unauthorized = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str:
        return self._last_error

    def _set_loading(self, loading: bool):
        if loading != self._is_loading:
            self._is_loading = loading
            self.loading_changed.emit(loading)

    def _log_operation(self, operation: str, **kwargs):
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_started(self, operation: str):
        self._last_error = ""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        self.operation_completed.emit(operation, success)
        self._set_loading(False)

    def _emit_error(self, operation: str, error: str):
        self._last_error = error
        logger.error(f"{self.__class__.__name__}.{operation} failed: {error}")
        self.operation_error.emit(operation, error)
        self._set_loading(False)

    def _fail_from_exception(self, operation: str, error: Exception,
                             bad_request_fallback: str = None) -> OperationResult:
        """Classify a backend failure and turn it into a failed result."""
        mapped = map_exception(error, bad_request_fallback)
        self._emit_error(operation, mapped.message)
        if mapped.requires_login:
            self.unauthorized.emit(mapped.message)
        errors = error.errors if isinstance(error, ValidationException) else {}
        return OperationResult.fail(message=mapped.message, errors=errors, failure=mapped)

    def _fail_with_server_message(self, operation: str, error: Exception,
                                  fallback: str) -> OperationResult:
        """
        Failed result carrying the backend's own message, or `fallback`.

        A 401 keeps the standard unauthorized message and login redirect.
        """
        mapped = map_exception(error)
        if mapped.requires_login:
            return self._fail_from_exception(operation, error)
        message = server_message_or(error, fallback)
        self._emit_error(operation, message)
        return OperationResult.fail(message=message, failure=mapped)

def response_message(response: Any, fallback: str) -> str:
    """The `message` of a success body, or `fallback`."""
    if isinstance(response, dict) and isinstance(response.get("message"), str) and response["message"]:
        return response["message"]
    return fallback


def response_data(response: Any) -> Dict[str, Any]:
    """The `data` object of a success body (or the body itself when there is none)."""
    if isinstance(response, dict):
        data = response.get("data")
        if isinstance(data, dict):
            return data
        return response
    return {}

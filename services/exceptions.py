# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised when the backend answers with an HTTP error status."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data if isinstance(response_data, dict) else {}
        self.context = context

    @property
    def server_message(self) -> str:
        """The `message` field of the error body, or an empty string."""
        value = self.response_data.get("message")
        return value if isinstance(value, str) else ""

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for client-side validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or {}
        self.context = context


class NetworkException(Exception):
    """Exception raised when no response was received (connection/timeout)."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context

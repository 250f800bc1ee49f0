# -*- coding: utf-8 -*-
"""
PropDesk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "PropertyApiClient",
    "SessionService",
    "get_api_client",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "PropertyApiClient":
        from .api_client import PropertyApiClient
        return PropertyApiClient
    elif name == "get_api_client":
        from .api_client import get_api_client
        return get_api_client
    elif name == "SessionService":
        from .session_service import SessionService
        return SessionService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

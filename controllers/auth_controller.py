# -*- coding: utf-8 -*-
"""
Auth Controller
===============
Sign-in and sign-out for the login page.
"""

from controllers.base_controller import BaseController, OperationResult
from models.user import CurrentUser
from services.exceptions import ApiException, NetworkException
from services.session_service import SessionService
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthController(BaseController):
    """Controller for authentication."""

    def __init__(self, session: SessionService, parent=None):
        super().__init__(parent)
        self.session = session

    def login(self, email: str, password: str) -> OperationResult[CurrentUser]:
        email = (email or "").strip()
        if not email or not password:
            return OperationResult.fail(tr("login.required"))

        self._emit_started("login")
        try:
            user = self.session.login(email, password)
        except ApiException as e:
            if e.status_code in (400, 401):
                message = e.server_message or tr("login.failed")
                self._emit_error("login", message)
                return OperationResult.fail(message)
            return self._fail_from_exception("login", e)
        except NetworkException as e:
            return self._fail_from_exception("login", e)

        self._emit_completed("login", True)
        return OperationResult.ok(data=user)

    def logout(self):
        self.session.logout()

# -*- coding: utf-8 -*-
"""
Session Service - holds the signed-in user.

Pages never talk to the sign-in endpoint directly; they read the current
user (and its tenant id) from here.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.user import CurrentUser
from services.api_client import PropertyApiClient
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionService(QObject):
    """
    Current-user holder.

    Signals:
        signed_in: Emitted with the CurrentUser after a successful login
        signed_out: Emitted when the session is cleared
    """

    signed_in = pyqtSignal(object)
    signed_out = pyqtSignal()

    def __init__(self, api: PropertyApiClient, parent=None):
        super().__init__(parent)
        self.api = api
        self._current_user: Optional[CurrentUser] = None

    @property
    def current_user(self) -> Optional[CurrentUser]:
        return self._current_user

    @property
    def tenant_id(self) -> Optional[str]:
        return self._current_user.tenant_id if self._current_user else None

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def login(self, email: str, password: str) -> CurrentUser:
        """Sign in against the backend. Raises ApiException / NetworkException."""
        data = self.api.login(email, password)
        user_data = data.get("user") if isinstance(data.get("user"), dict) else data
        self.set_user(CurrentUser.from_dict(user_data))
        return self._current_user

    def set_user(self, user: Optional[CurrentUser]):
        self._current_user = user
        if user is not None:
            logger.info(f"Session started for {user.email} (tenant {user.tenant_id})")
            self.signed_in.emit(user)

    def logout(self):
        """Clear the user and the HTTP session."""
        if self._current_user:
            logger.info(f"Session ended for {self._current_user.email}")
        self._current_user = None
        self.api.clear_session()
        self.signed_out.emit()

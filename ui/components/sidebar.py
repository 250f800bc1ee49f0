# -*- coding: utf-8 -*-
"""
Sidebar navigation: one entry per back-office page, the signed-in user
and a sign-out button.
"""

from PyQt5.QtWidgets import QVBoxLayout, QLabel, QPushButton, QFrame, QButtonGroup
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config, Routes
from services.translation_manager import tr

NAV_BUTTON_STYLE = f"""
    QPushButton {{
        background-color: transparent;
        color: rgba(255, 255, 255, 0.8);
        border: none;
        border-left: 3px solid transparent;
        text-align: left;
        padding: 14px 18px;
        font-size: {Config.FONT_SIZE + 1}pt;
    }}
    QPushButton:hover, QPushButton:checked {{
        background-color: rgba(253, 183, 20, 0.12);
        border-left: 3px solid {Config.ACCENT_COLOR};
        color: {Config.ACCENT_COLOR};
    }}
    QPushButton:checked {{
        font-weight: 700;
    }}
"""


class Sidebar(QFrame):
    """Left-hand navigation shown once a user is signed in."""

    navigate = pyqtSignal(str)  # route
    logout_requested = pyqtSignal()

    NAV_ITEMS = [
        (Routes.ONBOARDING, "nav.onboarding"),
        (Routes.BULK_IMPORT, "nav.bulk_import"),
        (Routes.CREATE_INVOICE, "nav.create_invoice"),
        (Routes.METER_READING, "nav.meter_reading"),
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_user = None
        self._buttons = {}
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("sidebar")
        self.setFixedWidth(Config.SIDEBAR_WIDTH)
        self.setStyleSheet(f"QFrame#sidebar {{ background-color: {Config.PRIMARY_COLOR}; border: none; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 12)
        layout.setSpacing(0)

        app_label = QLabel(Config.APP_NAME)
        app_label.setStyleSheet(
            f"color: white; font-weight: 700; font-size: {Config.FONT_SIZE + 4}pt; padding: 24px 18px;"
        )
        layout.addWidget(app_label)

        # Exclusive group keeps exactly one page highlighted
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        for route, label_key in self.NAV_ITEMS:
            btn = self._nav_button(tr(label_key))
            btn.setCheckable(True)
            btn.clicked.connect(lambda checked, r=route: self._on_nav_click(r))
            self._group.addButton(btn)
            self._buttons[route] = btn
            layout.addWidget(btn)

        layout.addStretch(1)

        self.user_name_label = QLabel("")
        self.user_name_label.setObjectName("sidebar_user")
        self.user_name_label.setWordWrap(True)
        self.user_name_label.setStyleSheet(
            f"color: white; font-weight: 700; font-size: {Config.FONT_SIZE}pt; padding: 0 18px;"
        )
        layout.addWidget(self.user_name_label)

        self.btn_logout = self._nav_button(tr("nav.logout"))
        self.btn_logout.clicked.connect(self.logout_requested)
        layout.addWidget(self.btn_logout)

    @staticmethod
    def _nav_button(label: str) -> QPushButton:
        btn = QPushButton(label)
        btn.setCursor(Qt.PointingHandCursor)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.setStyleSheet(NAV_BUTTON_STYLE)
        return btn

    def _on_nav_click(self, route: str):
        self.set_selected(route)
        self.navigate.emit(route)

    def set_selected(self, route: str):
        """Highlight the entry for `route`; routes without an entry clear it."""
        btn = self._buttons.get(route)
        if btn is not None:
            btn.setChecked(True)
            return
        # An exclusive group refuses to uncheck its last button
        self._group.setExclusive(False)
        for other in self._buttons.values():
            other.setChecked(False)
        self._group.setExclusive(True)

    def set_user(self, user):
        self.current_user = user
        if user is None:
            self.user_name_label.setText("")
            return
        name = f"{user.first_name} {user.last_name}".strip()
        self.user_name_label.setText(name or user.email)

# -*- coding: utf-8 -*-
"""
Login Page - email/password sign-in card.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton, QFrame, QGraphicsDropShadowEffect
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QColor, QPainter, QPaintEvent, QFont

from app.config import Config
from controllers.auth_controller import AuthController
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

INPUT_STYLE = f"""
    QLineEdit {{
        background-color: #f0f7ff;
        border: 1px solid #D5DBDB;
        border-radius: 12px;
        padding: 8px 12px;
        color: #2C3E50;
    }}
    QLineEdit:focus {{ border: 1px solid {Config.PRIMARY_COLOR}; }}
"""


class LoginPage(QWidget):
    """Sign-in card on a two-tone background."""

    login_successful = pyqtSignal(object)  # CurrentUser

    def __init__(self, controller: AuthController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._setup_ui()

    def paintEvent(self, event: QPaintEvent):
        """Paint two-tone background"""
        painter = QPainter(self)
        mid_height = self.height() // 2
        painter.fillRect(0, 0, self.width(), mid_height, QColor(Config.PRIMARY_COLOR))
        painter.fillRect(0, mid_height, self.width(), self.height() - mid_height, QColor("#F0F4F8"))

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setAlignment(Qt.AlignCenter)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self._create_login_card())

    def _create_login_card(self) -> QFrame:
        card = QFrame()
        card.setObjectName("login_card")
        card.setFixedSize(400, 380)
        card.setStyleSheet("QFrame#login_card { background-color: white; border-radius: 12px; }")

        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(25)
        shadow.setColor(QColor(150, 150, 150, 40))
        shadow.setOffset(0, 3)
        card.setGraphicsEffect(shadow)

        layout = QVBoxLayout(card)
        layout.setSpacing(6)
        layout.setContentsMargins(32, 32, 32, 32)

        title = QLabel(tr("login.title"))
        title.setAlignment(Qt.AlignCenter)
        title.setFont(QFont("", 16, QFont.Bold))
        title.setStyleSheet("color: #2C3E50;")
        layout.addWidget(title)
        layout.addSpacing(18)

        self.email_input = self._add_input(layout, tr("login.email"), "email_input")
        layout.addSpacing(10)
        self.password_input = self._add_input(layout, tr("login.password"), "password_input")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.returnPressed.connect(self._on_login)
        layout.addSpacing(14)

        self.error_label = QLabel("")
        self.error_label.setObjectName("login_error")
        self.error_label.setStyleSheet(
            f"background-color: #FADBD8; color: {Config.ERROR_COLOR}; font-size: 10px;"
            f" padding: 8px 10px; border-radius: 4px; border: 1px solid {Config.ERROR_COLOR};"
        )
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.login_btn = QPushButton(tr("login.submit"))
        self.login_btn.setFixedHeight(40)
        self.login_btn.setCursor(Qt.PointingHandCursor)
        self.login_btn.setStyleSheet(f"""
            QPushButton {{
                background-color: {Config.PRIMARY_COLOR};
                color: white;
                border: none;
                border-radius: 12px;
                font-weight: bold;
            }}
            QPushButton:disabled {{ background-color: #9FC6EE; }}
        """)
        self.login_btn.clicked.connect(self._on_login)
        layout.addWidget(self.login_btn)

        layout.addSpacing(12)
        version_label = QLabel(f"v {Config.VERSION}")
        version_label.setAlignment(Qt.AlignCenter)
        version_label.setStyleSheet("color: #BDC3C7; font-size: 10px;")
        layout.addWidget(version_label)
        return card

    def _add_input(self, layout: QVBoxLayout, label: str, object_name: str) -> QLineEdit:
        """Caption plus rounded line edit; typing hides the error banner."""
        layout.addWidget(QLabel(label))
        field = QLineEdit()
        field.setObjectName(object_name)
        field.setFixedHeight(40)
        field.setStyleSheet(INPUT_STYLE)
        field.textChanged.connect(self._hide_error)
        layout.addWidget(field)
        return field

    def _on_login(self):
        email = self.email_input.text().strip()

        # Enter in the password field must not start a second request
        self.login_btn.setEnabled(False)
        try:
            result = self.controller.login(email, self.password_input.text())
        finally:
            self.login_btn.setEnabled(True)

        if not result.success:
            logger.warning(f"Login failed for {email}: {result.message}")
            self.error_label.setText(result.message)
            self.error_label.show()
            return

        logger.info(f"Login successful: {email}")
        self._clear_form()
        self.login_successful.emit(result.data)

    def _hide_error(self, *args):
        self.error_label.hide()

    def _clear_form(self):
        self.email_input.clear()
        self.password_input.clear()
        self.error_label.hide()

    def refresh(self, data=None):
        """Blank form with focus on the email field."""
        self._clear_form()
        self.email_input.setFocus()

# -*- coding: utf-8 -*-
"""
Tests for the main window: login, routing and sign-out.
"""

from unittest.mock import patch

import pytest

from app.config import Routes
from app.main_window import MainWindow
from services.session_service import SessionService
from ui.error_handler import ErrorHandler
from ui.pages import CustomerDetailsPage, LoginPage
from ui.wizards.onboarding import OnboardingWizard

from conftest import api_error


@pytest.fixture
def window(qtbot, api, buildings_payload):
    api.get_buildings.return_value = buildings_payload
    api.login.return_value = {
        "user": {"id": "u1", "email": "admin@example.com", "firstName": "Ada", "tenantId": "t1"},
        "token": "abc",
    }
    widget = MainWindow(api, SessionService(api))
    qtbot.addWidget(widget)
    return widget


def sign_in(window):
    page = window.pages[Routes.LOGIN]
    page.email_input.setText("admin@example.com")
    page.password_input.setText("secret")
    page.login_btn.click()


class TestLogin:

    def test_starts_on_login(self, window):
        assert isinstance(window.stack.currentWidget(), LoginPage)
        assert window.sidebar.isHidden()

    def test_failed_login_stays(self, window, api):
        api.login.side_effect = api_error(401, "Invalid credentials")

        sign_in(window)

        page = window.pages[Routes.LOGIN]
        assert window.current_route == Routes.LOGIN
        assert page.error_label.text() == "Invalid credentials"

    def test_login_opens_onboarding(self, window):
        sign_in(window)

        assert window.current_route == Routes.ONBOARDING
        assert isinstance(window.stack.currentWidget(), OnboardingWizard)
        assert not window.sidebar.isHidden()
        assert window.sidebar.user_name_label.text() == "Ada"
        assert window.session.tenant_id == "t1"


class TestNavigation:

    def test_route_with_id(self, window, api):
        api.get_customer_details.return_value = {"id": "c1", "firstName": "Jane", "lastName": "Doe"}
        sign_in(window)

        window.navigate_to(Routes.customer_details("c1"))

        assert isinstance(window.stack.currentWidget(), CustomerDetailsPage)
        api.get_customer_details.assert_called_once_with("c1")

    def test_onboarding_is_rebuilt_on_each_visit(self, window):
        sign_in(window)
        first = window.pages[Routes.ONBOARDING]

        window.navigate_to(Routes.CREATE_INVOICE)
        window.navigate_to(Routes.ONBOARDING)

        assert window.pages[Routes.ONBOARDING] is not first
        assert window.pages[Routes.ONBOARDING].context.customer_id is None

    def test_login_route_clears_session(self, window, api):
        sign_in(window)

        window.navigate_to(Routes.LOGIN)

        assert not window.session.is_authenticated
        assert window.sidebar.isHidden()
        api.clear_session.assert_called_once_with()

    def test_refresh_error_shows_fallback(self, window):
        sign_in(window)
        page = window.pages[Routes.METER_READING]

        with patch.object(type(page), "refresh", side_effect=RuntimeError("boom")):
            window.navigate_to(Routes.meter_reading("m1"))

        fallback = window.stack.currentWidget()
        assert fallback.objectName() == "error_boundary_fallback"
        assert fallback.text() == "Error rendering page: boom"


class TestLogout:

    def test_logout_requires_confirmation(self, window):
        sign_in(window)

        with patch.object(ErrorHandler, "confirm", return_value=False):
            window.sidebar.btn_logout.click()
        assert window.session.is_authenticated

        with patch.object(ErrorHandler, "confirm", return_value=True):
            window.sidebar.btn_logout.click()
        assert not window.session.is_authenticated
        assert window.current_route == Routes.LOGIN

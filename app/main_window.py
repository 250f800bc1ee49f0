# -*- coding: utf-8 -*-
"""
Main application window with sidebar navigation and QStackedWidget routing.

Pages are addressed by route strings (see `Routes`); a route may carry one
trailing id, e.g. `/customer-details/c1`, which is passed to the page's
`refresh(data)`. Every page is built and refreshed behind its own
ErrorBoundary.
"""

from typing import Callable, Dict

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QStackedWidget, QShortcut
)
from PyQt5.QtGui import QKeySequence

from .config import Config, Routes
from controllers import (
    AuthController, BuildingController, BulkImportController, CustomerController,
    InvoiceController, MeterReadingController, OnboardingController
)
from services.api_client import PropertyApiClient
from services.session_service import SessionService
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.wizards.framework import ErrorBoundary
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window with navigation shell."""

    def __init__(self, api: PropertyApiClient, session: SessionService, parent=None):
        super().__init__(parent)
        self.api = api
        self.session = session

        self.auth_controller = AuthController(session, self)
        self.building_controller = BuildingController(api, self)
        self.onboarding_controller = OnboardingController(api, session, self)
        self.bulk_import_controller = BulkImportController(api, self)
        self.invoice_controller = InvoiceController(api, self)
        self.meter_reading_controller = MeterReadingController(api, session, self)
        self.customer_controller = CustomerController(api, self)

        self.pages: Dict[str, QWidget] = {}
        self.boundaries: Dict[str, ErrorBoundary] = {}
        self.current_route = None

        self._setup_window()
        self._setup_shortcuts()
        self._create_widgets()
        self._setup_layout()
        self._connect_signals()

        # Start with login page
        self._show_login()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        # Logout: Ctrl+Q
        self.logout_shortcut = QShortcut(QKeySequence("Ctrl+Q"), self)
        self.logout_shortcut.activated.connect(self._handle_logout)

    def _create_widgets(self):
        """Create main UI components."""
        # Import here to avoid circular imports
        from ui.components.sidebar import Sidebar

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)

        # Sidebar (hidden until login)
        self.sidebar = Sidebar(self)
        self.sidebar.setVisible(False)

        self.stack = QStackedWidget()

        for route, factory in self._page_factories().items():
            if route == Routes.ONBOARDING:
                # A fresh wizard is built on every visit
                continue
            self._install_page(route, factory)

    def _page_factories(self) -> Dict[str, Callable[[], QWidget]]:
        from ui.pages import (
            BulkImportPage, CustomerDetailsPage, InvoicePage, LoginPage, MeterReadingPage
        )
        from ui.wizards.onboarding import OnboardingWizard

        return {
            Routes.LOGIN: lambda: LoginPage(self.auth_controller, self),
            Routes.ONBOARDING: lambda: OnboardingWizard(
                self.onboarding_controller, self.building_controller, self
            ),
            Routes.BULK_IMPORT: lambda: BulkImportPage(
                self.bulk_import_controller, self.building_controller, self
            ),
            Routes.CREATE_INVOICE: lambda: InvoicePage(self.invoice_controller, self),
            Routes.METER_READING: lambda: MeterReadingPage(self.meter_reading_controller, self),
            Routes.CUSTOMER_DETAILS: lambda: CustomerDetailsPage(self.customer_controller, self),
        }

    def _install_page(self, route: str, factory: Callable[[], QWidget]) -> QWidget:
        """Build a page behind its ErrorBoundary and put it on the stack."""
        boundary = self.boundaries.get(route)
        if boundary is None:
            boundary = ErrorBoundary(route, self)
            boundary.error_occurred.connect(
                lambda error_type, message, r=route: logger.warning(f"Page {r} disabled after {error_type}")
            )
            self.boundaries[route] = boundary

        old = self.pages.get(route)
        page = boundary.fallback_widget() if boundary.has_error else boundary.render(factory)
        if old is not None:
            self.stack.removeWidget(old)
            old.deleteLater()

        self.pages[route] = page
        self.stack.addWidget(page)
        if hasattr(page, "navigation_requested"):
            page.navigation_requested.connect(self.navigate_to)
        return page

    def _setup_layout(self):
        """Setup the main layout."""
        main_layout = QHBoxLayout(self.central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self.sidebar, 0)
        main_layout.addWidget(self.stack, 1)

    def _connect_signals(self):
        """Connect widget signals to slots."""
        login_page = self.pages[Routes.LOGIN]
        if hasattr(login_page, "login_successful"):
            login_page.login_successful.connect(self._on_login_success)

        self.sidebar.navigate.connect(self.navigate_to)
        self.sidebar.logout_requested.connect(self._handle_logout)

    # ==================== Navigation ====================

    def navigate_to(self, route: str):
        """Navigate to a route, e.g. '/add-customer' or '/customer-details/c1'."""
        base, param = Routes.split(route)

        if base == Routes.LOGIN:
            self._show_login(clear_session=True)
            return

        if base == Routes.ONBOARDING:
            page = self._install_page(base, self._page_factories()[base])
            if hasattr(page, "wizard_completed"):
                page.wizard_completed.connect(
                    lambda summary: logger.info(f"Onboarding finished: {summary}")
                )
        elif base in self.pages:
            page = self.pages[base]
        else:
            logger.error(f"Page not found: {route}")
            return

        boundary = self.boundaries[base]
        if not boundary.has_error and hasattr(page, "refresh"):
            boundary.protect(page.refresh, "refresh")(param)
            if boundary.has_error:
                page = self._install_page(base, self._page_factories()[base])

        self.current_route = route
        self.sidebar.set_selected(base)
        self.stack.setCurrentWidget(page)
        logger.debug(f"Navigated to: {route}")

    def _show_login(self, clear_session: bool = False):
        """Show the login page."""
        if clear_session and self.session.is_authenticated:
            self.session.logout()
        self.sidebar.setVisible(False)
        self.sidebar.set_user(None)
        self.current_route = Routes.LOGIN
        page = self.pages[Routes.LOGIN]
        if hasattr(page, "refresh"):
            page.refresh()
        self.stack.setCurrentWidget(page)
        logger.info("Showing login page")

    def _on_login_success(self, user):
        """Handle successful login."""
        logger.info(f"User logged in: {user.email} (tenant {user.tenant_id})")
        self.sidebar.setVisible(True)
        self.sidebar.set_user(user)
        self.navigate_to(Routes.ONBOARDING)

    def _handle_logout(self):
        """Handle logout request."""
        if not self.session.is_authenticated:
            return
        if ErrorHandler.confirm(self, tr("nav.logout_confirm")):
            self.auth_controller.logout()
            self._show_login()

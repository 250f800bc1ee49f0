# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "https://taqa.co.ke/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_LOGIN_PATH = os.getenv("API_LOGIN_PATH", "/signin")
_API_TOKEN = os.getenv("API_TOKEN", "")
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Timing (milliseconds)
_REDIRECT_DELAY_MS = int(os.getenv("REDIRECT_DELAY_MS", "2000"))
_SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", "500"))
_TOAST_DURATION_MS = int(os.getenv("TOAST_DURATION_MS", "3000"))

# Bulk import
_MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "5"))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "PropDesk"
    APP_TITLE: str = "Property Management Back Office"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "PropDesk"

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_LOGIN_PATH: str = _API_LOGIN_PATH
    API_TOKEN: str = _API_TOKEN  # Optional bearer token, sent when set
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Timing
    REDIRECT_DELAY_MS: int = _REDIRECT_DELAY_MS
    SEARCH_DEBOUNCE_MS: int = _SEARCH_DEBOUNCE_MS
    TOAST_DURATION_MS: int = _TOAST_DURATION_MS

    # Bulk customer import
    MAX_UPLOAD_BYTES: int = _MAX_UPLOAD_MB * 1024 * 1024
    UPLOAD_MIME_TYPES: tuple = (
        "text/csv",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    UPLOAD_FILE_FILTER: str = "Customer files (*.csv *.xlsx)"
    TEMPLATE_FILE_NAME: str = "customers.csv"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1100
    WINDOW_MIN_HEIGHT: int = 760
    SIDEBAR_WIDTH: int = 220
    FONT_SIZE: int = 10

    # Branding Colors
    PRIMARY_COLOR: str = "#0072BC"
    ACCENT_COLOR: str = "#FDB714"
    TEXT_COLOR: str = "#2C3E50"
    TEXT_LIGHT: str = "#5D6D7E"
    BACKGROUND_COLOR: str = "#F0F7FF"
    CARD_BACKGROUND: str = "#FFFFFF"
    BORDER_COLOR: str = "#D5DCE6"
    SUCCESS_COLOR: str = "#27AE60"
    WARNING_COLOR: str = "#F39C12"
    ERROR_COLOR: str = "#E74C3C"

    # Currency shown next to invoice totals
    CURRENCY: str = "KES"


# Navigation targets
class Routes:
    LOGIN = "/login"
    ONBOARDING = "/add-customer"
    BULK_IMPORT = "/upload-customers"
    CREATE_INVOICE = "/create-invoice"
    METER_READING = "/meter-reading"
    CUSTOMERS = "/customers"
    CUSTOMER_DETAILS = "/customer-details"

    @classmethod
    def customer_details(cls, customer_id: str) -> str:
        return f"{cls.CUSTOMER_DETAILS}/{customer_id}"

    @classmethod
    def meter_reading(cls, reading_id: str) -> str:
        return f"{cls.METER_READING}/{reading_id}"

    @staticmethod
    def split(route: str):
        """Split '/customer-details/c1' into ('/customer-details', 'c1')."""
        parts = route.rstrip("/").split("/")
        if len(parts) > 2:
            return "/".join(parts[:-1]), parts[-1]
        return route, None


# Controlled vocabularies
class Vocabularies:
    # Unit statuses reported by the buildings API
    UNIT_STATUS = [
        ("VACANT", "Vacant"),
        ("OCCUPIED", "Occupied"),
        ("OCCUPIED_PENDING_PAYMENT", "Occupied (pending payment)"),
        ("UNDER_MAINTENANCE", "Under maintenance"),
    ]

    # A customer cannot be assigned to a unit in one of these statuses
    OCCUPIED_UNIT_STATUSES = ("OCCUPIED", "OCCUPIED_PENDING_PAYMENT")

    # Utility reading type -> endpoint
    UTILITY_TYPES = [
        ("water", "Water", "/water-reading"),
        ("gas", "Gas", "/gas-reading"),
    ]

    @classmethod
    def utility_endpoint(cls, utility_type: str) -> str:
        for code, _, endpoint in cls.UTILITY_TYPES:
            if code == utility_type:
                return endpoint
        raise ValueError(f"Unknown utility type: {utility_type}")

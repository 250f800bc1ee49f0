# -*- coding: utf-8 -*-
"""
PropDesk API Client
===================

Thin wrapper over the property-management REST backend.

Every call goes through one `requests.Session` so the backend's session
cookie, set at sign-in, travels with each request. Failures are raised as
`ApiException` (the server answered with an error status) or
`NetworkException` (no answer at all).
"""

import json as _json
import mimetypes
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are loaded from Config (which reads .env).

    Example .env:
        API_BASE_URL=https://taqa.co.ke/api
        API_TIMEOUT=30
    """
    base_url: str = None
    timeout: int = None
    token: str = None
    verify_ssl: bool = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class PropertyApiClient:
    """
    Client for the property-management backend.

    Usage:
        client = PropertyApiClient(ApiConfig())
        buildings = client.get_buildings()
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if config.token:
            self.set_access_token(config.token)

        if not config.verify_ssl:
            # Self-signed certificates in local backends
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def set_access_token(self, token: Optional[str]):
        """Send `Authorization: Bearer <token>` with every request (None clears it)."""
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        else:
            self.session.headers.pop("Authorization", None)

    def clear_session(self):
        """Forget cookies and token (used on sign-out and on 401)."""
        self.session.cookies.clear()
        self.set_access_token(None)

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        files: Optional[Dict] = None,
        raw: bool = False
    ) -> Any:
        """
        Perform one HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/customers")
            json_data: JSON payload
            params: Query parameters
            files: Multipart parts, passed to requests as-is
            raw: Return the response body as bytes instead of decoded JSON

        Returns:
            Response JSON data (None for an empty body), or bytes when raw
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {_json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                files=files,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            logger.info(f"[API RES] {response.status_code} {endpoint}")

            if raw:
                return response.content

            result = None
            if response.text:
                result = response.json()
                res_str = _json.dumps(result, ensure_ascii=False, default=str)
                if len(res_str) > 1000:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    # ==================== Authentication ====================

    def login(self, email: str, password: str, path: Optional[str] = None) -> Dict[str, Any]:
        """Sign in; the backend answers with `{user, token?}` and sets a session cookie."""
        from app.config import Config

        data = self._request("POST", path or Config.API_LOGIN_PATH,
                             json_data={"email": email, "password": password}) or {}
        token = data.get("token") or data.get("accessToken")
        if token:
            self.set_access_token(token)
        logger.info(f"Signed in as {email}")
        return data

    # ==================== Buildings ====================

    def get_buildings(self) -> List[Dict[str, Any]]:
        """GET /buildings?minimal=true -> list of {id, buildingName, landlord}."""
        data = self._request("GET", "/buildings", params={"minimal": "true"}) or {}
        buildings = data.get("buildings", []) if isinstance(data, dict) else data
        return buildings if isinstance(buildings, list) else []

    def get_building(self, building_id: str) -> Dict[str, Any]:
        """GET /buildings/{id} -> building with `units`."""
        return self._request("GET", f"/buildings/{building_id}") or {}

    # ==================== Customers ====================

    def create_customer(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST /customers -> {data: {id, ...}, message}."""
        return self._request("POST", "/customers", json_data=payload) or {}

    def get_customer_details(self, customer_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/customer-details/{customer_id}") or {}

    def search_customer_by_phone(self, phone: str) -> Dict[str, Any]:
        """Exact phone lookup; a miss is a 404."""
        return self._request("GET", "/search-customer-by-phone", params={"phone": phone}) or {}

    def search_customer_by_name(self, name: str) -> List[Dict[str, Any]]:
        data = self._request("GET", "/search-customer-by-name", params={"name": name})
        return data if isinstance(data, list) else []

    def upload_customers(self, file_path: str, building_id: str) -> Dict[str, Any]:
        """
        Bulk import customers via multipart/form-data.

        Endpoint: POST /upload-customers-withbuildingId
        Parts: `file` (the CSV/XLSX) and `buildingId`.
        """
        if not file_path or not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        file_name = os.path.basename(file_path)
        mime_type = mimetypes.guess_type(file_path)[0] or "application/octet-stream"
        logger.info(f"Uploading customers file: {file_name} ({mime_type}) for building {building_id}")

        with open(file_path, "rb") as f:
            files = {
                "file": (file_name, f, mime_type),
                "buildingId": (None, str(building_id)),
            }
            return self._request("POST", "/upload-customers-withbuildingId", files=files) or {}

    def download_customer_template(self, template_name: str = "customers.csv") -> bytes:
        """GET /templates/{name} -> file bytes."""
        return self._request("GET", f"/templates/{template_name}", raw=True)

    # ==================== Invoices ====================

    def create_onboarding_invoice(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/customer-onboarding-invoice", json_data=payload) or {}

    def create_invoice(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/create-invoice", json_data=payload) or {}

    def generate_invoices_for_all(self) -> Dict[str, Any]:
        return self._request("POST", "/generate-invoices-for-all", json_data={}) or {}

    # ==================== Meter readings ====================

    def create_utility_reading(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST one reading to /water-reading or /gas-reading."""
        return self._request("POST", endpoint, json_data=payload) or {}

    def get_meter_reading(self, reading_id: str, tenant_id: Optional[str] = None) -> Dict[str, Any]:
        params = {"tenantId": tenant_id} if tenant_id else None
        return self._request("GET", f"/meter-reading/{reading_id}", params=params) or {}

    def update_meter_reading_review(self, reading_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """PUT /meter-reading/{id} with {reviewed, reviewNotes, resolved}."""
        return self._request("PUT", f"/meter-reading/{reading_id}", json_data=payload) or {}

    def update_meter_reading_values(self, reading_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """PUT /meter-reading/{id}/values with {reading, consumption, meterPhotoUrl}."""
        return self._request("PUT", f"/meter-reading/{reading_id}/values", json_data=payload) or {}


# ==================== Singleton Instance ====================

_api_client_instance: Optional[PropertyApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> PropertyApiClient:
    """
    Shared PropertyApiClient instance.

    Args:
        config: API settings (only used the first time)
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = PropertyApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (tests)."""
    global _api_client_instance
    _api_client_instance = None

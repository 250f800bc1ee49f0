# -*- coding: utf-8 -*-
"""
Tests for PropertyApiClient.

The transport is a real requests.Session whose `request` method is
mocked, so URL building, status handling and payloads are exercised
without a network.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from services.api_client import ApiConfig, PropertyApiClient
from services.exceptions import ApiException, NetworkException


def make_response(status_code: int = 200, body=None, content: bytes = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://api.test"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = content or b""
    response.encoding = "utf-8"
    return response


@pytest.fixture
def http():
    session = requests.Session()
    session.request = MagicMock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def client(http):
    config = ApiConfig(base_url="https://api.test/", timeout=5, token="", verify_ssl=True)
    return PropertyApiClient(config, session=http)


def last_call(http):
    return http.request.call_args.kwargs


class TestTransport:

    def test_base_url_is_joined(self, client, http):
        http.request.return_value = make_response(200, {"buildings": []})
        client.get_buildings()

        call = last_call(http)
        assert call["method"] == "GET"
        assert call["url"] == "https://api.test/buildings"
        assert call["params"] == {"minimal": "true"}
        assert call["timeout"] == 5

    def test_http_error_raises_api_exception(self, client, http):
        http.request.return_value = make_response(401, {"message": "jwt expired"})

        with pytest.raises(ApiException) as exc_info:
            client.create_customer({"firstName": "Jane"})

        assert exc_info.value.status_code == 401
        assert exc_info.value.server_message == "jwt expired"
        assert exc_info.value.is_unauthorized

    def test_error_body_without_json(self, client, http):
        http.request.return_value = make_response(500, content=b"<html>oops</html>")

        with pytest.raises(ApiException) as exc_info:
            client.generate_invoices_for_all()

        assert exc_info.value.status_code == 500
        assert exc_info.value.response_data == {}

    def test_connection_error_raises_network_exception(self, client, http):
        http.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(NetworkException):
            client.get_buildings()

    def test_timeout_raises_network_exception(self, client, http):
        http.request.side_effect = requests.exceptions.Timeout("slow")

        with pytest.raises(NetworkException):
            client.get_building("b1")

    def test_empty_body(self, client, http):
        http.request.return_value = make_response(204, content=b"")
        assert client.update_meter_reading_review("m1", {"reviewed": True}) == {}


class TestSession:

    def test_login_sets_bearer_token(self, client, http):
        http.request.return_value = make_response(200, {"user": {"id": "u1"}, "token": "abc"})

        data = client.login("admin@example.com", "secret")

        assert data["user"]["id"] == "u1"
        assert last_call(http)["json"] == {"email": "admin@example.com", "password": "secret"}
        assert last_call(http)["url"] == "https://api.test/signin"
        assert http.headers["Authorization"] == "Bearer abc"

    def test_clear_session(self, client, http):
        client.set_access_token("abc")
        http.cookies.set("session", "xyz")

        client.clear_session()

        assert "Authorization" not in http.headers
        assert len(http.cookies) == 0


class TestEndpoints:

    def test_get_buildings_unwraps_list(self, client, http):
        http.request.return_value = make_response(200, {"buildings": [{"id": "b1"}]})
        assert client.get_buildings() == [{"id": "b1"}]

    def test_create_customer(self, client, http):
        http.request.return_value = make_response(201, {"data": {"id": "c1"}, "message": "ok"})

        response = client.create_customer({"firstName": "Jane", "unitId": None})

        assert response["data"]["id"] == "c1"
        call = last_call(http)
        assert (call["method"], call["url"]) == ("POST", "https://api.test/customers")
        assert call["json"] == {"firstName": "Jane", "unitId": None}

    def test_utility_reading_endpoint(self, client, http):
        client.create_utility_reading("/gas-reading", {"customerId": "c1", "reading": 4.0})
        assert last_call(http)["url"] == "https://api.test/gas-reading"

    def test_meter_reading_scoped_to_tenant(self, client, http):
        http.request.return_value = make_response(200, {"data": {"id": "m1"}})

        client.get_meter_reading("m1", "t1")

        call = last_call(http)
        assert call["url"] == "https://api.test/meter-reading/m1"
        assert call["params"] == {"tenantId": "t1"}

    def test_meter_reading_values(self, client, http):
        client.update_meter_reading_values("m1", {"reading": 1.0})
        call = last_call(http)
        assert (call["method"], call["url"]) == ("PUT", "https://api.test/meter-reading/m1/values")

    def test_search_by_name_returns_list(self, client, http):
        http.request.return_value = make_response(200, [{"id": "c1"}])
        assert client.search_customer_by_name("Jane") == [{"id": "c1"}]
        assert last_call(http)["params"] == {"name": "Jane"}

    def test_search_by_name_non_list(self, client, http):
        http.request.return_value = make_response(200, {"message": "none"})
        assert client.search_customer_by_name("Jane") == []


class TestBulkUpload:

    def test_multipart_parts(self, client, http, tmp_path):
        path = tmp_path / "customers.csv"
        path.write_bytes(b"firstName,lastName\nJane,Doe\n")
        http.request.return_value = make_response(200, {"message": "Uploaded", "errors": []})

        response = client.upload_customers(str(path), "b1")

        assert response["message"] == "Uploaded"
        call = last_call(http)
        assert call["url"] == "https://api.test/upload-customers-withbuildingId"
        assert call["json"] is None
        file_name, _, mime_type = call["files"]["file"]
        assert file_name == "customers.csv"
        assert mime_type == "text/csv"
        assert call["files"]["buildingId"] == (None, "b1")

    def test_missing_file(self, client, http):
        with pytest.raises(ValueError):
            client.upload_customers("/no/such/file.csv", "b1")
        http.request.assert_not_called()

    def test_download_template_returns_bytes(self, client, http):
        http.request.return_value = make_response(200, content=b"firstName,lastName\n")

        content = client.download_customer_template("customers.csv")

        assert content == b"firstName,lastName\n"
        assert last_call(http)["url"] == "https://api.test/templates/customers.csv"

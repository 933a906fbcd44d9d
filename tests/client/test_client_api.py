"""Тесты HTTP-клиента SalesDataClient."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests

from sales_dashboard.client.api import SalesDataClient
from sales_dashboard.core.exceptions import (
    ApiError,
    PayloadValidationError,
    RecordNotFoundError,
)
from sales_dashboard.schemas.sales_data import SalesDataPayload

BASE_URL = "http://api.test/api"

RECORD_JSON = {
    "id": 1,
    "product_name": "Widget",
    "q1_sales": "10.00",
    "q2_sales": "20.00",
    "q3_sales": "0.00",
    "q4_sales": "5.00",
    "target": "50.00",
    "created_at": "2024-03-21T10:00:00",
    "updated_at": "2024-03-21T10:00:00",
}


def make_response(status_code: int, body: object = None) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "Error"
    if body is None:
        response.json.side_effect = ValueError("no body")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def http() -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(http: MagicMock) -> SalesDataClient:
    return SalesDataClient(base_url=BASE_URL + "/", session=http, timeout=3)


def test_sets_json_headers(client: SalesDataClient, http: MagicMock) -> None:
    assert http.headers["Accept"] == "application/json"
    assert http.headers["Content-Type"] == "application/json"


def test_list_records_parses_models(client: SalesDataClient, http: MagicMock) -> None:
    http.request.return_value = make_response(200, {"data": [RECORD_JSON]})

    records = client.list_records()

    http.request.assert_called_once_with("GET", f"{BASE_URL}/sales-data", timeout=3)
    assert records[0].id == 1
    assert records[0].q1_sales == Decimal("10.00")


def test_create_sends_json_payload(client: SalesDataClient, http: MagicMock) -> None:
    http.request.return_value = make_response(
        201, {"data": RECORD_JSON, "message": "Sales data created successfully"}
    )
    payload = SalesDataPayload(
        product_name="Widget",
        q1_sales=Decimal("10"),
        q2_sales=Decimal("20"),
        q3_sales=Decimal("0"),
        q4_sales=Decimal("5"),
        target=Decimal("50"),
    )

    record = client.create_record(payload)

    _, kwargs = http.request.call_args
    assert kwargs["json"]["product_name"] == "Widget"
    assert Decimal(kwargs["json"]["q1_sales"]) == Decimal("10")
    assert record.product_name == "Widget"


def test_validation_errors_raised_with_field_map(
    client: SalesDataClient, http: MagicMock
) -> None:
    http.request.return_value = make_response(
        422, {"errors": {"target": "Target is required."}}
    )

    with pytest.raises(PayloadValidationError) as exc_info:
        client.list_records()

    assert exc_info.value.errors == {"target": "Target is required."}


def test_not_found_on_delete(client: SalesDataClient, http: MagicMock) -> None:
    http.request.return_value = make_response(
        404, {"error": "Sales data not found", "message": "missing"}
    )

    with pytest.raises(RecordNotFoundError) as exc_info:
        client.delete_record(5)

    assert exc_info.value.record_id == 5


def test_server_error_becomes_api_error(
    client: SalesDataClient, http: MagicMock
) -> None:
    http.request.return_value = make_response(
        500, {"error": "Failed to fetch sales data", "message": "database is down"}
    )

    with pytest.raises(ApiError) as exc_info:
        client.list_records()

    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "database is down"


def test_non_json_error_body(client: SalesDataClient, http: MagicMock) -> None:
    http.request.return_value = make_response(502)

    with pytest.raises(ApiError, match="Error"):
        client.list_records()


def test_transport_failure_becomes_api_error(
    client: SalesDataClient, http: MagicMock
) -> None:
    http.request.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ApiError, match="connection refused") as exc_info:
        client.list_records()

    assert exc_info.value.status_code is None


def test_success_with_non_json_body_becomes_api_error(
    client: SalesDataClient, http: MagicMock
) -> None:
    response = make_response(200)
    response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
    http.request.return_value = response

    with pytest.raises(ApiError) as exc_info:
        client.list_records()

    assert exc_info.value.status_code == 200

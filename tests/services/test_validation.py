"""Тесты проверки входящих данных."""

from decimal import Decimal

import pytest

from sales_dashboard.core.exceptions import PayloadValidationError
from sales_dashboard.services.validation import collect_violations, parse_sales_payload


def test_valid_payload_has_no_violations(payload: dict[str, object]) -> None:
    assert collect_violations(payload) == {}


def test_parse_converts_amounts_to_decimal(payload: dict[str, object]) -> None:
    data = parse_sales_payload(payload)

    assert data.product_name == "Widget"
    assert data.q1_sales == Decimal("100.50")
    assert data.q3_sales == Decimal("300.25")
    assert data.target == Decimal("750.00")


def test_amounts_rounded_to_cents(payload: dict[str, object]) -> None:
    payload["q1_sales"] = "10.005"

    assert parse_sales_payload(payload).q1_sales == Decimal("10.01")


def test_product_name_is_trimmed(payload: dict[str, object]) -> None:
    payload["product_name"] = "  Widget  "

    assert parse_sales_payload(payload).product_name == "Widget"


def test_empty_payload_reports_every_field() -> None:
    errors = collect_violations({})

    assert errors == {
        "product_name": "Product name is required.",
        "q1_sales": "Q1 sales is required.",
        "q2_sales": "Q2 sales is required.",
        "q3_sales": "Q3 sales is required.",
        "q4_sales": "Q4 sales is required.",
        "target": "Target is required.",
    }


def test_all_violations_collected_not_just_first(payload: dict[str, object]) -> None:
    payload.update(product_name="   ", q2_sales=-1, target="abc")

    errors = collect_violations(payload)

    assert set(errors) == {"product_name", "q2_sales", "target"}
    assert errors["product_name"] == "Product name is required."
    assert errors["q2_sales"] == "Q2 sales must be a non-negative number."
    assert errors["target"] == "Target must be a non-negative number."


@pytest.mark.parametrize("value", [None, "", "  "])
def test_blank_amount_counts_as_missing(
    payload: dict[str, object], value: object
) -> None:
    payload["q4_sales"] = value

    assert collect_violations(payload) == {"q4_sales": "Q4 sales is required."}


@pytest.mark.parametrize("value", ["NaN", "inf", [1], "1e400"])
def test_non_finite_or_malformed_amount_rejected(
    payload: dict[str, object], value: object
) -> None:
    payload["q1_sales"] = value

    assert "q1_sales" in collect_violations(payload)


def test_amount_above_column_precision_rejected(payload: dict[str, object]) -> None:
    payload["target"] = "10000000000"

    assert collect_violations(payload) == {
        "target": "Target may not be greater than 9999999999.99."
    }


def test_zero_is_allowed(payload: dict[str, object]) -> None:
    payload.update(q1_sales=0, q2_sales="0", q3_sales=0.0, q4_sales=0, target=0)

    assert collect_violations(payload) == {}


def test_product_name_length_limit(payload: dict[str, object]) -> None:
    payload["product_name"] = "x" * 255
    assert collect_violations(payload) == {}

    payload["product_name"] = "x" * 256
    assert collect_violations(payload) == {
        "product_name": "Product name may not be greater than 255 characters."
    }


def test_product_name_must_be_string(payload: dict[str, object]) -> None:
    payload["product_name"] = 42

    assert collect_violations(payload) == {
        "product_name": "Product name must be a string."
    }


def test_extra_fields_are_ignored(payload: dict[str, object]) -> None:
    payload["id"] = 999
    payload["created_at"] = "yesterday"

    assert collect_violations(payload) == {}


@pytest.mark.parametrize("raw", [None, [], "Widget", 5])
def test_non_mapping_payload_reported_not_raised(raw: object) -> None:
    assert collect_violations(raw) == {
        "payload": "The request body must be a JSON object."
    }


def test_parse_raises_with_all_errors() -> None:
    with pytest.raises(PayloadValidationError) as exc_info:
        parse_sales_payload({"product_name": "Widget"})

    assert set(exc_info.value.errors) == {
        "q1_sales",
        "q2_sales",
        "q3_sales",
        "q4_sales",
        "target",
    }


@pytest.mark.parametrize("value", ["-0", "-0.00", -0.0])
def test_negative_zero_normalized(payload: dict[str, object], value: object) -> None:
    payload["q1_sales"] = value

    amount = parse_sales_payload(payload).q1_sales

    assert str(amount) == "0.00"
    assert not amount.is_signed()

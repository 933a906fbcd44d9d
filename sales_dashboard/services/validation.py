"""Проверка входящих данных записи о продажах."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from sales_dashboard.core.exceptions import PayloadValidationError
from sales_dashboard.schemas.sales_data import (
    MAX_AMOUNT,
    PRODUCT_NAME_MAX_LENGTH,
    SalesDataPayload,
)

FIELD_LABELS = {
    "product_name": "Product name",
    "q1_sales": "Q1 sales",
    "q2_sales": "Q2 sales",
    "q3_sales": "Q3 sales",
    "q4_sales": "Q4 sales",
    "target": "Target",
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _describe(field: str, error: ErrorDetails) -> str:
    """Переводит ошибку pydantic в понятное пользователю сообщение."""
    label = FIELD_LABELS[field]
    kind = error["type"]
    if kind == "missing" or _is_blank(error.get("input")):
        return f"{label} is required."
    if field == "product_name":
        if kind == "string_too_long":
            return (
                f"{label} may not be greater than "
                f"{PRODUCT_NAME_MAX_LENGTH} characters."
            )
        return f"{label} must be a string."
    if kind == "less_than_equal":
        return f"{label} may not be greater than {MAX_AMOUNT}."
    return f"{label} must be a non-negative number."


def _check(raw: Any) -> tuple[SalesDataPayload | None, dict[str, str]]:
    if not isinstance(raw, Mapping):
        return None, {"payload": "The request body must be a JSON object."}
    try:
        return SalesDataPayload.model_validate(dict(raw)), {}
    except ValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "payload"
            if field not in FIELD_LABELS:
                continue
            # Одно сообщение на поле, как в форме на клиенте
            errors.setdefault(field, _describe(field, error))
        return None, errors


def collect_violations(raw: Any) -> dict[str, str]:
    """
    Проверяет все поля записи и собирает все нарушения.

    Args:
        raw: Данные из запроса (обычно словарь из JSON).

    Returns:
        Словарь "поле -> сообщение"; пустой, если данные корректны.
    """
    _, errors = _check(raw)
    return errors


def parse_sales_payload(raw: Any) -> SalesDataPayload:
    """
    Превращает сырые данные запроса в типизированную структуру.

    Args:
        raw: Данные из запроса.

    Returns:
        Проверенный объект SalesDataPayload.

    Raises:
        PayloadValidationError: Если хотя бы одно поле некорректно.
    """
    payload, errors = _check(raw)
    if payload is None:
        raise PayloadValidationError(errors)
    return payload

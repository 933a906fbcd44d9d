"""Состояние формы добавления/редактирования записи."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from sales_dashboard.schemas.sales_data import BUSINESS_FIELDS, SalesDataPayload
from sales_dashboard.services.validation import collect_violations, parse_sales_payload


@dataclass(frozen=True)
class Idle:
    """Форма пуста или заполняется для новой записи."""


@dataclass(frozen=True)
class Editing:
    """Форма заполнена данными существующей записи."""

    record_id: int


@dataclass(frozen=True)
class Submitting:
    """Данные отправлены, ждем ответа сервера."""

    record_id: int | None


FormMode = Idle | Editing | Submitting


def _empty_fields() -> dict[str, str]:
    return {name: "" for name in BUSINESS_FIELDS}


@dataclass(frozen=True)
class FormState:
    """
    Неизменяемое состояние формы: режим, значения полей и ошибки по полям.
    """

    mode: FormMode = field(default_factory=Idle)
    fields: Mapping[str, str] = field(default_factory=_empty_fields)
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def record_id(self) -> int | None:
        if isinstance(self.mode, Idle):
            return None
        return self.mode.record_id

    @property
    def is_submitting(self) -> bool:
        return isinstance(self.mode, Submitting)


def reset_form() -> FormState:
    """Пустая форма для новой записи."""
    return FormState()


def start_editing(state: FormState, record: Any) -> FormState:
    """
    Заполняет форму значениями записи и переходит в режим Editing.

    Во время отправки состояние не меняется.
    """
    if state.is_submitting:
        return state
    return FormState(
        mode=Editing(record.id),
        fields={name: str(getattr(record, name)) for name in BUSINESS_FIELDS},
    )


def change_field(state: FormState, name: str, value: str) -> FormState:
    """
    Меняет значение поля и убирает ошибку, показанную для него.

    Raises:
        ValueError: Если поле неизвестно.
    """
    if name not in BUSINESS_FIELDS:
        raise ValueError(f"Unknown form field: {name}")
    if state.is_submitting:
        return state
    errors = {k: v for k, v in state.errors.items() if k != name}
    return replace(state, fields={**state.fields, name: value}, errors=errors)


def begin_submit(state: FormState) -> FormState:
    """
    Проверяет поля формы. При ошибках остается в текущем режиме
    с ошибками по полям, иначе переходит в Submitting.
    """
    if state.is_submitting:
        return state
    errors = collect_violations(state.fields)
    if errors:
        return replace(state, errors=errors)
    return replace(state, mode=Submitting(state.record_id), errors={})


def submit_payload(state: FormState) -> SalesDataPayload:
    """Типизированные данные формы для отправки на сервер."""
    return parse_sales_payload(state.fields)


def submit_succeeded(state: FormState) -> FormState:
    return reset_form()


def submit_failed(
    state: FormState, errors: Mapping[str, str] | None = None
) -> FormState:
    """Возвращает форму в режим до отправки, с ошибками от сервера."""
    record_id = state.record_id
    mode: FormMode = Idle() if record_id is None else Editing(record_id)
    return replace(state, mode=mode, errors=dict(errors or {}))

"""Исключения предметной области."""


class SalesDataError(Exception):
    """Базовое исключение для операций с данными продаж."""


class PayloadValidationError(SalesDataError):
    """
    Данные запроса не прошли проверку.

    Атрибуты:
        errors: Сообщения об ошибках по именам полей.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("The given data was invalid.")
        self.errors = errors


class RecordNotFoundError(SalesDataError):
    """Запись с указанным ID не существует."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Sales record with ID {record_id} not found.")
        self.record_id = record_id


class StorageError(SalesDataError):
    """Хранилище недоступно или операция с ним завершилась ошибкой."""


class ApiError(SalesDataError):
    """Ошибка при обращении клиента к HTTP API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

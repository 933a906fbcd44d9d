"""HTTP-клиент для API данных продаж."""

import logging
from typing import Any

import requests

from sales_dashboard.core.config import settings
from sales_dashboard.core.exceptions import (
    ApiError,
    PayloadValidationError,
    RecordNotFoundError,
)
from sales_dashboard.schemas.sales_data import SalesDataPayload, SalesRecordRead

logger = logging.getLogger(__name__)


class SalesDataClient:
    """
    Обертка над requests.Session для эндпоинтов /sales-data.

    Args:
        base_url: Адрес API, например http://127.0.0.1:8000/api.
        session: Готовая сессия requests (по умолчанию создается новая).
        timeout: Таймаут одного запроса в секундах.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.CLIENT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.CLIENT_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )

    def _request(
        self, method: str, path: str, record_id: int | None = None, **kwargs: Any
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("API Error: %s %s failed: %s", method, url, e)
            raise ApiError(str(e)) from e

        if response.ok:
            try:
                return response.json()
            except ValueError as e:
                logger.error("API Error: %s %s returned a non-JSON body", method, url)
                raise ApiError(
                    "The server returned an unreadable response.",
                    status_code=response.status_code,
                ) from e

        logger.error("API Error: %s %s -> %s", method, url, response.status_code)
        body = self._error_body(response)
        if response.status_code == 422:
            raise PayloadValidationError(body.get("errors") or {})
        if response.status_code == 404 and record_id is not None:
            raise RecordNotFoundError(record_id)
        message = body.get("message") or body.get("error") or response.reason
        raise ApiError(str(message), status_code=response.status_code)

    @staticmethod
    def _error_body(response: requests.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def list_records(self) -> list[SalesRecordRead]:
        """Загружает все записи."""
        body = self._request("GET", "/sales-data")
        return [SalesRecordRead.model_validate(item) for item in body.get("data", [])]

    def create_record(self, payload: SalesDataPayload) -> SalesRecordRead:
        """Создает запись и возвращает ее в том виде, в каком она сохранена."""
        body = self._request(
            "POST", "/sales-data", json=payload.model_dump(mode="json")
        )
        return SalesRecordRead.model_validate(body["data"])

    def update_record(
        self, record_id: int, payload: SalesDataPayload
    ) -> SalesRecordRead:
        """Целиком заменяет запись."""
        body = self._request(
            "PUT",
            f"/sales-data/{record_id}",
            record_id=record_id,
            json=payload.model_dump(mode="json"),
        )
        return SalesRecordRead.model_validate(body["data"])

    def delete_record(self, record_id: int) -> None:
        """Удаляет запись."""
        self._request("DELETE", f"/sales-data/{record_id}", record_id=record_id)

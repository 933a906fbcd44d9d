"""Клиентская логика панели: загрузка данных, форма и диаграмма."""

import logging
from collections.abc import Callable
from decimal import Decimal

from sales_dashboard.charts.transform import (
    ChartMode,
    ChartPoint,
    build_chart_data,
    chart_scale,
)
from sales_dashboard.client import form_state
from sales_dashboard.client.api import SalesDataClient
from sales_dashboard.core.exceptions import PayloadValidationError, SalesDataError
from sales_dashboard.schemas.sales_data import SalesRecordRead

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load sales data. Please check your connection and try again."
SAVE_FAILED = "Failed to save record. Please try again."
DELETE_FAILED = "Failed to delete record. Please try again."


class SalesDashboard:
    """
    Держит последнее успешно загруженное состояние таблицы.

    После любого изменения данные загружаются заново целиком, без
    локального слияния. Ошибки сети и хранилища попадают в banner,
    ошибки проверки полей в form.errors.
    """

    def __init__(
        self,
        client: SalesDataClient,
        chart_mode: ChartMode | str = ChartMode.QUARTERLY,
    ) -> None:
        self.client = client
        self.chart_mode = ChartMode(chart_mode)
        self.records: list[SalesRecordRead] = []
        self.form = form_state.reset_form()
        self.banner: str | None = None
        self.loading = False

    def refresh(self) -> bool:
        """Загружает все записи заново."""
        self.loading = True
        self.banner = None
        try:
            self.records = self.client.list_records()
        except SalesDataError:
            logger.exception("Error fetching sales data")
            self.banner = LOAD_FAILED
            return False
        finally:
            self.loading = False
        return True

    def dismiss_banner(self) -> None:
        self.banner = None

    def edit(self, record_id: int) -> None:
        """
        Открывает запись на редактирование.

        Raises:
            KeyError: Если записи нет среди загруженных.
        """
        for record in self.records:
            if record.id == record_id:
                self.form = form_state.start_editing(self.form, record)
                return
        raise KeyError(record_id)

    def change_field(self, name: str, value: str) -> None:
        self.form = form_state.change_field(self.form, name, value)

    def cancel_edit(self) -> None:
        self.form = form_state.reset_form()

    def submit(self) -> bool:
        """
        Отправляет форму: создает новую запись или обновляет редактируемую.

        Returns:
            True, если запись сохранена и данные перезагружены.
        """
        self.form = form_state.begin_submit(self.form)
        if not self.form.is_submitting:
            return False

        payload = form_state.submit_payload(self.form)
        record_id = self.form.record_id
        try:
            if record_id is None:
                self.client.create_record(payload)
            else:
                self.client.update_record(record_id, payload)
        except PayloadValidationError as e:
            self.form = form_state.submit_failed(self.form, e.errors)
            return False
        except Exception:
            # Форма не должна застрять в Submitting при любой ошибке
            logger.exception("Error saving sales data")
            self.form = form_state.submit_failed(self.form)
            self.banner = SAVE_FAILED
            return False

        self.form = form_state.submit_succeeded(self.form)
        self.refresh()
        return True

    def delete(self, record_id: int, confirm: Callable[[], bool]) -> bool:
        """
        Удаляет запись, только если confirm() вернул True.

        Returns:
            True, если запись удалена.
        """
        if not confirm():
            return False

        try:
            self.client.delete_record(record_id)
        except SalesDataError:
            logger.exception("Error deleting sales data")
            self.banner = DELETE_FAILED
            return False

        if self.form.record_id == record_id and not self.form.is_submitting:
            self.form = form_state.reset_form()
        self.refresh()
        return True

    def set_chart_mode(self, mode: ChartMode | str) -> None:
        self.chart_mode = ChartMode(mode)

    def chart_data(self) -> list[ChartPoint]:
        return build_chart_data(self.records, self.chart_mode)

    def chart_scale(self) -> Decimal:
        return chart_scale(self.chart_data(), self.chart_mode)

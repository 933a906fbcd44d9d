"""Сервисный слой для управления записями о продажах."""

import datetime
import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from sales_dashboard.core.exceptions import RecordNotFoundError, StorageError
from sales_dashboard.db.models import MAX_RECORD_ID, SalesRecord, utcnow
from sales_dashboard.schemas.sales_data import SalesDataPayload

logger = logging.getLogger(__name__)


async def list_sales_records(session: AsyncSession) -> Sequence[SalesRecord]:
    """
    Возвращает все записи о продажах.

    Args:
        session: Сессия базы данных.

    Returns:
        Последовательность объектов SalesRecord, упорядоченных по ID.

    Raises:
        StorageError: Если база данных недоступна.
    """
    statement = select(SalesRecord).order_by(SalesRecord.id)  # type: ignore[arg-type]
    try:
        result = await session.execute(statement)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(str(e)) from e
    return result.scalars().all()


async def get_sales_record(session: AsyncSession, record_id: int) -> SalesRecord:
    """
    Находит запись по ID.

    Raises:
        RecordNotFoundError: Если записи нет.
        StorageError: Если база данных недоступна.
    """
    # Такой ID драйвер не примет (переполнение), а записи с ним быть не может
    if not 1 <= record_id <= MAX_RECORD_ID:
        raise RecordNotFoundError(record_id)
    try:
        db_record = await session.get(SalesRecord, record_id)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(str(e)) from e
    if db_record is None:
        raise RecordNotFoundError(record_id)
    return db_record


async def create_sales_record(
    session: AsyncSession, payload: SalesDataPayload
) -> SalesRecord:
    """
    Создает новую запись о продажах.

    Args:
        session: Сессия базы данных.
        payload: Проверенные данные записи.

    Returns:
        Созданная запись с присвоенным ID и временными метками.

    Raises:
        StorageError: Если запись не удалось сохранить. Транзакция
                      откатывается, частично сохраненных данных не остается.
    """
    now = utcnow()
    db_record = SalesRecord(**payload.model_dump(), created_at=now, updated_at=now)
    session.add(db_record)
    try:
        await session.commit()
        await session.refresh(db_record)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(str(e)) from e

    logger.info("Created sales record %s (%s)", db_record.id, db_record.product_name)
    return db_record


async def update_sales_record(
    session: AsyncSession, record_id: int, payload: SalesDataPayload
) -> SalesRecord:
    """
    Заменяет все бизнес-поля существующей записи.

    Args:
        session: Сессия базы данных.
        record_id: ID записи для обновления.
        payload: Новые значения всех шести полей.

    Returns:
        Обновленный объект SalesRecord.

    Raises:
        RecordNotFoundError: Если записи с таким ID нет.
        StorageError: Если изменения не удалось сохранить.
    """
    db_record = await get_sales_record(session, record_id)

    for field, value in payload.model_dump().items():
        setattr(db_record, field, value)
    # updated_at должен строго возрастать даже при очень частых обновлениях
    db_record.updated_at = max(
        utcnow(), db_record.updated_at + datetime.timedelta(microseconds=1)
    )
    session.add(db_record)
    try:
        await session.commit()
        await session.refresh(db_record)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(str(e)) from e

    logger.info("Updated sales record %s", record_id)
    return db_record


async def delete_sales_record(session: AsyncSession, record_id: int) -> None:
    """
    Безвозвратно удаляет запись.

    Raises:
        RecordNotFoundError: Если записи с таким ID нет.
        StorageError: Если удаление не удалось.
    """
    db_record = await get_sales_record(session, record_id)

    try:
        await session.delete(db_record)
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(str(e)) from e

    logger.info("Deleted sales record %s", record_id)

"""Модели базы данных проекта."""

import datetime
from decimal import Decimal

from sqlmodel import Field, SQLModel

# Верхняя граница INTEGER в PostgreSQL; больших ID в таблице быть не может
MAX_RECORD_ID = 2**31 - 1


def utcnow() -> datetime.datetime:
    """Текущее время в UTC без tzinfo (так оно хранится в БД)."""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


class SalesRecord(SQLModel, table=True):
    """Модель записи о продажах товара по кварталам."""

    __tablename__ = "sales_data"

    id: int | None = Field(default=None, primary_key=True)
    product_name: str = Field(max_length=255)
    q1_sales: Decimal = Field(max_digits=12, decimal_places=2)
    q2_sales: Decimal = Field(max_digits=12, decimal_places=2)
    q3_sales: Decimal = Field(max_digits=12, decimal_places=2)
    q4_sales: Decimal = Field(max_digits=12, decimal_places=2)
    target: Decimal = Field(max_digits=12, decimal_places=2)
    created_at: datetime.datetime = Field(default_factory=utcnow)
    updated_at: datetime.datetime = Field(default_factory=utcnow)

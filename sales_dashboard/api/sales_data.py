"""HTTP-эндпоинты для CRUD-операций над данными продаж."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from sales_dashboard.core.exceptions import (
    PayloadValidationError,
    RecordNotFoundError,
)
from sales_dashboard.db.models import SalesRecord
from sales_dashboard.db.session import get_db_session
from sales_dashboard.schemas.sales_data import SalesRecordRead
from sales_dashboard.services import sales_service, validation

router = APIRouter(prefix="/sales-data", tags=["sales-data"])

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
# Тело принимается как есть: проверка и сообщения об ошибках на нашей стороне
RawPayload = Annotated[Any, Body()]


def _serialize(record: SalesRecord) -> dict[str, Any]:
    return SalesRecordRead.model_validate(record).model_dump(mode="json")


def _failure(error: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": error, "message": str(exc)},
    )


def _invalid(exc: PayloadValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"errors": exc.errors},
    )


def _not_found(exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Sales data not found", "message": str(exc)},
    )


@router.get("")
async def list_sales_data(session: SessionDep) -> JSONResponse:
    """
    Возвращает все записи о продажах.
    """
    try:
        records = await sales_service.list_sales_records(session)
    except Exception as e:
        logging.exception("Error in list_sales_data")
        return _failure("Failed to fetch sales data", e)

    return JSONResponse(content={"data": [_serialize(r) for r in records]})


@router.post("")
async def create_sales_data(
    session: SessionDep, payload: RawPayload = None
) -> JSONResponse:
    """
    Проверяет данные и создает новую запись.
    """
    try:
        data = validation.parse_sales_payload(payload)
    except PayloadValidationError as e:
        return _invalid(e)

    try:
        record = await sales_service.create_sales_record(session, data)
    except Exception as e:
        logging.exception("Error in create_sales_data")
        return _failure("Failed to create sales data", e)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "data": _serialize(record),
            "message": "Sales data created successfully",
        },
    )


@router.put("/{record_id}")
async def update_sales_data(
    record_id: int, session: SessionDep, payload: RawPayload = None
) -> JSONResponse:
    """
    Проверяет данные и целиком заменяет существующую запись.
    """
    try:
        data = validation.parse_sales_payload(payload)
    except PayloadValidationError as e:
        return _invalid(e)

    try:
        record = await sales_service.update_sales_record(session, record_id, data)
    except RecordNotFoundError as e:
        return _not_found(e)
    except Exception as e:
        logging.exception("Error in update_sales_data")
        return _failure("Failed to update sales data", e)

    return JSONResponse(
        content={
            "data": _serialize(record),
            "message": "Sales data updated successfully",
        },
    )


@router.delete("/{record_id}")
async def delete_sales_data(record_id: int, session: SessionDep) -> JSONResponse:
    """
    Удаляет запись без возможности восстановления.
    """
    try:
        await sales_service.delete_sales_record(session, record_id)
    except RecordNotFoundError as e:
        return _not_found(e)
    except Exception as e:
        logging.exception("Error in delete_sales_data")
        return _failure("Failed to delete sales data", e)

    return JSONResponse(content={"message": "Sales data deleted successfully"})

"""Главный файл приложения. Точка входа."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from sales_dashboard.api import sales_data
from sales_dashboard.core.config import settings
from sales_dashboard.core.logging import setup_logging
from sales_dashboard.db import models  # noqa: F401
from sales_dashboard.db.session import async_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер для управления жизненным циклом приложения.
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting sales dashboard API")

    if settings.DB_CREATE_ALL:
        logger.info("Creating database tables (DB_CREATE_ALL is enabled)")
        async with async_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    logger.info("Startup complete, routes mounted under %r", settings.API_PREFIX)

    yield

    logger.info("Shutting down, disposing database engine")
    await async_engine.dispose()


# --- Приложение FastAPI ---
app = FastAPI(title="Sales Dashboard API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(sales_data.router, prefix=settings.API_PREFIX)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Приводит ошибки разбора запроса (битый JSON, нечисловой ID)
    к тому же формату {"errors": {...}}, что и проверка полей.
    """
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        key = str(loc[-1]) if loc and loc[0] == "path" else "payload"
        errors.setdefault(key, error.get("msg", "Invalid request."))
    return JSONResponse(status_code=422, content={"errors": errors})


@app.get("/health")
async def health() -> dict[str, str]:
    """Проверка доступности сервиса."""
    return {"status": "ok"}


# --- Точка входа для локального запуска ---
if __name__ == "__main__":
    uvicorn.run(
        "sales_dashboard.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
    )

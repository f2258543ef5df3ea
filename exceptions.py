"""
Исключения приложения и обработчики ошибок FastAPI.

Любая ошибка уходит клиенту как JSON {"message": ...}; трассировка
пишется только в лог сервера.
"""
import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Базовое исключение приложения."""
    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CsvIngestError(AppError):
    """CSV пустой или в нём нет строки заголовков."""
    pass


class BatchIdExhaustedError(AppError):
    """Все batchId из допустимого диапазона заняты."""
    pass


def format_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "query", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else error.get("msg", ""))
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(f"HTTP {exc.status_code} на {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc.errors())
    logger.warning(f"Некорректный запрос на {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"message": message},
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Необработанная ошибка на {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error"},
    )

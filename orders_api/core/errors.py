# orders_api/core/errors.py
"""
Иерархия ошибок сервиса и их регистрация в FastAPI.
Любая ошибка отдаётся клиенту как JSON с полем message.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from orders_api.common.constants import ErrorMessage
from orders_api.common.logger import log_error, log_warning


class OrdersApiError(Exception):
    """Базовая ошибка сервиса."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class NotFoundError(OrdersApiError):
    """Заказ или пользователь не найден."""
    http_status = status.HTTP_404_NOT_FOUND


class InvalidInputError(OrdersApiError):
    """Некорректные входные данные (например, формат даты)."""
    http_status = status.HTTP_400_BAD_REQUEST


class OrderNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(ErrorMessage.ORDER_NOT_FOUND.value)


class UserNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(ErrorMessage.USER_NOT_FOUND.value)


class InvalidDateFormatError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__(ErrorMessage.INVALID_DATE_FORMAT.value)


# =============================================================================
# ОБРАБОТЧИКИ ОШИБОК
# =============================================================================

def register_error_handlers(app: FastAPI) -> None:
    """Регистрирует глобальные обработчики ошибок приложения."""

    @app.exception_handler(OrdersApiError)
    async def orders_api_error_handler(request: Request, exc: OrdersApiError) -> JSONResponse:
        await log_warning(
            f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}",
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        await log_warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        await log_error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": ErrorMessage.INTERNAL_ERROR.value},
        )


def build_validation_error_response(exc: RequestValidationError) -> dict[str, Any]:
    """Формирует тело ответа для ошибок валидации тела запроса."""
    return {
        "message": ErrorMessage.INVALID_REQUEST.value,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }

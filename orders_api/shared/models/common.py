# orders_api/shared/models/common.py
"""
Общие модели ответов.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Ответ с ошибкой: 404 / 400 / 500."""

    message: str


class ValidationErrorDetail(BaseModel):
    field: str
    message: str
    type: str


class ValidationErrorResponse(MessageResponse):
    """Ответ 400 при невалидном теле запроса."""

    details: list[ValidationErrorDetail] = Field(default_factory=list)


class HealthStatus(BaseModel):
    """Статус здоровья сервиса."""

    status: str = "ok"
    service: str

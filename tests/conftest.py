# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

# Переменные окружения должны быть заданы до импорта модулей приложения
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "colored")

from orders_api.app import create_app
from orders_api.infra.database import MockDatabaseClient
from orders_api.shared.models.order_dto import OrderDTO
from orders_api.shared.models.user_dto import UserDTO


FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# ФИКСТУРЫ ДАННЫХ
# =============================================================================

@pytest.fixture
def sample_users_data() -> list[dict[str, Any]]:
    """Пользователи тестового хранилища."""
    return [
        {"id": "u1", "balance": 100.0},
        {"id": "u2", "balance": 50.0},
    ]


@pytest.fixture
def sample_orders_data() -> list[dict[str, Any]]:
    """Заказы тестового хранилища."""
    return [
        {
            "id": 1,
            "userId": "u1",
            "products": [{"name": "Pen", "price": 10, "count": 2}],
            "createdAt": "2022-12-31T00:00:00Z",
        },
        {
            "id": 2,
            "userId": "u1",
            "products": [{"name": "Paper", "price": 5, "count": 2}],
            "createdAt": "2023-06-01T12:00:00Z",
        },
        {
            "id": 3,
            "userId": "u2",
            "products": [],
            "createdAt": "2023-02-01T00:00:00Z",
        },
    ]


# =============================================================================
# ФИКСТУРЫ ИНФРАСТРУКТУРЫ
# =============================================================================

@pytest.fixture
def fixed_now() -> datetime:
    """Время, которое хранилище присваивает новым заказам."""
    return FIXED_NOW


@pytest.fixture
def database(
    sample_users_data: list[dict[str, Any]],
    sample_orders_data: list[dict[str, Any]],
    fixed_now: datetime,
) -> MockDatabaseClient:
    """Свежее in-memory хранилище с фиксированным временем."""
    return MockDatabaseClient(
        users=[UserDTO.model_validate(u) for u in sample_users_data],
        orders=[OrderDTO.model_validate(o) for o in sample_orders_data],
        clock=lambda: fixed_now,
    )


@pytest.fixture
def client(database: MockDatabaseClient) -> Generator[TestClient, None, None]:
    """HTTP-клиент приложения поверх тестового хранилища."""
    with TestClient(create_app(database=database)) as test_client:
        yield test_client

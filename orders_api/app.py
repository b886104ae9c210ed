# orders_api/app.py
"""
Фабрика FastAPI-приложения.
Хранилище передаётся явно (или создаётся из настроек) и кладётся в app.state.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from orders_api.common.constants import SERVICE_NAME, TypeMsg
from orders_api.common.logger import log_info
from orders_api.config import Settings, settings as default_settings
from orders_api.core.errors import register_error_handlers
from orders_api.infra.database import OrdersDatabase, create_database
from orders_api.services.orders_service.routes import router as orders_router
from orders_api.services.users_service.routes import router as users_router
from orders_api.shared.models.common import HealthStatus


def create_app(
    database: Optional[OrdersDatabase] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Собирает приложение.

    Args:
        database: Хранилище; если не передано, создаётся in-memory
            (с демо-данными, если включён SEED_DEMO_DATA)
        settings: Настройки; по умолчанию — из config.json
    """
    settings = settings or default_settings
    if database is None:
        database = create_database(seed=settings.store.SEED_DEMO_DATA)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await log_info(
            f"Starting {settings.system.PROJECT_NAME} v{settings.system.VERSION} "
            f"({settings.system.ENVIRONMENT})",
            type_msg=TypeMsg.INFO,
        )
        yield
        await log_info(f"Shutting down {settings.system.PROJECT_NAME}", type_msg=TypeMsg.INFO)

    app = FastAPI(
        title="Orders API",
        description="Orders CRUD and user balance calculations",
        version=settings.system.VERSION,
        docs_url=settings.server.DOCS_URL,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.database = database

    register_error_handlers(app)

    app.include_router(orders_router)
    app.include_router(users_router)

    @app.get("/health", response_model=HealthStatus, tags=["health"])
    async def health_check():
        return HealthStatus(service=SERVICE_NAME)

    return app


app = create_app()

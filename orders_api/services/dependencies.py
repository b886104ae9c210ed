from fastapi import Request

from orders_api.infra.database import OrdersDatabase


def get_database(request: Request) -> OrdersDatabase:
    """Хранилище, созданное фабрикой приложения."""
    return request.app.state.database

# orders_api/infra/__init__.py
"""
Инфраструктурный слой: доступ к данным.
"""

from orders_api.infra.database import MockDatabaseClient, OrdersDatabase, create_database

__all__ = [
    "MockDatabaseClient",
    "OrdersDatabase",
    "create_database",
]

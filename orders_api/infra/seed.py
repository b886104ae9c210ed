# orders_api/infra/seed.py
"""
Демо-данные для in-memory хранилища.
"""

from __future__ import annotations

from orders_api.shared.models.order_dto import OrderDTO
from orders_api.shared.models.user_dto import UserDTO


_USERS = [
    {"id": "user-1", "balance": 100.0},
    {"id": "user-2", "balance": 250.5},
    {"id": "user-3", "balance": 0.0},
]

_ORDERS = [
    {
        "id": 1,
        "userId": "user-1",
        "products": [
            {"name": "Coffee", "price": 3.5, "count": 2},
            {"name": "Croissant", "price": 2.25, "count": 1},
        ],
        "createdAt": "2023-01-15T09:30:00Z",
    },
    {
        "id": 2,
        "userId": "user-1",
        "products": [{"name": "Notebook", "price": 12.99, "count": 3}],
        "createdAt": "2023-03-02T14:00:00Z",
    },
    {
        "id": 3,
        "userId": "user-2",
        "products": [{"name": "Headphones", "price": 79.9, "count": 1}],
        "createdAt": "2022-11-20T18:45:00Z",
    },
]


def demo_users() -> list[UserDTO]:
    return [UserDTO.model_validate(user) for user in _USERS]


def demo_orders() -> list[OrderDTO]:
    return [OrderDTO.model_validate(order) for order in _ORDERS]

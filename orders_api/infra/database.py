# orders_api/infra/database.py
"""
Слой доступа к данным.

OrdersDatabase — контракт хранилища, который используют сервисы.
MockDatabaseClient — in-memory реализация без долговечности. Экземпляр
создаётся фабрикой приложения и живёт в app.state, глобального состояния нет.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional, Protocol

from orders_api.shared.models.order_dto import OrderDTO, ProductDTO
from orders_api.shared.models.user_dto import UserDTO


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrdersDatabase(Protocol):
    """Контракт хранилища заказов и пользователей."""

    async def get_orders(self) -> list[OrderDTO]: ...

    async def get_order_by_id(self, order_id: Optional[int]) -> Optional[OrderDTO]: ...

    async def create_order(self, user_id: str, products: list[ProductDTO]) -> OrderDTO: ...

    async def update_order(
        self, order_id: Optional[int], changes: dict[str, Any],
    ) -> Optional[OrderDTO]: ...

    async def delete_order(self, order_id: Optional[int]) -> bool: ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserDTO]: ...

    async def get_user_orders_after_date(self, user_id: str, date: datetime) -> list[OrderDTO]: ...


class MockDatabaseClient:
    """
    In-memory хранилище.

    Методы — корутины без точек ожидания внутри, поэтому каждый вызов
    атомарен относительно других запросов в том же event loop.
    ID заказов выдаются последовательно и не переиспользуются после удаления.
    """

    # Поля заказа, которые нельзя менять через update_order
    _IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

    def __init__(
        self,
        users: Iterable[UserDTO] = (),
        orders: Iterable[OrderDTO] = (),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Args:
            users: Начальный набор пользователей
            orders: Начальный набор заказов
            clock: Источник времени для created_at новых заказов
        """
        self._users: dict[str, UserDTO] = {user.id: user for user in users}
        self._orders: list[OrderDTO] = list(orders)
        self._clock = clock
        self._next_id = max((order.id for order in self._orders), default=0) + 1

    def _find_index(self, order_id: Optional[int]) -> Optional[int]:
        if order_id is None:
            return None
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                return index
        return None

    async def get_orders(self) -> list[OrderDTO]:
        return list(self._orders)

    async def get_order_by_id(self, order_id: Optional[int]) -> Optional[OrderDTO]:
        index = self._find_index(order_id)
        return None if index is None else self._orders[index]

    async def create_order(self, user_id: str, products: list[ProductDTO]) -> OrderDTO:
        order = OrderDTO(
            id=self._next_id,
            user_id=user_id,
            products=products,
            created_at=self._clock(),
        )
        self._next_id += 1
        self._orders.append(order)
        return order

    async def update_order(
        self, order_id: Optional[int], changes: dict[str, Any],
    ) -> Optional[OrderDTO]:
        """Сливает changes с существующим заказом. None, если заказа нет."""
        index = self._find_index(order_id)
        if index is None:
            return None

        current = self._orders[index]
        allowed = {k: v for k, v in changes.items() if k not in self._IMMUTABLE_FIELDS}
        updated = OrderDTO.model_validate({**current.model_dump(), **allowed})
        self._orders[index] = updated
        return updated

    async def delete_order(self, order_id: Optional[int]) -> bool:
        index = self._find_index(order_id)
        if index is None:
            return False
        del self._orders[index]
        return True

    async def get_user_by_id(self, user_id: str) -> Optional[UserDTO]:
        return self._users.get(user_id)

    async def get_user_orders_after_date(self, user_id: str, date: datetime) -> list[OrderDTO]:
        """Заказы пользователя, созданные строго позже date."""
        return [
            order for order in self._orders
            if order.user_id == user_id and order.created_at > date
        ]


def create_database(seed: bool = False) -> MockDatabaseClient:
    """Создаёт хранилище, при необходимости с демо-данными."""
    if not seed:
        return MockDatabaseClient()

    from orders_api.infra.seed import demo_orders, demo_users

    return MockDatabaseClient(users=demo_users(), orders=demo_orders())

from datetime import datetime
from typing import Optional

from orders_api.common.logger import log_debug
from orders_api.core.billing import balance_with_orders
from orders_api.infra.database import OrdersDatabase
from orders_api.shared.models.user_dto import UserDTO


class UserService:
    def __init__(self, database: OrdersDatabase):
        self.database = database

    async def get_user(self, user_id: str) -> Optional[UserDTO]:
        return await self.database.get_user_by_id(user_id)

    async def get_balance_by_date(self, user_id: str, date: datetime) -> Optional[float]:
        """
        Баланс пользователя плюс сумма его заказов, созданных строго после date.
        Возвращает None, если пользователя нет.
        """
        user = await self.get_user(user_id)
        if user is None:
            await log_debug(f"User {user_id} not found")
            return None

        orders = await self.database.get_user_orders_after_date(user_id, date)
        balance = balance_with_orders(user.balance, orders)

        await log_debug(
            f"Balance for user {user_id} after {date.isoformat()}: {balance}",
            extra={"orders_count": len(orders)},
        )
        return balance

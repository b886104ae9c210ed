from typing import List, Optional

from orders_api.common.logger import log_debug, log_info
from orders_api.core.billing import order_total
from orders_api.infra.database import OrdersDatabase
from orders_api.shared.models.order_dto import CreateOrderRequest, OrderDTO, UpdateOrderRequest


class OrderService:
    def __init__(self, database: OrdersDatabase):
        self.database = database

    async def list_orders(self) -> List[OrderDTO]:
        return await self.database.get_orders()

    async def get_order(self, order_id: Optional[int]) -> Optional[OrderDTO]:
        order = await self.database.get_order_by_id(order_id)
        if order is None:
            await log_debug(f"Order {order_id} not found")
        return order

    async def get_order_total(self, order_id: Optional[int]) -> Optional[float]:
        """Sum of price * count over the order's products, None if there is no such order."""
        order = await self.get_order(order_id)
        if order is None:
            return None
        return order_total(order.products)

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        order = await self.database.create_order(request.user_id, request.products)
        await log_info(
            f"Created order {order.id} for user {order.user_id}",
            extra={"order_id": order.id, "products": len(order.products)},
        )
        return order

    async def update_order(
        self, order_id: Optional[int], request: UpdateOrderRequest
    ) -> Optional[OrderDTO]:
        """Merges the supplied fields into the order; fields not sent are kept."""
        changes = request.to_changes()
        order = await self.database.update_order(order_id, changes)
        if order is None:
            await log_debug(f"Order {order_id} not found, nothing to update")
            return None

        await log_info(f"Updated order {order.id}: {sorted(changes)}")
        return order

    async def delete_order(self, order_id: Optional[int]) -> bool:
        deleted = await self.database.delete_order(order_id)
        if deleted:
            await log_info(f"Deleted order {order_id}")
        else:
            await log_debug(f"Order {order_id} not found, nothing to delete")
        return deleted

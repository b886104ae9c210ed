# orders_api/shared/models/__init__.py
from orders_api.shared.models.common import HealthStatus, MessageResponse, ValidationErrorResponse
from orders_api.shared.models.order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderTotalResponse,
    ProductDTO,
    UpdateOrderRequest,
)
from orders_api.shared.models.user_dto import BalanceResponse, UserDTO

__all__ = [
    "HealthStatus",
    "MessageResponse",
    "ValidationErrorResponse",
    "CreateOrderRequest",
    "OrderDTO",
    "OrderTotalResponse",
    "ProductDTO",
    "UpdateOrderRequest",
    "BalanceResponse",
    "UserDTO",
]

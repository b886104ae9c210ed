from fastapi import Request

from orders_api.services.dependencies import get_database
from orders_api.services.orders_service.service import OrderService


def get_order_service(request: Request) -> OrderService:
    return OrderService(get_database(request))

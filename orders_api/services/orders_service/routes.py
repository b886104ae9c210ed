from typing import List

from fastapi import APIRouter, Depends, Response, status

from orders_api.core.errors import OrderNotFoundError
from orders_api.core.validation import parse_int
from orders_api.services.orders_service.dependencies import get_order_service
from orders_api.services.orders_service.service import OrderService
from orders_api.shared.models.common import MessageResponse, ValidationErrorResponse
from orders_api.shared.models.order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderTotalResponse,
    UpdateOrderRequest,
)

router = APIRouter(prefix="/orders", tags=["orders"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}

# Order ids arrive as raw path strings and are parsed like parseInt:
# "12abc" -> 12, "abc" -> no id at all, which simply matches no order.


@router.get("", response_model=List[OrderDTO])
async def list_orders(service: OrderService = Depends(get_order_service)):
    return await service.list_orders()


@router.get("/{order_id}", response_model=OrderDTO, responses=NOT_FOUND)
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)):
    order = await service.get_order(parse_int(order_id))
    if order is None:
        raise OrderNotFoundError()
    return order


# 201 on a read is kept for compatibility with existing clients
@router.get(
    "/{order_id}/order-total",
    response_model=OrderTotalResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def get_order_total(order_id: str, service: OrderService = Depends(get_order_service)):
    total = await service.get_order_total(parse_int(order_id))
    if total is None:
        raise OrderNotFoundError()
    return OrderTotalResponse(total=total)


@router.post(
    "",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_order(
    request: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
):
    return await service.create_order(request)


# Same 201 for updates
@router.put(
    "/{order_id}",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_order(
    order_id: str,
    request: UpdateOrderRequest,
    service: OrderService = Depends(get_order_service),
):
    order = await service.update_order(parse_int(order_id), request)
    if order is None:
        raise OrderNotFoundError()
    return order


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)):
    if not await service.delete_order(parse_int(order_id)):
        raise OrderNotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

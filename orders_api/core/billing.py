# orders_api/core/billing.py
"""
Денежные расчёты: сумма заказа и баланс пользователя.
Баланс считается в минимальных единицах (центах), чтобы сумма
не накапливала ошибку плавающей точки.
"""

from __future__ import annotations

from typing import Iterable

from orders_api.common.constants import MINOR_UNITS_PER_MAJOR
from orders_api.shared.models.order_dto import OrderDTO, ProductDTO


def to_minor_units(amount: float) -> int:
    """
    Переводит сумму в центы с округлением до целого цента.

    Цена округляется до умножения на count, поэтому для цен с долями цента
    (например, 0.015) баланс отличается от точного price × 100 × count.
    """
    return round(amount * MINOR_UNITS_PER_MAJOR)


def order_total(products: Iterable[ProductDTO]) -> float:
    """Сумма заказа: price × count по всем позициям. Пустой заказ — 0."""
    return sum((product.price * product.count for product in products), 0.0)


def order_total_minor(products: Iterable[ProductDTO]) -> int:
    """Сумма заказа в центах."""
    return sum(to_minor_units(product.price) * product.count for product in products)


def balance_with_orders(balance: float, orders: Iterable[OrderDTO]) -> float:
    """
    Баланс пользователя с учётом заказов.

    Args:
        balance: Текущий баланс в основных единицах
        orders: Заказы, которые нужно прибавить

    Returns:
        Итоговый баланс в основных единицах
    """
    total = sum(order_total_minor(order.products) for order in orders)
    return (total + to_minor_units(balance)) / MINOR_UNITS_PER_MAJOR

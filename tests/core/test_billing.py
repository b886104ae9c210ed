# tests/core/test_billing.py
"""
Тесты денежных расчётов (orders_api/core/billing.py).
"""

from __future__ import annotations

from datetime import datetime, timezone

from orders_api.core.billing import (
    balance_with_orders,
    order_total,
    order_total_minor,
    to_minor_units,
)
from orders_api.shared.models.order_dto import OrderDTO, ProductDTO


def _order(*products: tuple[float, int]) -> OrderDTO:
    return OrderDTO(
        id=1,
        user_id="u1",
        products=[ProductDTO(price=price, count=count) for price, count in products],
        created_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
    )


class TestOrderTotal:
    """Сумма заказа."""

    def test_sum_of_price_times_count(self) -> None:
        order = _order((10, 2), (2.5, 4))

        assert order_total(order.products) == 30

    def test_empty_order(self) -> None:
        assert order_total([]) == 0


class TestMinorUnits:
    """Перевод в центы."""

    def test_to_minor_units_rounds(self) -> None:
        assert to_minor_units(0.1) == 10
        assert to_minor_units(19.99) == 1999
        assert to_minor_units(0.29) == 29

    def test_order_total_minor(self) -> None:
        order = _order((0.1, 3), (1.25, 2))

        assert order_total_minor(order.products) == 280

    def test_price_rounded_before_count(self) -> None:
        # 0.125 -> 12 центов (банковское округление), затем × 4
        order = _order((0.125, 4))

        assert order_total_minor(order.products) == 48
        assert balance_with_orders(0, [order]) == 0.48


class TestBalanceWithOrders:
    """Баланс с учётом заказов."""

    def test_adds_orders(self) -> None:
        assert balance_with_orders(100.0, [_order((5, 2))]) == 110.0

    def test_no_orders(self) -> None:
        assert balance_with_orders(42.42, []) == 42.42

    def test_many_small_amounts(self) -> None:
        orders = [_order((0.1, 1)) for _ in range(10)]

        assert balance_with_orders(0.0, orders) == 1.0

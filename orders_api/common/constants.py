# orders_api/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorMessage(str, Enum):
    """Тексты ошибок, которые отдаются клиенту в поле message."""
    ORDER_NOT_FOUND = "Order not found"
    USER_NOT_FOUND = "User not found"
    INVALID_DATE_FORMAT = "Invalid date format."
    INVALID_REQUEST = "Invalid request data"
    INTERNAL_ERROR = "Internal server error"


# Денежные суммы считаются в минимальных единицах (центах)
MINOR_UNITS_PER_MAJOR = 100

SERVICE_NAME = "orders_api"

# Верхние границы позиции заказа
MAX_PRODUCT_PRICE = 1_000_000_000.0
MAX_PRODUCT_COUNT = 1_000_000

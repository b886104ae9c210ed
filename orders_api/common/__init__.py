# orders_api/common/__init__.py
"""
Общие утилиты, константы и логгер.
"""

from orders_api.common.logger import get_logger, log_info, log_error, log_warning, log_debug
from orders_api.common.constants import TypeMsg, ErrorMessage

__all__ = [
    "get_logger",
    "log_info",
    "log_error",
    "log_warning",
    "log_debug",
    "TypeMsg",
    "ErrorMessage",
]

# orders_api/shared/__init__.py
"""
Общие модели, которые используют все сервисы.
"""

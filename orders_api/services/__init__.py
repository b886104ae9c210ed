# orders_api/services/__init__.py
"""
HTTP-сервисы приложения.

Сервисы:
- orders_service: CRUD заказов и сумма заказа
- users_service: баланс пользователя на дату

Каждый сервис состоит из routes (HTTP), service (логика)
и dependencies (сборка зависимостей из app.state).
"""

__all__: list[str] = []

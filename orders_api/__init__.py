# orders_api/__init__.py
"""
Orders API — HTTP-сервис заказов и балансов пользователей.
"""

__version__ = "1.0.0"

from fastapi import Request

from orders_api.services.dependencies import get_database
from orders_api.services.users_service.service import UserService


def get_user_service(request: Request) -> UserService:
    return UserService(get_database(request))

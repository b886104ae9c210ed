from fastapi import APIRouter, Depends, status

from orders_api.core.errors import InvalidDateFormatError, UserNotFoundError
from orders_api.core.validation import is_valid_date_time_string, parse_date_time_string
from orders_api.services.users_service.dependencies import get_user_service
from orders_api.services.users_service.service import UserService
from orders_api.shared.models.common import MessageResponse
from orders_api.shared.models.user_dto import BalanceResponse

router = APIRouter(prefix="/users", tags=["users"])


# 201 on a read is kept for compatibility with existing clients
@router.get(
    "/{user_id}/balance-by-date/{date}",
    response_model=BalanceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    },
)
async def get_balance_by_date(
    user_id: str,
    date: str,
    service: UserService = Depends(get_user_service)
):
    """
    Balance of the user plus the total of their orders created after `date`.

    `date` uses the ISO-like date-time string format: `YYYY`, `YYYY-MM`,
    `YYYY-MM-DD`, optionally followed by `THH:mm[:ss[.sss]]` and `Z` or `±HH:mm`.
    Dates without an offset are treated as UTC.
    """
    # The format is checked before the user lookup
    if not is_valid_date_time_string(date):
        raise InvalidDateFormatError()

    balance = await service.get_balance_by_date(user_id, parse_date_time_string(date))
    if balance is None:
        raise UserNotFoundError()

    return BalanceResponse(balance=balance)

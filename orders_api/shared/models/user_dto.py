from pydantic import BaseModel, ConfigDict


class UserDTO(BaseModel):
    id: str
    # Баланс хранится в основных единицах валюты
    balance: float

    model_config = ConfigDict(from_attributes=True)


class BalanceResponse(BaseModel):
    balance: float

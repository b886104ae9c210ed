from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from orders_api.common.constants import MAX_PRODUCT_COUNT, MAX_PRODUCT_PRICE


class ProductDTO(BaseModel):
    """Позиция заказа. Дополнительные поля клиента сохраняются как есть."""

    price: float = Field(
        ..., allow_inf_nan=False, ge=-MAX_PRODUCT_PRICE, le=MAX_PRODUCT_PRICE,
    )
    count: int = Field(..., ge=1, le=MAX_PRODUCT_COUNT)

    model_config = ConfigDict(extra="allow")


class OrderDTO(BaseModel):
    id: int
    user_id: str = Field(..., alias="userId")
    products: List[ProductDTO] = Field(default_factory=list)
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class CreateOrderRequest(BaseModel):
    user_id: str = Field(..., alias="userId")
    products: List[ProductDTO]

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class UpdateOrderRequest(BaseModel):
    """Частичное обновление: меняются только переданные поля."""

    user_id: Optional[str] = Field(None, alias="userId")
    products: Optional[List[ProductDTO]] = None

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "UpdateOrderRequest":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Поля, которые клиент действительно передал."""
        return self.model_dump(exclude_unset=True)


class OrderTotalResponse(BaseModel):
    total: float

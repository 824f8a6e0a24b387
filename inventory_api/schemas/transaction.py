# inventory_api/schemas/transaction.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory_api.models.transaction import TransactionType
from inventory_api.schemas.common import MAX_PRICE, MAX_QUANTITY, to_money


class PurchaseCreate(BaseModel):
    product_id: int
    supplier_id: int
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY)
    price: Decimal = Field(..., gt=0, le=MAX_PRICE)
    notes: Optional[str] = None

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Decimal) -> Decimal:
        value = to_money(value)
        if value <= 0:
            raise ValueError("El precio debe ser mayor a 0")
        return value


class SaleCreate(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY)
    notes: Optional[str] = None


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: TransactionType
    product_id: Optional[int] = None
    product_name: str
    quantity: int
    price: Decimal
    total: Decimal
    user_id: int
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
    notes: Optional[str] = None
    date: datetime

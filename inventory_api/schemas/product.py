# inventory_api/schemas/product.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory_api.schemas.common import MAX_PRICE, MAX_QUANTITY, to_money


class ProductIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    product_number: str = Field(..., min_length=1, max_length=50)
    category_id: int
    stock: int = Field(0, ge=0, le=MAX_QUANTITY)
    price: Decimal = Field(..., ge=0, le=MAX_PRICE)
    description: Optional[str] = None
    image_url: Optional[str] = None
    expiration_date: Optional[date] = None

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Decimal) -> Decimal:
        return to_money(value)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    product_number: Optional[str] = Field(None, min_length=1, max_length=50)
    category_id: Optional[int] = None
    stock: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY)
    price: Optional[Decimal] = Field(None, ge=0, le=MAX_PRICE)
    description: Optional[str] = None
    image_url: Optional[str] = None
    expiration_date: Optional[date] = None

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        return to_money(value) if value is not None else None


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    product_number: str
    category_id: int
    stock: int
    price: Decimal
    description: Optional[str] = None
    image_url: Optional[str] = None
    expiration_date: Optional[date] = None
    notification_sent: bool
    created_at: Optional[datetime] = None

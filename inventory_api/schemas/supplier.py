# inventory_api/schemas/supplier.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SupplierIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=30)
    address: Optional[str] = None


class SupplierUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=3, max_length=100)
    phone_number: Optional[str] = Field(None, min_length=1, max_length=30)
    address: Optional[str] = None


class SupplierOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone_number: str
    address: Optional[str] = None
    created_at: Optional[datetime] = None

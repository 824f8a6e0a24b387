# inventory_api/models/transaction.py
import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.sql import func

from inventory_api.core.database import Base


class TransactionType(str, enum.Enum):
    purchase = "purchase"
    sale = "sale"


class Transaction(Base):
    """Compra o venta registrada. Los nombres se copian al momento del registro."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(Enum(TransactionType, name="transaction_type"), nullable=False, index=True)
    # SET NULL para conservar el historial si se elimina el producto
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), index=True)
    product_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), index=True)
    supplier_name = Column(String(100))
    notes = Column(Text)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

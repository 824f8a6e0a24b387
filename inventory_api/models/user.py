# inventory_api/models/user.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from inventory_api.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    phone_number = Column(String(30), nullable=False)
    role = Column(String(30), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

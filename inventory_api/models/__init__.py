from .user import User
from .category import Category
from .supplier import Supplier
from .product import Product
from .transaction import Transaction, TransactionType

__all__ = ["User", "Category", "Supplier", "Product", "Transaction", "TransactionType"]

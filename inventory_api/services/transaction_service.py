# inventory_api/services/transaction_service.py
"""
Registro de compras y ventas.

Cada operación actualiza el stock del producto e inserta la transacción en
un único commit: si algo falla, no queda ni el stock modificado ni la
transacción. El descuento de stock de una venta es un UPDATE condicionado a
``stock >= cantidad``, así que dos ventas concurrentes no pueden dejar el
stock en negativo aunque ambas hayan pasado la validación inicial.
"""
import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import (
    InsufficientStockError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from inventory_api.models.product import Product
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction, TransactionType
from inventory_api.schemas.common import MAX_QUANTITY, MAX_TOTAL, to_money
from inventory_api.schemas.transaction import PurchaseCreate, SaleCreate

logger = logging.getLogger(__name__)


def calculate_total(quantity: int, price: Decimal) -> Decimal:
    total = to_money(Decimal(quantity) * to_money(price))
    if total > MAX_TOTAL:
        raise ValidationError("El total excede el máximo permitido")
    return total


class TransactionService:

    def list_transactions(self, db: Session) -> List[Transaction]:
        """Todas las transacciones, más recientes primero"""
        stmt = select(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc())
        return list(db.scalars(stmt))

    def record_purchase(self, db: Session, payload: PurchaseCreate, user_id: int) -> Transaction:
        """Registrar compra: suma stock y guarda la transacción"""
        product = self._get_product(db, payload.product_id)

        supplier = db.get(Supplier, payload.supplier_id)
        if supplier is None:
            raise NotFoundError("Proveedor no encontrado")

        if product.stock + payload.quantity > MAX_QUANTITY:
            logger.warning(
                "Compra rechazada: producto=%s stock=%s cantidad=%s supera el máximo",
                product.id, product.stock, payload.quantity,
            )
            raise ValidationError("El stock resultante excede el máximo permitido")

        price = to_money(payload.price)
        transaction = Transaction(
            type=TransactionType.purchase,
            product_id=product.id,
            product_name=product.name,
            quantity=payload.quantity,
            price=price,
            total=calculate_total(payload.quantity, price),
            user_id=user_id,
            supplier_id=supplier.id,
            supplier_name=supplier.name,
            notes=payload.notes,
        )

        stmt = (
            update(Product)
            .where(Product.id == product.id)
            .values(stock=Product.stock + payload.quantity)
            .execution_options(synchronize_session=False)
        )
        self._apply(db, stmt, transaction, on_miss=NotFoundError("Producto no encontrado"))

        logger.info(
            "Compra registrada: producto=%s cantidad=%s total=%s usuario=%s",
            product.id, transaction.quantity, transaction.total, user_id,
        )
        return transaction

    def record_sale(self, db: Session, payload: SaleCreate, user_id: int) -> Transaction:
        """Registrar venta: valida stock, lo descuenta y guarda la transacción"""
        product = self._get_product(db, payload.product_id)

        if payload.quantity > product.stock:
            logger.warning(
                "Venta rechazada: producto=%s solicitado=%s disponible=%s",
                product.id, payload.quantity, product.stock,
            )
            raise InsufficientStockError("No hay suficiente stock disponible")

        price = to_money(product.price)
        transaction = Transaction(
            type=TransactionType.sale,
            product_id=product.id,
            product_name=product.name,
            quantity=payload.quantity,
            price=price,
            total=calculate_total(payload.quantity, price),
            user_id=user_id,
            notes=payload.notes,
        )

        # El stock pudo cambiar desde la lectura
        stmt = (
            update(Product)
            .where(Product.id == product.id, Product.stock >= payload.quantity)
            .values(stock=Product.stock - payload.quantity)
            .execution_options(synchronize_session=False)
        )
        self._apply(
            db, stmt, transaction,
            on_miss=InsufficientStockError("No hay suficiente stock disponible"),
        )

        logger.info(
            "Venta registrada: producto=%s cantidad=%s total=%s usuario=%s",
            product.id, transaction.quantity, transaction.total, user_id,
        )
        return transaction

    def _get_product(self, db: Session, product_id: int) -> Product:
        product = db.get(Product, product_id)
        if product is None:
            raise NotFoundError("Producto no encontrado")
        return product

    def _apply(self, db: Session, stock_update, transaction: Transaction, on_miss: Exception) -> None:
        """Actualizar stock e insertar la transacción en un solo commit"""
        try:
            result = db.execute(stock_update)
            if result.rowcount != 1:
                db.rollback()
                logger.warning("Actualización de stock sin efecto para producto %s", transaction.product_id)
                raise on_miss
            db.add(transaction)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("❌ Error guardando transacción de %s", transaction.type.value)
            raise StoreError() from exc
        db.refresh(transaction)


transaction_service = TransactionService()

# inventory_api/services/supplier_service.py
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import ConflictError, NotFoundError
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction
from inventory_api.schemas.supplier import SupplierIn, SupplierUpdate

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "El email ya existe para otro proveedor"


class SupplierService:

    def list_suppliers(self, db: Session) -> List[Supplier]:
        return list(db.scalars(select(Supplier).order_by(Supplier.name)))

    def get_supplier(self, db: Session, supplier_id: int) -> Supplier:
        supplier = db.get(Supplier, supplier_id)
        if supplier is None:
            raise NotFoundError("Proveedor no encontrado")
        return supplier

    def create_supplier(self, db: Session, data: SupplierIn) -> Supplier:
        if self._find_by_email(db, data.email):
            raise ConflictError(DUPLICATE_EMAIL)

        supplier = Supplier(**data.model_dump())
        db.add(supplier)
        self._commit(db)
        db.refresh(supplier)
        logger.info("Proveedor creado: %s", supplier.email)
        return supplier

    def update_supplier(self, db: Session, supplier_id: int, data: SupplierUpdate) -> Supplier:
        supplier = self.get_supplier(db, supplier_id)

        if data.email and data.email != supplier.email:
            if self._find_by_email(db, data.email, exclude_id=supplier.id):
                raise ConflictError(DUPLICATE_EMAIL)

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field != "address":
                continue
            setattr(supplier, field, value)

        self._commit(db)
        db.refresh(supplier)
        return supplier

    def delete_supplier(self, db: Session, supplier_id: int) -> None:
        """Eliminar proveedor si no tiene transacciones"""
        supplier = self.get_supplier(db, supplier_id)

        transactions_with_supplier = db.scalar(
            select(func.count()).select_from(Transaction).where(Transaction.supplier_id == supplier.id)
        )
        if transactions_with_supplier:
            raise ConflictError(
                "No se puede eliminar el proveedor. "
                f"Está asociado a {transactions_with_supplier} transacción(es)."
            )

        db.delete(supplier)
        db.commit()
        logger.info("Proveedor eliminado: %s", supplier_id)

    def _find_by_email(self, db: Session, email: str, exclude_id: Optional[int] = None) -> Optional[Supplier]:
        stmt = select(Supplier).where(Supplier.email == email)
        if exclude_id is not None:
            stmt = stmt.where(Supplier.id != exclude_id)
        return db.scalars(stmt).first()

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError(DUPLICATE_EMAIL) from exc


supplier_service = SupplierService()

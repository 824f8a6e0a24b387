# inventory_api/services/product_service.py
import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inventory_api.core.config import settings
from inventory_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from inventory_api.models.category import Category
from inventory_api.models.product import Product
from inventory_api.schemas.product import ProductIn, ProductUpdate

logger = logging.getLogger(__name__)

DUPLICATE_NUMBER = "El número de producto ya existe"


class ProductService:

    def list_products(self, db: Session) -> List[Product]:
        """Productos, más recientes primero"""
        stmt = select(Product).order_by(Product.created_at.desc(), Product.id.desc())
        return list(db.scalars(stmt))

    def list_expiring(self, db: Session, today: Optional[date] = None) -> List[Product]:
        """Productos que vencen dentro de la ventana y aún sin notificar"""
        today = today or date.today()
        limit = today + timedelta(days=settings.EXPIRING_WINDOW_DAYS)
        stmt = (
            select(Product)
            .where(
                Product.expiration_date.is_not(None),
                Product.expiration_date > today,
                Product.expiration_date <= limit,
                Product.notification_sent.is_(False),
            )
            .order_by(Product.expiration_date)
        )
        return list(db.scalars(stmt))

    def get_product(self, db: Session, product_id: int) -> Product:
        product = db.get(Product, product_id)
        if product is None:
            raise NotFoundError("Producto no encontrado")
        return product

    def create_product(self, db: Session, data: ProductIn) -> Product:
        self._ensure_category(db, data.category_id)
        if self._find_by_number(db, data.product_number):
            raise ConflictError(DUPLICATE_NUMBER)

        product = Product(**data.model_dump(), notification_sent=False)
        db.add(product)
        self._commit(db)
        db.refresh(product)
        logger.info("Producto creado: %s", product.product_number)
        return product

    def update_product(self, db: Session, product_id: int, data: ProductUpdate) -> Product:
        """Actualización parcial; solo se aplican los campos enviados"""
        if data.category_id is not None:
            self._ensure_category(db, data.category_id)
        if data.product_number and self._find_by_number(db, data.product_number, exclude_id=product_id):
            raise ConflictError(DUPLICATE_NUMBER)

        product = self.get_product(db, product_id)

        changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        for field, value in changes.items():
            setattr(product, field, value)
        if "expiration_date" in changes:
            # Nueva fecha, nueva notificación
            product.notification_sent = False

        self._commit(db)
        db.refresh(product)
        return product

    def delete_product(self, db: Session, product_id: int) -> None:
        product = self.get_product(db, product_id)
        db.delete(product)
        db.commit()
        logger.info("Producto eliminado: %s", product_id)

    def set_notification(self, db: Session, product_id: int, sent: bool) -> Product:
        product = self.get_product(db, product_id)
        product.notification_sent = sent
        db.commit()
        db.refresh(product)
        return product

    def _ensure_category(self, db: Session, category_id: int) -> None:
        if db.get(Category, category_id) is None:
            raise ValidationError("Categoría inválida")

    def _find_by_number(self, db: Session, product_number: str, exclude_id: Optional[int] = None) -> Optional[Product]:
        stmt = select(Product).where(Product.product_number == product_number)
        if exclude_id is not None:
            stmt = stmt.where(Product.id != exclude_id)
        return db.scalars(stmt).first()

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError(DUPLICATE_NUMBER) from exc


product_service = ProductService()

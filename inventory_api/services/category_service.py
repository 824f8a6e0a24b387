# inventory_api/services/category_service.py
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import ConflictError, NotFoundError
from inventory_api.models.category import Category
from inventory_api.models.product import Product
from inventory_api.schemas.category import CategoryIn

logger = logging.getLogger(__name__)


class CategoryService:

    def list_categories(self, db: Session) -> List[Category]:
        return list(db.scalars(select(Category).order_by(Category.name)))

    def get_category(self, db: Session, category_id: int) -> Category:
        category = db.get(Category, category_id)
        if category is None:
            raise NotFoundError("Categoría no encontrada")
        return category

    def create_category(self, db: Session, data: CategoryIn) -> Category:
        if self._find_by_name(db, data.name):
            raise ConflictError("La categoría ya existe")

        category = Category(name=data.name)
        db.add(category)
        self._commit(db)
        db.refresh(category)
        logger.info("Categoría creada: %s", category.name)
        return category

    def update_category(self, db: Session, category_id: int, data: CategoryIn) -> Category:
        category = self.get_category(db, category_id)

        if data.name != category.name:
            existing = self._find_by_name(db, data.name, exclude_id=category.id)
            if existing:
                raise ConflictError("Ya existe una categoría con ese nombre")

        category.name = data.name
        self._commit(db)
        db.refresh(category)
        return category

    def delete_category(self, db: Session, category_id: int) -> None:
        """Eliminar categoría si ningún producto la usa"""
        category = self.get_category(db, category_id)

        products_with_category = db.scalar(
            select(func.count()).select_from(Product).where(Product.category_id == category.id)
        )
        if products_with_category:
            raise ConflictError(
                f"No se puede eliminar la categoría. La usan {products_with_category} producto(s)."
            )

        db.delete(category)
        db.commit()
        logger.info("Categoría eliminada: %s", category_id)

    def _find_by_name(self, db: Session, name: str, exclude_id: Optional[int] = None) -> Optional[Category]:
        # Comparación sin distinguir mayúsculas
        stmt = select(Category).where(func.lower(Category.name) == name.lower())
        if exclude_id is not None:
            stmt = stmt.where(Category.id != exclude_id)
        return db.scalars(stmt).first()

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError("La categoría ya existe") from exc


category_service = CategoryService()

# scripts/init_data.py
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from inventory_api.core.database import SessionLocal, init_database
from inventory_api.core.exceptions import ConflictError
from inventory_api.core.logging_config import setup_logging
from inventory_api.schemas.category import CategoryIn
from inventory_api.schemas.user import UserRegister
from inventory_api.services.auth_service import auth_service
from inventory_api.services.category_service import category_service

logger = logging.getLogger("scripts.init_data")

DEFAULT_CATEGORIES = ["General", "Alimentos", "Limpieza"]


def create_initial_data():
    """Crear datos iniciales"""

    # Primero inicializar las tablas
    init_database()

    with SessionLocal() as db:
        try:
            auth_service.create_user(
                db,
                UserRegister(
                    name="Admin",
                    email="admin@inventario.com",
                    password="admin123",
                    phone_number="0000000000",
                    role="admin",
                ),
            )
            logger.info("✅ Usuario admin creado: admin@inventario.com / admin123")
        except ConflictError as e:
            logger.warning("⚠️ Usuario admin: %s", e)

        for name in DEFAULT_CATEGORIES:
            try:
                category_service.create_category(db, CategoryIn(name=name))
                logger.info("✅ Categoría creada: %s", name)
            except ConflictError as e:
                logger.warning("⚠️ Categoría %s: %s", name, e)


if __name__ == "__main__":
    setup_logging()
    create_initial_data()

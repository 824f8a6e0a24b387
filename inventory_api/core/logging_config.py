# inventory_api/core/logging_config.py
# Configuración de logging de la aplicación

import logging
import sys

from inventory_api.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: str = None) -> None:
    """Configurar el logger raíz una sola vez"""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel((level or settings.LOG_LEVEL).upper())

    # SQLAlchemy solo en modo debug
    if settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    _configured = True


def log_startup() -> None:
    """Registrar información de arranque"""
    logger = logging.getLogger("inventory_api")
    logger.info("=" * 60)
    logger.info("🚀 %s v%s", settings.PROJECT_NAME, settings.VERSION)
    logger.info("🌍 Entorno: %s", settings.ENVIRONMENT)
    logger.info("💾 Base de datos: %s", settings.DATABASE_URL[:50])
    logger.info("📚 Documentación: http://localhost:%s/docs", settings.PORT)
    logger.info("=" * 60)

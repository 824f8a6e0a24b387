# inventory_api/core/database.py
import logging
import os
import sqlite3
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from inventory_api.core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # FastAPI atiende endpoints síncronos en un threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def _ensure_sqlite_dir(url: str) -> None:
    if url.startswith("sqlite:///") and ":memory:" not in url:
        path = url.replace("sqlite:///", "")
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)


_ensure_sqlite_dir(settings.DATABASE_URL)

engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db() -> Generator[Session, None, None]:
    """Sesión de BD por request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_database(bind=None) -> None:
    """Crear tablas"""
    # Registrar los modelos en Base.metadata
    import inventory_api.models  # noqa: F401

    logger.info("🔧 Inicializando base de datos...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("✅ Tablas creadas correctamente")


def ping(db: Session) -> None:
    db.execute(text("SELECT 1"))

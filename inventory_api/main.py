# inventory_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.api.v1 import api_router
from inventory_api.core.config import settings
from inventory_api.core.database import get_db, init_database, ping
from inventory_api.core.exceptions import register_exception_handlers
from inventory_api.core.logging_config import log_startup, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    log_startup()
    yield


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        lifespan=lifespan,
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url="/docs",
        description="API de inventario: productos, categorías, proveedores, compras y ventas",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def root():
        return {
            "message": f"{settings.PROJECT_NAME} funcionando",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "docs": "/docs",
        }

    @app.get("/health")
    def health(db: Session = Depends(get_db)):
        try:
            ping(db)
            db_status = "connected"
        except SQLAlchemyError as e:
            logger.error("Health check sin base de datos: %s", e)
            db_status = f"error: {e}"
        return {"status": "healthy", "database": db_status, "version": settings.VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inventory_api.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=False,
    )

# inventory_api/core/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Error de dominio con código HTTP asociado"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Error del servidor"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(InventoryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Datos inválidos"


class NotFoundError(InventoryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Recurso no encontrado"


class ConflictError(InventoryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflicto con datos existentes"


class InsufficientStockError(InventoryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Stock insuficiente"


class AuthenticationError(InventoryError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token inválido"


class StoreError(InventoryError):
    default_message = "Error del servidor"


async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    if isinstance(exc, StoreError):
        # El detalle real queda en el log
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": StoreError.default_message},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # Un id de ruta mal formado no identifica ningún recurso
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in errors):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": NotFoundError.default_message},
        )
    fields = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if loc:
            fields.append(".".join(loc))
    message = "Campos inválidos o faltantes"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("❌ Error de base de datos en %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": StoreError.default_message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

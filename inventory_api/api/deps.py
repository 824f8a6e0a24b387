# inventory_api/api/deps.py
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from inventory_api.core.database import get_db
from inventory_api.core.exceptions import AuthenticationError
from inventory_api.core.security import decode_token
from inventory_api.models.user import User

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_auth_token: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    """Obtener usuario actual desde token JWT (Bearer o x-auth-token)"""

    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise AuthenticationError("No hay token, autorización denegada")

    payload = decode_token(token)
    if payload is None:
        raise AuthenticationError("Token inválido")

    user_id = payload.get("user_id")
    if user_id is None:
        raise AuthenticationError("Token inválido")

    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError("Usuario no encontrado")

    return user

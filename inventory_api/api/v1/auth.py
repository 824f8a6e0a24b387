# inventory_api/api/v1/auth.py
from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.config import settings
from inventory_api.core.database import get_db
from inventory_api.core.exceptions import AuthenticationError
from inventory_api.core.security import create_access_token
from inventory_api.models.user import User
from inventory_api.schemas.user import Token, UserLogin, UserRegister, UserResponse
from inventory_api.services.auth_service import auth_service

router = APIRouter()


def _token_response(user: User) -> Token:
    access_token = create_access_token(
        data={"user_id": user.id},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(
        access_token=access_token,
        token_type="bearer",
        user=UserResponse.model_validate(user),
    )


@router.post("/register", response_model=Token)
def register(data: UserRegister, db: Session = Depends(get_db)):
    """Registrar usuario y devolver token"""
    user = auth_service.create_user(db, data)
    return _token_response(user)


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login con email y password"""
    user = auth_service.authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise AuthenticationError("Email o contraseña incorrectos")
    return _token_response(user)


@router.get("/me", response_model=UserResponse)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Información del usuario actual"""
    return current_user

# inventory_api/services/auth_service.py
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from inventory_api.core.security import get_password_hash, verify_password
from inventory_api.models.user import User
from inventory_api.schemas.user import PasswordUpdate, ProfileUpdate, UserRegister

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:

    def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        """Autenticar usuario"""
        user = self._find_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    def get_user_by_id(self, db: Session, user_id: int) -> Optional[User]:
        """Obtener usuario por ID"""
        return db.get(User, user_id)

    def create_user(self, db: Session, data: UserRegister) -> User:
        """Crear nuevo usuario"""
        email = _normalize_email(data.email)
        if self._find_by_email(db, email):
            raise ConflictError("El email ya está registrado")

        user = User(
            name=data.name,
            email=email,
            password_hash=get_password_hash(data.password),
            phone_number=data.phone_number,
            role=data.role or "user",
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError("El email ya está registrado") from exc
        db.refresh(user)
        logger.info("Usuario creado: %s", user.email)
        return user

    def update_profile(self, db: Session, user_id: int, data: ProfileUpdate) -> User:
        """Actualizar perfil del usuario actual"""
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("Usuario no encontrado")

        if data.email:
            email = _normalize_email(data.email)
            existing = self._find_by_email(db, email)
            if existing and existing.id != user_id:
                raise ConflictError("El email ya está en uso")
            user.email = email
        if data.name:
            user.name = data.name
        if data.phone_number:
            user.phone_number = data.phone_number

        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError("El email ya está en uso") from exc
        db.refresh(user)
        return user

    def change_password(self, db: Session, user_id: int, data: PasswordUpdate) -> None:
        """Cambiar contraseña verificando la actual"""
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("Usuario no encontrado")
        if not verify_password(data.current_password, user.password_hash):
            raise ValidationError("La contraseña actual es incorrecta")

        user.password_hash = get_password_hash(data.new_password)
        db.commit()
        logger.info("Contraseña actualizada para usuario %s", user.id)

    def _find_by_email(self, db: Session, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == _normalize_email(email))
        return db.scalars(stmt).first()


auth_service = AuthService()

# inventory_api/api/v1/users.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.database import get_db
from inventory_api.models.user import User
from inventory_api.schemas.user import PasswordUpdate, ProfileUpdate, UserResponse
from inventory_api.services.auth_service import auth_service

router = APIRouter()


@router.put("/profile", response_model=UserResponse)
def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return auth_service.update_profile(db, current_user.id, data)


@router.put("/password")
def update_password(
    data: PasswordUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    auth_service.change_password(db, current_user.id, data)
    return {"message": "Contraseña actualizada exitosamente"}

# inventory_api/api/v1/categories.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.database import get_db
from inventory_api.schemas.category import CategoryIn, CategoryOut
from inventory_api.services.category_service import category_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return category_service.list_categories(db)


@router.post("", response_model=CategoryOut)
def create_category(payload: CategoryIn, db: Session = Depends(get_db)):
    return category_service.create_category(db, payload)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, payload: CategoryIn, db: Session = Depends(get_db)):
    return category_service.update_category(db, category_id, payload)


@router.delete("/{category_id}")
def delete_category(category_id: int, db: Session = Depends(get_db)):
    category_service.delete_category(db, category_id)
    return {"message": "Categoría eliminada"}

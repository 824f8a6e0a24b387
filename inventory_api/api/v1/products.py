# inventory_api/api/v1/products.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.database import get_db
from inventory_api.schemas.product import ProductIn, ProductOut, ProductUpdate
from inventory_api.services.product_service import product_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return product_service.list_products(db)


# Rutas fijas antes de /{product_id}
@router.get("/expiring", response_model=List[ProductOut])
def list_expiring_products(db: Session = Depends(get_db)):
    """Productos por vencer sin notificación enviada"""
    return product_service.list_expiring(db)


@router.put("/notification/{product_id}", response_model=ProductOut)
def mark_notification_sent(product_id: int, db: Session = Depends(get_db)):
    return product_service.set_notification(db, product_id, True)


@router.put("/reset-notification/{product_id}", response_model=ProductOut)
def reset_notification(product_id: int, db: Session = Depends(get_db)):
    return product_service.set_notification(db, product_id, False)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return product_service.get_product(db, product_id)


@router.post("", response_model=ProductOut)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    return product_service.create_product(db, payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    return product_service.update_product(db, product_id, payload)


@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    product_service.delete_product(db, product_id)
    return {"message": "Producto eliminado"}

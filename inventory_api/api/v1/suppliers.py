# inventory_api/api/v1/suppliers.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.database import get_db
from inventory_api.schemas.supplier import SupplierIn, SupplierOut, SupplierUpdate
from inventory_api.services.supplier_service import supplier_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[SupplierOut])
def list_suppliers(db: Session = Depends(get_db)):
    return supplier_service.list_suppliers(db)


@router.get("/{supplier_id}", response_model=SupplierOut)
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    return supplier_service.get_supplier(db, supplier_id)


@router.post("", response_model=SupplierOut)
def create_supplier(payload: SupplierIn, db: Session = Depends(get_db)):
    return supplier_service.create_supplier(db, payload)


@router.put("/{supplier_id}", response_model=SupplierOut)
def update_supplier(supplier_id: int, payload: SupplierUpdate, db: Session = Depends(get_db)):
    return supplier_service.update_supplier(db, supplier_id, payload)


@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)):
    supplier_service.delete_supplier(db, supplier_id)
    return {"message": "Proveedor eliminado"}

# inventory_api/api/v1/transactions.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.database import get_db
from inventory_api.models.user import User
from inventory_api.schemas.transaction import PurchaseCreate, SaleCreate, TransactionOut
from inventory_api.services.transaction_service import transaction_service

router = APIRouter()


@router.get("", response_model=List[TransactionOut])
def list_transactions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Todas las transacciones, más recientes primero"""
    return transaction_service.list_transactions(db)


@router.post("/purchase", response_model=TransactionOut)
def create_purchase(
    payload: PurchaseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Registrar recepción de inventario de un proveedor"""
    return transaction_service.record_purchase(db, payload, user_id=current_user.id)


@router.post("/sell", response_model=TransactionOut)
def create_sale(
    payload: SaleCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Registrar venta de un producto"""
    return transaction_service.record_sale(db, payload, user_id=current_user.id)

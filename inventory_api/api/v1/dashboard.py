# inventory_api/api/v1/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.api.deps import get_current_user
from inventory_api.core.database import get_db
from inventory_api.schemas.dashboard import DashboardOut
from inventory_api.services.dashboard_service import dashboard_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=DashboardOut)
def get_dashboard(db: Session = Depends(get_db)):
    return dashboard_service.get_dashboard(db)

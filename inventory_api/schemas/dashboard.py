# inventory_api/schemas/dashboard.py
from decimal import Decimal
from typing import List

from pydantic import BaseModel

from inventory_api.schemas.transaction import TransactionOut


class ChartDatasets(BaseModel):
    sales: List[Decimal]
    purchases: List[Decimal]


class ChartData(BaseModel):
    labels: List[str]
    datasets: ChartDatasets


class DashboardOut(BaseModel):
    total_products: int
    total_categories: int
    total_suppliers: int
    total_purchases: int
    total_sales: int
    recent_transactions: List[TransactionOut]
    chart_data: ChartData

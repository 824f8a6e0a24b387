# inventory_api/services/dashboard_service.py
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy import extract, func, select
from sqlalchemy.orm import Session

from inventory_api.core.config import settings
from inventory_api.models.category import Category
from inventory_api.models.product import Product
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction, TransactionType
from inventory_api.schemas.common import to_money


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Desplazar (año, mes) en ``delta`` meses"""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


class DashboardService:

    def get_dashboard(self, db: Session, now: Optional[datetime] = None) -> Dict:
        """Estadísticas del dashboard"""
        now = now or datetime.now()

        counts_by_type = dict(
            db.execute(
                select(Transaction.type, func.count()).group_by(Transaction.type)
            ).all()
        )

        return {
            "total_products": self._count(db, Product),
            "total_categories": self._count(db, Category),
            "total_suppliers": self._count(db, Supplier),
            "total_purchases": counts_by_type.get(TransactionType.purchase, 0),
            "total_sales": counts_by_type.get(TransactionType.sale, 0),
            "recent_transactions": self._recent_transactions(db),
            "chart_data": self._monthly_chart(db, now),
        }

    def _count(self, db: Session, model) -> int:
        return db.scalar(select(func.count()).select_from(model))

    def _recent_transactions(self, db: Session) -> List[Transaction]:
        stmt = (
            select(Transaction)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(settings.RECENT_TRANSACTIONS_LIMIT)
        )
        return list(db.scalars(stmt))

    def _monthly_chart(self, db: Session, now: datetime) -> Dict:
        """Sumas mensuales de compras y ventas, del mes más antiguo al actual"""
        months = [
            shift_month(now.year, now.month, -offset)
            for offset in range(settings.DASHBOARD_MONTHS - 1, -1, -1)
        ]
        start_year, start_month = months[0]
        window_start = datetime(start_year, start_month, 1)

        year_col = extract("year", Transaction.date)
        month_col = extract("month", Transaction.date)
        rows = db.execute(
            select(year_col, month_col, Transaction.type, func.sum(Transaction.total))
            .where(Transaction.date >= window_start)
            .group_by(year_col, month_col, Transaction.type)
        ).all()

        totals = {}
        for year, month, tx_type, total in rows:
            totals[(int(year), int(month), tx_type)] = to_money(total or 0)

        labels = []
        sales = []
        purchases = []
        zero = Decimal("0.00")
        for year, month in months:
            labels.append(datetime(year, month, 1).strftime("%b %Y"))
            sales.append(totals.get((year, month, TransactionType.sale), zero))
            purchases.append(totals.get((year, month, TransactionType.purchase), zero))

        return {
            "labels": labels,
            "datasets": {"sales": sales, "purchases": purchases},
        }


dashboard_service = DashboardService()

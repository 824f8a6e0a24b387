# inventory_api/schemas/common.py
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Redondear a 2 decimales (ROUND_HALF_UP)"""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)

# Límites de las columnas: Integer, Numeric(10,2) y Numeric(12,2)
MAX_QUANTITY = 2**31 - 1
MAX_PRICE = Decimal("99999999.99")
MAX_TOTAL = Decimal("9999999999.99")

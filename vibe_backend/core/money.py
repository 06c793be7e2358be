# core/money.py

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def money(v) -> Decimal:
    """Quantize any price-like value to 2dp (HALF_UP)."""
    if v is None or v == "":
        return ZERO
    try:
        return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"invalid money value: {v!r}") from exc


def line_total(unit_price, quantity: int) -> Decimal:
    return money(money(unit_price) * Decimal(int(quantity)))

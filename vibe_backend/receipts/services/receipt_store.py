# receipts/services/receipt_store.py

"""
RECEIPT STORE

Purpose:
- Append-only archive of completed receipts and their items.

Hard rules:
- create_receipt() is the ONLY write entry point and must run inside the
  checkout transaction (it refuses to run outside an atomic block).
- Items are frozen copies of (product id, name, price, quantity) as read by
  the checkout; nothing here looks at the live catalog.
- Reads return snapshots, never live model instances.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.db import connection
from django.utils import timezone

from core.exceptions import InvalidInputError, NotFoundError, StoreFailureError
from core.money import ZERO, line_total, money
from core.quantities import to_positive_id
from core.store import translate_store_errors
from receipts.models import Receipt, ReceiptItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReceiptItemSnapshot:
    product_id: int
    name: str
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return line_total(self.unit_price, self.quantity)


@dataclass(frozen=True)
class ReceiptSnapshot:
    id: int
    user_id: int
    total: Decimal
    customer_name: str
    customer_email: str
    created_at: datetime
    items: tuple[ReceiptItemSnapshot, ...]


def _snapshot(receipt: Receipt) -> ReceiptSnapshot:
    items = tuple(
        ReceiptItemSnapshot(
            product_id=item.product_id,
            name=item.name,
            unit_price=money(item.unit_price),
            quantity=int(item.quantity),
        )
        for item in receipt.items.all()
    )
    return ReceiptSnapshot(
        id=receipt.id,
        user_id=receipt.user_id,
        total=money(receipt.total),
        customer_name=receipt.customer_name,
        customer_email=receipt.customer_email,
        created_at=receipt.created_at,
        items=items,
    )


def _max_amount(model, field_name: str) -> Decimal:
    field = model._meta.get_field(field_name)
    return Decimal(10) ** (field.max_digits - field.decimal_places)


def create_receipt(*, user_id: int, customer_name: str, customer_email: str, lines) -> ReceiptSnapshot:
    """
    Persist one Receipt plus one ReceiptItem per line.

    `lines` is any iterable of objects exposing product_id, name, unit_price,
    quantity (the checkout passes its cart snapshot).
    """
    if not connection.in_atomic_block:
        raise StoreFailureError(
            "create_receipt must run inside the checkout transaction",
            user_id=user_id,
        )

    frozen = [
        ReceiptItemSnapshot(
            product_id=int(line.product_id),
            name=str(line.name),
            unit_price=money(line.unit_price),
            quantity=int(line.quantity),
        )
        for line in lines
    ]
    total = money(sum((item.line_total for item in frozen), ZERO))
    if total >= _max_amount(Receipt, "total"):
        raise InvalidInputError(
            "Receipt total exceeds the storable amount",
            user_id=user_id,
            total=str(total),
        )

    receipt = Receipt.objects.create(
        user_id=user_id,
        total=total,
        customer_name=customer_name,
        customer_email=customer_email,
        created_at=timezone.now(),
    )

    ReceiptItem.objects.bulk_create(
        [
            ReceiptItem(
                receipt=receipt,
                product_id=item.product_id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in frozen
        ]
    )

    logger.info(
        "Receipt written",
        extra={"user_id": user_id, "receipt_id": receipt.id, "total": str(total)},
    )

    return ReceiptSnapshot(
        id=receipt.id,
        user_id=user_id,
        total=total,
        customer_name=customer_name,
        customer_email=customer_email,
        created_at=receipt.created_at,
        items=tuple(frozen),
    )


@translate_store_errors
def get_receipt(*, receipt_id, user_id=None) -> ReceiptSnapshot:
    receipt_id = to_positive_id(receipt_id, label="receipt id")

    qs = Receipt.objects.prefetch_related("items").filter(pk=receipt_id)
    if user_id is not None:
        qs = qs.filter(user_id=to_positive_id(user_id, label="user_id"))

    receipt = qs.first()
    if receipt is None:
        raise NotFoundError(f"Receipt {receipt_id} not found", receipt_id=receipt_id)

    return _snapshot(receipt)


@translate_store_errors
def list_receipts_for_user(*, user_id, queryset=None) -> list[ReceiptSnapshot]:
    """
    Newest first. `queryset` lets the API layer pass a pre-filtered Receipt
    queryset (django-filter); it is always re-scoped to user_id.
    """
    user_id = to_positive_id(user_id, label="user_id")

    qs = queryset if queryset is not None else Receipt.objects.all()
    qs = qs.filter(user_id=user_id).prefetch_related("items").order_by("-id")

    return [_snapshot(r) for r in qs]

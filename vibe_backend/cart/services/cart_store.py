# cart/services/cart_store.py

"""
CART STORE (APPLICATION SERVICE)

Purpose:
- Keyed collection of (user, product) -> quantity.
- The only mutable pre-checkout state; every CartLine write goes through here.

Hard rules:
- At most one line per (user, product): enforced by the DB unique constraint and
  written with a single conflict-aware statement (no read-then-branch-then-write).
- quantity <= 0 means "remove" (idempotent; absent line is a no-op).
- remove_line only ever touches lines owned by the caller's user_id.
- Prices are never stored on cart lines; views join the LIVE catalog price.

Checkout helpers:
- claim_cart() / lock_lines() / clear_lines() are called by the checkout
  transaction inside its atomic block. They are not safe on their own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from cart.models import Cart, CartLine
from catalog.services.catalog_reader import get_product
from core.money import ZERO, line_total, money
from core.quantities import to_int_qty, to_positive_id
from core.store import translate_store_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLineView:
    cart_line_id: int
    product_id: int
    name: str
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return line_total(self.unit_price, self.quantity)


@dataclass(frozen=True)
class CartView:
    user_id: int
    lines: tuple[CartLineView, ...]
    total: Decimal
    item_count: int

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class UpsertResult:
    removed: bool
    line: CartLineView | None = None


def _to_view(line: CartLine) -> CartLineView:
    return CartLineView(
        cart_line_id=line.id,
        product_id=line.product_id,
        name=line.product.name,
        unit_price=money(line.product.unit_price),
        quantity=int(line.quantity),
    )


def _lines_qs(user_id: int):
    return (
        CartLine.objects.filter(cart__user_id=user_id)
        .select_related("product")
        .order_by("id")
    )


def _get_or_create_cart(user_id: int) -> Cart:
    cart, created = Cart.objects.get_or_create(user_id=user_id)
    if created:
        logger.info("Cart created", extra={"user_id": user_id, "cart_id": cart.id})
    return cart


# =====================================================
# PUBLIC OPERATIONS
# =====================================================


@translate_store_errors
def upsert_line(*, user_id, product_id, quantity) -> UpsertResult:
    """
    Insert, replace or (quantity <= 0) delete the (user, product) line.
    """
    user_id = to_positive_id(user_id, label="user_id")
    product_id = to_positive_id(product_id, label="productId")
    qty = to_int_qty(quantity)

    product = get_product(product_id)

    with transaction.atomic():
        if qty <= 0:
            deleted, _ = CartLine.objects.filter(
                cart__user_id=user_id, product_id=product.id
            ).delete()
            logger.info(
                "Cart line removed via upsert",
                extra={"user_id": user_id, "product_id": product.id, "deleted": deleted},
            )
            return UpsertResult(removed=True)

        cart = _get_or_create_cart(user_id)

        CartLine.objects.bulk_create(
            [CartLine(cart=cart, product_id=product.id, quantity=qty)],
            update_conflicts=True,
            unique_fields=["cart", "product"],
            update_fields=["quantity"],
        )

        line = _lines_qs(user_id).get(product_id=product.id)

    logger.info(
        "Cart line upserted",
        extra={"user_id": user_id, "product_id": product.id, "quantity": qty},
    )
    return UpsertResult(removed=False, line=_to_view(line))


@translate_store_errors
def list_lines(*, user_id) -> CartView:
    user_id = to_positive_id(user_id, label="user_id")

    lines = tuple(_to_view(line) for line in _lines_qs(user_id))
    total = money(sum((line.line_total for line in lines), ZERO))
    item_count = sum(line.quantity for line in lines)

    return CartView(user_id=user_id, lines=lines, total=total, item_count=item_count)


@translate_store_errors
def remove_line(*, user_id, cart_line_id) -> bool:
    """
    Delete one line by its own id, scoped to user_id.

    Absent ids and ids owned by another user are a silent no-op.
    """
    user_id = to_positive_id(user_id, label="user_id")
    cart_line_id = to_positive_id(cart_line_id, label="cart line id")

    deleted, _ = CartLine.objects.filter(
        id=cart_line_id, cart__user_id=user_id
    ).delete()

    if not deleted:
        logger.info(
            "Cart line remove was a no-op",
            extra={"user_id": user_id, "cart_line_id": cart_line_id},
        )
    return bool(deleted)


# =====================================================
# CHECKOUT HELPERS (must run inside transaction.atomic)
# =====================================================


def claim_cart(*, user_id: int) -> bool:
    """
    Take the per-user checkout lock by writing the cart anchor row.

    This must be the FIRST statement of the checkout transaction: a write
    takes the row lock (PostgreSQL) / database write lock (SQLite) before
    anything is read. Returns False when the user has no cart yet.
    """
    claimed = Cart.objects.filter(user_id=user_id).update(updated_at=timezone.now())
    return bool(claimed)


def lock_lines(*, user_id: int) -> list[CartLineView]:
    """
    Read the user's lines joined with live prices, locking the line rows.
    """
    qs = _lines_qs(user_id).select_for_update(of=("self",))
    return [_to_view(line) for line in qs]


def clear_lines(*, user_id: int, cart_line_ids) -> int:
    """
    Delete exactly the given lines of user_id (the ones a checkout consumed).
    """
    ids = list(cart_line_ids)
    if not ids:
        return 0

    deleted, _ = CartLine.objects.filter(cart__user_id=user_id, id__in=ids).delete()
    return deleted

"""
PATH: cart/models/cart.py

CART MODEL

Purpose:
- One row per user: the anchor that owns the user's cart lines.
- Checkout claims (writes) this row first, which serializes checkouts per user.

Rules:
- Exactly one cart per user_id (DB constraint).
- Created lazily on the first cart write; never deleted by the engine.
"""

from decimal import Decimal

from django.db import models
from django.db.models import F, Sum


class Cart(models.Model):
    user_id = models.PositiveBigIntegerField(unique=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    @property
    def item_count(self) -> int:
        total = self.lines.aggregate(total=Sum("quantity")).get("total")
        return int(total or 0)

    @property
    def total_amount(self) -> Decimal:
        total = (
            self.lines.annotate(line_total=F("quantity") * F("product__unit_price"))
            .aggregate(total=Sum("line_total"))
            .get("total")
        )
        return total or Decimal("0.00")

    def __str__(self):
        return f"Cart {self.id} | user {self.user_id}"

# receipts/models/receipt_item.py

"""
RECEIPT ITEM (FROZEN SNAPSHOT)

Represents one purchased line, copied from the cart + catalog at checkout time.

Notes:
- product_id is a plain value, not a live FK: later catalog changes (price,
  name, even deletion) cannot alter historical receipts.
- Rows are append-only.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from .append_only import AppendOnlyModel
from .receipt import Receipt


class ReceiptItem(AppendOnlyModel):
    receipt = models.ForeignKey(
        Receipt,
        on_delete=models.PROTECT,
        related_name="items",
    )

    product_id = models.PositiveBigIntegerField()
    name = models.CharField(max_length=255)

    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField()

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["receipt", "id"], name="receipt_item_receipt_idx"),
        ]

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.unit_price) * Decimal(int(self.quantity or 0))

    def __str__(self):
        return f"{self.name} x {self.quantity}"

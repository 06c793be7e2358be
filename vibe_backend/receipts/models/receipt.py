# receipts/models/receipt.py

from decimal import Decimal

from django.db import models
from django.utils import timezone

from .append_only import AppendOnlyModel


class Receipt(AppendOnlyModel):
    """
    A completed checkout.

    GUARANTEES:
    - Created exactly once per successful checkout, inside the checkout transaction
    - total == sum(item.unit_price * item.quantity)
    - Immutable once written (append-only archive)
    """

    user_id = models.PositiveBigIntegerField(db_index=True)

    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    customer_name = models.CharField(max_length=255)
    customer_email = models.CharField(max_length=254)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["user_id", "created_at"], name="receipt_user_created_idx"),
        ]

    def __str__(self):
        return f"Receipt #{self.id} | user {self.user_id} | {self.total}"

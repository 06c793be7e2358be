# catalog/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """
    A sellable catalog item.

    RULES:
    - Read-only input to the cart/checkout engine
    - unit_price is the LIVE price; receipts copy it at checkout
    - Created by seeding or admin only
    """

    name = models.CharField(max_length=255, db_index=True)

    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    image_url = models.CharField(
        max_length=500,
        blank=True,
        default="",
        help_text="Opaque image reference shown by the storefront.",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(unit_price__gte=0),
                name="product_unit_price_non_negative",
            )
        ]

    def clean(self):
        if self.unit_price is None or Decimal(self.unit_price) < 0:
            raise ValidationError({"unit_price": "Unit price cannot be negative"})

    def __str__(self):
        return f"{self.name} ({self.unit_price})"

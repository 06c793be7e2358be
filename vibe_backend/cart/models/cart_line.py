# cart/models/cart_line.py

"""
CART LINE MODEL

Purpose:
- One (user, product, quantity) record.
- Price is NOT stored here: the cart always shows the live catalog price.

Rules:
- At most one line per (cart, product) (DB constraint).
- Quantity must be > 0 while the line exists (zero means the line is deleted).
"""

from django.db import models

from catalog.models import Product

from .cart import Cart


class CartLine(models.Model):
    cart = models.ForeignKey(
        Cart,
        on_delete=models.CASCADE,
        related_name="lines",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="cart_lines",
    )

    quantity = models.PositiveIntegerField(help_text="Must be greater than zero")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["cart", "product"],
                name="unique_product_per_cart",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="cart_line_quantity_positive",
            ),
        ]

    def __str__(self):
        return f"{getattr(self.product, 'name', 'Product')} x {self.quantity}"

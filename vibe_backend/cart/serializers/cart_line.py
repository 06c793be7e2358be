"""
PATH: cart/serializers/cart_line.py

CART LINE SERIALIZER

Purpose:
- Serialize CartLineView snapshots for the storefront.
- Keys follow the storefront contract: cartId, productId, name, price, qty.
- price is the LIVE catalog price; lineTotal is server-derived.
"""

from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    cartId = serializers.IntegerField(source="cart_line_id", read_only=True)
    productId = serializers.IntegerField(source="product_id", read_only=True)
    name = serializers.CharField(read_only=True)

    price = serializers.DecimalField(
        source="unit_price",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )

    qty = serializers.IntegerField(source="quantity", read_only=True)

    lineTotal = serializers.DecimalField(
        source="line_total",
        max_digits=20,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )

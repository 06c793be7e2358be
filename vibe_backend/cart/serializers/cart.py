"""
PATH: cart/serializers/cart.py

CART SERIALIZERS

Purpose:
- Return a user's cart (lines + server-computed total).
- Validate the upsert request shape; business rules stay in the cart store.
"""

from rest_framework import serializers

from core.quantities import MAX_QTY

from .cart_line import CartLineSerializer


class CartViewSerializer(serializers.Serializer):
    items = CartLineSerializer(source="lines", many=True, read_only=True)

    total = serializers.DecimalField(
        max_digits=20,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )

    itemCount = serializers.IntegerField(source="item_count", read_only=True)


class UpsertCartLineInputSerializer(serializers.Serializer):
    """
    qty <= 0 is legal here: it means "remove this product from the cart".
    """

    productId = serializers.IntegerField(min_value=1)
    qty = serializers.IntegerField(max_value=MAX_QTY)
